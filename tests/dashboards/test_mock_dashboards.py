from __future__ import annotations

from datetime import date

import pytest

from digital_logbook.core.enums import AttendanceStatus
from digital_logbook.core.exceptions import ValidationError


def test_admin_counts(mock_container):
    dash = mock_container.dashboard_service.get_admin_dashboard()

    assert dash.to_dict() == {"total_students": 5, "total_instructors": 3, "working_students": 2, "recent_logins": 8}


def test_instructor_sees_only_their_subjects(mock_container):
    dash = mock_container.dashboard_service.get_instructor_dashboard("Reyes, Miguel")

    assert [s.code for s in dash.subjects] == ["IT101", "IT202"]
    assert len(dash.attendance) == 4


def test_instructor_without_subjects_still_gets_sample_rows(mock_container):
    dash = mock_container.dashboard_service.get_instructor_dashboard("Nobody, Here")

    assert dash.subjects == []
    assert [a.status for a in dash.attendance] == [
        AttendanceStatus.PRESENT, AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.SEAT_IN,
    ]
    assert {a.date for a in dash.attendance} == {date.today().isoformat()}


def test_absent_sample_row_has_no_times(mock_container):
    absent = mock_container.dashboard_service.get_instructor_dashboard("Garcia, Sofia").attendance[2]

    assert (absent.time_in, absent.time_out) == ("", "")


def test_student_dashboard_echoes_student_id(mock_container):
    dash = mock_container.dashboard_service.get_student_dashboard(6)

    assert [a.date for a in dash.attendance] == ["2024-01-15", "2024-01-16", "2024-01-17"]
    assert all(a.student_id == 6 for a in dash.attendance)
    assert dash.today_log.id == 4
    assert dash.today_log.student_id == 6
    assert dash.today_log.date == date.today().isoformat()


def test_student_dashboard_accepts_numeric_strings(mock_container):
    assert mock_container.dashboard_service.get_student_dashboard("7").today_log.student_id == 7

    with pytest.raises(ValidationError):
        mock_container.dashboard_service.get_student_dashboard("seven")


def test_working_student_counts(mock_container):
    dash = mock_container.dashboard_service.get_working_student_dashboard()

    assert (dash.students_registered, dash.classlists_created) == (5, 3)
