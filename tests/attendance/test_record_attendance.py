from __future__ import annotations

from datetime import date, time

import pytest

from digital_logbook.attendance.service import AttendanceService
from digital_logbook.core.enums import AttendanceStatus
from digital_logbook.core.exceptions import ValidationError


class FakeAttendanceRepo:
    def __init__(self):
        self._next_id = 1
        self.rows = {}

    def find_id(self, *, student_id, subject_id, work_date):
        for rid, row in self.rows.items():
            if (row["student_id"], row["subject_id"], row["work_date"]) == (student_id, subject_id, work_date):
                return rid
        return None

    def create(self, *, student_id, subject_id, work_date, status, time_in, time_out):
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = dict(
            student_id=student_id, subject_id=subject_id, work_date=work_date,
            status=status, time_in=time_in, time_out=time_out,
        )
        return rid

    def update(self, *, attendance_id, status, time_in, time_out):
        self.rows[attendance_id].update(status=status, time_in=time_in, time_out=time_out)
        return True


def test_first_record_of_the_day_inserts(fixed_now):
    repo = FakeAttendanceRepo()

    rid = AttendanceService(repo).record_attendance(6, 1, "Present", now=fixed_now)

    row = repo.rows[rid]
    assert row["work_date"] == date(2026, 2, 2)
    assert row["status"] == AttendanceStatus.PRESENT
    assert row["time_in"] == row["time_out"] == time(8, 30, 15)


def test_second_record_same_day_updates(fixed_now):
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    first = svc.record_attendance(6, 1, AttendanceStatus.PRESENT, now=fixed_now)
    second = svc.record_attendance(6, 1, AttendanceStatus.ABSENT, now=fixed_now)

    assert first == second
    assert len(repo.rows) == 1
    assert repo.rows[first]["status"] == AttendanceStatus.ABSENT
    assert repo.rows[first]["time_in"] is None
    assert repo.rows[first]["time_out"] is None


def test_other_subject_gets_its_own_row(fixed_now):
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    svc.record_attendance(6, 1, "Present", now=fixed_now)
    svc.record_attendance(6, 2, "Seat-in", now=fixed_now)

    assert len(repo.rows) == 2


@pytest.mark.parametrize("student_id,subject_id", [(0, 1), (6, 0), (-1, 2)])
def test_missing_ids_are_rejected(student_id, subject_id):
    with pytest.raises(ValidationError):
        AttendanceService(FakeAttendanceRepo()).record_attendance(student_id, subject_id, "Present")


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceService(FakeAttendanceRepo()).record_attendance(6, 1, "Late")
