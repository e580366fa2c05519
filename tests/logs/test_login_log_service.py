from __future__ import annotations

import pytest

from digital_logbook.core.exceptions import ValidationError
from digital_logbook.logs.model import LoginLog
from digital_logbook.logs.service import LoginLogService


class FakeLogsRepo:
    def __init__(self):
        self.rows = []
        self.closed = {}
        self.searches = []

    def create(self, *, user_id, login_time, user_name="", user_type="", pc_number=""):
        self.rows.append(
            LoginLog(
                id=len(self.rows) + 1,
                user_id=user_id,
                user_name=user_name,
                user_type=user_type,
                pc_number=pc_number,
                login_time=login_time.strftime("%Y-%m-%d %H:%M:%S"),
            )
        )
        return len(self.rows)

    def close(self, log_id, *, logout_time):
        self.closed[log_id] = logout_time
        return True

    def list_logs(self, *, user_type=None):
        return [r for r in self.rows if user_type is None or r.user_type == user_type]

    def search(self, term, *, user_type=None):
        self.searches.append((term, user_type))
        return [r for r in self.list_logs(user_type=user_type) if term.lower() in r.user_name.lower()]


def test_record_login_and_logout(fixed_now):
    repo = FakeLogsRepo()
    svc = LoginLogService(repo)

    log_id = svc.record_login(user_id=6, user_name=" Santos, Juan ", user_type="student", pc_number=" PC-07 ", now=fixed_now)
    svc.record_logout(log_id, now=fixed_now)

    assert repo.rows[0].user_name == "Santos, Juan"
    assert repo.rows[0].pc_number == "PC-07"
    assert repo.rows[0].login_time == "2026-02-02 08:30:15"
    assert repo.closed == {log_id: fixed_now}


def test_record_login_requires_user():
    svc = LoginLogService(FakeLogsRepo())

    with pytest.raises(ValidationError):
        svc.record_login(user_id=0, user_name="Santos, Juan", user_type="student")
    with pytest.raises(ValidationError):
        svc.record_login(user_id=6, user_name=" ", user_type="student")


def test_search_filters_by_user_type(fixed_now):
    repo = FakeLogsRepo()
    svc = LoginLogService(repo)
    svc.record_login(user_id=6, user_name="Santos, Juan", user_type="student", now=fixed_now)
    svc.record_login(user_id=3, user_name="Reyes, Miguel", user_type="instructor", now=fixed_now)

    assert [r.user_id for r in svc.list_logs(user_type="instructor")] == [3]
    assert [r.user_id for r in svc.search_logs(" santos ")] == [6]
    assert repo.searches == [("santos", None)]
    # Blank terms fall back to a plain listing.
    assert len(svc.search_logs("   ")) == 2
