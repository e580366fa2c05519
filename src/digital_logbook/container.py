from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .dashboards.mock_dashboard_source import MockDashboardSource
from .dashboards.mysql_dashboard_source import MySQLDashboardSource
from .dashboards.repository import DashboardSource
from .dashboards.service import DashboardService
from .database.connection import DatabaseConnection
from .feedback.memory_feedback_repository import InMemoryFeedbackRepository
from .feedback.mysql_feedback_repository import MySQLFeedbackRepository
from .feedback.repository import FeedbackRepository
from .feedback.service import FeedbackService
from .logs.memory_login_log_repository import InMemoryLoginLogRepository
from .logs.mysql_login_log_repository import MySQLLoginLogRepository
from .logs.repository import LoginLogRepository
from .logs.service import LoginLogService
from .mock.fixtures import MockDataStore
from .subjects.memory_subject_repository import InMemorySubjectRepository
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .users.memory_user_directory import InMemoryUserDirectory
from .users.mysql_user_directory import MySQLUserDirectory
from .users.repository import UserDirectory
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    # None means mock data mode.
    conn: Optional[DatabaseConnection]

    users_repo: UserDirectory
    subjects_repo: SubjectRepository
    attendance_repo: AttendanceRepository
    login_logs_repo: LoginLogRepository
    feedback_repo: FeedbackRepository
    dashboard_source: DashboardSource

    auth_service: AuthService
    user_service: UserService
    subject_service: SubjectService
    attendance_service: AttendanceService
    login_log_service: LoginLogService
    feedback_service: FeedbackService
    dashboard_service: DashboardService

    @property
    def mock_mode(self) -> bool:
        return self.conn is None


def build_container(conn: Optional[DatabaseConnection] = None, *, store: Optional[MockDataStore] = None) -> Container:
    """Select MySQL-backed repositories when a live connection exists, fixture-backed ones otherwise."""
    if conn is not None:
        users_repo = MySQLUserDirectory(conn)
        subjects_repo = MySQLSubjectRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        login_logs_repo = MySQLLoginLogRepository(conn)
        feedback_repo = MySQLFeedbackRepository(conn)
        dashboard_source = MySQLDashboardSource(conn, subjects_repo)
        # The database records a session row for every successful login.
        auth_service = AuthService(users_repo, login_logs_repo)
    else:
        store = store or MockDataStore()
        users_repo = InMemoryUserDirectory(store)
        subjects_repo = InMemorySubjectRepository(store)
        attendance_repo = InMemoryAttendanceRepository()
        login_logs_repo = InMemoryLoginLogRepository()
        feedback_repo = InMemoryFeedbackRepository()
        dashboard_source = MockDashboardSource(store)
        auth_service = AuthService(users_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        subjects_repo=subjects_repo,
        attendance_repo=attendance_repo,
        login_logs_repo=login_logs_repo,
        feedback_repo=feedback_repo,
        dashboard_source=dashboard_source,
        auth_service=auth_service,
        user_service=UserService(users_repo),
        subject_service=SubjectService(subjects_repo),
        attendance_service=AttendanceService(attendance_repo),
        login_log_service=LoginLogService(login_logs_repo),
        feedback_service=FeedbackService(feedback_repo),
        dashboard_service=DashboardService(dashboard_source),
    )
