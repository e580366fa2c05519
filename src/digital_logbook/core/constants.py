"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_PASSWORD_LENGTH = 6

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Fixed counts reported by the mock dashboards (not derived from the roster).
MOCK_ADMIN_TOTAL_STUDENTS = 5
MOCK_ADMIN_TOTAL_INSTRUCTORS = 3
MOCK_ADMIN_WORKING_STUDENTS = 2
MOCK_ADMIN_RECENT_LOGINS = 8
MOCK_STUDENTS_REGISTERED = 5
MOCK_CLASSLISTS_CREATED = 3
