"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_DEPARTMENTS = ("HNDIT", "HNDA", "HNDM", "HNDE")
DEFAULT_DEPARTMENT = "HNDIT"

DEFAULT_REQUIRED_PERCENTAGE = 80
DEFAULT_GOAL_DESCRIPTION = "Minimum attendance required for exam eligibility"

DEFAULT_MARK_LOCATION = "Unknown"
DEFAULT_MARK_CONFIDENCE = 0.95
DEFAULT_STUDENT_REVIEW = "confirmed"

DEFAULT_SCHEDULE_YEAR = "2nd Year"

RECENT_ACTIVITY_LIMIT = 10

WEEK_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

UNKNOWN_LECTURER = "Unknown Lecturer"
NO_LECTURER_ASSIGNED = "No Lecturer Assigned"

# Firestore collection names.
USERS = "users"
LECTURERS = "lecturers"
SUBJECTS = "subjects"
COURSES = "courses"
SCHEDULES = "schedules"
ATTENDANCE = "attendance"
SETTINGS = "settings"
