"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_PASSWORD_LENGTH = 6

# Seed fixture
SEED_STUDENT_COUNT = 30
SEED_HISTORY_DAYS = 30
SEED_STUDENT_ID_PREFIX = "2024"
SEED_STATUS_WEIGHTS = (("P", 0.7), ("L", 0.2), ("A", 0.1))

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

CSV_EXPORT_FIELDS = ("date", "student_id", "student_name", "section_name", "status")
