"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Canonical weekday codes, Monday first (T2 = "thứ hai").
DAY_CODES = ("T2", "T3", "T4", "T5", "T6", "T7", "CN")

# Python date.weekday() -> day code.
WEEKDAY_TO_DAY_CODE = {
    0: "T2",
    1: "T3",
    2: "T4",
    3: "T5",
    4: "T6",
    5: "T7",
    6: "CN",
}

ATTENDANCE_BUFFER_MINUTES = 15
DEFAULT_TUITION_AMOUNT = 500000
DEFAULT_OVERDUE_LIMIT = 10

DEMO_PROFILES = (
    # full_name, email, password, role
    ("Quản trị viên", "admin@example.com", "admin123", "admin"),
    ("Cô Lan", "teacher@example.com", "teacher123", "teacher"),
    ("Nguyễn Văn A", "student@example.com", "student123", "student"),
)

# Quizzes
DEFAULT_QUIZ_TIME_LIMIT_MINUTES = 15
DEFAULT_QUESTION_TEXT = "Câu hỏi mới"
DEFAULT_QUESTION_OPTIONS = ("Lựa chọn A", "Lựa chọn B", "Lựa chọn C", "Lựa chọn D")
TRUE_FALSE_OPTIONS = ("Đúng", "Sai")
