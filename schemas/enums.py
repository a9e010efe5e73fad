from enum import Enum


# ✅ 학년 구분
class GradeLevel(str, Enum):
    NINTH = "9th"
    TENTH = "10th"
    ELEVENTH = "11th"
    TWELFTH = "12th"


# ✅ 개설 과목
class Subject(str, Enum):
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    CHEMISTRY = "Chemistry"
    BIOLOGY = "Biology"
    ENGLISH = "English"
    HISTORY = "History"
    GEOGRAPHY = "Geography"
    COMPUTER_SCIENCE = "Computer Science"


# ✅ 과제 유형
class AssignmentCategory(str, Enum):
    HOMEWORK = "homework"
    QUIZ = "quiz"
    TEST = "test"
    PROJECT = "project"
    PARTICIPATION = "participation"


# ✅ 출결 상태
class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    TARDY = "tardy"
    EXCUSED = "excused"


# ✅ 성적 등급 (A ~ F)
class LetterGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
