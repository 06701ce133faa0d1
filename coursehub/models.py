"""Users, courses, assignments, submissions and messages."""

import time
from dataclasses import dataclass, field
from enum import IntEnum

from coursehub.config import ADMIN_ID, ADMIN_PASSWORD

_MESSAGE_SEPARATOR = "\n______________________\n"
_UNGRADED = -1.0


def hash_password(password: str) -> str:
    """Obscure a password; the scheme is a plain reversal of the text."""
    return password[::-1]


class UserType(IntEnum):
    """Role of a user; the values are the ones stored on disk."""

    ADMIN = 0
    TEACHER = 1
    STUDENT = 2


@dataclass
class User:
    role: UserType
    first_name: str
    last_name: str
    hashed_password: str
    id: int


def create_user(role: UserType, first_name: str, last_name: str, password: str, user_id: int) -> User:
    """Create a teacher or a student; any other role is refused."""
    if role not in (UserType.TEACHER, UserType.STUDENT):
        raise ValueError("Can not create user")
    return User(UserType(role), first_name, last_name, hash_password(password), user_id)


def make_admin() -> User:
    """The built-in administrator account."""
    return User(UserType.ADMIN, "admin", "_", hash_password(ADMIN_PASSWORD), ADMIN_ID)


@dataclass
class Assignment:
    name: str
    id: int
    course_id: int


@dataclass
class Course:
    name: str
    hashed_password: str
    owner_id: int
    id: int
    students_count: int = 0

    def increment_students(self) -> None:
        self.students_count += 1


def _current_time() -> str:
    # ctime without the seconds, ending in a newline
    stamp = time.ctime()
    return stamp[:16] + stamp[19:] + "\n"


@dataclass
class Message:
    id: int
    text: str
    receiver_id: int
    sender_id: int
    formatted_time: str = field(default_factory=_current_time)

    def format(self) -> str:
        """The message as shown in a mailbox."""
        return f"{self.formatted_time}{self.text}{_MESSAGE_SEPARATOR}"


@dataclass
class Submission:
    id: int
    student_id: int
    assignment_id: int
    answer: str
    grade: float = _UNGRADED

    def is_graded(self) -> bool:
        return self.grade != _UNGRADED

    def set_grade(self, grade: float) -> None:
        """Set a grade in [2, 6], truncated to two decimal places."""
        if grade < 2 or grade > 6:
            raise ValueError("Grade must be between 2 and 6")
        self.grade = int(grade * 100) / 100.0

    def format_line(self) -> str:
        """One line of a submissions or grades listing."""
        grade = f"{self.grade:g}" if self.is_graded() else "not graded"
        return f"| Id: {self.id} | Answer: {self.answer} | Grade: {grade}\n"