import re
from unittest.mock import patch

import pytest

from coursehub.config import ADMIN_ID, ADMIN_PASSWORD
from coursehub.models import (
    Assignment,
    Course,
    Message,
    Submission,
    User,
    UserType,
    create_user,
    hash_password,
    make_admin,
)


def test_hash_password_reverses():
    assert hash_password("abc") == "cba"
    assert hash_password(hash_password("placeholder")) == "placeholder"
    assert hash_password("") == ""


def test_user_type_stored_values():
    assert UserType(0) is UserType.ADMIN
    assert UserType(1) is UserType.TEACHER
    assert UserType(2) is UserType.STUDENT


@pytest.mark.parametrize("role", [UserType.TEACHER, UserType.STUDENT])
def test_create_user(role):
    password = "password"
    user = create_user(role, "Ann", "Lee", password, 101)
    assert user == User(role, "Ann", "Lee", hash_password(password), 101)


def test_create_user_refuses_admin():
    with pytest.raises(ValueError, match="Can not create user"):
        create_user(UserType.ADMIN, "a", "b", "password", 5)


def test_make_admin():
    admin = make_admin()
    assert admin.role is UserType.ADMIN
    assert admin.id == ADMIN_ID
    assert admin.first_name == "admin"
    assert admin.last_name == "_"
    assert admin.hashed_password == hash_password(ADMIN_PASSWORD)


def test_assignment_fields():
    assignment = Assignment("Essay", 100, 200)
    assert (assignment.name, assignment.id, assignment.course_id) == ("Essay", 100, 200)


def test_course_increment_students():
    course = Course("Math", hash_password("secret"), 7, 100)
    assert course.students_count == 0
    course.increment_students()
    course.increment_students()
    assert course.students_count == 2


def test_message_format():
    message = Message(1, "hello", 2, 3, formatted_time="stamp\n")
    assert message.format() == "stamp\nhello\n______________________\n"


def test_message_time_drops_seconds():
    with patch("coursehub.models.time.ctime", return_value="Wed Jun  9 04:26:40 1993"):
        message = Message(1, "hi", 2, 3)
    assert message.formatted_time == "Wed Jun  9 04:26 1993\n"


def test_message_default_time_shape():
    message = Message(1, "hi", 2, 3)
    stamp = message.formatted_time
    assert len(stamp) == 22
    assert stamp.count(":") == 1
    assert stamp[-1] == "\n"
    assert re.fullmatch(r"\w{3} \w{3} [ \d]\d \d\d:\d\d \d{4}\n", stamp) is not None


def test_submission_starts_ungraded():
    submission = Submission(1, 2, 3, "answer")
    assert not submission.is_graded()
    assert submission.format_line() == "| Id: 1 | Answer: answer | Grade: not graded\n"


@pytest.mark.parametrize("grade", [2, 4.5, 6])
def test_set_grade_in_range(grade):
    submission = Submission(1, 2, 3, "answer")
    submission.set_grade(grade)
    assert submission.is_graded()
    assert submission.grade == pytest.approx(grade)


def test_set_grade_truncates():
    submission = Submission(1, 2, 3, "answer")
    submission.set_grade(5.678)
    assert submission.grade == pytest.approx(5.67)


@pytest.mark.parametrize("grade", [1.99, 6.01, -1, 0])
def test_set_grade_out_of_range(grade):
    submission = Submission(1, 2, 3, "answer")
    with pytest.raises(ValueError, match="Grade must be between 2 and 6"):
        submission.set_grade(grade)
    assert not submission.is_graded()


def test_format_line_graded():
    submission = Submission(7, 2, 3, "x")
    submission.set_grade(5.5)
    assert submission.format_line() == "| Id: 7 | Answer: x | Grade: 5.5\n"
    submission.set_grade(6)
    assert submission.format_line() == "| Id: 7 | Answer: x | Grade: 6\n"