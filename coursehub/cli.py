"""Interactive command loop of the course system."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from coursehub.config import DataFiles
from coursehub.models import UserType
from coursehub.system import System

_UINT_MAX = 2**32 - 1
_FLOAT = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

_HELP = (
    "login\n"
    "add_user | Admin only\n"
    "delete_user | Admin only\n"
    "add_course | Teacher only\n"
    "enroll | Teacher or Student\n"
    "assign_homework | Teacher only\n"
    "submit_homework | Student only\n"
    "view_homeworks | Teacher only\n"
    "grade_homework | Teacher only\n"
    "view_grades | Student only\n"
    "mailbox\n"
    "clear_mailbox\n"
    "message\n"
    "message_all | Admin only\n"
    "message_students | Teacher only\n"
    "change_password | Teacher or Student\n"
    "logout\n"
    "exit\n"
)

_LOGIN_PROMPT = "Password: "
_NEW_USER_PROMPT = "password: "
_NEW_COURSE_PROMPT = "password: "
_COURSE_PROMPT = "Course password: "
_CHANGE_PROMPT = "New password: "

_ROLES = {"student": UserType.STUDENT, "teacher": UserType.TEACHER}


class CommandHandler:
    """Reads commands line by line and runs them against a System."""

    def __init__(self, system: System, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.system = system
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._commands = {
            "help": self._help,
            "add_user": self._add_user,
            "delete_user": self._delete_user,
            "login": self._login,
            "logout": self.system.logout,
            "add_course": self._add_course,
            "enroll": self._enroll,
            "assign_homework": self._assign_homework,
            "submit_homework": self._submit_homework,
            "view_homeworks": self._view_homeworks,
            "grade_homework": self._grade_homework,
            "view_grades": lambda: self._write(self.system.grades_report()),
            "message": self._message_user,
            "message_all": self._message_all,
            "message_students": self._message_course,
            "mailbox": lambda: self._write(self.system.mailbox()),
            "clear_mailbox": self.system.clear_mailbox,
            "change_password": self._change_password,
        }

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\n").strip(" ")

    def _text(self, prompt: str) -> str:
        self._write(prompt)
        while True:
            text = self._line()
            if text:
                return text

    def _uint(self, prompt: str) -> int:
        self._write(prompt)
        while True:
            text = self._line().strip()
            if text.isdigit() and text.isascii() and int(text) <= _UINT_MAX:
                return int(text)

    def _float(self, prompt: str) -> float:
        self._write(prompt)
        while True:
            text = self._line().strip()
            if _FLOAT.fullmatch(text):
                return float(text)

    def start(self) -> None:
        """Run commands until "exit" or the end of input."""
        self._write("Welcome to CourseHub\nType help to view all commands\n")
        try:
            while True:
                command = self._line()
                self.call_command(command)
                if command == "exit":
                    break
        except EOFError:
            pass

    def call_command(self, command: str) -> None:
        """Run one command; errors are reported, not raised."""
        action = self._commands.get(command.strip(" "))
        if action is None:
            return
        try:
            action()
        except EOFError:
            raise
        except Exception as error:
            self._write(f"{error}\n")

    def _help(self) -> None:
        self._write(_HELP)

    def _login(self) -> None:
        user_id = self._uint("Id: ")
        password = self._text(_LOGIN_PROMPT)
        self.system.login(user_id, password)
        self._write("Login succefull!\n")

    def _add_user(self) -> None:
        while True:
            self._write("Choose role for the user (student or teacher): ")
            role_name = self._line()
            if role_name in _ROLES:
                break
        first_name = self._text("first name: ")
        last_name = self._text("last name: ")
        password = self._text(_NEW_USER_PROMPT)
        user_id = self.system.add_user(_ROLES[role_name], first_name, last_name, password)
        self._write(f"Added {role_name} {first_name} {last_name} with ID {user_id}\n")

    def _delete_user(self) -> None:
        user_id = self._uint("id: ")
        if self.system.delete_user(user_id):
            self._write("User deleted succefully!\n")
        else:
            self._write("No user with that id found. \n")

    def _add_course(self) -> None:
        name = self._text("name: ")
        password = self._text(_NEW_COURSE_PROMPT)
        course_id = self.system.add_course(name, password)
        self._write(f"Course {name} with id of {course_id} added successfully\n")

    def _enroll(self) -> None:
        if self.system.enrolls_with_password():
            course_id = self._uint("Course id: ")
            course_password = self._text(_COURSE_PROMPT)
            self.system.enroll_self(course_id, course_password)
            self._write("You have succefully enrolled in this course!\n")
        else:
            course_id = self._uint("Course id: ")
            student_id = self._uint("Student id: ")
            self.system.enroll_student(student_id, course_id)
            self._write("Student succefully added to course. \n")

    def _assign_homework(self) -> None:
        course_id = self._uint("Course id: ")
        name = self._text("Homework name: ")
        assignment_id = self.system.add_assignment(course_id, name)
        self._write(f"Assignment with id of {assignment_id} added.\n")

    def _submit_homework(self) -> None:
        assignment_id = self._uint("Assignment id: ")
        homework = self._text("Homework: ")
        submission_id = self.system.add_homework(assignment_id, homework)
        self._write(f"Homework with id of {submission_id} added.\n")

    def _view_homeworks(self) -> None:
        assignment_id = self._uint("Assignment id: ")
        self._write(self.system.submissions_report(assignment_id))

    def _grade_homework(self) -> None:
        submission_id = self._uint("Homework id: ")
        grade = self._float("Grade: ")
        self.system.grade_submission(submission_id, grade)
        self._write("Homework graded.\n")

    def _message_user(self) -> None:
        receiver_id = self._uint("Reciever id: ")
        text = self._text("Message: ")
        self.system.message_user(receiver_id, text)
        self._write("Message sent succefully\n")

    def _message_all(self) -> None:
        text = self._text("Message: ")
        self.system.message_all(text)
        self._write("Message sent succefully\n")

    def _message_course(self) -> None:
        course_id = self._uint("Course id: ")
        text = self._text("Message: ")
        self.system.message_course(course_id, text)
        self._write("Message sent succefully\n")

    def _change_password(self) -> None:
        password = self._text(_CHANGE_PROMPT)
        self.system.change_password(password)
        self._write("Password changed succefully\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="coursehub", description="Interactive course management.")
    parser.add_argument("--data-dir", default=".", help="directory that holds the data files")
    args = parser.parse_args(argv)
    with System(DataFiles(args.data_dir)) as system:
        CommandHandler(system).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())