"""The course system: accounts, courses, homework and messages."""

from __future__ import annotations

from coursehub.access import (
    AccessDenied,
    require_admin,
    require_client,
    require_logged,
    require_logged_out,
    require_student,
    require_teacher,
)
from coursehub.assignments import AssignmentStore
from coursehub.config import (
    ASSIGNMENTS_FILE,
    COURSES_FILE,
    HOMEWORKS_FILE,
    MESSAGES_FILE,
    USERS_FILE,
    DataFiles,
)
from coursehub.courses import CourseStore
from coursehub.ids import IdContainer
from coursehub.messages import MessageStore
from coursehub.models import (
    Assignment,
    Course,
    Message,
    Submission,
    User,
    UserType,
    create_user,
    hash_password,
)
from coursehub.submissions import SubmissionStore
from coursehub.users import UserStore


class System:
    """All stores of the system together with the logged-in user."""

    def __init__(self, files: DataFiles | None = None) -> None:
        self.files = files if files is not None else DataFiles()
        self.files.directory.mkdir(parents=True, exist_ok=True)
        self.user: User | None = None
        self.users = UserStore(self.files.users)
        self.submissions = SubmissionStore(self.files.homeworks)
        self.courses = CourseStore(self.files.courses)
        self.assignments = AssignmentStore(self.files.assignments)
        self.messages = MessageStore(self.files.messages)
        self.ids = IdContainer(self.files.ids)

    def close(self) -> None:
        self.user = None
        for store in (self.users, self.submissions, self.courses, self.assignments, self.messages):
            store.close()

    def __enter__(self) -> System:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # accounts

    def add_user(self, role: UserType, first_name: str, last_name: str, password: str) -> int:
        """Create a teacher or student account and return its id."""
        require_admin(self.user)
        user_id = self.ids.get(USERS_FILE)
        if self.users.find(user_id, hash_password(password)) is not None:
            raise ValueError("User with that id already exists")
        self.users.save(create_user(role, first_name, last_name, password, user_id))
        self.ids.increment(USERS_FILE)
        return user_id

    def delete_user(self, user_id: int) -> bool:
        """Remove an account; tell whether one was removed."""
        admin = require_admin(self.user)
        if admin.id == user_id:
            raise ValueError("Admin can not be deleted.")
        return self.users.delete(user_id)

    def login(self, user_id: int, password: str) -> None:
        require_logged_out(self.user)
        self.user = self.users.get(user_id, hash_password(password))

    def logout(self) -> None:
        self.user = None

    def change_password(self, password: str) -> None:
        user = require_client(self.user)
        updated = create_user(user.role, user.first_name, user.last_name, password, user.id)
        self.users.update(user.id, updated)
        self.user = updated

    # courses

    def add_course(self, name: str, password: str) -> int:
        """Create a course owned by the logged-in teacher and return its id."""
        teacher = require_teacher(self.user)
        course_id = self.ids.get(COURSES_FILE)
        course = Course(name, hash_password(password), teacher.id, course_id)
        if self.courses.find(course_id) is not None:
            raise ValueError("Course with that id already exists.")
        self.courses.save(course)
        self.ids.increment(COURSES_FILE)
        return course_id

    def enrolls_with_password(self) -> bool:
        """Students enroll themselves with a course password; teachers do not."""
        user = require_logged(self.user)
        return user.role is not UserType.TEACHER

    def enroll_self(self, course_id: int, course_password: str) -> None:
        student = require_student(self.user)
        course = self.courses.get(course_id, hash_password(course_password))
        if self.courses.has_student(course_id, student.id):
            raise ValueError("You have already enrolled in this course.")
        self.courses.add_student(course, student.id)

    def enroll_student(self, student_id: int, course_id: int) -> None:
        teacher = require_teacher(self.user)
        course = self.courses.get(course_id)
        student = self.users.get(student_id)
        if student.role is not UserType.STUDENT:
            raise ValueError("Only students can be enrolled.")
        if teacher.id != course.owner_id:
            raise AccessDenied("Access denied.")
        if self.courses.has_student(course_id, student_id):
            raise ValueError("Student has already enrolled.")
        self.courses.add_student(course, student_id)

    # homework

    def add_assignment(self, course_id: int, name: str) -> int:
        teacher = require_teacher(self.user)
        course = self.courses.get(course_id)
        if course.owner_id != teacher.id:
            raise AccessDenied("Access denied.")
        assignment_id = self.ids.get(ASSIGNMENTS_FILE)
        if self.assignments.find(assignment_id) is not None:
            raise ValueError("Assignment with that id already exists")
        self.assignments.save(Assignment(name, assignment_id, course_id))
        self.ids.increment(ASSIGNMENTS_FILE)
        return assignment_id

    def add_homework(self, assignment_id: int, homework: str) -> int:
        student = require_student(self.user)
        submission_id = self.ids.get(HOMEWORKS_FILE)
        if self.submissions.find(submission_id) is not None:
            raise ValueError("Submission with that id already exists")
        assignment = self.assignments.get(assignment_id)
        course = self.courses.get(assignment.course_id)
        if not self.courses.has_student(course.id, student.id):
            raise AccessDenied("Access denied.")
        self.submissions.save(Submission(submission_id, student.id, assignment_id, homework))
        self.ids.increment(HOMEWORKS_FILE)
        return submission_id

    def submissions_report(self, assignment_id: int) -> str:
        """Every submission for an assignment of the teacher's course."""
        teacher = require_teacher(self.user)
        assignment = self.assignments.get(assignment_id)
        course = self.courses.get(assignment.course_id)
        if teacher.id != course.owner_id:
            raise AccessDenied("Access denied")
        header = f"Assignment {assignment.name} for course {course.name} : \n"
        return header + self.submissions.render(self.submissions.for_assignment(assignment_id))

    def grade_submission(self, submission_id: int, grade: float) -> None:
        teacher = require_teacher(self.user)
        submission = self.submissions.get(submission_id)
        assignment = self.assignments.get(submission.assignment_id)
        course = self.courses.get(assignment.course_id)
        if course.owner_id != teacher.id:
            raise AccessDenied("Access denied")
        submission.set_grade(grade)
        self.submissions.update(submission)

    def grades_report(self) -> str:
        student = require_student(self.user)
        return self.submissions.render(self.submissions.for_student(student.id))

    # messages

    def message_user(self, receiver_id: int, text: str) -> None:
        sender = require_logged(self.user)
        message_id = self.ids.get(MESSAGES_FILE)
        if sender.id == receiver_id:
            raise ValueError("You can not message yourself")
        if self.users.find(receiver_id) is None:
            raise LookupError("User with that id was not found")
        if self.messages.find(message_id) is not None:
            raise ValueError("Message with that id already exists.")
        self.messages.save(Message(message_id, text, receiver_id, sender.id))
        self.ids.increment(MESSAGES_FILE)

    def message_all(self, text: str) -> None:
        admin = require_admin(self.user)
        for receiver in [user for user in self.users if user.id != admin.id]:
            self.message_user(receiver.id, text)

    def message_course(self, course_id: int, text: str) -> None:
        """Message every student enrolled in the teacher's course."""
        teacher = require_teacher(self.user)
        course = self.courses.get(course_id)
        if course.owner_id != teacher.id:
            raise AccessDenied("You are not the owner of this course")
        enrolled = set(self.courses.student_ids(course_id))
        for receiver in [user for user in self.users if user.id != teacher.id]:
            if receiver.id in enrolled:
                self.message_user(receiver.id, text)

    def mailbox(self) -> str:
        user = require_logged(self.user)
        return self.messages.render_mailbox(user.id)

    def clear_mailbox(self) -> None:
        user = require_logged(self.user)
        self.messages.delete_for(user.id)