"""Storage of courses together with their enrolled students."""

from __future__ import annotations

import os
from dataclasses import dataclass

from coursehub.binfile import BinaryFile, Reader, encode_string, encode_uint
from coursehub.models import Course


@dataclass(frozen=True)
class _Entry:
    course: Course
    student_ids: tuple[int, ...]


def _decode(reader: Reader) -> _Entry:
    owner_id = reader.uint()
    course_id = reader.uint()
    name = reader.string()
    hashed_password = reader.string()
    count = reader.uint()
    student_ids = tuple(reader.uint() for _ in range(count))
    return _Entry(Course(name, hashed_password, owner_id, course_id, count), student_ids)


def _encode_header(course: Course) -> bytes:
    return (
        encode_uint(course.owner_id)
        + encode_uint(course.id)
        + encode_string(course.name)
        + encode_string(course.hashed_password)
        + encode_uint(course.students_count)
    )


class CourseStore:
    """Courses kept in a binary file, each followed by its student ids."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = BinaryFile(path, _decode)

    def save(self, course: Course) -> None:
        """Append a course; it is saved without student ids."""
        self._file.append(_encode_header(course))

    def _entry(self, course_id: int, hashed_password: str | None = None) -> _Entry | None:
        return next(
            (
                entry
                for entry, _ in self._file.records()
                if entry.course.id == course_id
                and (hashed_password is None or entry.course.hashed_password == hashed_password)
            ),
            None,
        )

    def find(self, course_id: int, hashed_password: str | None = None) -> Course | None:
        """The course with that id (and hashed password, when given), or None."""
        entry = self._entry(course_id, hashed_password)
        return None if entry is None else entry.course

    def get(self, course_id: int, hashed_password: str | None = None) -> Course:
        course = self.find(course_id, hashed_password)
        if course is None:
            raise LookupError("Course with that id was not found")
        return course

    def student_ids(self, course_id: int) -> list[int]:
        entry = self._entry(course_id)
        if entry is None:
            raise LookupError("Course with that id was not found")
        return list(entry.student_ids)

    def has_student(self, course_id: int, student_id: int) -> bool:
        return student_id in self.student_ids(course_id)

    def add_student(self, course: Course, student_id: int) -> None:
        """Enroll a student; the given course's count is incremented."""

        def chunks():
            for entry, raw in self._file.records():
                if entry.course.id != course.id:
                    yield raw
                    continue
                course.students_count = len(entry.student_ids)
                course.increment_students()
                yield (
                    _encode_header(course)
                    + b"".join(encode_uint(existing) for existing in entry.student_ids)
                    + encode_uint(student_id)
                )

        self._file.rewrite(chunks())

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> CourseStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()