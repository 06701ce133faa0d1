"""Storage of assignments."""

from __future__ import annotations

import os

from coursehub.binfile import BinaryFile, Reader, encode_string, encode_uint
from coursehub.models import Assignment


def _decode(reader: Reader) -> Assignment:
    assignment_id = reader.uint()
    course_id = reader.uint()
    name = reader.string()
    return Assignment(name, assignment_id, course_id)


def _encode(assignment: Assignment) -> bytes:
    return (
        encode_uint(assignment.id)
        + encode_uint(assignment.course_id)
        + encode_string(assignment.name)
    )


class AssignmentStore:
    """Assignments kept one after another in a binary file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = BinaryFile(path, _decode)

    def save(self, assignment: Assignment) -> None:
        self._file.append(_encode(assignment))

    def find(self, assignment_id: int) -> Assignment | None:
        """The assignment with that id, or None."""
        return next(
            (assignment for assignment, _ in self._file.records() if assignment.id == assignment_id),
            None,
        )

    def get(self, assignment_id: int) -> Assignment:
        assignment = self.find(assignment_id)
        if assignment is None:
            raise LookupError("Assignment with that id was not found")
        return assignment

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> AssignmentStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()