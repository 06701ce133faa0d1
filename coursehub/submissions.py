"""Storage of homework submissions and their grades."""

from __future__ import annotations

import os
from collections.abc import Iterable

from coursehub.binfile import BinaryFile, Reader, encode_double, encode_string, encode_uint
from coursehub.models import Submission

_NO_SUBMISSIONS = "There are no submited homeworks yet.\n"


def _decode(reader: Reader) -> Submission:
    submission_id = reader.uint()
    student_id = reader.uint()
    assignment_id = reader.uint()
    answer = reader.string()
    grade = reader.double()
    return Submission(submission_id, student_id, assignment_id, answer, grade)


def _encode(submission: Submission) -> bytes:
    return (
        encode_uint(submission.id)
        + encode_uint(submission.student_id)
        + encode_uint(submission.assignment_id)
        + encode_string(submission.answer)
        + encode_double(submission.grade)
    )


class SubmissionStore:
    """Submissions kept one after another in a binary file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = BinaryFile(path, _decode)

    def save(self, submission: Submission) -> None:
        self._file.append(_encode(submission))

    def find(self, submission_id: int) -> Submission | None:
        """The submission with that id, or None."""
        return next(
            (submission for submission, _ in self._file.records() if submission.id == submission_id),
            None,
        )

    def get(self, submission_id: int) -> Submission:
        submission = self.find(submission_id)
        if submission is None:
            raise LookupError("Submission with that id was not found")
        return submission

    def for_assignment(self, assignment_id: int) -> list[Submission]:
        """Every submission made for an assignment, in the order saved."""
        return [
            submission
            for submission, _ in self._file.records()
            if submission.assignment_id == assignment_id
        ]

    def for_student(self, student_id: int) -> list[Submission]:
        """Every submission made by a student, in the order saved."""
        return [
            submission
            for submission, _ in self._file.records()
            if submission.student_id == student_id
        ]

    def render(self, submissions: Iterable[Submission]) -> str:
        """A listing of the given submissions, one line each."""
        lines = [submission.format_line() for submission in submissions]
        if not lines:
            return _NO_SUBMISSIONS
        return "".join(lines)

    def update(self, submission: Submission) -> None:
        """Replace the stored submission that has the same id."""
        self._file.rewrite(
            raw if stored.id != submission.id else _encode(submission)
            for stored, raw in self._file.records()
        )

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> SubmissionStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()