"""Storage of user accounts."""

from __future__ import annotations

import os
from collections.abc import Iterator

from coursehub.binfile import BinaryFile, Reader, encode_string, encode_uint
from coursehub.config import ADMIN_ID, ADMIN_PASSWORD
from coursehub.models import User, UserType, hash_password, make_admin


def _decode(reader: Reader) -> User:
    raw_role = reader.byte()
    try:
        role = UserType(raw_role)
    except ValueError:
        raise ValueError("Can not create user") from None
    first_name = reader.string()
    last_name = reader.string()
    hashed_password = reader.string()
    user_id = reader.uint()
    return User(role, first_name, last_name, hashed_password, user_id)


def _encode(user: User) -> bytes:
    return (
        bytes([int(user.role)])
        + encode_string(user.first_name)
        + encode_string(user.last_name)
        + encode_string(user.hashed_password)
        + encode_uint(user.id)
    )


class UserStore:
    """Users kept in a binary file; the administrator is always present."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._file = BinaryFile(path, _decode)
        if self.find(ADMIN_ID, hash_password(ADMIN_PASSWORD)) is None:
            self.save(make_admin())

    def save(self, user: User) -> None:
        if user is None:
            raise TypeError("User can not be None")
        self._file.append(_encode(user))

    def __iter__(self) -> Iterator[User]:
        return (user for user, _ in self._file.records())

    def find(self, user_id: int, hashed_password: str | None = None) -> User | None:
        """The user with that id (and hashed password, when given), or None."""
        return next(
            (
                user
                for user in self
                if user.id == user_id
                and (hashed_password is None or user.hashed_password == hashed_password)
            ),
            None,
        )

    def get(self, user_id: int, hashed_password: str | None = None) -> User:
        user = self.find(user_id, hashed_password)
        if user is None:
            raise LookupError("User was not found.")
        return user

    def _replace(self, user_id: int, replacement: User | None) -> bool:
        matched = False

        def chunks():
            nonlocal matched
            for user, raw in self._file.records():
                if user.id != user_id:
                    yield raw
                    continue
                matched = True
                if replacement is not None:
                    yield _encode(replacement)

        self._file.rewrite(chunks())
        return matched

    def delete(self, user_id: int) -> bool:
        """Remove the user with that id; tell whether one was removed."""
        return self._replace(user_id, None)

    def update(self, user_id: int, updated_user: User | None) -> bool:
        """Store ``updated_user`` in place of the user with that id.

        Passing None removes the user. Tells whether a user was matched.
        """
        return self._replace(user_id, updated_user)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> UserStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()