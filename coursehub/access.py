"""Checks that the current user may perform an action."""

from __future__ import annotations

from coursehub.models import User, UserType


class AccessDenied(PermissionError):
    """The current user may not perform the requested action."""


def require_logged(user: User | None) -> User:
    if user is None:
        raise AccessDenied("Access denied: user not logged in.")
    return user


def require_logged_out(user: User | None) -> None:
    if user is not None:
        raise AccessDenied("You must logout first, in order to log in.")


def require_admin(user: User | None) -> User:
    user = require_logged(user)
    if user.role is not UserType.ADMIN:
        raise AccessDenied("Access denied: requires Admin role.")
    return user


def require_teacher(user: User | None) -> User:
    user = require_logged(user)
    if user.role is not UserType.TEACHER:
        raise AccessDenied("Access denied: requires Teacher role.")
    return user


def require_student(user: User | None) -> User:
    user = require_logged(user)
    if user.role is not UserType.STUDENT:
        raise AccessDenied("Access denied: requires Student role.")
    return user


def require_client(user: User | None) -> User:
    """Allow students and teachers."""
    user = require_logged(user)
    if user.role not in (UserType.STUDENT, UserType.TEACHER):
        raise AccessDenied("Access denied: requires Student or Teacher role.")
    return user