"""Course management: users, courses, assignments, submissions and messages kept in binary files."""

__version__ = "1.0.0"
__all__ = ["__version__"]