"""Custom exceptions for the student collection."""


class StudentError(Exception):
    """Base exception for student collection errors."""


class StudentNotFoundError(StudentError):
    """Student with given ID does not exist."""
