"""
Custom exceptions for the course management system.

Every exception carries the exact status line printed on the command stream
when it terminates a session.
"""

from typing import Optional, Any, Dict


class UcmsException(Exception):
    """Base exception for all registry errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class _FixedMessageError(UcmsException):
    """Error whose status line never varies."""

    default_message = ""
    default_code: Optional[str] = None

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(self.default_message, self.default_code, details)


class WrongInputsError(_FixedMessageError):
    """Raised for any malformed, unresolvable or reserved input."""
    default_message = "Wrong inputs"
    default_code = "wrong_inputs"


class CourseExistsError(_FixedMessageError):
    """Raised when a course name is already registered."""
    default_message = "Course exists"
    default_code = "course_exists"


class AlreadyEnrolledError(_FixedMessageError):
    """Raised when the student already attends the course."""
    default_message = "Student is already enrolled in this course"
    default_code = "already_enrolled"


class NotEnrolledError(_FixedMessageError):
    """Raised when dropping a course the student does not attend."""
    default_message = "Student is not enrolled in this course"
    default_code = "not_enrolled"


class MaxEnrollmentError(_FixedMessageError):
    """Raised when the student attends the maximum number of courses."""
    default_message = "Maximum enrollment is reached for the student"
    default_code = "max_enrollment"


class CourseFullError(_FixedMessageError):
    """Raised when the course roster is at capacity."""
    default_message = "Course is full"
    default_code = "course_full"


class ProfessorLoadError(_FixedMessageError):
    """Raised when the professor teaches the maximum number of courses."""
    default_message = "Professor's load is complete"
    default_code = "load_complete"


class AlreadyTeachingError(_FixedMessageError):
    """Raised when the professor already teaches the course."""
    default_message = "Professor is already teaching this course"
    default_code = "already_teaching"


class NotTeachingError(_FixedMessageError):
    """Raised when exempting a professor from a course they do not teach."""
    default_message = "Professor is not teaching this course"
    default_code = "not_teaching"


class ConfigurationError(UcmsException):
    """Raised when configuration is invalid."""
    pass


class SessionTerminated(Exception):
    """Raised by the dispatcher once a session has printed its final line."""

    def __init__(self, exit_status: int = 0):
        super().__init__(exit_status)
        self.exit_status = exit_status
