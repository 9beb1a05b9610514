"""
Core module containing the domain model, validation and error types.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .identifiers import *
from .validation import *

__all__ = [
    # Entities
    "AbstractEntity",
    "UniversityMember",
    "Student",
    "Professor",
    "Course",

    # Interfaces
    "Enrollable",

    # Identifiers
    "IdentifierAllocator",

    # Enums
    "CourseLevel",
    "CommandType",
    "RESERVED_NAMES",
    "RESERVED_COURSE_NAMES",

    # Validation
    "MemberCreate",
    "CourseCreate",
    "RelationRequest",
    "build_operands",
    "check_name",
    "check_course_name",
    "parse_course_level",
    "parse_identifier",

    # Exceptions
    "UcmsException",
    "WrongInputsError",
    "CourseExistsError",
    "AlreadyEnrolledError",
    "NotEnrolledError",
    "MaxEnrollmentError",
    "CourseFullError",
    "ProfessorLoadError",
    "AlreadyTeachingError",
    "NotTeachingError",
    "ConfigurationError",
    "SessionTerminated",
]
