"""
Enumerations and constants for the course management system.
"""

from enum import Enum
from typing import FrozenSet


class CourseLevel(Enum):
    """Academic level of a course."""
    BACHELOR = "BACHELOR"
    MASTER = "MASTER"


class CommandType(Enum):
    """Commands accepted on the input stream."""
    COURSE = "course"
    STUDENT = "student"
    PROFESSOR = "professor"
    ENROLL = "enroll"
    DROP = "drop"
    TEACH = "teach"
    EXEMPT = "exempt"


# Names that collide with command tokens
RESERVED_NAMES: FrozenSet[str] = frozenset(
    ("student", "course", "professor", "enroll", "teach", "exempt", "drop")
)

# Course names additionally cannot collide with level tokens
RESERVED_COURSE_NAMES: FrozenSet[str] = RESERVED_NAMES | frozenset(("master", "bachelor"))
