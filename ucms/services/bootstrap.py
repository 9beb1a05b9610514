"""
Initial dataset loaded before the first command is read.
"""

import logging

from ..core.enums import CourseLevel
from .registry_service import RegistryService

logger = logging.getLogger(__name__)

INITIAL_COURSES = (
    ("java_beginner", CourseLevel.BACHELOR),
    ("java_intermediate", CourseLevel.BACHELOR),
    ("python_basics", CourseLevel.BACHELOR),
    ("algorithms", CourseLevel.MASTER),
    ("advanced_programming", CourseLevel.MASTER),
    ("mathematical_analysis", CourseLevel.MASTER),
    ("computer_vision", CourseLevel.MASTER),
)

# Member name -> 1-based course IDs
INITIAL_STUDENTS = (
    ("Alice", (1, 2, 3)),
    ("Bob", (1, 4)),
    ("Alex", (5,)),
)

INITIAL_PROFESSORS = (
    ("Ali", (1, 2)),
    ("Ahmed", (3, 5)),
    ("Andrey", (6,)),
)


def seed_initial_data(registry: RegistryService) -> RegistryService:
    """Populate an empty registry with the fixed courses and members.

    Names are taken as-is; the dataset is known to satisfy every limit, so
    relations are applied directly on the entities.
    """
    for course_name, course_level in INITIAL_COURSES:
        registry.register_course(course_name, course_level)

    for member_name, course_ids in INITIAL_STUDENTS:
        student = registry.register_student(member_name)
        for course_id in course_ids:
            student.enroll(registry.get_course(course_id))

    for member_name, course_ids in INITIAL_PROFESSORS:
        professor = registry.register_professor(member_name)
        for course_id in course_ids:
            professor.teach(registry.get_course(course_id))

    logger.info(f"Seeded registry: {registry.get_statistics()}")
    return registry
