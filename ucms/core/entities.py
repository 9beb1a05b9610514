"""
Core entities for the course management system.
"""

from abc import ABC
from typing import Any, Dict, List

from .enums import CourseLevel
from .interfaces import Enrollable


class AbstractEntity(ABC):
    """Base abstract entity with an integer ID."""

    def __init__(self, entity_id: int):
        self._id = entity_id

    @property
    def id(self) -> int:
        """Get the entity ID."""
        return self._id

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Course(AbstractEntity):
    """Course entity holding its roster of enrolled students."""

    CAPACITY = 3

    def __init__(self, course_id: int, course_name: str, course_level: CourseLevel):
        super().__init__(course_id)
        self._course_name = course_name
        self._course_level = course_level
        self._enrolled_students: List['Student'] = []

    @property
    def course_id(self) -> int:
        return self._id

    @property
    def course_name(self) -> str:
        return self._course_name

    @property
    def course_level(self) -> CourseLevel:
        return self._course_level

    @property
    def enrolled_students(self) -> List['Student']:
        return self._enrolled_students.copy()

    def is_full(self) -> bool:
        """Check if the roster is at capacity."""
        return len(self._enrolled_students) == self.CAPACITY

    def has_student(self, student: 'Student') -> bool:
        return student in self._enrolled_students

    # Roster changes go through Student.enroll / Student.drop so both
    # sides of the relation move together.
    def _attach_student(self, student: 'Student') -> None:
        self._enrolled_students.append(student)

    def _detach_student(self, student: 'Student') -> None:
        self._enrolled_students.remove(student)

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'course_name': self._course_name,
            'course_level': self._course_level.value,
            'enrolled_students': [student.member_id for student in self._enrolled_students],
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Course(id={self._id}, name={self._course_name!r}, level={self._course_level.value})"


class UniversityMember(AbstractEntity):
    """Common header of students and professors: an ID and a name."""

    def __init__(self, member_id: int, member_name: str):
        super().__init__(member_id)
        self._member_name = member_name

    @property
    def member_id(self) -> int:
        return self._id

    @property
    def member_name(self) -> str:
        return self._member_name

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict['member_name'] = self._member_name
        return base_dict

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, name={self._member_name!r})"


class Student(UniversityMember, Enrollable):
    """Student entity attending up to MAX_ENROLMENT courses."""

    MAX_ENROLMENT = 3

    def __init__(self, member_id: int, member_name: str):
        super().__init__(member_id, member_name)
        self._enrolled_courses: List[Course] = []

    @property
    def enrolled_courses(self) -> List[Course]:
        return self._enrolled_courses.copy()

    def has_reached_max_enrolment(self) -> bool:
        return len(self._enrolled_courses) >= self.MAX_ENROLMENT

    def is_enrolled_in(self, course: Course) -> bool:
        return course in self._enrolled_courses

    def enroll(self, course: Course) -> bool:
        """Add the course to this student and the student to the course roster."""
        course._attach_student(self)
        self._enrolled_courses.append(course)
        return True

    def drop(self, course: Course) -> bool:
        """Remove both sides of the enrollment."""
        course._detach_student(self)
        self._enrolled_courses.remove(course)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict['enrolled_courses'] = [course.course_id for course in self._enrolled_courses]
        return base_dict


class Professor(UniversityMember):
    """Professor entity teaching up to MAX_LOAD courses.

    The assignment is stored on the professor only; courses do not track
    their teachers.
    """

    MAX_LOAD = 2

    def __init__(self, member_id: int, member_name: str):
        super().__init__(member_id, member_name)
        self._assigned_courses: List[Course] = []

    @property
    def assigned_courses(self) -> List[Course]:
        return self._assigned_courses.copy()

    def has_full_load(self) -> bool:
        return len(self._assigned_courses) >= self.MAX_LOAD

    def is_teaching(self, course: Course) -> bool:
        return course in self._assigned_courses

    def teach(self, course: Course) -> bool:
        """Assign a course to teach."""
        self._assigned_courses.append(course)
        return True

    def exempt(self, course: Course) -> bool:
        """Remove a course assignment."""
        self._assigned_courses.remove(course)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert professor to dictionary."""
        base_dict = super().to_dict()
        base_dict['assigned_courses'] = [course.course_id for course in self._assigned_courses]
        return base_dict
