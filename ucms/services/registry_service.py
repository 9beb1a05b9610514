"""
Registry service owning courses, students and professors.

The service keeps the three creation-ordered sequences, the identifier
allocators, and enforces the capacity, enrollment and load limits in a fixed
order before any relation is changed.
"""

import logging
from typing import Any, Dict, List

from ..core.entities import Course, Student, Professor
from ..core.enums import CourseLevel
from ..core.exceptions import (
    WrongInputsError, CourseExistsError, AlreadyEnrolledError, NotEnrolledError,
    MaxEnrollmentError, CourseFullError, ProfessorLoadError, AlreadyTeachingError,
    NotTeachingError
)
from ..core.identifiers import IdentifierAllocator

logger = logging.getLogger(__name__)


class RegistryService:
    """In-memory registry of courses and university members."""

    def __init__(self):
        self._courses: List[Course] = []
        self._students: List[Student] = []
        self._professors: List[Professor] = []
        self._course_ids = IdentifierAllocator()
        # Students and professors share one ID space
        self._member_ids = IdentifierAllocator()

    @property
    def courses(self) -> List[Course]:
        return self._courses.copy()

    @property
    def students(self) -> List[Student]:
        return self._students.copy()

    @property
    def professors(self) -> List[Professor]:
        return self._professors.copy()

    @property
    def last_course_id(self) -> int:
        return self._course_ids.last

    @property
    def last_member_id(self) -> int:
        return self._member_ids.last

    # Creation

    def register_course(self, course_name: str, course_level: CourseLevel) -> Course:
        """Create a course. Names are unique across the registry."""
        if any(course.course_name == course_name for course in self._courses):
            logger.info(f"Rejected duplicate course {course_name!r}")
            raise CourseExistsError(details={'course_name': course_name})
        course = Course(self._course_ids.next_id(), course_name, course_level)
        self._courses.append(course)
        logger.info(f"Added course {course.course_id} {course_name!r} ({course_level.value})")
        return course

    def register_student(self, member_name: str) -> Student:
        """Create a student. Names need not be unique."""
        student = Student(self._member_ids.next_id(), member_name)
        self._students.append(student)
        logger.info(f"Added student {student.member_id} {member_name!r}")
        return student

    def register_professor(self, member_name: str) -> Professor:
        """Create a professor. Names need not be unique."""
        professor = Professor(self._member_ids.next_id(), member_name)
        self._professors.append(professor)
        logger.info(f"Added professor {professor.member_id} {member_name!r}")
        return professor

    # Lookup

    def find_student(self, member_id: int) -> Student:
        for student in self._students:
            if student.member_id == member_id:
                return student
        logger.debug(f"No student with member ID {member_id}")
        raise WrongInputsError(details={'member_id': member_id, 'expected': 'student'})

    def find_professor(self, member_id: int) -> Professor:
        for professor in self._professors:
            if professor.member_id == member_id:
                return professor
        logger.debug(f"No professor with member ID {member_id}")
        raise WrongInputsError(details={'member_id': member_id, 'expected': 'professor'})

    def get_course(self, course_id: int) -> Course:
        """Resolve a 1-based course ID against the creation order."""
        if not 1 <= course_id <= len(self._courses):
            logger.debug(f"Course ID {course_id} out of range 1..{len(self._courses)}")
            raise WrongInputsError(details={'course_id': course_id})
        return self._courses[course_id - 1]

    # Relations

    def enroll(self, member_id: int, course_id: int) -> Student:
        """Enroll a student in a course."""
        student = self.find_student(member_id)
        course = self.get_course(course_id)
        if course.has_student(student):
            raise AlreadyEnrolledError(details={'member_id': member_id, 'course_id': course_id})
        if student.has_reached_max_enrolment():
            raise MaxEnrollmentError(details={'member_id': member_id})
        if course.is_full():
            raise CourseFullError(details={'course_id': course_id})
        student.enroll(course)
        logger.info(f"Enrolled student {member_id} in course {course_id}")
        return student

    def drop(self, member_id: int, course_id: int) -> Student:
        """Drop a student from a course."""
        student = self.find_student(member_id)
        course = self.get_course(course_id)
        if not course.has_student(student):
            raise NotEnrolledError(details={'member_id': member_id, 'course_id': course_id})
        student.drop(course)
        logger.info(f"Dropped student {member_id} from course {course_id}")
        return student

    def teach(self, member_id: int, course_id: int) -> Professor:
        """Assign a professor to teach a course.

        The load limit is checked before the duplicate assignment, so a
        professor at full load always gets the load diagnostic.
        """
        professor = self.find_professor(member_id)
        course = self.get_course(course_id)
        if professor.has_full_load():
            raise ProfessorLoadError(details={'member_id': member_id})
        if professor.is_teaching(course):
            raise AlreadyTeachingError(details={'member_id': member_id, 'course_id': course_id})
        professor.teach(course)
        logger.info(f"Assigned professor {member_id} to course {course_id}")
        return professor

    def exempt(self, member_id: int, course_id: int) -> Professor:
        """Remove a professor's assignment to a course."""
        professor = self.find_professor(member_id)
        course = self.get_course(course_id)
        if not professor.is_teaching(course):
            raise NotTeachingError(details={'member_id': member_id, 'course_id': course_id})
        professor.exempt(course)
        logger.info(f"Exempted professor {member_id} from course {course_id}")
        return professor

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        return {
            'courses': len(self._courses),
            'students': len(self._students),
            'professors': len(self._professors),
            'enrollments': sum(len(student.enrolled_courses) for student in self._students),
            'assignments': sum(len(professor.assigned_courses) for professor in self._professors),
            'last_course_id': self._course_ids.last,
            'last_member_id': self._member_ids.last,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of every entity in creation order."""
        return {
            'courses': [course.to_dict() for course in self._courses],
            'students': [student.to_dict() for student in self._students],
            'professors': [professor.to_dict() for professor in self._professors],
        }
