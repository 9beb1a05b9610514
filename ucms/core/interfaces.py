"""
Core interfaces for the course management system.
"""

from abc import ABC, abstractmethod


class Enrollable(ABC):
    """Interface for members that can attend courses."""

    @abstractmethod
    def enroll(self, course: 'Course') -> bool:
        """Enroll in a course."""
        pass

    @abstractmethod
    def drop(self, course: 'Course') -> bool:
        """Drop a course."""
        pass
