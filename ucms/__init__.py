"""
UCMS: University Course Management System

A small interactive registry of courses, students and professors driven by a
line-oriented command stream. Tracks enrollments and teaching assignments and
enforces course capacity, student enrollment limits and professor load.
"""

__version__ = "1.0.0"
__author__ = "UCMS Development Team"
__description__ = "University course registry driven by a command stream"
