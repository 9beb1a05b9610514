"""
Input validation for command operands.

Names are checked against command tokens and a character class, course
levels against `CourseLevel`, and identifiers are parsed as signed decimal
integers. Operand shapes are declared as pydantic models; every validation
failure surfaces as `WrongInputsError`.
"""

import re
from typing import Any, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError, field_validator

from .entities import Course
from .enums import CourseLevel, RESERVED_NAMES, RESERVED_COURSE_NAMES
from .exceptions import CourseExistsError, WrongInputsError

NAME_PATTERN = re.compile(r"[a-zA-Z]+")
COURSE_NAME_PATTERN = re.compile(r"[a-zA-Z]+(_[a-zA-Z]+)*")
IDENTIFIER_PATTERN = re.compile(r"[+-]?[0-9]+")

M = TypeVar('M', bound=BaseModel)


def _member_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("name must be a string")
    name = value.lower()
    if name in RESERVED_NAMES:
        raise ValueError(f"{name!r} is a reserved word")
    if not NAME_PATTERN.fullmatch(name):
        raise ValueError(f"{name!r} is not a valid name")
    return name


def _course_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("course name must be a string")
    name = value.lower()
    if name in RESERVED_COURSE_NAMES:
        raise ValueError(f"{name!r} is a reserved word")
    if not COURSE_NAME_PATTERN.fullmatch(name):
        raise ValueError(f"{name!r} is not a valid course name")
    return name


def _course_level(value: Any) -> CourseLevel:
    if isinstance(value, CourseLevel):
        return value
    if not isinstance(value, str):
        raise ValueError("course level must be a string")
    try:
        return CourseLevel[value.upper()]
    except KeyError:
        raise ValueError(f"{value!r} is not a course level") from None


def _identifier(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str) or not IDENTIFIER_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not an integer")
    return int(value)


class MemberCreate(BaseModel):
    """Operands of the `student` and `professor` commands."""
    name: str

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return _member_name(value)


class CourseCreate(BaseModel):
    """Operands of the `course` command."""
    name: str
    level: CourseLevel

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return _course_name(value)

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, value: Any) -> CourseLevel:
        return _course_level(value)


class RelationRequest(BaseModel):
    """Operands of `enroll`, `drop`, `teach` and `exempt`."""
    member_id: int
    course_id: int

    @field_validator('member_id', 'course_id', mode='before')
    @classmethod
    def validate_identifier(cls, value: Any) -> int:
        return _identifier(value)


def build_operands(model: Type[M], **operands: Any) -> M:
    """Validate raw operands into `model`, collapsing failures to `WrongInputsError`."""
    try:
        return model(**operands)
    except ValidationError as e:
        raise WrongInputsError(details={'errors': e.errors(include_url=False)}) from e


def _wrap(check, value: Any):
    try:
        return check(value)
    except ValueError as e:
        raise WrongInputsError(details={'reason': str(e)}) from e


def check_name(name: str) -> str:
    """Validate a student or professor name and return it lowercased."""
    return build_operands(MemberCreate, name=name).name


def check_course_name(name: str, courses: Iterable[Course]) -> str:
    """Validate a new course name and return it lowercased.

    An already registered name raises `CourseExistsError` before the
    reserved-word and pattern checks are applied.
    """
    folded = name.lower()
    for course in courses:
        if course.course_name == folded:
            raise CourseExistsError(details={'course_name': folded})
    return _wrap(_course_name, folded)


def parse_course_level(token: str) -> CourseLevel:
    """Map a level token (any case) to `CourseLevel`."""
    return _wrap(_course_level, token)


def parse_identifier(token: str) -> int:
    """Parse a decimal member or course identifier."""
    return _wrap(_identifier, token)
