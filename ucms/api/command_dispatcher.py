"""
Line-oriented command interface to the registry.

Each command token is followed by its operand lines. A successful command
prints one status line. The first failure prints its diagnostic and ends the
session.
"""

import logging
import sys
from typing import Callable, Dict, Iterable, Iterator, Optional, TextIO

from ..core.enums import CommandType
from ..core.exceptions import UcmsException, WrongInputsError, SessionTerminated
from ..core.validation import (
    CourseCreate, RelationRequest, build_operands, check_course_name, check_name
)
from ..services.registry_service import RegistryService

logger = logging.getLogger(__name__)

ADDED = "Added successfully"
ENROLLED = "Enrolled successfully"
DROPPED = "Dropped successfully"
ASSIGNED = "Professor is successfully assigned to teach this course"
EXEMPTED = "Professor is exempted"


def strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


class CommandDispatcher:
    """Reads commands, applies them to a registry and reports the outcome."""

    def __init__(self, registry: RegistryService, output: Optional[TextIO] = None):
        self._registry = registry
        self._output = output
        self._commands_processed = 0
        self._handlers: Dict[CommandType, Callable[[Iterator[str]], str]] = {
            CommandType.COURSE: self._handle_course,
            CommandType.STUDENT: self._handle_student,
            CommandType.PROFESSOR: self._handle_professor,
            CommandType.ENROLL: self._handle_enroll,
            CommandType.DROP: self._handle_drop,
            CommandType.TEACH: self._handle_teach,
            CommandType.EXEMPT: self._handle_exempt,
        }

    @property
    def registry(self) -> RegistryService:
        return self._registry

    @property
    def commands_processed(self) -> int:
        return self._commands_processed

    def run(self, lines: Iterable[str]) -> int:
        """Process commands until the input ends or a command fails.

        Returns the exit status, which is 0 on every path.
        """
        stream = iter(lines)
        try:
            while True:
                try:
                    line = next(stream)
                except StopIteration:
                    break
                except Exception as e:
                    logger.error(f"Failed to read command: {e}", exc_info=True)
                    self._emit(WrongInputsError.default_message)
                    raise SessionTerminated(0) from e
                self._execute(strip_line_terminator(line), stream)
        except SessionTerminated as e:
            logger.info(f"Session terminated after {self._commands_processed} commands")
            return e.exit_status
        logger.info(f"End of input after {self._commands_processed} commands")
        return 0

    def dispatch(self, command: str, operands: Iterable[str]) -> str:
        """Execute a single command; raises `SessionTerminated` on failure."""
        return self._execute(command, iter(operands))

    def _execute(self, command: str, stream: Iterator[str]) -> str:
        try:
            try:
                command_type = CommandType(command)
            except ValueError:
                logger.debug(f"Unknown command {command!r}")
                raise WrongInputsError(details={'command': command}) from None
            message = self._handlers[command_type](stream)
        except UcmsException as e:
            logger.info(f"Command {command!r} failed: {e.message} {e.details}")
            self._emit(e.message)
            raise SessionTerminated(0) from e
        except Exception as e:
            logger.error(f"Unexpected failure in command {command!r}: {e}", exc_info=True)
            self._emit(WrongInputsError.default_message)
            raise SessionTerminated(0) from e
        self._commands_processed += 1
        self._emit(message)
        return message

    def _emit(self, message: str) -> None:
        print(message, file=self._output or sys.stdout, flush=True)

    @staticmethod
    def _read_operand(stream: Iterator[str]) -> str:
        try:
            return strip_line_terminator(next(stream))
        except StopIteration:
            logger.debug("Input ended before all operands were read")
            raise WrongInputsError(details={'reason': 'missing operand'}) from None

    def _read_relation(self, stream: Iterator[str]) -> RelationRequest:
        member_id = self._read_operand(stream)
        course_id = self._read_operand(stream)
        return build_operands(RelationRequest, member_id=member_id, course_id=course_id)

    def _handle_course(self, stream: Iterator[str]) -> str:
        # The name is checked before the level line is consumed
        name = check_course_name(self._read_operand(stream), self._registry.courses)
        level = self._read_operand(stream)
        request = build_operands(CourseCreate, name=name, level=level)
        self._registry.register_course(request.name, request.level)
        return ADDED

    def _handle_student(self, stream: Iterator[str]) -> str:
        name = check_name(self._read_operand(stream))
        self._registry.register_student(name)
        return ADDED

    def _handle_professor(self, stream: Iterator[str]) -> str:
        name = check_name(self._read_operand(stream))
        self._registry.register_professor(name)
        return ADDED

    def _handle_enroll(self, stream: Iterator[str]) -> str:
        request = self._read_relation(stream)
        self._registry.enroll(request.member_id, request.course_id)
        return ENROLLED

    def _handle_drop(self, stream: Iterator[str]) -> str:
        request = self._read_relation(stream)
        self._registry.drop(request.member_id, request.course_id)
        return DROPPED

    def _handle_teach(self, stream: Iterator[str]) -> str:
        request = self._read_relation(stream)
        self._registry.teach(request.member_id, request.course_id)
        return ASSIGNED

    def _handle_exempt(self, stream: Iterator[str]) -> str:
        request = self._read_relation(stream)
        self._registry.exempt(request.member_id, request.course_id)
        return EXEMPTED
