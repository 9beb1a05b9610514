"""
Configuration for the course management system.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SystemConfig(BaseModel):
    seed_initial_data: bool = True
    log_level: str = Field(default="WARNING", min_length=1)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(config: Optional[Dict[str, Any]] = None) -> SystemConfig:
    """Validate a plain configuration dict."""
    try:
        return SystemConfig(**(config or {}))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            error_code="invalid_config",
            details={'errors': e.errors(include_url=False)},
        ) from e


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to standard error; standard output carries status lines only."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
