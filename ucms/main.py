"""
Main entry point for the course management system.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from .api.command_dispatcher import CommandDispatcher
from .config import SystemConfig, configure_logging, load_config
from .services import RegistryService, seed_initial_data

logger = logging.getLogger(__name__)


class CourseManagementSystem:
    """Wires the registry, its initial dataset and the command dispatcher."""

    def __init__(self, config: Optional[dict] = None, output: Optional[TextIO] = None):
        self._config: SystemConfig = load_config(config)
        self._registry = None
        self._dispatcher = None
        self._output = output

        self._initialize_system()

    def _initialize_system(self):
        """Create the registry and seed it when configured to."""
        self._registry = RegistryService()
        if self._config.seed_initial_data:
            seed_initial_data(self._registry)
        else:
            logger.info("Starting with an empty registry")
        self._dispatcher = CommandDispatcher(self._registry, self._output)

    @property
    def config(self) -> SystemConfig:
        return self._config

    @property
    def registry(self) -> RegistryService:
        return self._registry

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def run(self, lines: Iterable[str]) -> int:
        """Process a command stream and return the exit status."""
        return self._dispatcher.run(lines)


def main():
    """Main entry point. Command-line arguments are ignored."""
    config = load_config()
    configure_logging(config.log_level)
    system = CourseManagementSystem(config.model_dump())
    sys.exit(system.run(sys.stdin))


if __name__ == "__main__":
    main()
