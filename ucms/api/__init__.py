"""
API module exposing the command-stream interface.
"""

from .command_dispatcher import CommandDispatcher

__all__ = [
    "CommandDispatcher",
]
