"""
Sequential identifier allocation.
"""


class IdentifierAllocator:
    """Hands out strictly increasing positive integers starting at 1."""

    def __init__(self, start: int = 0):
        self._last = start

    @property
    def last(self) -> int:
        """Most recently issued identifier, or 0 if none was issued."""
        return self._last

    def next_id(self) -> int:
        self._last += 1
        return self._last

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(last={self._last})"
