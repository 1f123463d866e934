"""
Console History
Bounded record of executed input lines
"""

from collections import deque
from typing import Deque, Iterator, Optional


class History:
    """Ring buffer of input lines. The oldest line is dropped once capacity is reached."""

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._lines: Deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._lines.maxlen

    @property
    def last(self) -> Optional[str]:
        return self._lines[-1] if self._lines else None

    def push(self, line: str) -> None:
        """Append a line. Blank lines are not recorded."""
        if line and line.strip():
            self._lines.append(line)

    def clear(self) -> None:
        self._lines.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __len__(self) -> int:
        return len(self._lines)
