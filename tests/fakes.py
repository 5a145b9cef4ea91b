# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


class ScriptedInput:
    """
    Line source for the console loop.

    - Returns the scripted lines in order
    - Raises EOFError once they run out (like input() at end of stdin)
    - Counts reads so tests can assert nothing was read after "bye"
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if self.reads >= len(self._lines):
            raise EOFError
        line = self._lines[self.reads]
        self.reads += 1
        return line


@dataclass(slots=True)
class CapturingWriter:
    """Collects everything the console loop writes."""

    frames: list[str] = field(default_factory=list)

    def __call__(self, text: str) -> None:
        self.frames.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.frames)
