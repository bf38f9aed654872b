from __future__ import annotations
from typing import Optional

WHITESPACE = b" \t"


class Cursor:
    """
    Forward-only read position over ``data[pos:end]``.

    The underlying bytes are never copied; every consumer advances the same
    cursor and either moves past what it matched or leaves it where it was.
    """
    __slots__ = ('data', 'pos', 'end')

    def __init__(self, data: bytes, pos: int = 0, end: Optional[int] = None) -> None:
        self.data = data
        self.pos = pos
        self.end = len(data) if end is None else end

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> Optional[int]:
        """Current byte, or ``None`` at the end of input."""
        if self.pos >= self.end:
            return None
        return self.data[self.pos]

    def consume_if(self, literal: bytes) -> bool:
        """Advance past ``literal`` if the input continues with it exactly."""
        stop = self.pos + len(literal)
        if stop > self.end or self.data[self.pos:stop] != literal:
            return False
        self.pos = stop
        return True

    def consume_whitespace(self) -> int:
        """Skip spaces and tabs; return how many were skipped."""
        start = self.pos
        while self.pos < self.end and self.data[self.pos] in WHITESPACE:
            self.pos += 1
        return self.pos - start

    def advance_to(self, pos: int) -> None:
        if not self.pos <= pos <= self.end:
            raise ValueError(f"cursor can only move forward within input, got {pos}")
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor({self.data[self.pos:self.end]!r})"
