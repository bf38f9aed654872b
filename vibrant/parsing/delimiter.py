from typing import Optional

from .cursor import Cursor


class DelimiterTracker:
    """
    Argument separator state for one function call.

    The first separator decides the mode: a comma locks comma mode, one or
    more spaces without a comma lock space mode. Later separators must use
    the locked mode.
    """
    __slots__ = ('comma_mode',)

    def __init__(self) -> None:
        self.comma_mode: Optional[bool] = None

    @property
    def locked(self) -> bool:
        return self.comma_mode is not None

    def consume(self, cursor: Cursor) -> bool:
        """Consume one separator; return ``False`` if none matches the mode."""
        spaces = cursor.consume_whitespace()

        if self.comma_mode is None:
            self.comma_mode = cursor.consume_if(b",")
            return self.comma_mode or spaces > 0

        if self.comma_mode:
            return cursor.consume_if(b",")

        return spaces > 0
