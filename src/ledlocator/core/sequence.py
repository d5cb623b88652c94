"""Process-wide frame sequence counter."""

import threading

from ..exceptions.custom_exceptions import InvalidArgumentError
from ..utils.validation import MAX_UINT32, validate_sequence_number


class SequenceCounter:
    """
    Strictly increasing uint32 sequence numbers.

    Shared by the workflow thread and the beacon thread, so every
    increment happens under a lock. The counter never resets; running
    past 0xFFFFFFFF raises instead of wrapping.
    """

    def __init__(self, start: int = 1):
        validate_sequence_number(start)
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Consume and return the next sequence number."""
        with self._lock:
            value = self._next
            if value > MAX_UINT32:
                raise InvalidArgumentError("Sequence counter exhausted")
            self._next = value + 1
            return value

    def peek(self) -> int:
        """Next value that next() would return, without consuming it."""
        with self._lock:
            return self._next
