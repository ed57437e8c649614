"""
Process-wide view identifier allocation.

View identifiers are positive integers in [1, MAX_VIEW_ID]. The high byte is
kept clear so generated ids never collide with statically assigned ones.
When the counter passes MAX_VIEW_ID it rolls over to 1, never to 0.

Usage:
    allocator = ViewIdAllocator()
    view_id = allocator.next_id()

    # Or the shared process-wide allocator:
    view_id = generate_view_id()
"""

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

MAX_VIEW_ID = 0x00FFFFFF
DEFAULT_SEED = 1


class ViewIdAllocator:
    """Monotonic view id counter with wrap-around, safe for concurrent callers."""

    def __init__(self, seed: int = DEFAULT_SEED):
        if not 1 <= seed <= MAX_VIEW_ID:
            raise ValueError(f"seed must be in [1, {MAX_VIEW_ID:#x}], got {seed}")
        self._value = seed
        self._lock = threading.Lock()

    def peek(self) -> int:
        """Return the id the next call to next_id() would hand out."""
        return self._value

    def _compare_and_set(self, expected: int, new_value: int) -> bool:
        with self._lock:
            if self._value != expected:
                return False
            self._value = new_value
            return True

    def next_id(self) -> int:
        """Return the next available view id."""
        while True:
            result = self._value
            new_value = result + 1
            if new_value > MAX_VIEW_ID:
                new_value = 1  # Roll over to 1, not 0
            if self._compare_and_set(result, new_value):
                return result


_default_allocator: Optional[ViewIdAllocator] = None
_default_lock = threading.Lock()


def get_default_allocator() -> ViewIdAllocator:
    """Return the process-wide allocator, creating it with the default seed."""
    global _default_allocator
    with _default_lock:
        if _default_allocator is None:
            _default_allocator = ViewIdAllocator()
        return _default_allocator


def set_default_allocator(allocator: ViewIdAllocator) -> None:
    """Replace the process-wide allocator (tests, embedding hosts)."""
    global _default_allocator
    with _default_lock:
        _default_allocator = allocator
    logger.debug(f"Default view id allocator replaced, next id {allocator.peek()}")


def generate_view_id() -> int:
    """Generate an available id from the process-wide allocator."""
    return get_default_allocator().next_id()
