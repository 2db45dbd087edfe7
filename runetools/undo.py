"""A bounded stack of states that can be undone and redone."""

from __future__ import annotations

from collections import deque
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_UNDO_STACK_SIZE = 128


class UndoState(Generic[T]):
    """A stack of states with a cursor pointing at the live state."""

    def __init__(self, init_state: T, max_undo_count: int = DEFAULT_UNDO_STACK_SIZE):
        if max_undo_count < 1:
            raise ValueError("max_undo_count must be at least 1")
        self.max_undo_count = max_undo_count
        self._stack: deque[T] = deque([init_state])
        self._live_index = 0

    def __len__(self) -> int:
        return len(self._stack)

    def current(self) -> T:
        """Return the live state."""
        return self._stack[self._live_index]

    def undo(self) -> Optional[T]:
        """Step back one state, returning it, or None if there is nothing to undo."""
        if self._live_index == 0:
            return None
        self._live_index -= 1
        return self._stack[self._live_index]

    def redo(self) -> Optional[T]:
        """Step forward one state, returning it, or None if there is nothing to redo."""
        if self._live_index == len(self._stack) - 1:
            return None
        self._live_index += 1
        return self._stack[self._live_index]

    def add_undo_group(self, item: T) -> None:
        """Push a new state, discarding any redo history and the oldest entry if full."""
        while len(self._stack) > self._live_index + 1:
            self._stack.pop()
        self._stack.append(item)
        self._live_index += 1
        if len(self._stack) > self.max_undo_count:
            self._stack.popleft()
            self._live_index -= 1

    def update_current_undo(self, f: Callable[[T], Optional[T]]) -> None:
        """Modify the live state with ``f``.

        ``f`` receives the live state; it may mutate it in place, or return a
        replacement value, which then becomes the live state.
        """
        result = f(self._stack[self._live_index])
        if result is not None:
            self._stack[self._live_index] = result