"""
Nested and mapped diagnostic contexts

Both contexts are owned by the calling thread. Filters never read them
directly; ``LoggingEvent.capture`` snapshots them into the event.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List
import threading


class _NestedDiagnosticContext:
    """
    Per-thread stack of context strings.

    The flattened value seen by filters is the stack joined by single spaces.
    """

    def __init__(self):
        self._local = threading.local()

    def _stack(self) -> List[str]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    def push(self, message: str) -> None:
        """Push a message onto the calling thread's stack."""
        self._stack().append(str(message))

    def pop(self) -> str:
        """Pop the innermost message; empty string if the stack is empty."""
        stack = self._stack()
        return stack.pop() if stack else ""

    def peek(self) -> str:
        """Innermost message without removing it."""
        stack = self._stack()
        return stack[-1] if stack else ""

    def get(self) -> str:
        """Flattened context of the calling thread."""
        return " ".join(self._stack())

    def get_depth(self) -> int:
        return len(self._stack())

    def set_max_depth(self, max_depth: int) -> None:
        """
        Trim the calling thread's stack to at most ``max_depth`` entries.

        Later pushes are not limited.

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        del self._stack()[max_depth:]

    def clear(self) -> None:
        self._stack().clear()

    @contextmanager
    def scope(self, message: str) -> Iterator[None]:
        """Push ``message`` for the duration of a ``with`` block."""
        depth = self.get_depth()
        self.push(message)
        try:
            yield
        finally:
            del self._stack()[depth:]


class _MappedDiagnosticContext:
    """Per-thread key/value map."""

    def __init__(self):
        self._local = threading.local()

    def _map(self) -> Dict[str, str]:
        values = getattr(self._local, "values", None)
        if values is None:
            values = self._local.values = {}
        return values

    def put(self, key: str, value: str) -> None:
        self._map()[key] = str(value)

    def get(self, key: str) -> str:
        """Value for ``key``; empty string when absent."""
        return self._map().get(key, "")

    def remove(self, key: str) -> None:
        self._map().pop(key, None)

    def clear(self) -> None:
        self._map().clear()

    def get_context(self) -> Dict[str, str]:
        """Copy of the calling thread's map."""
        return dict(self._map())

    @contextmanager
    def scope(self, key: str, value: str) -> Iterator[None]:
        """Set ``key`` for the duration of a ``with`` block, then restore it."""
        values = self._map()
        missing = key not in values
        previous = values.get(key)
        self.put(key, value)
        try:
            yield
        finally:
            if missing:
                values.pop(key, None)
            else:
                values[key] = previous


NDC = _NestedDiagnosticContext()
MDC = _MappedDiagnosticContext()
