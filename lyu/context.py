"""
The tracking context knows which effect is currently running. Reads
of reactive state register that effect as a subscriber.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional


class TrackingContext:
    __slots__ = ("stack",)

    def __init__(self) -> None:
        self.stack: list["ReactiveEffect"] = []  # noqa: F821

    @property
    def active_effect(self) -> Optional["ReactiveEffect"]:  # noqa: F821
        if self.stack:
            return self.stack[-1]
        return None

    def is_running(self, effect: "ReactiveEffect") -> bool:  # noqa: F821
        return effect in self.stack

    @contextmanager
    def activate(self, effect: "ReactiveEffect") -> Iterator[None]:  # noqa: F821
        """
        Makes the given effect the active one for the duration of the
        with-block. The effect is removed again on every exit path.
        """
        self.stack.append(effect)
        try:
            yield
        finally:
            self.stack.pop()

    def clear(self) -> None:
        self.stack.clear()


# Construct global instance
context = TrackingContext()
