from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from .object_utils import has_changed
from .registry import registry

T = TypeVar("T")


class Ref(Generic[T]):
    """
    Reactive container for a single value, exposed as the `value` property.
    Every ref is its own key in the registry.
    """

    __slots__ = ("__weakref__", "_value")

    def __init__(self, value: T = None) -> None:
        self._value = value

    @property
    def value(self) -> T:
        registry.track(self, "value")
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        # writing back the value that was just read must not re-trigger
        if has_changed(self._value, new_value):
            self._value = new_value
            registry.trigger(self, "value")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class ComputedRef(Ref[T]):
    """
    Ref whose value is written by the effect that evaluates getter.
    """

    __slots__ = ("effect", "getter")

    def __init__(self, getter: Callable[[], T]) -> None:
        super().__init__()
        self.getter = getter
        self.effect: Optional["ReactiveEffect"] = None  # noqa: F821


def ref(value: T = None) -> Ref[T]:
    return Ref(value)
