"""
Effects perform dependency tracking via functions acting on
reactive datastructures, and re-run synchronously whenever
one of the values they read has changed.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Any, Callable, TypeVar

from .context import context
from .dep import Dep
from .ref import ComputedRef

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Every effect gets a unique ID which is used to
# keep track of the order in which subscribers will
# be notified
_ids = count()


class ReactiveEffect:
    __slots__ = (
        "__weakref__",
        "_deps",
        "_new_deps",
        "fn",
        "id",
        "runs",
    )

    def __init__(self, fn: Callable[[], Any]) -> None:
        self.id = next(_ids)
        self.fn = fn
        self.runs = 0
        self._deps: set[Dep] = set()
        self._new_deps: set[Dep] = set()

    def __repr__(self) -> str:
        return f"<ReactiveEffect {self.id} {self.fn_fqn}>"

    def update(self) -> None:
        """Called by a Dep when one of the values read by fn changed"""
        # fn wrote to a value it depends on itself
        if context.is_running(self):
            return
        self.run()

    def run(self) -> Any:
        self.runs += 1
        with context.activate(self):
            try:
                return self.fn()
            finally:
                self.cleanup_deps()

    def add_dep(self, dep: Dep) -> None:
        if dep not in self._new_deps:
            self._new_deps.add(dep)
            if dep not in self._deps:
                dep.add_sub(self)

    def cleanup_deps(self) -> None:
        """
        Unsubscribes from all deps that were not read during the last run
        """
        for dep in self._deps:
            if dep not in self._new_deps:
                dep.remove_sub(self)
        self._deps, self._new_deps = self._new_deps, self._deps
        self._new_deps.clear()

    @property
    def deps(self) -> frozenset[Dep]:
        return frozenset(self._deps)

    @property
    def fn_fqn(self) -> str:
        module = getattr(self.fn, "__module__", None)
        name = getattr(self.fn, "__qualname__", type(self.fn).__qualname__)
        return f"{module}.{name}"


def effect(fn: Callable[[], Any]) -> ReactiveEffect:
    """
    Runs fn right away and runs it again every time reactive state
    that was read during its last run changes. Can be used as decorator.
    """
    reactive_effect = ReactiveEffect(fn)
    logger.debug("created %r", reactive_effect)
    reactive_effect.run()
    return reactive_effect


def computed(getter: Callable[[], T]) -> ComputedRef[T]:
    """
    Creates a ref that is kept in sync with the result of getter.
    The getter is evaluated eagerly: once now and again whenever
    one of its dependencies changes.
    Note: make sure getter doesn't need any arguments to run
    and that no reactive state is changed within the expression
    """
    result = ComputedRef(getter)

    def update():
        result.value = getter()

    result.effect = effect(update)
    return result
