"""
Deps implement the classic observable pattern. There is one Dep for
every (object, property) pair that has been read inside an effect.
"""

from __future__ import annotations

from .context import context


class Dep:
    __slots__ = ("__weakref__", "_subs")

    def __init__(self) -> None:
        self._subs: set["ReactiveEffect"] = None  # noqa: F821

    def __len__(self) -> int:
        return len(self._subs) if self._subs else 0

    def __contains__(self, sub: "ReactiveEffect") -> bool:  # noqa: F821
        return bool(self._subs) and sub in self._subs

    def add_sub(self, sub: "ReactiveEffect") -> None:  # noqa: F821
        if self._subs is None:
            self._subs = set()
        self._subs.add(sub)

    def remove_sub(self, sub: "ReactiveEffect") -> None:  # noqa: F821
        if self._subs:
            self._subs.discard(sub)

    def depend(self) -> None:
        effect = context.active_effect
        if effect is not None:
            effect.add_dep(self)

    def notify(self) -> None:
        if not self._subs:
            return

        # effects unsubscribe and resubscribe while they run,
        # so iterate over a snapshot in creation order
        errors = []
        for sub in sorted(self._subs, key=lambda s: s.id):
            try:
                sub.update()
            except Exception as e:
                errors.append(e)

        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise ExceptionGroup(f"{len(errors)} effects failed", errors)
