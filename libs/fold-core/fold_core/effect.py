from collections.abc import Callable, Sequence
from typing import Any


def deps_equal(old: Sequence[Any], new: Sequence[Any]) -> bool:
    """Two dependency lists are equal when they have the same length and every
    pair of values is identical or compares equal."""

    if len(old) != len(new):
        return False
    return all(o is n or o == n for o, n in zip(old, new))


class ConditionalEffect:
    """
    Runs `callback` on the first `sync` and afterwards only when the
    dependency values differ from the ones seen at the last run.
    Passing `None` as dependencies runs the callback on every `sync`.
    """

    def __init__(self, callback: Callable[[], Any]):
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callback = callback
        self._has_run = False
        self._prev_deps: tuple[Any, ...] | None = None
        self.runs = 0

    @property
    def has_run(self) -> bool:
        return self._has_run

    @property
    def prev_deps(self) -> tuple[Any, ...] | None:
        return self._prev_deps

    def sync(self, deps: Sequence[Any] | None) -> bool:
        """Returns `True` if the callback was executed."""

        snapshot = None if deps is None else tuple(deps)
        if self._has_run and snapshot is not None and self._prev_deps is not None:
            if deps_equal(self._prev_deps, snapshot):
                return False

        self._callback()
        self.runs += 1
        self._has_run = True
        self._prev_deps = snapshot
        return True
