import inspect
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

from fold_core.types import FoldStep

logger = logging.getLogger("fold")

T = TypeVar("T")
U = TypeVar("U")

# (accumulator, element, index, sequence) -> accumulator
Combiner = Callable[..., Any]


class EmptySequenceError(ValueError):
    """Raised when an empty sequence is folded without a seed"""


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


# `None` is a valid seed, so an omitted seed needs its own marker.
MISSING: Any = _Missing()

MAX_COMBINER_ARGS = 4


# ---------------------------------------------------------------------------- #
#                                    Helpers                                   #
# ---------------------------------------------------------------------------- #


def combiner_arity(combine: Combiner) -> int:
    """Returns how many of the (accumulator, element, index, sequence)
    arguments are handed to `combine`.

    Callables with `*args` receive all of them. Builtins without signature
    information (e.g. `max`) are treated like a binary reducer.
    """

    if not callable(combine):
        raise TypeError(f"combine must be callable, got {type(combine).__name__}")

    try:
        signature = inspect.signature(combine)
    except (TypeError, ValueError):
        return 2

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return MAX_COMBINER_ARGS
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1

    if count < 2:
        raise TypeError(
            f"combine must accept at least 2 positional arguments (accumulator, element), "
            f"{getattr(combine, '__name__', combine)!r} accepts {count}"
        )
    return min(count, MAX_COMBINER_ARGS)


def _prepare(sequence: Iterable[T], seed: Any) -> tuple[Sequence[T], int, Any]:
    items = sequence if isinstance(sequence, Sequence) else tuple(sequence)
    if seed is MISSING:
        if len(items) == 0:
            raise EmptySequenceError("fold of empty sequence with no seed")
        return items, 1, items[0]
    return items, 0, seed


# ---------------------------------------------------------------------------- #
#                                     Fold                                     #
# ---------------------------------------------------------------------------- #


def fold(sequence: Iterable[T], combine: Combiner, seed: U = MISSING) -> U:
    """Left-folds `sequence` with `combine`.

    Without a seed the first element is the initial accumulator and combining
    starts at index 1; with a seed it starts at index 0. Each call receives
    `(accumulator, element, index, sequence)`, trimmed to what `combine` accepts.
    """

    arity = combiner_arity(combine)
    items, start, accumulator = _prepare(sequence, seed)
    logger.debug(f"fold {len(items)} element(s) starting at index {start}")

    for index in range(start, len(items)):
        args = (accumulator, items[index], index, items)
        accumulator = combine(*args[:arity])
    return accumulator


def fold_steps(sequence: Iterable[T], combine: Combiner, seed: U = MISSING) -> Iterator[FoldStep]:
    """Same as `fold`, but yields a `FoldStep` after every combine call."""

    arity = combiner_arity(combine)
    items, start, accumulator = _prepare(sequence, seed)

    for index in range(start, len(items)):
        args = (accumulator, items[index], index, items)
        accumulator = combine(*args[:arity])
        yield FoldStep(index=index, element=items[index], accumulator=accumulator)
