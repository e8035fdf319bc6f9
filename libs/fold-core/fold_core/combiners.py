from typing import Any

from fold_core.fold import Combiner
from fold_core.kinds import CombinerKind

# ---------------------------------------------------------------------------- #
#                              Built-in Combiners                              #
# ---------------------------------------------------------------------------- #


def combine_sum(accumulator: Any, element: Any, index: int, sequence: Any) -> Any:
    return accumulator + element


def combine_product(accumulator: Any, element: Any, index: int, sequence: Any) -> Any:
    return accumulator * element


def combine_concat(accumulator: Any, element: Any, index: int, sequence: Any) -> str:
    return str(accumulator) + str(element)


def combine_max(accumulator: Any, element: Any, index: int, sequence: Any) -> Any:
    # ties keep the accumulator, i.e. the earliest maximum wins
    return element if element > accumulator else accumulator


def combine_min(accumulator: Any, element: Any, index: int, sequence: Any) -> Any:
    return element if element < accumulator else accumulator


def make_join(separator: str) -> Combiner:
    def combine_join(accumulator: Any, element: Any, index: int, sequence: Any) -> str:
        return f"{accumulator}{separator}{element}"

    return combine_join


def get_combiner(kind: CombinerKind | str, *, separator: str = ",") -> Combiner:
    """Looks up a built-in combiner by kind. `separator` is only used by `join`."""

    try:
        kind = CombinerKind(kind)
    except ValueError:
        supported = ", ".join(k.value for k in CombinerKind)
        raise ValueError(f"unknown combiner '{kind}', expected one of: {supported}") from None

    match kind:
        case CombinerKind.SUM:
            return combine_sum
        case CombinerKind.PRODUCT:
            return combine_product
        case CombinerKind.CONCAT:
            return combine_concat
        case CombinerKind.JOIN:
            return make_join(separator)
        case CombinerKind.MAX:
            return combine_max
        case CombinerKind.MIN:
            return combine_min
    raise AssertionError(f"unhandled combiner kind {kind}")
