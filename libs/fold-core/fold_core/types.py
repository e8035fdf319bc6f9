from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FoldStep:
    """Snapshot taken right after a single combine call"""
    index: int  # position of `element` in the folded sequence
    element: Any
    accumulator: Any  # accumulator value returned by the combine call
