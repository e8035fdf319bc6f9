import operator

import pytest
from fold_core.fold import EmptySequenceError, combiner_arity, fold, fold_steps
from fold_core.types import FoldStep


def add(a, b):
    return a + b


def test_fold_sum_without_seed():
    assert fold([1, 2, 3, 4], add) == 10


def test_fold_sum_with_seed():
    assert fold([1, 2, 3, 4], add, 100) == 110


def test_fold_keeps_element_order():
    assert fold(["a", "b", "c"], lambda acc, x: acc + "," + x) == "a,b,c"


@pytest.mark.parametrize(
    "sequence",
    [[1, 2, 3, 4], ["x", "y"], [7], (2.5, -1.0, 4.0), "abc"],
)
def test_fold_without_seed_equals_fold_of_tail_seeded_with_head(sequence):
    def combine(acc, x):
        return f"({acc}+{x})"

    assert fold(sequence, combine) == fold(sequence[1:], combine, sequence[0])


def test_fold_indices_without_seed():
    seen = []

    def combine(acc, x, index, seq):
        seen.append(index)
        return acc + x

    fold([10, 20, 30, 40], combine)
    assert seen == [1, 2, 3]


def test_fold_indices_with_seed():
    seen = []

    def combine(acc, x, index, seq):
        seen.append(index)
        return acc + x

    fold([10, 20, 30, 40], combine, 0)
    assert seen == [0, 1, 2, 3]


def test_fold_passes_whole_sequence():
    data = [1, 2, 3]
    received = []

    def combine(acc, x, index, seq):
        received.append(seq)
        return acc + x

    fold(data, combine, 0)
    assert len(received) == 3
    assert all(seq is data for seq in received)


def test_fold_empty_sequence_with_seed_returns_seed():
    calls = []
    assert fold([], lambda acc, x: calls.append(x), "seed") == "seed"
    assert calls == []


def test_fold_none_is_a_valid_seed():
    assert fold([], add, None) is None
    assert fold([1, 2], lambda acc, x: [x] if acc is None else acc + [x], None) == [1, 2]


def test_fold_empty_sequence_without_seed_raises():
    with pytest.raises(EmptySequenceError, match="empty sequence"):
        fold([], add)


def test_empty_sequence_error_is_value_error():
    with pytest.raises(ValueError):
        fold((), add)


def test_fold_single_element_without_seed_skips_combine():
    def combine(acc, x):
        raise AssertionError("combine must not be called")

    assert fold(["only"], combine) == "only"


def test_fold_accepts_any_iterable():
    assert fold((x for x in range(5)), add) == 10
    assert fold(iter([]), add, 3) == 3


def test_fold_with_builtin_combiners():
    assert fold([1, 2, 3, 4], operator.mul) == 24
    assert fold([3, 9, 2], max) == 9
    assert fold([3, 9, 2], min) == 2


def test_fold_propagates_combine_errors():
    with pytest.raises(ZeroDivisionError):
        fold([1, 0], operator.truediv)


def test_combiner_arity():
    assert combiner_arity(lambda a, b: a) == 2
    assert combiner_arity(lambda a, b, i: a) == 3
    assert combiner_arity(lambda a, b, i, s: a) == 4
    assert combiner_arity(lambda a, b, i, s, extra=None: a) == 4
    assert combiner_arity(lambda *args: args[0]) == 4
    assert combiner_arity(max) == 2


def test_fold_variadic_combiner_receives_all_arguments():
    received = []

    def combine(*args):
        received.append(args)
        return args[0] + args[1]

    data = [1, 2]
    assert fold(data, combine) == 3
    assert received == [(1, 2, 1, data)]


def test_fold_rejects_bad_combiners():
    with pytest.raises(TypeError):
        fold([1, 2], lambda acc: acc)
    with pytest.raises(TypeError):
        fold([1, 2], "not callable")


def test_fold_steps_without_seed():
    steps = list(fold_steps([1, 2, 3, 4], add))
    assert steps == [
        FoldStep(index=1, element=2, accumulator=3),
        FoldStep(index=2, element=3, accumulator=6),
        FoldStep(index=3, element=4, accumulator=10),
    ]


def test_fold_steps_with_seed_matches_fold():
    data = [5, 6, 7]
    steps = list(fold_steps(data, add, 100))
    assert [step.index for step in steps] == [0, 1, 2]
    assert steps[-1].accumulator == fold(data, add, 100)


def test_fold_steps_empty_input():
    assert list(fold_steps([], add, 1)) == []

    steps = fold_steps([], add)
    with pytest.raises(EmptySequenceError):
        next(steps)
