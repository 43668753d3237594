"""The universal left fold and the operations re-expressed on top of it."""

from __future__ import annotations

from typing import Callable

from .errors import EmptySequenceError, classify_runtime_exception
from .trampoline import bounce, trampoline
from .values import SeqView, accepts_positional, as_elements, is_sequence

__all__ = [
    "add",
    "divide",
    "filter_fold",
    "first_fold",
    "flatten_fold",
    "last_fold",
    "length_fold",
    "map_fold",
    "merge",
    "multiply",
    "reduce",
    "reduce_right",
    "reject_fold",
    "reverse_fold",
]


def _reduce_step(view: SeqView, fn: Callable, acc, with_index: bool):
    if view.empty:
        return acc
    if with_index:
        acc = fn(acc, view.head, view.index)
    else:
        acc = fn(acc, view.head)
    return bounce(_reduce_step, view.tail(), fn, acc, with_index)


def reduce(seq, fn: Callable, initial):
    """Left fold ``fn(...fn(fn(initial, e0, 0), e1, 1)...)``.

    ``fn`` receives the element index as a third argument only when it
    declares three required positional parameters. The accumulator-passing
    recursion runs on the trampoline, so stack depth does not grow with the
    input.
    """
    view = SeqView.of(seq, where="reduce")
    return trampoline(_reduce_step, view, fn, initial, accepts_positional(fn, 3))


def reduce_right(seq, fn: Callable, initial):
    return reduce(reverse_fold(seq), fn, initial)


def reverse_fold(seq) -> list:
    return reduce(seq, lambda memo, x: [x, *memo], [])


def length_fold(seq) -> int:
    return reduce(seq, lambda memo, _x: memo + 1, 0)


def map_fold(seq, fn: Callable) -> list:
    if accepts_positional(fn, 2):
        return reduce(seq, lambda memo, x, i: [*memo, fn(x, i)], [])
    return reduce(seq, lambda memo, x: [*memo, fn(x)], [])


def _select_fold(seq, predicate: Callable, keep: bool) -> list:
    if accepts_positional(predicate, 2):
        return reduce(seq, lambda memo, x, i: [*memo, x] if bool(predicate(x, i)) is keep else memo, [])
    return reduce(seq, lambda memo, x: [*memo, x] if bool(predicate(x)) is keep else memo, [])


def filter_fold(seq, predicate: Callable) -> list:
    return _select_fold(seq, predicate, True)


def reject_fold(seq, predicate: Callable) -> list:
    return _select_fold(seq, predicate, False)


def first_fold(seq, n: int = 1) -> list:
    return reduce(seq, lambda memo, x, i: [*memo, x] if i < n else memo, [])


def last_fold(seq, n: int = 1) -> list:
    size = length_fold(seq)
    return reduce(seq, lambda memo, x, i: [*memo, x] if i >= size - n else memo, [])


def flatten_fold(seq) -> list:
    return reduce(seq, lambda memo, x: [*memo, *flatten_fold(x)] if is_sequence(x) else [*memo, x], [])


def merge(*seqs) -> list:
    """Concatenate the given sequences, in argument order."""
    return reduce(seqs, lambda memo, x: [*memo, *as_elements(x, where="merge")], [])


def _seeded_fold(name: str, xs: tuple, fn: Callable):
    view = SeqView(xs)
    if view.empty:
        raise EmptySequenceError(f"{name}() needs at least one argument")
    return reduce(view.tail().to_list(), fn, view.head)


def add(*xs):
    return _seeded_fold("add", xs, lambda memo, y: memo + y)


def multiply(*xs):
    return _seeded_fold("multiply", xs, lambda memo, y: memo * y)


def _divide_step(memo, y):
    try:
        return memo / y
    except ZeroDivisionError as exc:
        raise classify_runtime_exception(exc, where="divide") from exc


def divide(*xs):
    """``divide(100, 2, 5) == 10``: the head divided by each remaining argument in turn."""
    return _seeded_fold("divide", xs, _divide_step)
