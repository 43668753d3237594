"""Numeric folds and recursive sorting."""

from __future__ import annotations

import math
import numbers
from functools import lru_cache
from typing import Final

from .arrays import NO_FAST_PATH, fast_fold
from .config import env_int
from .errors import DomainError, depth_guarded
from .recursive import filter, flatten, partition, reject
from .trampoline import bounce, trampoline
from .values import SeqView

__all__ = ["factorial", "fib", "fib_memo", "max", "min", "quicksort", "quicksort_partition"]

_FIB_CACHE_MAX: Final[int] = env_int("HEADTAIL_FIB_CACHE_MAX", 256)


def _min(view: SeqView, result):
    if view.empty:
        return result
    return _min(view.tail(), view.head if view.head < result else result)


@depth_guarded
def min(seq):
    """Smallest element; ``math.inf`` for an empty sequence. NaN never compares smaller."""
    fast = fast_fold("min", seq)
    if fast is not NO_FAST_PATH:
        return fast
    return _min(SeqView.of(seq, where="min"), math.inf)


def _max(view: SeqView, result):
    if view.empty:
        return result
    return _max(view.tail(), view.head if view.head > result else result)


@depth_guarded
def max(seq):
    """Largest element; ``-math.inf`` for an empty sequence. NaN never compares larger."""
    fast = fast_fold("max", seq)
    if fast is not NO_FAST_PATH:
        return fast
    return _max(SeqView.of(seq, where="max"), -math.inf)


def _factorial_step(n: int, acc: int):
    if n == 0:
        return acc
    return bounce(_factorial_step, n - 1, n * acc)


def factorial(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
        raise DomainError(f"factorial is defined for non-negative integers, got {n!r}")
    return trampoline(_factorial_step, int(n), 1)


@depth_guarded
def fib(n: int) -> int:
    """Naive double recursion, ``fib(n) = 1`` for ``n <= 2``. Exponential time."""
    if n > 2:
        return fib(n - 1) + fib(n - 2)
    return 1


@lru_cache(maxsize=_FIB_CACHE_MAX)
def _fib_memo(n: int) -> int:
    if n > 2:
        return _fib_memo(n - 1) + _fib_memo(n - 2)
    return 1


@depth_guarded
def fib_memo(n: int) -> int:
    """``fib`` with memoized subproblems; linear time, same results."""
    return _fib_memo(n)


def _quicksort(view: SeqView) -> list:
    if view.empty:
        return []
    pivot = view.head
    rest = view.tail().to_list()
    less = filter(rest, lambda x: x <= pivot)
    more = reject(rest, lambda x: x <= pivot)
    return flatten([_quicksort(SeqView.of(less)), pivot, _quicksort(SeqView.of(more))])


@depth_guarded
def quicksort(seq) -> list:
    """Sort ascending around the head element as pivot.

    Worst case is quadratic time and linear recursion depth, reached on
    already-sorted and reverse-sorted input. Results are recombined with
    ``flatten``, so elements must not themselves be sequences.
    """
    return _quicksort(SeqView.of(seq, where="quicksort"))


def _quicksort_partition(view: SeqView) -> list:
    if view.empty:
        return []
    pivot = view.head
    less, more = partition(view.tail().to_list(), lambda x: x < pivot)
    return flatten([_quicksort_partition(SeqView.of(less)), pivot, _quicksort_partition(SeqView.of(more))])


@depth_guarded
def quicksort_partition(seq) -> list:
    return _quicksort_partition(SeqView.of(seq, where="quicksort_partition"))
