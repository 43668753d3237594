"""Layer-2 operations written as direct head/tail recursion.

Each public function snapshots its input into a ``SeqView`` once and recurses
over the view, so the caller's container is never touched and every result
is a fresh list. These are the plain-recursive formulations: they use one
stack frame per element and convert interpreter stack exhaustion into
``RecursionDepthError``. Fold-based counterparts live in ``headtail.folds``.
"""

from __future__ import annotations

from typing import Callable

from .errors import IndexOutOfRangeError, depth_guarded, invoke_callback
from .primitives import reverse
from .values import SeqView, is_sequence

__all__ = [
    "filter",
    "first",
    "flatten",
    "is_sequence",
    "last",
    "map",
    "partition",
    "reject",
    "slice",
    "swap",
]


def _map(view: SeqView, fn: Callable) -> list:
    if view.empty:
        return []
    return [invoke_callback(fn, view.head), *_map(view.tail(), fn)]


@depth_guarded
def map(seq, fn: Callable) -> list:
    return _map(SeqView.of(seq, where="map"), fn)


def _filter(view: SeqView, predicate: Callable, keep: bool) -> list:
    if view.empty:
        return []
    if bool(invoke_callback(predicate, view.head)) is keep:
        return [view.head, *_filter(view.tail(), predicate, keep)]
    return _filter(view.tail(), predicate, keep)


@depth_guarded
def filter(seq, predicate: Callable) -> list:
    return _filter(SeqView.of(seq, where="filter"), predicate, True)


@depth_guarded
def reject(seq, predicate: Callable) -> list:
    return _filter(SeqView.of(seq, where="reject"), predicate, False)


def partition(seq, predicate: Callable) -> tuple[list, list]:
    return filter(seq, predicate), reject(seq, predicate)


def _first(view: SeqView, n: int) -> list:
    if view.empty or n <= 0:
        return []
    return [view.head, *_first(view.tail(), n - 1)]


@depth_guarded
def first(seq, n: int = 1) -> list:
    return _first(SeqView.of(seq, where="first"), n)


def last(seq, n: int = 1) -> list:
    return reverse(first(reverse(seq), n))


def _slice(view: SeqView, index: int, value) -> list:
    if view.empty:
        return [value]
    if view.index == index:
        return [value, *view.to_list()]
    return [view.head, *_slice(view.tail(), index, value)]


@depth_guarded
def slice(seq, index: int, value) -> list:
    """Insert ``value`` before position ``index``; past-the-end positions append."""
    view = SeqView.of(seq, where="slice")
    if index < 0:
        raise IndexOutOfRangeError(where="slice", index=index, length=len(view.items))
    return _slice(view, index, value)


def _swap(view: SeqView, i: int, j: int, at_i, at_j) -> list:
    if view.empty:
        return []
    if view.index == i:
        current = at_j
    elif view.index == j:
        current = at_i
    else:
        current = view.head
    return [current, *_swap(view.tail(), i, j, at_i, at_j)]


@depth_guarded
def swap(seq, i: int, j: int) -> list:
    view = SeqView.of(seq, where="swap")
    size = len(view.items)
    for index in (i, j):
        if index < 0 or index >= size:
            raise IndexOutOfRangeError(where="swap", index=index, length=size)
    return _swap(view, i, j, view.items[i], view.items[j])


def _flatten(view: SeqView) -> list:
    if view.empty:
        return []
    item = view.head
    if is_sequence(item):
        return [*_flatten(SeqView.of(item)), *_flatten(view.tail())]
    return [item, *_flatten(view.tail())]


@depth_guarded
def flatten(seq) -> list:
    """Depth-first, left-to-right expansion of arbitrarily nested sequences."""
    return _flatten(SeqView.of(seq, where="flatten"))
