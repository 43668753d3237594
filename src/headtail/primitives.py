"""Layer-1 primitives built directly on head/tail decomposition."""

from __future__ import annotations

from typing import Final

from .errors import EmptySequenceError, depth_guarded
from .trampoline import bounce, trampoline
from .values import SeqView, as_elements, is_defined, is_undefined

__all__ = [
    "copy",
    "head",
    "is_defined",
    "is_empty",
    "is_undefined",
    "length",
    "length_acc",
    "reverse",
    "tail",
]

_MISSING: Final = object()


def is_empty(seq) -> bool:
    return SeqView.of(seq, where="is_empty").empty


def head(seq, default=_MISSING):
    """First element of ``seq``; ``default`` instead of ``EmptySequenceError`` when given."""
    view = SeqView.of(seq, where="head")
    if view.empty:
        if default is not _MISSING:
            return default
        raise EmptySequenceError("head of an empty sequence")
    return view.head


def tail(seq) -> list:
    view = SeqView.of(seq, where="tail")
    if view.empty:
        return []
    return view.tail().to_list()


def copy(seq) -> list:
    return [*as_elements(seq, where="copy")]


def _length(view: SeqView) -> int:
    if view.empty:
        return 0
    return 1 + _length(view.tail())


@depth_guarded
def length(seq) -> int:
    """Element count by plain recursion; one stack frame per element."""
    return _length(SeqView.of(seq, where="length"))


def _length_step(view: SeqView, count: int):
    if view.empty:
        return count
    return bounce(_length_step, view.tail(), count + 1)


def length_acc(seq) -> int:
    """Element count by accumulator passing, run on the trampoline."""
    return trampoline(_length_step, SeqView.of(seq, where="length_acc"), 0)


def _reverse(view: SeqView) -> list:
    if view.empty:
        return []
    return [*_reverse(view.tail()), view.head]


@depth_guarded
def reverse(seq) -> list:
    return _reverse(SeqView.of(seq, where="reverse"))
