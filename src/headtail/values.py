"""Sequence value model and validators."""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

import jax

from .errors import SequenceTypeError


class _Undefined:
    """Marker for "no value", distinct from ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

_SCALAR_SEQUENCE_TYPES: Final = (str, bytes, bytearray)


class SequenceKind(str, Enum):
    EMPTY = "empty"
    SEQUENCE = "sequence"
    ARRAY = "array"
    SCALAR = "scalar"


@dataclass(frozen=True)
class SequenceInfo:
    kind: SequenceKind
    length: int
    depth: int


def is_defined(value: object) -> bool:
    return value is not UNDEFINED


def is_undefined(value: object) -> bool:
    return not is_defined(value)


def is_array(value: object) -> bool:
    return isinstance(value, jax.Array) and value.ndim >= 1


def is_sequence(value: object) -> bool:
    """True for lists, tuples, other non-text sequences, and JAX arrays of rank >= 1."""
    if isinstance(value, _SCALAR_SEQUENCE_TYPES):
        return False
    if isinstance(value, Sequence):
        return True
    return is_array(value)


def as_elements(value: object, *, where: str = "value") -> tuple:
    """Snapshot ``value`` into a tuple so recursion never touches the caller's container."""
    if isinstance(value, tuple):
        return value
    if is_array(value):
        return tuple(value.tolist())
    if not is_sequence(value):
        raise SequenceTypeError(f"{where} must be a sequence, got {type(value).__name__}")
    return tuple(value)


def depth_of(value: object) -> int:
    if not is_sequence(value):
        return 0
    if is_array(value):
        return value.ndim
    items = as_elements(value)
    if not items:
        return 1
    return 1 + max(depth_of(item) for item in items)


def kind_of(value: object) -> SequenceKind:
    if is_array(value):
        return SequenceKind.ARRAY
    if not is_sequence(value):
        return SequenceKind.SCALAR
    if len(value) == 0:
        return SequenceKind.EMPTY
    return SequenceKind.SEQUENCE


def sequence_info(value: object) -> SequenceInfo:
    kind = kind_of(value)
    length = 0 if kind is SequenceKind.SCALAR else len(value)
    return SequenceInfo(kind=kind, length=length, depth=depth_of(value))


def accepts_positional(fn: Callable, count: int) -> bool:
    """Whether ``fn`` declares at least ``count`` required positional parameters."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False

    # *args and defaulted parameters do not count.
    positional = 0
    for param in signature.parameters.values():
        if param.kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            continue
        if param.default is inspect.Parameter.empty:
            positional += 1
    return positional >= count


@dataclass(frozen=True)
class SeqView:
    """Immutable head/tail view over a tuple snapshot; ``tail()`` shares the snapshot."""

    items: tuple
    start: int = 0

    @classmethod
    def of(cls, value: object, *, where: str = "value") -> SeqView:
        return cls(as_elements(value, where=where))

    @property
    def empty(self) -> bool:
        return self.start >= len(self.items)

    @property
    def head(self):
        return self.items[self.start]

    def tail(self) -> SeqView:
        return SeqView(self.items, self.start + 1)

    @property
    def index(self) -> int:
        return self.start

    def to_list(self) -> list:
        return list(self.items[self.start :])
