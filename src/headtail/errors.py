"""Structured error types for sequence operations."""

from __future__ import annotations

import functools

from .logger import setup_logger

_log = setup_logger("headtail.errors")

# A runaway callback leaves a long traceback below the call site; library
# overflow that merely lands inside a callback leaves only a few frames.
_CALLBACK_FRAME_SLACK = 32
_FROM_CALLBACK = "_headtail_from_callback"


class HeadTailError(Exception):
    """Base class for structured headtail errors."""


class EmptySequenceError(HeadTailError, LookupError):
    """Operation requires a non-empty sequence."""


class IndexOutOfRangeError(HeadTailError, IndexError):
    """Position argument falls outside the sequence it addresses."""

    def __init__(self, where: str, index: int, length: int) -> None:
        super().__init__(where, index, length)
        self.where = where
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f"{self.where}: index {self.index} out of range for sequence of length {self.length}"


class SequenceTypeError(HeadTailError, TypeError):
    """Value is not a sequence where one is required."""


class RecursionDepthError(HeadTailError, RecursionError):
    """Plain recursion exhausted the interpreter stack."""


class DomainError(HeadTailError, ArithmeticError):
    """Argument outside the mathematical domain of an operation."""


class DivisionByZeroError(DomainError, ZeroDivisionError):
    """Division fold hit a zero divisor."""


def invoke_callback(fn, *args):
    """Call a user callback, tagging stack exhaustion that its own frames caused."""
    try:
        return fn(*args)
    except RecursionError as exc:
        frames = 0
        tb = exc.__traceback__
        while tb is not None:
            frames += 1
            tb = tb.tb_next
        if frames > _CALLBACK_FRAME_SLACK:
            setattr(exc, _FROM_CALLBACK, True)
        raise


def depth_guarded(fn):
    """Re-raise interpreter stack exhaustion as ``RecursionDepthError``.

    Overflow raised by a user callback's own recursion passes through as is.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except RecursionError as exc:
            if isinstance(exc, RecursionDepthError) or getattr(exc, _FROM_CALLBACK, False):
                raise
            _log.warning(
                "%s exceeded the interpreter recursion limit; use an accumulator or fold variant",
                fn.__name__,
            )
            raise classify_runtime_exception(exc, where=fn.__name__) from exc

    return wrapper


def classify_runtime_exception(err: Exception, *, where: str | None = None) -> HeadTailError:
    """Best-effort classification of arbitrary exceptions into the headtail hierarchy.

    ``where`` names the operation and prefixes the message.
    """
    if isinstance(err, HeadTailError):
        return err
    message = str(err) if where is None else f"{where}: {err}"
    if isinstance(err, RecursionError):
        return RecursionDepthError(message)
    if isinstance(err, ZeroDivisionError):
        return DivisionByZeroError(message)
    if isinstance(err, ArithmeticError):
        return DomainError(message)
    if isinstance(err, TypeError):
        return SequenceTypeError(message)

    lowered = message.lower()
    empty_markers = (
        "empty",
        "no elements",
        "no arguments",
    )
    if any(marker in lowered for marker in empty_markers):
        return EmptySequenceError(message)

    return HeadTailError(message)
