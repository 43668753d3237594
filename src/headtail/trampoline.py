"""Trampoline driver for accumulator-passing recursion."""

from __future__ import annotations

from typing import Any, Callable


class Bounce:
    """A pending tail call."""

    __slots__ = ("fn", "args")

    def __init__(self, fn: Callable, *args) -> None:
        self.fn = fn
        self.args = args

    def __repr__(self) -> str:
        return f"Bounce({getattr(self.fn, '__name__', self.fn)!r}, {len(self.args)} args)"


def bounce(fn: Callable, *args) -> Bounce:
    return Bounce(fn, *args)


def trampoline(fn: Callable[..., Any], *args) -> Any:
    """Run ``fn`` and every ``Bounce`` it returns until a plain value comes back.

    Functions written for the trampoline return ``bounce(self, ...)`` in tail
    position instead of calling themselves, so the stack stays one frame deep
    regardless of how many steps the recursion takes.
    """
    result = fn(*args)
    while isinstance(result, Bounce):
        result = result.fn(*result.args)
    return result
