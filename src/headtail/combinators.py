"""Higher-order functions that build new functions from existing ones."""

from __future__ import annotations

from typing import Any, Callable

from .folds import reduce
from .primitives import reverse

__all__ = ["compose", "flow", "partial", "pluck", "reverse_args", "spread_arg"]


def partial(fn: Callable, *bound) -> Callable:
    """``partial(fn, a)(b, c) == fn(a, b, c)``."""

    def applied(*more):
        return fn(*bound, *more)

    return applied


def spread_arg(fn: Callable[[list], Any]) -> Callable:
    """Adapt a function taking one sequence into one taking its elements as arguments."""

    def spread(*args):
        return fn(list(args))

    return spread


def reverse_args(fn: Callable) -> Callable:
    def reversed_call(*args):
        return fn(*reverse(args))

    return reversed_call


def flow(*fns: Callable) -> Callable:
    """Left-to-right composition: ``flow(f, g, h)(x) == h(g(f(x)))``."""
    steps = tuple(fns)

    def flowed(value):
        return reduce(steps, lambda memo, fn: fn(memo), value)

    return flowed


def compose(*fns: Callable) -> Callable:
    """Right-to-left composition: ``compose(f, g, h)(x) == f(g(h(x)))``."""
    return flow(*reverse(fns))


def pluck(key, obj):
    if hasattr(obj, "__getitem__"):
        return obj[key]
    return getattr(obj, key)
