"""Vectorized folds for JAX array inputs.

A rank >= 1 ``jax.Array`` is a sequence like any list. The recursive
operations read its elements through ``.tolist()``; the helpers here instead
fold along axis 0 without touching the Python stack.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Callable, Final

import jax
from jax import lax
import jax.numpy as jnp

from .config import env_disabled, env_int
from .errors import SequenceTypeError
from .logger import setup_logger
from .values import is_array

__all__ = ["NO_FAST_PATH", "fast_fold", "fold_identity", "scan_cache_stats", "scan_reduce"]

_log = setup_logger("headtail.arrays")

NO_FAST_PATH: Final = object()
_USE_ARRAY_FAST_PATH: Final[bool] = not env_disabled("HEADTAIL_DISABLE_ARRAY_FAST_PATH")
_SCAN_CACHE_MAX: Final[int] = env_int("HEADTAIL_SCAN_CACHE_MAX", 64)

_FOLD_IDENTITIES: Final[dict[str, float]] = {
    "min": math.inf,
    "max": -math.inf,
}


def _skip_nan(x: jnp.ndarray, fill: float) -> jnp.ndarray:
    # NaN never wins a comparison in the recursive min/max, so it never wins here.
    if jnp.issubdtype(x.dtype, jnp.floating):
        return jnp.where(jnp.isnan(x), jnp.asarray(fill, dtype=x.dtype), x)
    return x


_BASE_REDUCERS: Final[dict[str, Callable[[jnp.ndarray], jnp.ndarray]]] = {
    "min": lambda x: jnp.min(_skip_nan(x, math.inf), axis=0),
    "max": lambda x: jnp.max(_skip_nan(x, -math.inf), axis=0),
}

_JITTED_REDUCERS: dict[str, Callable[[jnp.ndarray], jnp.ndarray]] = {}


def fold_identity(op: str):
    if op not in _FOLD_IDENTITIES:
        raise KeyError(f"no fold identity for op {op!r}")
    return _FOLD_IDENTITIES[op]


def _jitted_reducer(op: str) -> Callable[[jnp.ndarray], jnp.ndarray]:
    fn = _JITTED_REDUCERS.get(op)
    if fn is None:
        fn = jax.jit(_BASE_REDUCERS[op])
        _JITTED_REDUCERS[op] = fn
    return fn


def _as_python_scalar(value):
    if hasattr(value, "ndim") and value.ndim == 0:
        return value.item()
    return value


def fast_fold(op: str, value):
    """Fold a rank-1 JAX array with a vectorized ``min``/``max``, or return ``NO_FAST_PATH``.

    NaN entries are skipped, matching the element-by-element comparison of
    the recursive path; an array of only NaN folds to the identity.
    """
    if not _USE_ARRAY_FAST_PATH:
        return NO_FAST_PATH
    if op not in _BASE_REDUCERS:
        return NO_FAST_PATH
    if not is_array(value) or value.ndim != 1:
        return NO_FAST_PATH

    if int(value.shape[0]) == 0:
        return fold_identity(op)
    _log.debug("fast path %s over array of shape %s", op, value.shape)
    return _as_python_scalar(_jitted_reducer(op)(value))


@lru_cache(maxsize=_SCAN_CACHE_MAX)
def _jitted_scan_kernel(fn: Callable) -> Callable:
    def _step(carry, x):
        return fn(carry, x), None

    def _scan(init, xs):
        carry, _ = lax.scan(_step, init, xs)
        return carry

    return jax.jit(_scan)


def scan_reduce(value, fn: Callable, initial):
    """Left fold of ``fn(acc, x)`` over axis 0 using ``lax.scan``.

    ``fn`` must be traceable by JAX and return an accumulator of the same
    shape and dtype as ``initial`` promoted against the array's dtype.
    Compiled kernels are kept for the ``HEADTAIL_SCAN_CACHE_MAX`` most
    recently used folding functions.
    """
    arr = jnp.asarray(value)
    if arr.ndim == 0:
        raise SequenceTypeError("scan_reduce needs an array of rank at least 1")
    init = jnp.asarray(initial, dtype=jnp.result_type(initial, arr))
    if int(arr.shape[0]) == 0:
        return init
    return _jitted_scan_kernel(fn)(init, arr)


def scan_cache_stats() -> dict[str, int]:
    info = _jitted_scan_kernel.cache_info()
    return {"entries": info.currsize, "max_entries": info.maxsize, "hits": info.hits, "misses": info.misses}
