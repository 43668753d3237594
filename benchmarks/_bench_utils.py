"""Shared benchmark runtime helpers."""

from __future__ import annotations

import math
import os
import platform
import sys
import time
from typing import Any, Callable

import jax

THREAD_ENV_VARS = (
    "OMP_NUM_THREADS",
    "OPENBLAS_NUM_THREADS",
    "MKL_NUM_THREADS",
    "JAX_NUM_THREADS",
    "XLA_FLAGS",
)


def thread_env_snapshot() -> dict[str, str]:
    return {name: os.environ[name] for name in THREAD_ENV_VARS if name in os.environ}


def host_metadata() -> dict[str, Any]:
    return {
        "platform": platform.platform(),
        "python": platform.python_version(),
        "jax": getattr(jax, "__version__", "unknown"),
        "backend": jax.default_backend(),
        "cpu_count": os.cpu_count(),
        "recursion_limit": sys.getrecursionlimit(),
        "thread_env": thread_env_snapshot(),
    }


def block_until_ready(value: object) -> None:
    if hasattr(value, "block_until_ready"):
        value.block_until_ready()
        return
    if isinstance(value, (tuple, list)):
        for item in value:
            block_until_ready(item)


def timeit(fn: Callable, *args: object, repeats: int, warmup: int) -> list[float]:
    for _ in range(warmup):
        block_until_ready(fn(*args))
    samples: list[float] = []
    for _ in range(repeats):
        start = time.perf_counter()
        block_until_ready(fn(*args))
        samples.append(time.perf_counter() - start)
    return samples


def percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    if len(ordered) == 1:
        return ordered[0]
    pos = (len(ordered) - 1) * q
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return ordered[lo]
    alpha = pos - lo
    return ordered[lo] * (1.0 - alpha) + ordered[hi] * alpha


def mean(values: list[float]) -> float:
    return sum(values) / len(values)
