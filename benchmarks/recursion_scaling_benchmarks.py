"""Scaling benchmarks: plain recursion vs fold vs trampoline vs array fast path."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Literal

import jax.numpy as jnp

from _bench_utils import host_metadata, mean, percentile, timeit
from headtail import RecursionDepthError, length, length_acc, length_fold, max, reduce, reverse, reverse_fold
from headtail.arrays import scan_reduce


Formulation = Literal["recursive", "fold", "trampoline", "array"]


@dataclass(frozen=True)
class ScalingCase:
    name: str
    formulation: Formulation
    build_args: Callable[[int], tuple[object, ...]]
    fn: Callable


@dataclass(frozen=True)
class ScalingRow:
    size: int
    repeats: int
    mean_ms: float
    p90_ms: float
    status: str


def _add(acc, x):
    return acc + x


def _build_cases() -> list[ScalingCase]:
    def as_list(n: int) -> tuple[object, ...]:
        return (list(range(n)),)

    def as_array(n: int) -> tuple[object, ...]:
        return (jnp.arange(n, dtype=jnp.float32),)

    return [
        ScalingCase(name="length", formulation="recursive", build_args=as_list, fn=length),
        ScalingCase(name="length", formulation="trampoline", build_args=as_list, fn=length_acc),
        ScalingCase(name="length", formulation="fold", build_args=as_list, fn=length_fold),
        ScalingCase(name="reverse", formulation="recursive", build_args=as_list, fn=reverse),
        ScalingCase(name="reverse", formulation="fold", build_args=as_list, fn=reverse_fold),
        ScalingCase(name="sum", formulation="fold", build_args=as_list, fn=lambda xs: reduce(xs, _add, 0)),
        ScalingCase(name="sum", formulation="array", build_args=as_array, fn=lambda xs: scan_reduce(xs, _add, 0.0)),
        ScalingCase(name="max", formulation="recursive", build_args=as_list, fn=max),
        ScalingCase(name="max", formulation="array", build_args=as_array, fn=max),
    ]


def _run_case(case: ScalingCase, sizes: list[int], *, repeats: int) -> list[ScalingRow]:
    rows: list[ScalingRow] = []
    for size in sizes:
        args = case.build_args(size)
        try:
            samples = timeit(case.fn, *args, repeats=repeats, warmup=1)
        except RecursionDepthError:
            rows.append(ScalingRow(size=size, repeats=0, mean_ms=float("nan"), p90_ms=float("nan"), status="overflow"))
            continue
        rows.append(
            ScalingRow(
                size=size,
                repeats=repeats,
                mean_ms=mean(samples) * 1e3,
                p90_ms=percentile(samples, 0.9) * 1e3,
                status="ok",
            )
        )
    return rows


def _print_rows(case: ScalingCase, rows: list[ScalingRow]) -> None:
    title = f"{case.name} ({case.formulation})"
    print(title)
    print("-" * len(title))
    print(f"{'size':>8} {'mean(ms)':>11} {'p90(ms)':>11} {'status':>9}")
    for row in rows:
        print(f"{row.size:8d} {row.mean_ms:11.4f} {row.p90_ms:11.4f} {row.status:>9}")
    print()


def _powers_of_two(min_exp: int, max_exp: int) -> list[int]:
    if min_exp > max_exp:
        raise ValueError("minimum exponent cannot be greater than maximum exponent")
    return [1 << exp for exp in range(min_exp, max_exp + 1)]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--min-exp", type=int, default=4, help="minimum exponent for sizes (2^exp)")
    parser.add_argument("--max-exp", type=int, default=12, help="maximum exponent for sizes (2^exp)")
    parser.add_argument("--repeats", type=int, default=5, help="timed repeats per size")
    parser.add_argument("--json-out", default="", help="optional path to write machine-readable results")
    args = parser.parse_args()

    sizes = _powers_of_two(args.min_exp, args.max_exp)
    print(f"Recursion scaling suite: sizes 2^{args.min_exp} .. 2^{args.max_exp}")
    print()

    payload_rows: list[dict[str, object]] = []
    for case in _build_cases():
        rows = _run_case(case, sizes, repeats=args.repeats)
        _print_rows(case, rows)
        payload_rows.append(
            {
                "case": case.name,
                "formulation": case.formulation,
                "rows": [asdict(row) for row in rows],
            }
        )

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps({"host": host_metadata(), "specs": payload_rows}, indent=2), encoding="utf-8")
        print(f"Wrote {out}")


if __name__ == "__main__":
    main()
