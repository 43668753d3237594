"""Law-level pass-rate reporting over the unittest suites."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Final
import io
import unittest


@dataclass(frozen=True)
class SuiteStats:
    name: str
    tests_run: int
    passed: int
    failed: int
    errors: int
    skipped: int
    executable: int
    pass_rate: float | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status in {"pass", "skipped"}


@dataclass(frozen=True)
class LawSection:
    key: str
    title: str
    patterns: tuple[str, ...]


_LAW_SECTIONS: Final[tuple[LawSection, ...]] = (
    LawSection(key="primitives", title="Head/tail primitives", patterns=("test_primitives.py",)),
    LawSection(key="involution", title="Reverse is an involution", patterns=("test_primitives.py", "test_fold_equivalence.py")),
    LawSection(key="recursion", title="Head/tail recursive operations", patterns=("test_recursive_operations.py",)),
    LawSection(key="folds", title="Fold equivalence", patterns=("test_fold_equivalence.py",)),
    LawSection(key="ordering", title="Numeric folds and sort correctness", patterns=("test_numeric_and_sorting.py",)),
    LawSection(key="composition", title="Composition law", patterns=("test_combinators.py",)),
    LawSection(key="errors", title="Error model", patterns=("test_error_model.py",)),
    LawSection(key="ambient", title="Configuration and logging", patterns=("test_config.py",)),
    LawSection(key="arrays", title="Array fast paths", patterns=("test_array_fast_paths.py",)),
    LawSection(key="examples", title="README examples", patterns=("test_readme_examples.py",)),
)


def default_law_sections() -> tuple[LawSection, ...]:
    return _LAW_SECTIONS


def _discover_suite(patterns: tuple[str, ...], *, tests_dir: Path) -> unittest.TestSuite:
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for pattern in patterns:
        suite.addTests(loader.discover(start_dir=str(tests_dir), pattern=pattern, top_level_dir=str(tests_dir)))
    return suite


def _status(failed: int, errors: int, executable: int) -> str:
    if failed or errors:
        return "fail"
    if executable == 0:
        return "skipped"
    return "pass"


def _build_stats(name: str, *, tests_run: int, failed: int, errors: int, skipped: int) -> SuiteStats:
    executable = tests_run - skipped
    passed = executable - failed - errors
    return SuiteStats(
        name=name,
        tests_run=tests_run,
        passed=passed,
        failed=failed,
        errors=errors,
        skipped=skipped,
        executable=executable,
        pass_rate=None if executable == 0 else (passed / executable) * 100.0,
        status=_status(failed, errors, executable),
    )


def run_patterns(name: str, patterns: tuple[str, ...], *, tests_dir: Path = Path("tests")) -> SuiteStats:
    suite = _discover_suite(patterns, tests_dir=tests_dir)
    result = unittest.TextTestRunner(stream=io.StringIO(), verbosity=0).run(suite)
    return _build_stats(
        name,
        tests_run=result.testsRun,
        failed=len(result.failures),
        errors=len(result.errors),
        skipped=len(result.skipped),
    )


def run_law_sections(*, tests_dir: Path = Path("tests")) -> list[tuple[LawSection, SuiteStats]]:
    return [(section, run_patterns(section.key, section.patterns, tests_dir=tests_dir)) for section in default_law_sections()]


def aggregate(name: str, stats: list[SuiteStats]) -> SuiteStats:
    return _build_stats(
        name,
        tests_run=sum(s.tests_run for s in stats),
        failed=sum(s.failed for s in stats),
        errors=sum(s.errors for s in stats),
        skipped=sum(s.skipped for s in stats),
    )


def _rate(stats: SuiteStats) -> str:
    return "n/a" if stats.pass_rate is None else f"{stats.pass_rate:.2f}%"


def law_report(rows: list[tuple[LawSection, SuiteStats]]) -> dict[str, object]:
    """JSON-ready report: one entry per law section plus the overall summary."""
    overall = aggregate("laws", [stats for _, stats in rows])
    return {
        "sections": [{"key": section.key, "title": section.title, "stats": asdict(stats)} for section, stats in rows],
        "summary": asdict(overall),
    }


def render_law_report(rows: list[tuple[LawSection, SuiteStats]]) -> str:
    overall = aggregate("laws", [stats for _, stats in rows])
    lines = [
        "# Law Conformance Report",
        "",
        "| Law | Run | Passed | Skipped | Failed | Errors | Pass Rate | Status |",
        "|---|---:|---:|---:|---:|---:|---:|---|",
    ]
    for section, stats in rows:
        lines.append(
            f"| {section.title} (`{section.key}`) | {stats.tests_run} | {stats.passed} | {stats.skipped}"
            f" | {stats.failed} | {stats.errors} | {_rate(stats)} | {stats.status} |"
        )
    lines.extend(["", f"Overall: {overall.passed}/{overall.executable} executable tests passed ({_rate(overall)}), status `{overall.status}`."])
    return "\n".join(lines)
