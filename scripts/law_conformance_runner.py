"""Run the law-level conformance suites and write JSON/markdown reports."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from headtail.conformance import law_report, render_law_report, run_law_sections


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--tests-dir", default="tests", help="directory containing unittest test files")
    parser.add_argument(
        "--json-out",
        default="benchmarks/output/conformance/law_conformance.json",
        help="where to write machine-readable conformance results",
    )
    parser.add_argument(
        "--markdown-out",
        default="benchmarks/output/conformance/law_conformance.md",
        help="where to write markdown summary",
    )
    args = parser.parse_args()

    rows = run_law_sections(tests_dir=Path(args.tests_dir))
    report = law_report(rows)
    markdown = render_law_report(rows)
    print(markdown)

    _write(Path(args.json_out), json.dumps(report, indent=2))
    _write(Path(args.markdown_out), markdown + "\n")
    return 1 if report["summary"]["status"] == "fail" else 0


if __name__ == "__main__":
    raise SystemExit(main())
