"""Reference sample cases and a Rich results table.

Replays the cases every build of the engine must satisfy and renders a
pass/fail table, one row per case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from rich.console import Console
from rich.table import Table

from intcalc.errors import DivisionByZero, EvaluationError, InvalidCharacter
from intcalc.evaluator import evaluate
from intcalc.models import EvalOptions

Expected = Union[int, type]


@dataclass
class SampleCase:
    """One expression with its expected value or expected error class."""

    text: str
    expected: Expected
    note: str = ""


@dataclass
class CaseResult:
    """Outcome of evaluating one SampleCase."""

    case: SampleCase
    value: Optional[int] = None
    error: Optional[EvaluationError] = None

    @property
    def verdict(self) -> str:
        expected = self.case.expected
        if isinstance(expected, int):
            return "pass" if self.error is None and self.value == expected else "fail"
        return "pass" if isinstance(self.error, expected) else "fail"

    @property
    def outcome(self) -> str:
        if self.error is not None:
            return type(self.error).__name__
        return str(self.value)


SAMPLE_CASES: list[SampleCase] = [
    SampleCase("2/2", 1),
    SampleCase("4*4-3*2", 10),
    SampleCase("0*4-3*2+1", -5),
    SampleCase("(1+3*(-4))/2", -5),
    SampleCase("1+2/(1*3)-2", -1),
    SampleCase("(1*(-2))*(-2)-1*(2+4*2)/3+1", 2),
    SampleCase("(1*(-1+2*1)/3", 0, "missing ')' tolerated"),
    SampleCase("(1+2)*3", 9),
    SampleCase("7/2", 3, "truncates toward zero"),
    SampleCase("-7/2", -3, "truncates toward zero"),
    SampleCase("-3*4", -12),
    SampleCase("-1*-4", 4),
    SampleCase("1/0", DivisionByZero),
    SampleCase("(1+1)/(1-1)", DivisionByZero),
    SampleCase("2+2a", InvalidCharacter),
    SampleCase("8.0", InvalidCharacter),
]


def run_cases(
    cases: Optional[list[SampleCase]] = None,
    options: Optional[EvalOptions] = None,
) -> list[CaseResult]:
    """Evaluate every case with the given options (permissive by default)."""
    opts = options or EvalOptions()
    results = []
    for case in cases if cases is not None else SAMPLE_CASES:
        try:
            results.append(CaseResult(case, value=evaluate(case.text, options=opts)))
        except EvaluationError as e:
            results.append(CaseResult(case, error=e))
    return results


def _fmt_expected(expected: Expected) -> str:
    if isinstance(expected, int):
        return str(expected)
    return expected.__name__


def render_results(results: list[CaseResult], console: Console) -> None:
    """Render a Rich table of case results with a summary line."""
    table = Table(title="intcalc self-test", show_header=True, header_style="bold")
    table.add_column("Expression", style="cyan", min_width=16)
    table.add_column("Expected", justify="right")
    table.add_column("Got", justify="right")
    table.add_column("Verdict", justify="center")
    table.add_column("Note", style="dim")

    for r in results:
        color = "green" if r.verdict == "pass" else "red"
        table.add_row(
            r.case.text,
            _fmt_expected(r.case.expected),
            r.outcome,
            f"[{color}]{r.verdict}[/{color}]",
            r.case.note,
        )

    passed = sum(1 for r in results if r.verdict == "pass")
    console.print()
    console.print(table)
    console.print(f"  {passed}/{len(results)} passed")
    console.print()
