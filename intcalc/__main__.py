"""CLI for the intcalc expression evaluator.

Usage:
    python -m intcalc eval "4*4-3*2"        # Evaluate one expression
    python -m intcalc eval -- "-3*4"        # Leading '-' needs the -- separator
    python -m intcalc prompt                # Read one line from stdin
    python -m intcalc prompt --loop         # Read lines until end of input
    python -m intcalc selftest              # Replay the reference cases
    python -m intcalc -v eval "1/0"         # Debug logging to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from intcalc.config import max_line_length
from intcalc.errors import EvaluationError
from intcalc.evaluator import evaluate
from intcalc.models import EvalOptions
from intcalc.selftest import render_results, run_cases

app = typer.Typer(
    name="intcalc",
    help="Integer arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console(highlight=False)

PROMPT = "Enter an arithmetic expression: "

_STRICT_HELP = "Reject factors with no digits and trailing text (env: INTCALC_STRICT)"
_GROUPING_HELP = "Reject unbalanced parentheses (env: INTCALC_CHECK_GROUPING)"


def _options(strict: Optional[bool], check_grouping: Optional[bool]) -> EvalOptions:
    return EvalOptions.from_env().override(strict=strict, check_grouping=check_grouping)


def _evaluate_and_print(text: str, options: EvalOptions) -> bool:
    """Evaluate text and print the result. Returns False on failure."""
    try:
        result = evaluate(text, options=options)
    except EvaluationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return False
    try:
        rendered = str(result)
    except ValueError as e:
        # Python 3.11+ caps int-to-str conversion (sys.set_int_max_str_digits).
        console.print(f"[red]Error:[/red] result too large to print: {escape(str(e))}", highlight=False)
        return False
    out.print(f"Result: {rendered}")
    return True


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log evaluation steps to stderr"),
) -> None:
    """Integer arithmetic expression evaluator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '(1+2)*3' (no spaces)"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help=_STRICT_HELP),
    check_grouping: Optional[bool] = typer.Option(None, "--check-grouping/--no-check-grouping", help=_GROUPING_HELP),
) -> None:
    """Evaluate one expression given on the command line."""
    if not _evaluate_and_print(expression, _options(strict, check_grouping)):
        raise typer.Exit(1)


@app.command("prompt")
def cmd_prompt(
    loop: bool = typer.Option(False, "--loop", "-l", help="Keep reading lines until end of input"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help=_STRICT_HELP),
    check_grouping: Optional[bool] = typer.Option(None, "--check-grouping/--no-check-grouping", help=_GROUPING_HELP),
) -> None:
    """Read an expression from standard input and evaluate it."""
    options = _options(strict, check_grouping)
    limit = max_line_length()
    failed = False

    while True:
        out.print(PROMPT, end="")
        line = sys.stdin.readline()
        if not line:
            out.print()
            if not loop:
                console.print("[red]Error:[/red] no input")
                failed = True
            break
        text = line.rstrip("\r\n")
        if loop and not text:
            continue

        if len(text) > limit:
            console.print(f"[red]Error:[/red] line longer than {limit} characters")
            failed = True
        elif not _evaluate_and_print(text, options):
            failed = True

        if not loop:
            break

    if failed:
        raise typer.Exit(1)


@app.command("selftest")
def cmd_selftest() -> None:
    """Replay the reference sample cases and show a results table."""
    # Always the permissive grammar; the cases include a tolerated missing ")".
    results = run_cases(options=EvalOptions())
    render_results(results, console)
    if any(r.verdict != "pass" for r in results):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
