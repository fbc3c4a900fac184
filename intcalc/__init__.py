"""intcalc: integer arithmetic expression evaluator.

Evaluates text such as '(1+3*(-4))/2' with a recursive-descent parser that
computes the value while it parses. Supports + - * / (truncating toward
zero), a single unary minus per factor and parentheses.

Usage:
    python -m intcalc eval "4*4-3*2"     # Evaluate one expression
    python -m intcalc prompt             # Read an expression from stdin
    python -m intcalc selftest           # Replay the reference cases
"""

from intcalc.errors import (
    DivisionByZero,
    EmptyExpression,
    EvaluationError,
    InvalidCharacter,
    MalformedGrouping,
    NestingTooDeep,
    UnexpectedCharacter,
    UnexpectedEnd,
)
from intcalc.evaluator import evaluate, evaluate_many
from intcalc.models import EvalOptions

__all__ = [
    "DivisionByZero",
    "EmptyExpression",
    "EvalOptions",
    "EvaluationError",
    "InvalidCharacter",
    "MalformedGrouping",
    "NestingTooDeep",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "evaluate",
    "evaluate_many",
]
