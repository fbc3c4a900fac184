"""Tests for the top-level evaluate() entry point and its configuration."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from intcalc import (
    DivisionByZero,
    EmptyExpression,
    EvalOptions,
    EvaluationError,
    InvalidCharacter,
    MalformedGrouping,
    NestingTooDeep,
    UnexpectedCharacter,
    UnexpectedEnd,
    evaluate,
    evaluate_many,
)
from intcalc.config import DEFAULT_MAX_LINE, env_flag, max_line_length


# --- Reference cases ---

@pytest.mark.parametrize("text,expected", [
    ("2/2", 1),
    ("4*4-3*2", 10),
    ("0*4-3*2+1", -5),
    ("(1+3*(-4))/2", -5),
    ("1+2/(1*3)-2", -1),
    ("(1*(-2))*(-2)-1*(2+4*2)/3+1", 2),
    ("(1*(-1+2*1)/3", 0),
    ("(1+2)*3", 9),
    ("-3*4", -12),
    ("-1*-4", 4),
    ("7/2", 3),
    ("-7/2", -3),
])
def test_reference_cases(text, expected):
    assert evaluate(text) == expected


# --- Precedence and associativity ---

def test_multiplication_before_addition():
    assert evaluate("2+3*4") == 14


def test_subtraction_is_left_associative():
    assert evaluate("10-2-3") == 5


def test_division_is_left_associative():
    assert evaluate("100/10/5") == 2


def test_nested_parentheses():
    assert evaluate("((2+3)*(4-1))") == 15
    assert evaluate("(((1+2)))") == 3


def test_no_wraparound_on_large_values():
    assert evaluate("99999999999*99999999999") == 99999999999 * 99999999999


# --- Errors ---

@pytest.mark.parametrize("text", ["1/0", "(1+1)/(1-1)", "2+3*4/(2-2)+1", "0/0"])
def test_division_by_zero_anywhere(text):
    with pytest.raises(DivisionByZero):
        evaluate(text)


@pytest.mark.parametrize("text", ["1+a", "3.5*2", "1 + 2", "2*2=4", "1+1\n"])
def test_invalid_character_rejected(text):
    with pytest.raises(InvalidCharacter):
        evaluate(text)


def test_invalid_character_after_complete_expression():
    """Validation runs before parsing, so trailing garbage is still caught."""
    with pytest.raises(InvalidCharacter) as exc_info:
        evaluate("1+2)x")
    assert exc_info.value.position == 4


def test_invalid_character_reported_before_division_by_zero():
    with pytest.raises(InvalidCharacter):
        evaluate("1/0+x")


def test_empty_expression():
    with pytest.raises(EmptyExpression):
        evaluate("")


def test_deep_nesting_reports_error():
    """Nesting past the recursion limit is an evaluation error, not a crash."""
    text = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(NestingTooDeep) as exc_info:
        evaluate(text)
    assert isinstance(exc_info.value, EvaluationError)
    assert "nested too deeply" in str(exc_info.value)
    assert evaluate("1+1") == 2


def test_moderate_nesting():
    assert evaluate("(" * 50 + "-7" + ")" * 50 + "/2") == -3


def test_errors_share_base_class():
    for text in ("", "x", "1/0"):
        with pytest.raises(EvaluationError):
            evaluate(text)


# --- Permissive defaults and strictness switches ---

def test_trailing_text_ignored_by_default():
    assert evaluate("(1)(2)") == 1
    assert evaluate("1)") == 1


def test_zero_fallback_by_default():
    assert evaluate("1+") == 1
    assert evaluate("*3") == 0


def test_strict_rejects_trailing_text():
    with pytest.raises(UnexpectedCharacter) as exc_info:
        evaluate("(1)(2)", strict=True)
    assert exc_info.value.position == 3


def test_strict_rejects_missing_operand():
    with pytest.raises(UnexpectedEnd):
        evaluate("1+", strict=True)
    with pytest.raises(UnexpectedCharacter):
        evaluate("*3", strict=True)


def test_strict_accepts_well_formed_input():
    assert evaluate("(1+3*(-4))/2", strict=True) == -5


def test_check_grouping_missing_close():
    with pytest.raises(MalformedGrouping):
        evaluate("(1*(-1+2*1)/3", check_grouping=True)


def test_check_grouping_unmatched_close():
    with pytest.raises(MalformedGrouping) as exc_info:
        evaluate("(1))", check_grouping=True)
    assert exc_info.value.position == 3


def test_check_grouping_accepts_balanced():
    assert evaluate("(1*(-2))*(-2)-1*(2+4*2)/3+1", check_grouping=True) == 2


def test_options_object():
    opts = EvalOptions(strict=True, check_grouping=True)
    with pytest.raises(MalformedGrouping):
        evaluate("1)", options=opts)
    assert evaluate("1)", options=opts, check_grouping=False, strict=False) == 1


# --- Environment configuration ---

def test_env_strict(monkeypatch):
    monkeypatch.setenv("INTCALC_STRICT", "yes")
    with pytest.raises(UnexpectedEnd):
        evaluate("1+")


def test_explicit_flag_overrides_env(monkeypatch):
    monkeypatch.setenv("INTCALC_STRICT", "1")
    assert evaluate("1+", strict=False) == 1


def test_env_check_grouping(monkeypatch):
    monkeypatch.setenv("INTCALC_CHECK_GROUPING", "TRUE")
    with pytest.raises(MalformedGrouping):
        evaluate("(1+2")


@pytest.mark.parametrize("raw,expected", [
    ("1", True), ("on", True), ("Yes", True),
    ("0", False), ("off", False), ("", False), ("  ", False),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("INTCALC_STRICT", raw)
    assert env_flag("INTCALC_STRICT") is expected


def test_env_flag_unset_uses_default():
    assert env_flag("INTCALC_STRICT") is False
    assert env_flag("INTCALC_STRICT", default=True) is True


def test_max_line_length(monkeypatch):
    assert max_line_length() == DEFAULT_MAX_LINE
    monkeypatch.setenv("INTCALC_MAX_LINE", "10")
    assert max_line_length() == 10
    monkeypatch.setenv("INTCALC_MAX_LINE", "abc")
    assert max_line_length() == DEFAULT_MAX_LINE
    monkeypatch.setenv("INTCALC_MAX_LINE", "-5")
    assert max_line_length() == DEFAULT_MAX_LINE


# --- Independence between calls ---

def test_repeated_evaluation_is_identical():
    text = "(1*(-2))*(-2)-1*(2+4*2)/3+1"
    assert evaluate(text) == evaluate(text) == 2


def test_failure_does_not_affect_next_call():
    with pytest.raises(DivisionByZero):
        evaluate("1/0")
    assert evaluate("1+1") == 2


def test_evaluate_many():
    assert evaluate_many(["2/2", "4*4-3*2", "(1+2)*3"]) == [1, 10, 9]
    with pytest.raises(DivisionByZero):
        evaluate_many(["1+1", "1/0"])


def test_concurrent_evaluation():
    texts = ["(1+3*(-4))/2", "4*4-3*2", "1+2/(1*3)-2", "-1*-4"] * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate, texts))
    assert results == [-5, 10, -1, 4] * 50


# --- Logging ---

def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="intcalc")
    evaluate("(1)(2)")
    messages = [r.getMessage() for r in caplog.records]
    assert any("ignoring trailing text '(2)'" in m for m in messages)
    assert any("evaluated '(1)(2)' = 1" in m for m in messages)


def test_rejection_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="intcalc")
    with pytest.raises(InvalidCharacter):
        evaluate("1+x")
    assert any("invalid character 'x' at 2" in r.getMessage() for r in caplog.records)


def test_division_by_zero_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="intcalc")
    with pytest.raises(DivisionByZero):
        evaluate("(1+1)/(1-1)")
    assert any("division by zero at 5" in r.getMessage() for r in caplog.records)
