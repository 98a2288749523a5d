"""Condition and arithmetic evaluation."""

import math
import re
from collections.abc import Mapping

from .model import Variable
from .utils import strip_quotes

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_MATH = re.compile(r"([0-9]+)\s*([-+*/%^])\s*([0-9]+)")


class EvaluationError(ValueError):
    """Raised when a value cannot be evaluated."""


def safe_int(text: str) -> int:
    """Parse the leading integer of ``text`` as a signed 64-bit value."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise EvaluationError(f"Invalid integer: {text}")
    value = int(match.group(1))
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise EvaluationError(f"Invalid integer: {text}")
    return value


def _wrap64(value: int) -> int:
    value &= 2**64 - 1
    return value - 2**64 if value > _INT64_MAX else value


def _power(base: int, exponent: int) -> int:
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        return _INT64_MIN
    if not math.isfinite(result) or not _INT64_MIN <= result <= _INT64_MAX:
        return _INT64_MIN
    return int(result)


def eval_expression(expr: str) -> str:
    """Evaluate ``a OP b`` on non-negative integers; other text is returned as is.

    Division and modulo by zero give 0.
    """
    match = _MATH.fullmatch(expr)
    if match is None:
        return expr
    left = safe_int(match.group(1))
    op = match.group(2)
    right = safe_int(match.group(3))

    if op == "+":
        result = _wrap64(left + right)
    elif op == "-":
        result = _wrap64(left - right)
    elif op == "*":
        result = _wrap64(left * right)
    elif op == "/":
        result = left // right if right else 0
    elif op == "%":
        result = left % right if right else 0
    else:
        result = _power(left, right)
    return str(result)


def evaluate_condition(
    variables: Mapping[str, Variable], lhs: str, op: str, rhs_raw: str
) -> bool:
    """Compare variable ``lhs`` with a variable or literal using ``>>``, ``<<`` or ``===``."""
    left = variables.get(lhs)
    if left is None:
        return False

    if rhs_raw in variables:
        right = variables[rhs_raw]
    elif left.type in ("str", "int"):
        right = Variable(left.type, strip_quotes(rhs_raw))
    else:
        return False

    if left.type != right.type:
        return False

    if left.type == "int":
        lval, rval = safe_int(left.value), safe_int(right.value)
    elif left.type == "str":
        lval, rval = left.value, right.value
    else:
        return False

    if op == ">>":
        return lval > rval
    if op == "<<":
        return lval < rval
    if op == "===":
        return lval == rval
    return False