"""Parsing and evaluation of ``ifeval`` comparison expressions.

An expression has the form ``lhs operator rhs``, where the operator is one
of ``==``, ``!=``, ``<``, ``<=``, ``>``, ``>=`` and each side is an
attribute reference (``{attr}``), a number, a quoted string, a boolean,
``nil``/``null`` or a bare word.
"""

from __future__ import annotations

import math
import operator as _op
import sys
from decimal import Decimal
from enum import Enum
from typing import Callable, Mapping, Optional, Tuple, Union

Value = Union[str, float, bool, None]

_EPSILON = sys.float_info.epsilon


class ExprError(Exception):
    """An ``ifeval`` expression could not be evaluated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidSyntaxError(ExprError):
    """The expression syntax is invalid."""


class UnknownOperatorError(ExprError):
    """An unknown operator was used."""


class TypeMismatchError(ExprError):
    """The two sides cannot be compared with the operator."""


class UnresolvedAttributeError(ExprError):
    """An attribute reference could not be resolved."""


class _Operator(Enum):
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="


_TWO_CHAR = (
    _Operator.EQUAL,
    _Operator.NOT_EQUAL,
    _Operator.LESS_EQUAL,
    _Operator.GREATER_EQUAL,
)
_ONE_CHAR = (_Operator.LESS_THAN, _Operator.GREATER_THAN)

_ORDERING: dict = {
    _Operator.LESS_THAN: _op.lt,
    _Operator.LESS_EQUAL: _op.le,
    _Operator.GREATER_THAN: _op.gt,
    _Operator.GREATER_EQUAL: _op.ge,
}


def evaluate_expression(expr: str, attributes: Mapping[str, str]) -> bool:
    """Evaluate an ``ifeval`` expression against document attributes.

    Raises an :class:`ExprError` subclass when the expression is malformed
    or its operands cannot be compared.
    """
    lhs_text, op, rhs_text = _split_expression(expr.strip())
    lhs = _parse_value(lhs_text, attributes)
    rhs = _parse_value(rhs_text, attributes)
    return _compare(lhs, op, rhs)


def _split_expression(expr: str) -> Tuple[str, _Operator, str]:
    for op in _TWO_CHAR:
        pos = expr.find(op.value)
        if pos >= 0:
            return expr[:pos], op, expr[pos + 2:]
    for op in _ONE_CHAR:
        pos = _find_standalone(expr, op.value)
        if pos is not None:
            return expr[:pos], op, expr[pos + 1:]
    raise InvalidSyntaxError(f"No operator found in expression: {expr}")


def _find_standalone(expr: str, symbol: str) -> Optional[int]:
    pos = expr.find(symbol)
    while pos >= 0:
        if expr[pos + 1:pos + 2] != "=":
            return pos
        pos = expr.find(symbol, pos + 1)
    return None


def _parse_number(text: str) -> Optional[float]:
    if not text or not text.isascii() or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_value(text: str, attributes: Mapping[str, str]) -> Value:
    text = text.strip()
    if len(text) >= 2 and text.startswith("{") and text.endswith("}"):
        return _resolve_attribute(text[1:-1], attributes)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered in ("nil", "null"):
        return None
    number = _parse_number(text)
    return number if number is not None else text


def _resolve_attribute(name: str, attributes: Mapping[str, str]) -> Value:
    value = attributes.get(name)
    if value is None:
        return None
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    number = _parse_number(value)
    return number if number is not None else value


def _is_number(value: Value) -> bool:
    return isinstance(value, float)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    return format(Decimal(text), "f") if "e" in text else text


def _compare(lhs: Value, op: _Operator, rhs: Value) -> bool:
    if _is_number(lhs) and _is_number(rhs):
        return _compare_ordered(lhs, op, rhs, _numbers_equal)
    if isinstance(lhs, str) and isinstance(rhs, str):
        return _compare_ordered(lhs, op, rhs, _op.eq)
    if isinstance(lhs, bool) and isinstance(rhs, bool):
        return _compare_equality(lhs == rhs, op, "Booleans can only be compared with == or !=")
    if lhs is None or rhs is None:
        return _compare_equality(
            lhs is None and rhs is None, op, "nil can only be compared with == or !="
        )
    if isinstance(lhs, bool) or isinstance(rhs, bool):
        raise TypeMismatchError("Cannot compare boolean with non-boolean")
    return _compare_mixed(lhs, op, rhs)


def _compare_mixed(lhs: Value, op: _Operator, rhs: Value) -> bool:
    text = lhs if isinstance(lhs, str) else rhs
    assert isinstance(text, str)
    coerced = _parse_number(text)
    if coerced is not None:
        left = coerced if isinstance(lhs, str) else lhs
        right = coerced if isinstance(rhs, str) else rhs
        return _compare_ordered(left, op, right, _numbers_equal)
    left_text = lhs if isinstance(lhs, str) else _format_number(lhs)
    right_text = rhs if isinstance(rhs, str) else _format_number(rhs)
    return _compare_ordered(left_text, op, right_text, _op.eq)


def _numbers_equal(a: float, b: float) -> bool:
    return abs(a - b) < _EPSILON


def _compare_ordered(
    a, op: _Operator, b, equal: Callable[[object, object], bool]
) -> bool:
    if op is _Operator.EQUAL:
        return equal(a, b)
    if op is _Operator.NOT_EQUAL:
        return not equal(a, b)
    return _ORDERING[op](a, b)


def _compare_equality(equal: bool, op: _Operator, message: str) -> bool:
    if op is _Operator.EQUAL:
        return equal
    if op is _Operator.NOT_EQUAL:
        return not equal
    raise TypeMismatchError(message)