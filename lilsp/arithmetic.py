"""Numeric builtins.

`+ - * / %` share one left fold: the first argument is the accumulator and
each following operand is combined into it in order, which fixes the
associativity of `-`, `/` and `%`. Integers behave as signed 64-bit values
(wrapping, truncating division); decimals are floats.
"""

from __future__ import annotations

import math
import operator

from lilsp.errors import (
    LilspArityError,
    LilspDivisionByZero,
    LilspTypeError,
    LilspTypeMismatch,
)
from lilsp.types.environment import Environment
from lilsp.types.value import Decimal, Integer, SExpr, Value

_INT_BITS = 64
_INT_MIN = -(2 ** (_INT_BITS - 1))


def wrap_int(x: int) -> int:
    """Wrap an unbounded int to 64-bit two's complement."""
    return (x - _INT_MIN) % (2 ** _INT_BITS) + _INT_MIN


def int_div(a: int, b: int) -> int:
    # Truncates toward zero
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def int_mod(a: int, b: int) -> int:
    # Remainder takes the sign of the dividend
    return a - b * int_div(a, b)


def decimal_mod(a: float, b: float) -> float:
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


INTEGER_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": int_div,
    "%": int_mod,
}

DECIMAL_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": decimal_mod,
}


def _negate(x: Integer | Decimal) -> Integer | Decimal:
    if isinstance(x, Integer):
        return Integer(wrap_int(-x.value))
    return Decimal(-x.value)


def _combine(op: str, x: Integer | Decimal, y: Integer | Decimal) -> Integer | Decimal:
    if op in ("/", "%") and y.value == 0:
        raise LilspDivisionByZero("Division by zero")
    if isinstance(x, Integer):
        return Integer(wrap_int(INTEGER_OPS[op](x.value, y.value)))
    return Decimal(DECIMAL_OPS[op](x.value, y.value))


def numeric_fold(op: str, args: SExpr) -> Value:
    if not args.items:
        raise LilspArityError(f"Function '{op}' passed no arguments. Expected at least 1.")
    for position, arg in enumerate(args.items, start=1):
        if not isinstance(arg, (Integer, Decimal)):
            raise LilspTypeError(
                f"Function '{op}' passed incorrect type for argument {position}. "
                f"Got {arg.type_name}, expected Integer or Decimal."
            )

    x = args.pop(0)

    # unary negation
    if op == "-" and not args.items:
        return _negate(x)

    while args.items:
        y = args.pop(0)
        if type(x) is not type(y):
            raise LilspTypeMismatch(
                f"Numeric types don't match. "
                f"Cannot apply '{op}' to {x.type_name} and {y.type_name}."
            )
        x = _combine(op, x, y)
    return x


def builtin_add(env: Environment, args: SExpr) -> Value:
    return numeric_fold("+", args)


def builtin_sub(env: Environment, args: SExpr) -> Value:
    return numeric_fold("-", args)


def builtin_mul(env: Environment, args: SExpr) -> Value:
    return numeric_fold("*", args)


def builtin_div(env: Environment, args: SExpr) -> Value:
    return numeric_fold("/", args)


def builtin_mod(env: Environment, args: SExpr) -> Value:
    return numeric_fold("%", args)
