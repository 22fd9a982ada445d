import pytest

from lilsp.arithmetic import builtin_add
from lilsp.errors import ErrorKind
from lilsp.printer import render
from lilsp.types.value import (
    Decimal,
    Error,
    Function,
    Integer,
    QExpr,
    SExpr,
    Symbol,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Integer(42), "42"),
        (Integer(-5), "-5"),
        (Decimal(2.5), "2.500000"),
        (Decimal(-0.5), "-0.500000"),
        (Decimal(1 / 3), "0.333333"),
        (Error(ErrorKind.DIVISION_BY_ZERO, "Division by zero"), "Error: Division by zero"),
        (Symbol("foo"), "foo"),
        (Function("+", builtin_add), "<function>"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), Integer(1)]), "(+ 1)"),
        (QExpr([Integer(1), QExpr([Integer(2), Decimal(3.0)])]), "{1 {2 3.000000}}"),
        (SExpr([QExpr(), SExpr()]), "({} ())"),
    ]
)
def test_render(value, expected):
    assert render(value) == expected
