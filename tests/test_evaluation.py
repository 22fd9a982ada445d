import pytest

from lilsp.arithmetic import builtin_add
from lilsp.builtins import builtin_head
from lilsp.errors import ErrorKind
from lilsp.evaluation.apply import apply
from lilsp.evaluation.evaluator import evaluate
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
    "value",
    [
        Integer(1),
        Decimal(3.14),
        Error(ErrorKind.WRONG_TYPE, "already failed"),
        Function("+", builtin_add),
        QExpr([Symbol("undefined"), SExpr([Symbol("+"), Integer(1)])]),
    ]
)
def test_self_evaluating(env, value):
    assert evaluate(value, env) is value


def test_symbol_lookup(env):
    assert evaluate(Symbol("+"), env) == Function("+", builtin_add)
    assert evaluate(Symbol("foo"), env) == Error(ErrorKind.UNBOUND_SYMBOL, "Unbound symbol 'foo'")


def test_empty_sexpr(env):
    expr = SExpr()
    assert evaluate(expr, env) is expr


def test_single_item_sexpr(env):
    assert evaluate(SExpr([Integer(5)]), env) == Integer(5)
    assert evaluate(SExpr([SExpr([SExpr([Integer(5)])])]), env) == Integer(5)
    assert evaluate(SExpr([QExpr([Integer(1)])]), env) == QExpr([Integer(1)])


def test_application(env):
    expr = SExpr([Symbol("+"), Integer(1), SExpr([Symbol("+"), Integer(2), Integer(3)])])
    assert evaluate(expr, env) == Integer(6)


def test_first_error_wins(env):
    expr = SExpr([Symbol("a"), Symbol("b")])
    assert evaluate(expr, env) == Error(ErrorKind.UNBOUND_SYMBOL, "Unbound symbol 'a'")

    expr = SExpr([Symbol("+"), Integer(1), Symbol("foo")])
    assert evaluate(expr, env) == Error(ErrorKind.UNBOUND_SYMBOL, "Unbound symbol 'foo'")


def test_not_a_function(env):
    result = evaluate(SExpr([Integer(1), Integer(2)]), env)
    assert result == Error(ErrorKind.NOT_A_FUNCTION, "First element is not a function. Got Integer.")

    result = evaluate(SExpr([QExpr(), Integer(2)]), env)
    assert result.kind is ErrorKind.NOT_A_FUNCTION


def test_every_item_is_evaluated_before_dispatch(env, run):
    # Both defs run even though the surrounding expression then fails
    result = run("(def {a} 1) (def {b} 2)")
    assert result.kind is ErrorKind.NOT_A_FUNCTION
    assert env.get("a") == Integer(1)
    assert env.get("b") == Integer(2)


def test_apply_converts_failures(env):
    result = apply(Function("head", builtin_head), SExpr(), env)
    assert result == Error(
        ErrorKind.WRONG_ARITY,
        "Function 'head' passed incorrect number of arguments. Got 0, expected 1.",
    )
