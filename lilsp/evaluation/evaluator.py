"""Core evaluator for Lilsp.

Symbols are looked up, S-Expressions are reduced, and everything else
(numbers, errors, functions and Q-Expressions) evaluates to itself. A
Q-Expression is inert data until `eval` relabels it as an S-Expression.
"""

from __future__ import annotations

import logging

from lilsp.errors import ErrorKind
from lilsp.evaluation.apply import apply
from lilsp.types.environment import Environment
from lilsp.types.value import Error, Function, SExpr, Symbol, Value

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Environment) -> Value:
    """Reduce `expr` to a value. The expression is consumed."""
    match expr:
        case Symbol():
            return env.get(expr.name)
        case SExpr():
            return evaluate_sexpr(expr, env)
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> Value:
    # Strict, left-to-right evaluation of every item
    expr.items = [evaluate(item, env) for item in expr.items]

    # First error wins
    for item in expr.items:
        if isinstance(item, Error):
            logger.debug("Short-circuiting on error: %s", item.message)
            return item

    if not expr.items:
        return expr
    if len(expr.items) == 1:
        return expr.pop(0)

    head = expr.pop(0)
    if not isinstance(head, Function):
        return Error(
            ErrorKind.NOT_A_FUNCTION,
            f"First element is not a function. Got {head.type_name}.",
        )
    return apply(head, expr, env)
