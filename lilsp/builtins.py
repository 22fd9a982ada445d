from __future__ import annotations

import logging

from lilsp import BuiltinFn
from lilsp.arithmetic import (
    builtin_add,
    builtin_div,
    builtin_mod,
    builtin_mul,
    builtin_sub,
)
from lilsp.errors import (
    LilspArityError,
    LilspEmptyListError,
    LilspRedefinitionError,
    LilspTypeError,
)
from lilsp.evaluation.evaluator import evaluate
from lilsp.types.environment import Environment
from lilsp.types.value import QExpr, SExpr, Symbol, Value

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def _expect_count(name: str, args: SExpr, expected: int) -> None:
    if len(args.items) != expected:
        raise LilspArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args.items)}, expected {expected}."
        )


def _expect_type(name: str, args: SExpr, index: int, kind: type) -> None:
    arg = args.items[index]
    if not isinstance(arg, kind):
        raise LilspTypeError(
            f"Function '{name}' passed incorrect type for argument {index + 1}. "
            f"Got {arg.type_name}, expected {kind.type_name}."
        )


def _expect_non_empty(name: str, args: SExpr, index: int) -> None:
    if not args.items[index].items:
        raise LilspEmptyListError(f"Function '{name}' passed {{}}.")


# -------------------------------
# List operations
# -------------------------------
def builtin_list(env: Environment, args: SExpr) -> Value:
    return QExpr(args.items)


def builtin_head(env: Environment, args: SExpr) -> Value:
    _expect_count("head", args, 1)
    _expect_type("head", args, 0, QExpr)
    _expect_non_empty("head", args, 0)

    v = args.pop(0)
    del v.items[1:]
    return v


def builtin_tail(env: Environment, args: SExpr) -> Value:
    _expect_count("tail", args, 1)
    _expect_type("tail", args, 0, QExpr)
    _expect_non_empty("tail", args, 0)

    v = args.pop(0)
    v.pop(0)
    return v


def builtin_eval(env: Environment, args: SExpr) -> Value:
    _expect_count("eval", args, 1)
    _expect_type("eval", args, 0, QExpr)

    q = args.pop(0)
    return evaluate(SExpr(q.items), env)


def builtin_join(env: Environment, args: SExpr) -> Value:
    if not args.items:
        raise LilspArityError("Function 'join' passed no arguments. Expected at least 1.")
    for i in range(len(args.items)):
        _expect_type("join", args, i, QExpr)

    x = args.pop(0)
    while args.items:
        y = args.pop(0)
        while y.items:
            x.add(y.pop(0))
    return x


# -------------------------------
# Definition
# -------------------------------
def builtin_def(env: Environment, args: SExpr) -> Value:
    if not args.items:
        raise LilspArityError(
            "Function 'def' passed no arguments. Expected a Q-Expression of symbols."
        )
    _expect_type("def", args, 0, QExpr)

    syms = args.pop(0)
    for i, sym in enumerate(syms.items, start=1):
        if not isinstance(sym, Symbol):
            raise LilspTypeError(
                f"Function 'def' expected a symbol at position {i}, "
                f"instead got {sym.type_name}."
            )
    if len(syms.items) != len(args.items):
        raise LilspArityError(
            f"Function 'def' passed incorrect number of values. "
            f"Expected {len(syms.items)}, got {len(args.items)}."
        )
    # Validate every name before binding any of them
    for sym in syms.items:
        if env.is_reserved(sym.name):
            raise LilspRedefinitionError(f"Cannot redefine builtin function '{sym.name}'.")

    for sym, value in zip(syms.items, args.items):
        logger.debug("def %s", sym.name)
        env.put(sym.name, value)
    return SExpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "list": builtin_list,
    "head": builtin_head,
    "tail": builtin_tail,
    "eval": builtin_eval,
    "join": builtin_join,
    "def": builtin_def,
    "+": builtin_add,
    "-": builtin_sub,
    "*": builtin_mul,
    "/": builtin_div,
    "%": builtin_mod,
}


def register(env: Environment) -> None:
    for name, fn in BUILTINS.items():
        env.register_builtin(name, fn)
