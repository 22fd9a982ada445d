from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from lilsp import config
from lilsp.builtins import register
from lilsp.errors import ErrorKind, LilspSyntaxError
from lilsp.evaluation.evaluator import evaluate as evaluate_value
from lilsp.printer import render
from lilsp.reader import ParseNode, parse, read
from lilsp.types.environment import Environment
from lilsp.types.value import Error, Value

logger = logging.getLogger(__name__)

__all__ = ["evaluate", "render", "Interpreter", "recursion_limit"]


def _nested_too_deeply() -> Error:
    return Error(ErrorKind.NESTED_TOO_DEEPLY, "Expression is nested too deeply to evaluate.")


def evaluate(tree: ParseNode, env: Environment) -> Value:
    """Read a parse tree and evaluate the resulting expression in `env`."""
    try:
        return evaluate_value(read(tree), env)
    except RecursionError:
        logger.debug("Recursion limit reached while evaluating")
        return _nested_too_deeply()


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least `limit` for the block."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    A line-oriented interpreter for Lilsp expressions.
    Keeps one environment, pre-populated with the builtins, across calls.
    """
    def __init__(self, prelude: str | None = None, max_depth: int | None = None):
        self.env = Environment()
        register(self.env)
        self.max_depth = max_depth if max_depth is not None else config.get_recursion_limit()

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate each top-level expression of `code` on its own.

        Failures are logged and skipped; a prelude never stops the session.
        """
        with recursion_limit(self.max_depth):
            try:
                exprs = read(parse(code)).items
            except LilspSyntaxError as exc:
                logger.warning("Prelude not loaded: %s", exc.message)
                return
            except RecursionError:
                logger.warning("Prelude not loaded: %s", _nested_too_deeply().message)
                return
            for expr in exprs:
                try:
                    result = evaluate_value(expr, self.env)
                except RecursionError:
                    result = _nested_too_deeply()
                if isinstance(result, Error):
                    logger.warning("Prelude expression failed: %s", result.message)

    def eval(self, code: str) -> Value:
        """Parse and evaluate one line of input.

        The whole line is an S-Expression, so `+ 1 2` and `(+ 1 2)` are equivalent.
        Raises LilspSyntaxError if the line cannot be parsed.
        """
        with recursion_limit(self.max_depth):
            return evaluate(parse(code), self.env)
