"""Builtin application.

Builtins signal precondition failures by raising LilspError subclasses; this is
the single place where those are turned back into Error values, so evaluation
itself never raises.
"""

from __future__ import annotations

import logging

from lilsp.errors import LilspError
from lilsp.types.environment import Environment
from lilsp.types.value import Error, Function, SExpr, Value

logger = logging.getLogger(__name__)


def apply(fn: Function, args: SExpr, env: Environment) -> Value:
    """Invoke `fn` with ownership of `args`; always returns a value."""
    logger.debug("Applying %s to %d argument(s)", fn.name, len(args.items))
    try:
        return fn(env, args)
    except LilspError as exc:
        logger.debug("Builtin %s failed: %s", fn.name, exc.message)
        return Error.from_exception(exc)
