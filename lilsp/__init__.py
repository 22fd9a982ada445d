# Core type aliases for the Lilsp data model.
# Runtime values are the tagged variants in lilsp.types.value (Integer, Decimal,
# Error, Symbol, Function, SExpr, QExpr). Builtins receive the environment and an
# S-Expression holding their already evaluated arguments, and return one value.

from typing import Callable

__version__ = "0.0.0.1"

# Builtin function type: (env, args) -> Value
BuiltinFn = Callable[..., "Value"]
