from lilsp.types.value import (
    Integer,
    Decimal,
    Error,
    Symbol,
    Function,
    SExpr,
    QExpr,
    Value,
)
from lilsp.types.environment import Environment

__all__ = [
    "Integer",
    "Decimal",
    "Error",
    "Symbol",
    "Function",
    "SExpr",
    "QExpr",
    "Value",
    "Environment",
]
