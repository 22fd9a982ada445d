from __future__ import annotations

from io import StringIO

from lilsp.types.value import (
    Decimal,
    Error,
    Function,
    Integer,
    QExpr,
    SExpr,
    Symbol,
    Value,
)


def _write_expr(buffer: StringIO, items: list[Value], open_: str, close: str) -> None:
    buffer.write(open_)
    for i, item in enumerate(items):
        if i:
            buffer.write(" ")
        _write(buffer, item)
    buffer.write(close)


def _write(buffer: StringIO, value: Value) -> None:
    match value:
        case Integer():
            buffer.write(str(value.value))
        case Decimal():
            buffer.write(f"{value.value:f}")
        case Error():
            buffer.write(f"Error: {value.message}")
        case Symbol():
            buffer.write(value.name)
        case SExpr():
            _write_expr(buffer, value.items, "(", ")")
        case QExpr():
            _write_expr(buffer, value.items, "{", "}")
        case Function():
            buffer.write("<function>")


def render(value: Value) -> str:
    """Render a value as Lilsp source-like text."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()
