"""Runtime values for Lilsp.

Every runtime entity is one of seven mutually exclusive variants. S-Expressions
and Q-Expressions exclusively own their children: moving a value into another
container pops it from the old one, and `copy()` is always a structural deep
copy so that no mutable state is shared between two owners.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Union

from lilsp import BuiltinFn
from lilsp.errors import ErrorKind, LilspError


@dataclass(frozen=True)
class Integer:
    value: int
    type_name = "Integer"

    def copy(self) -> Integer:
        return Integer(self.value)


@dataclass(frozen=True)
class Decimal:
    value: float
    type_name = "Decimal"

    def copy(self) -> Decimal:
        return Decimal(self.value)


@dataclass(frozen=True)
class Error:
    kind: ErrorKind
    message: str
    type_name = "Error"

    @classmethod
    def from_exception(cls, exc: LilspError) -> Error:
        return cls(exc.kind, exc.message)

    def copy(self) -> Error:
        return Error(self.kind, self.message)


class Symbol:
    __slots__ = ("name",)
    type_name = "Symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name

    def copy(self) -> Symbol:
        return Symbol(self.name)


@dataclass(frozen=True)
class Function:
    """A builtin stored as data: the dispatch name plus the Python callable."""

    name: str
    fn: BuiltinFn = field(repr=False)
    type_name = "Function"

    def __call__(self, env, args: SExpr) -> Value:
        return self.fn(env, args)

    def copy(self) -> Function:
        # Only the dispatch identifier is copied, never the callable itself
        return Function(self.name, self.fn)


@dataclass
class SExpr:
    items: list[Value] = field(default_factory=list)
    type_name = "S-Expression"

    def add(self, value: Value) -> SExpr:
        self.items.append(value)
        return self

    def pop(self, index: int = 0) -> Value:
        return self.items.pop(index)

    def copy(self) -> SExpr:
        return SExpr([item.copy() for item in self.items])


@dataclass
class QExpr:
    items: list[Value] = field(default_factory=list)
    type_name = "Q-Expression"

    def add(self, value: Value) -> QExpr:
        self.items.append(value)
        return self

    def pop(self, index: int = 0) -> Value:
        return self.items.pop(index)

    def copy(self) -> QExpr:
        return QExpr([item.copy() for item in self.items])


Value = Union[Integer, Decimal, Error, Symbol, Function, SExpr, QExpr]
