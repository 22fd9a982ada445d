from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Taxonomy carried by Error values."""

    INVALID_NUMBER = "InvalidNumber"
    MALFORMED_PARSE_TREE = "MalformedParseTree"
    UNBOUND_SYMBOL = "UnboundSymbol"
    NOT_A_FUNCTION = "NotAFunction"
    WRONG_ARITY = "WrongArity"
    WRONG_TYPE = "WrongType"
    EMPTY_LIST = "EmptyList"
    TYPE_MISMATCH = "TypeMismatch"
    DIVISION_BY_ZERO = "DivisionByZero"
    CANNOT_REDEFINE_BUILTIN = "CannotRedefineBuiltin"
    NESTED_TOO_DEEPLY = "NestedTooDeeply"


class LilspError(Exception):
    """ Base class for all Lilsp errors"""
    kind: ErrorKind | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LilspSyntaxError(LilspError):
    """ Raised when source text does not match the grammar"""


class LilspArityError(LilspError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""
    kind = ErrorKind.WRONG_ARITY


class LilspTypeError(LilspError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""
    kind = ErrorKind.WRONG_TYPE


class LilspEmptyListError(LilspError):
    """ Raised when head or tail is applied to an empty Q-Expression"""
    kind = ErrorKind.EMPTY_LIST


class LilspTypeMismatch(LilspError):
    """ Raised when a numeric fold meets operands of different numeric kinds"""
    kind = ErrorKind.TYPE_MISMATCH


class LilspDivisionByZero(LilspError):
    """ Raised when / or % gets a zero divisor"""
    kind = ErrorKind.DIVISION_BY_ZERO


class LilspRedefinitionError(LilspError):
    """ Raised when def targets a reserved builtin name"""
    kind = ErrorKind.CANNOT_REDEFINE_BUILTIN
