"""Runtime environment for Lilsp.

The Environment maps symbol names to values it owns. Values are deep-copied on
the way in (`put`) and on the way out (`get`), so a binding never aliases the
expression it was evaluated from. Frames may be nested through a weak `outer`
link; the interpreter itself runs with a single root frame.
"""

from __future__ import annotations

import logging
import weakref
from typing import Iterator, Optional

from lilsp import BuiltinFn
from lilsp.errors import ErrorKind
from lilsp.types.value import Error, Function, Value

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from symbol names to Lilsp values, with reserved builtin names."""

    __slots__ = ("vars", "reserved", "_outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.reserved: set[str] = set()
        # Parent frames are never owned by their children
        self._outer = weakref.ref(outer) if outer is not None else None

    @property
    def outer(self) -> Optional[Environment]:
        return self._outer() if self._outer is not None else None

    def child(self) -> Environment:
        """Create a nested frame whose lookups fall back to this one."""
        return Environment(self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an UnboundSymbol Error."""
        env = self.find(name)
        if env is None:
            return Error(ErrorKind.UNBOUND_SYMBOL, f"Unbound symbol '{name}'")
        return env.vars[name].copy()

    def put(self, name: str, value: Value) -> None:
        """Bind `name` in this frame to a copy of `value`, replacing any old binding."""
        if name in self.vars:
            logger.debug("Rebinding %s", name)
        self.vars[name] = value.copy()

    def register_builtin(self, name: str, fn: BuiltinFn) -> None:
        self.put(name, Function(name, fn))
        self.reserved.add(name)

    def is_reserved(self, name: str) -> bool:
        return any(name in frame.reserved for frame in self.frames())

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def frames(self) -> Iterator[Environment]:
        """Yield this frame, then each enclosing frame still alive."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _bindings_text(self) -> str:
        return "{" + ", ".join(f"{k}: {v!r}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        suffix = " -> ..." if self.outer is not None else ""
        return self._bindings_text() + suffix

    def __repr__(self) -> str:
        chain = " -> ".join(frame._bindings_text() for frame in self.frames())
        return f"<Environment chain: {chain}>"
