"""Variable bindings with lexical nesting."""

from __future__ import annotations

from typing import Any, Optional


class Environment:
    """A scope of name bindings, optionally enclosed by an outer scope."""

    def __init__(self, outer: Optional[Environment] = None) -> None:
        self._store: dict[str, Any] = {}
        self.outer = outer

    @classmethod
    def new_enclosed_environment(cls, outer: Environment) -> Environment:
        """Create a fresh scope whose lookups fall back to ``outer``."""
        return cls(outer)

    def get(self, name: str) -> Optional[Any]:
        """Look ``name`` up here, then in the enclosing scopes; None if unbound."""
        if name in self._store:
            return self._store[name]
        if self.outer is not None:
            return self.outer.get(name)
        return None

    def store(self, name: str, value: Any) -> Any:
        """Bind ``name`` to ``value`` in this scope and return the value."""
        self._store[name] = value
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._store == other._store and self.outer == other.outer

    def __str__(self) -> str:
        lines = "".join(f"{key}: {self._store[key]}\n" for key in sorted(self._store))
        tail = f"{self.outer}\n" if self.outer is not None else "\n"
        return f"{lines}\n{tail}"

    def __repr__(self) -> str:
        return f"Environment(store={self._store!r}, outer={self.outer!r})"