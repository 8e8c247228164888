"""Nested scopes holding the entities declared in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(eq=False)
class Scope:
    """One level of nesting: its entities, their total size and its parent."""

    flags: int = 0
    entities: List[Any] = field(default_factory=list)
    size: int = 0
    parent: Optional["Scope"] = None
    _cursor: int = field(default=-1, init=False, repr=False)

    def last_entity(self) -> Any:
        """The most recently pushed entity, or None when the scope is empty."""
        return self.entities[-1] if self.entities else None

    def iteration_start(self) -> None:
        """Place the backward cursor on the newest entity."""
        self._cursor = len(self.entities) - 1

    def iterate_back(self) -> Any:
        """Return the entity under the cursor and step back, or None when exhausted."""
        if not self.entities or not 0 <= self._cursor < len(self.entities):
            return None
        entity = self.entities[self._cursor]
        self._cursor -= 1
        return entity


class ScopeManager:
    """Tracks the root scope and the scope currently being filled."""

    def __init__(self) -> None:
        self.root: Optional[Scope] = None
        self._current: Optional[Scope] = None

    def create_root(self) -> Scope:
        """Create the root scope and make it current; raises if one already exists."""
        if self.root is not None or self._current is not None:
            raise RuntimeError("a root scope already exists")
        root = Scope()
        self.root = root
        self._current = root
        return root

    def free_root(self) -> None:
        """Drop the root scope and every scope below it."""
        self.root = None
        self._current = None

    def new(self, flags: int = 0) -> Scope:
        """Open a child of the current scope and make it current."""
        if self.root is None or self._current is None:
            raise RuntimeError("no root scope to nest a new scope in")
        scope = Scope(flags=flags, parent=self._current)
        self._current = scope
        return scope

    def push(self, entity: Any, size: int) -> None:
        """Add ``entity`` to the current scope, growing its size by ``size`` bytes."""
        if self._current is None:
            raise RuntimeError("no current scope to push into")
        self._current.entities.append(entity)
        self._current.size += size

    def finish(self) -> None:
        """Close the current scope and return to its parent."""
        if self._current is None:
            raise RuntimeError("no current scope to finish")
        self._current = self._current.parent
        if self.root is not None and self._current is None:
            self.root = None

    def current(self) -> Optional[Scope]:
        """The scope currently being filled, or None."""
        return self._current

    def last_entity_stop_at(self, stop_scope: Optional[Scope]) -> Any:
        """Newest entity found walking up from the current scope, not entering ``stop_scope``."""
        scope = self._current
        while scope is not None and scope is not stop_scope:
            last = scope.last_entity()
            if last is not None:
                return last
            scope = scope.parent
        return None

    def last_entity(self) -> Any:
        """Newest entity found walking up from the current scope to the root."""
        return self.last_entity_stop_at(None)