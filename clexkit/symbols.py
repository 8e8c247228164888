"""Symbol tables mapping declared names to the nodes that define them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Optional

from clexkit.nodes import Node, NodeType
from clexkit.scope import ScopeManager


class SymbolType(IntEnum):
    """What a symbol refers to."""

    NODE = 0
    NATIVE_FUNCTION = 1
    UNKNOWN = 2


@dataclass(eq=False)
class Symbol:
    """A named entry in a symbol table."""

    name: str
    type: SymbolType
    data: Any = None

    def node(self) -> Optional[Node]:
        """The node this symbol stands for, or None if it is not a node symbol."""
        if self.type is not SymbolType.NODE:
            return None
        return self.data


class SymbolResolver:
    """A stack of symbol tables, the newest of which is active."""

    def __init__(self, scopes: Optional[ScopeManager] = None) -> None:
        if scopes is None:
            scopes = ScopeManager()
            scopes.create_root()
        self.scopes = scopes
        self.table: List[Symbol] = []
        self.tables: List[List[Symbol]] = []

    def new_table(self) -> None:
        """Save the active table and start an empty one."""
        self.tables.append(self.table)
        self.table = []

    def end_table(self) -> None:
        """Discard the active table and restore the one saved before it."""
        if not self.tables:
            raise RuntimeError("no saved symbol table to return to")
        self.table = self.tables.pop()

    def get_symbol(self, name: str) -> Optional[Symbol]:
        """The symbol called ``name`` in the active table, or None."""
        return next((sym for sym in self.table if sym.name == name), None)

    def get_symbol_for_native_function(self, name: str) -> Optional[Symbol]:
        """The symbol called ``name`` if it is a native function, else None."""
        sym = self.get_symbol(name)
        if sym is None or sym.type is not SymbolType.NATIVE_FUNCTION:
            return None
        return sym

    def register_symbol(
        self, name: str, symbol_type: SymbolType, data: Any
    ) -> Optional[Symbol]:
        """Add a symbol to the active table; None if the name is already taken there."""
        if self.get_symbol(name) is not None:
            return None
        sym = Symbol(name, SymbolType(symbol_type), data)
        self.table.append(sym)
        return sym

    def _build_for_variable(self, node: Node) -> None:
        data = node.val.value if node.val is not None else None
        self.register_symbol(node.name, SymbolType.NODE, data)
        size = node.datatype.size if node.datatype is not None else 0
        self.scopes.push(node, size)

    def build_for_node(self, node: Node) -> None:
        """Register the symbol a declaration node introduces; other nodes are ignored."""
        if node.type is NodeType.VARIABLE:
            self._build_for_variable(node)
        elif node.type in (NodeType.FUNCTION, NodeType.STRUCT):
            self.register_symbol(node.name, SymbolType.NODE, node)
        # Unions and all other node types introduce no symbols.