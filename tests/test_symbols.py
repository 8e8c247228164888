import pytest

from clexkit.nodes import Datatype, DatatypeKind, Node, NodeType
from clexkit.scope import ScopeManager
from clexkit.symbols import Symbol, SymbolResolver, SymbolType


def test_register_and_get_symbol():
    resolver = SymbolResolver()
    node = Node(NodeType.FUNCTION, name="main")
    sym = resolver.register_symbol("main", SymbolType.NODE, node)
    assert resolver.get_symbol("main") is sym
    assert sym.data is node
    assert resolver.get_symbol("other") is None


def test_duplicate_registration_returns_none():
    resolver = SymbolResolver()
    first = resolver.register_symbol("a", SymbolType.NODE, None)
    assert resolver.register_symbol("a", SymbolType.UNKNOWN, None) is None
    assert resolver.get_symbol("a") is first
    assert len(resolver.table) == 1


def test_new_table_hides_and_end_table_restores():
    resolver = SymbolResolver()
    outer = resolver.register_symbol("x", SymbolType.NODE, None)
    resolver.new_table()
    assert resolver.get_symbol("x") is None
    inner = resolver.register_symbol("x", SymbolType.NODE, None)
    assert resolver.get_symbol("x") is inner
    resolver.end_table()
    assert resolver.get_symbol("x") is outer


def test_end_table_without_saved_table_raises():
    resolver = SymbolResolver()
    with pytest.raises(RuntimeError):
        resolver.end_table()


def test_native_function_lookup():
    resolver = SymbolResolver()
    native = resolver.register_symbol("printf", SymbolType.NATIVE_FUNCTION, None)
    resolver.register_symbol("main", SymbolType.NODE, None)
    assert resolver.get_symbol_for_native_function("printf") is native
    assert resolver.get_symbol_for_native_function("main") is None
    assert resolver.get_symbol_for_native_function("missing") is None


def test_symbol_node_only_for_node_symbols():
    node = Node(NodeType.STRUCT, name="point")
    assert Symbol("point", SymbolType.NODE, node).node() is node
    assert Symbol("puts", SymbolType.NATIVE_FUNCTION, node).node() is None


def test_build_for_variable_registers_value_and_pushes_scope():
    scopes = ScopeManager()
    scopes.create_root()
    resolver = SymbolResolver(scopes)
    var = Node(
        NodeType.VARIABLE,
        name="a",
        datatype=Datatype(kind=DatatypeKind.INTEGER, size=4),
        val=Node(NodeType.NUMBER, value=17),
    )
    resolver.build_for_node(var)
    sym = resolver.get_symbol("a")
    assert sym.type is SymbolType.NODE
    assert sym.data == 17
    assert scopes.last_entity() is var
    assert scopes.current().size == 4


def test_build_for_function_and_struct():
    resolver = SymbolResolver()
    func = Node(NodeType.FUNCTION, name="main")
    struct = Node(NodeType.STRUCT, name="point")
    resolver.build_for_node(func)
    resolver.build_for_node(struct)
    assert resolver.get_symbol("main").node() is func
    assert resolver.get_symbol("point").node() is struct


def test_build_for_union_and_other_nodes_registers_nothing():
    resolver = SymbolResolver()
    resolver.build_for_node(Node(NodeType.UNION, name="u"))
    resolver.build_for_node(Node(NodeType.IDENTIFIER, value="b", name="b"))
    assert resolver.table == []


def test_build_for_variable_without_scope_raises():
    scopes = ScopeManager()
    resolver = SymbolResolver(scopes)
    with pytest.raises(RuntimeError):
        resolver.build_for_node(Node(NodeType.VARIABLE, name="a"))