"""Syntax tree nodes, data types and the parser's node stack."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, List, Optional

from clexkit.tokens import Position


class NodeType(IntEnum):
    """Kinds of syntax tree node."""

    EXPRESSION = 0
    EXPRESSION_PARENTHESES = 1
    NUMBER = 2
    IDENTIFIER = 3
    STRING = 4
    VARIABLE = 5
    VARIABLE_LIST = 6
    FUNCTION = 7
    BODY = 8
    STATEMENT_RETURN = 9
    STATEMENT_IF = 10
    STATEMENT_ELSE = 11
    STATEMENT_WHILE = 12
    STATEMENT_DO_WHILE = 13
    STATEMENT_FOR = 14
    STATEMENT_BREAK = 15
    STATEMENT_CONTINUE = 16
    STATEMENT_SWITCH = 17
    STATEMENT_CASE = 18
    STATEMENT_DEFAULT = 19
    STATEMENT_GOTO = 20
    UNARY = 21
    TENARY = 22
    LABEL = 23
    STRUCT = 24
    UNION = 25
    BRACKET = 26
    CAST = 27
    BLANK = 28


class NodeFlag(IntFlag):
    """Flags carried by a node."""

    NONE = 0
    INSIDE_EXPRESSION = 0b1


class DatatypeFlag(IntFlag):
    """Qualifiers and properties of a data type."""

    NONE = 0
    IS_SIGNED = 0b1
    IS_STATIC = 0b10
    IS_CONST = 0b100
    IS_POINTER = 0b1000
    IS_ARRAY = 0b10000
    IS_EXTERN = 0b100000
    IS_RESTRICT = 0b1000000
    IS_IGNORE_TYPE_CHECKING = 0b10000000
    IS_SECONDARY = 0b100000000
    IS_STRUCT_UNION_NO_NAME = 0b1000000000
    IS_LETERAL = 0b10000000000


class DatatypeKind(IntEnum):
    """Base kinds of data type."""

    VOID = 0
    CHAR = 1
    SHORT = 2
    INTEGER = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    STRUCT = 7
    UNION = 8
    UNKNOWN = 9


@dataclass
class Datatype:
    """A declared type such as ``unsigned long int*``."""

    kind: DatatypeKind = DatatypeKind.UNKNOWN
    type_str: Optional[str] = None
    flags: DatatypeFlag = DatatypeFlag.NONE
    secondary: Optional["Datatype"] = None
    size: int = 0
    pointer_depth: int = 0
    node: Optional["Node"] = None
    array_brackets: List[Any] = field(default_factory=list)


_EXPRESSIONABLE = frozenset(
    {
        NodeType.EXPRESSION,
        NodeType.EXPRESSION_PARENTHESES,
        NodeType.UNARY,
        NodeType.IDENTIFIER,
        NodeType.NUMBER,
        NodeType.STRING,
    }
)


@dataclass(eq=False)
class Node:
    """A syntax tree node; which fields are used depends on ``type``."""

    type: NodeType
    value: Any = None
    flags: NodeFlag = NodeFlag.NONE
    pos: Position = Position()
    owner: Optional["Node"] = None
    function: Optional["Node"] = None
    # expressions
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    op: Optional[str] = None
    # variables, structs and functions
    name: Optional[str] = None
    datatype: Optional[Datatype] = None
    val: Optional["Node"] = None
    body: Optional["Node"] = None
    args: List["Node"] = field(default_factory=list)
    # variable lists and bodies
    items: List["Node"] = field(default_factory=list)
    statements: List["Node"] = field(default_factory=list)
    size: int = 0
    # if statements and returns
    cond: Optional["Node"] = None
    next: Optional["Node"] = None
    exp: Optional["Node"] = None

    def is_expressionable(self) -> bool:
        """True if this node may appear inside an expression."""
        return self.type in _EXPRESSIONABLE


class NodeStack:
    """The parser's working stack of nodes and the list of tree roots."""

    def __init__(
        self,
        nodes: Optional[List[Node]] = None,
        roots: Optional[List[Node]] = None,
    ) -> None:
        self.nodes: List[Node] = nodes if nodes is not None else []
        self.roots: List[Node] = roots if roots is not None else []

    def __len__(self) -> int:
        return len(self.nodes)

    def push(self, node: Node) -> None:
        """Put ``node`` on top of the stack."""
        self.nodes.append(node)

    def peek(self) -> Node:
        """Top node; raises IndexError when empty."""
        if not self.nodes:
            raise IndexError("peek from an empty node stack")
        return self.nodes[-1]

    def peek_or_none(self) -> Optional[Node]:
        """Top node, or None when empty."""
        return self.nodes[-1] if self.nodes else None

    def pop(self) -> Node:
        """Remove and return the top node, dropping it from the roots if it heads them."""
        if not self.nodes:
            raise IndexError("pop from an empty node stack")
        last = self.nodes.pop()
        if self.roots and self.roots[-1] is last:
            self.roots.pop()
        return last

    def peek_expressionable_or_none(self) -> Optional[Node]:
        """Top node if it may appear inside an expression, else None."""
        last = self.peek_or_none()
        if last is not None and last.is_expressionable():
            return last
        return None

    def create(self, node: Node) -> Node:
        """Push a freshly built node and return it."""
        self.push(node)
        return node

    def make_exp(self, left: Node, right: Node, op: str) -> Node:
        """Build an expression node from two operands and push it."""
        if left is None or right is None:
            raise ValueError("an expression needs both operands")
        return self.create(Node(NodeType.EXPRESSION, left=left, right=right, op=op))