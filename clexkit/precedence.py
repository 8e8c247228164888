"""Operator precedence groups for expression parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Associativity(Enum):
    """Direction in which operators of equal precedence bind."""

    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


@dataclass(frozen=True)
class PrecedenceGroup:
    """Operators sharing one precedence level."""

    operators: Tuple[str, ...]
    associativity: Associativity


_L = Associativity.LEFT_TO_RIGHT
_R = Associativity.RIGHT_TO_LEFT

# Ordered from the tightest binding group to the loosest.
OP_PRECEDENCE: Tuple[PrecedenceGroup, ...] = (
    PrecedenceGroup(("++", "--", "()", "[]", "(", "[", ".", "->"), _L),
    PrecedenceGroup(("*", "/", "%"), _L),
    PrecedenceGroup(("+", "-"), _L),
    PrecedenceGroup(("<<", ">>"), _L),
    PrecedenceGroup(("<", "<=", ">", ">="), _L),
    PrecedenceGroup(("==", "!="), _L),
    PrecedenceGroup(("&",), _L),
    PrecedenceGroup(("^",), _L),
    PrecedenceGroup(("|",), _L),
    PrecedenceGroup(("&&",), _L),
    PrecedenceGroup(("||",), _L),
    PrecedenceGroup(("?", ":"), _R),
    PrecedenceGroup(("=", "+=", "-=", "*=", "/=", "%=", "<<=", ">>=", "&=", "^=", "|="), _R),
    PrecedenceGroup((",",), _L),
)

_INDEX = {op: i for i, group in enumerate(OP_PRECEDENCE) for op in group.operators}


def precedence_of(op: str) -> int:
    """Index of the group holding ``op``; lower binds tighter."""
    try:
        return _INDEX[op]
    except KeyError:
        raise ValueError(f"unknown operator {op!r}") from None


def associativity_of(op: str) -> Associativity:
    """Associativity of the group holding ``op``."""
    return OP_PRECEDENCE[precedence_of(op)].associativity