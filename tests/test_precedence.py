import pytest

from clexkit.precedence import (
    OP_PRECEDENCE,
    Associativity,
    associativity_of,
    precedence_of,
)


def test_multiplication_binds_tighter_than_addition():
    assert precedence_of("*") < precedence_of("+")
    assert precedence_of("/") == precedence_of("%")


def test_postfix_operators_are_tightest():
    assert precedence_of("++") == 0
    assert precedence_of("->") == precedence_of("(")


def test_comma_is_loosest():
    assert precedence_of(",") == len(OP_PRECEDENCE) - 1


def test_ordering_chain():
    chain = ["+", "<<", "<", "==", "&", "^", "|", "&&", "||", "?", "=", ","]
    levels = [precedence_of(op) for op in chain]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


@pytest.mark.parametrize("op", ["=", "+=", "<<=", "|=", "?", ":"])
def test_right_to_left(op):
    assert associativity_of(op) is Associativity.RIGHT_TO_LEFT


@pytest.mark.parametrize("op", ["+", "*", "==", "&&", ",", "."])
def test_left_to_right(op):
    assert associativity_of(op) is Associativity.LEFT_TO_RIGHT


def test_every_group_operator_resolves_to_its_group():
    for index, group in enumerate(OP_PRECEDENCE):
        for op in group.operators:
            assert precedence_of(op) == index
            assert associativity_of(op) is group.associativity


def test_unknown_operator_raises():
    with pytest.raises(ValueError):
        precedence_of("@@")
    with pytest.raises(ValueError):
        associativity_of("~~")