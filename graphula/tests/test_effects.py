"""
Tests for effect sequencing.

Programs are stepped by hand here: no backend or frontend is involved, so
these tests pin down exactly which effects a graph yields and in what order.
"""

import pytest

from graphula.core.effects import GenerateNode, Insert, LogNode, Throw
from graphula.core.errors import DependencyShapeError, MaxAttemptsExceededError
from graphula.core.graph import node, node_edit, node_edit_with, node_with
from graphula.tests.fixtures import Dog, Owner, Veterinarian


def test_node_effect_sequence():
    """node yields generate, log, insert and returns the entity."""
    program = node(Veterinarian)
    vet = Veterinarian(name="dr", years=2)

    assert next(program) == GenerateNode(Veterinarian)
    assert program.send(vet) == LogNode(vet)
    assert program.send(None) == Insert(vet)
    with pytest.raises(StopIteration) as stop:
        program.send("entity-1")

    assert stop.value.value == "entity-1"


def test_rejected_insert_regenerates():
    """A None insert result restarts from generation."""
    program = node(Veterinarian)
    first = Veterinarian(name="a", years=1)
    second = Veterinarian(name="b", years=1)

    assert next(program) == GenerateNode(Veterinarian)
    program.send(first)
    assert program.send(None) == Insert(first)
    assert program.send(None) == GenerateNode(Veterinarian)
    program.send(second)
    assert program.send(None) == Insert(second)


def test_exhausted_attempts_yield_throw():
    """After max_attempts rejections the program yields Throw."""
    program = node(Veterinarian, max_attempts=2)
    vet = Veterinarian(name="a", years=1)

    effect = next(program)
    generations = 0
    while not isinstance(effect, Throw):
        if isinstance(effect, GenerateNode):
            generations += 1
            effect = program.send(vet)
        else:
            effect = program.send(None)

    assert generations == 2
    assert effect.error == MaxAttemptsExceededError(Veterinarian, 2)


def test_zero_attempts_throws_immediately():
    program = node(Veterinarian, max_attempts=0)

    effect = next(program)

    assert isinstance(effect, Throw)
    assert isinstance(effect.error, MaxAttemptsExceededError)


def test_edit_is_logged_before_dependencies():
    """The log holds the edited value; dependencies win over edits."""
    program = node_edit_with(Dog, (5, 6), lambda d: Dog(name="fido", owner_id=99))
    raw = Dog(name="rex", owner_id=-1, veterinarian_id=-1)

    next(program)
    logged = program.send(raw)
    inserted = program.send(None)

    assert logged == LogNode(Dog(name="fido", owner_id=99, veterinarian_id=0))
    assert inserted == Insert(Dog(name="fido", owner_id=5, veterinarian_id=6))


def test_node_with_links_dependencies():
    program = node_with(Owner, (42,))
    owner = Owner(name="ann", veterinarian_id=1)

    next(program)
    program.send(owner)

    assert program.send(None) == Insert(Owner(name="ann", veterinarian_id=42))


def test_node_edit_applies_edit():
    program = node_edit(Veterinarian, lambda v: Veterinarian(name=v.name, years=0))

    next(program)

    assert program.send(Veterinarian(name="dr", years=9)) == LogNode(Veterinarian(name="dr", years=0))


def test_node_rejects_types_with_dependencies():
    """node/node_edit are for dependency-free types only."""
    with pytest.raises(DependencyShapeError):
        next(node(Owner))
    with pytest.raises(DependencyShapeError):
        next(node_edit(Dog, lambda d: d))
