"""
Tests for dependency declaration and injection.

Critical: depends_on must be idempotent and positional.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

import pytest
from pydantic import BaseModel

from graphula.core.dependencies import (
    HasDependencies,
    Only,
    dependency_values,
    depends_on,
    graft,
    only,
)
from graphula.core.errors import DependencyShapeError
from graphula.tests.fixtures import Dog, Owner, Veterinarian


def test_only_wraps_single_value():
    """only() is a 1-tuple that compares by its content."""
    assert only(3) == Only(3)
    assert only(3).from_only == 3
    assert only(1) < only(2)
    assert only(2).map(lambda x: x * 10) == Only(20)


def test_dependency_values_normalization():
    """Descriptors normalize to tuples."""
    assert dependency_values(None) == ()
    assert dependency_values(()) == ()
    assert dependency_values(only("a")) == ("a",)
    assert dependency_values((1, 2)) == (1, 2)
    assert dependency_values([1, 2]) == (1, 2)


def test_dependency_values_rejects_bare_value():
    """A bare value must be wrapped with only()."""
    with pytest.raises(DependencyShapeError):
        dependency_values(5)


def test_depends_on_grafts_positionally():
    """Tuple order follows dependency_fields order."""
    dog = Dog(name="rex", owner_id=-1, veterinarian_id=-1)

    linked = depends_on(dog, (7, 9))

    assert linked.owner_id == 7
    assert linked.veterinarian_id == 9
    assert linked.name == "rex"
    assert dog.owner_id == -1  # original untouched


def test_depends_on_single_dependency():
    owner = Owner(name="ann", veterinarian_id=1234)

    assert depends_on(owner, only(1)).veterinarian_id == 1


def test_depends_on_idempotent():
    """dependsOn . dependsOn = dependsOn"""
    dog = Dog(name="rex")
    deps = (3, 4)

    once = depends_on(dog, deps)
    twice = depends_on(once, deps)

    assert once == twice


def test_depends_on_arity_mismatch():
    """Descriptor length must match the declared fields."""
    with pytest.raises(DependencyShapeError):
        depends_on(Dog(name="rex"), only(1))
    with pytest.raises(DependencyShapeError):
        depends_on(Owner(name="ann"), (1, 2))


def test_types_without_dependencies():
    """Plain types accept only the empty descriptor."""
    vet = Veterinarian(name="dr", years=3)

    assert depends_on(vet, ()) is vet
    with pytest.raises(DependencyShapeError):
        depends_on(vet, only(1))


def test_explicit_depends_on_override():
    """Fixture authors may map dependencies by hand."""

    @dataclass(frozen=True)
    class Visit(HasDependencies):
        dog_name: str = ""
        vet_name: str = ""

        def depends_on(self, dependencies):
            dog, vet = dependencies
            return Visit(dog_name=dog.name, vet_name=vet.name)

    visit = depends_on(Visit(), (Dog(name="rex"), Veterinarian(name="dr", years=1)))

    assert visit == Visit(dog_name="rex", vet_name="dr")


def test_graft_pydantic_model():
    """Pydantic models are copied with model_copy."""

    class Cat(HasDependencies, BaseModel):
        dependency_fields: ClassVar[Tuple[str, ...]] = ("owner_id",)

        name: str
        owner_id: int = 0

    cat = Cat(name="tom")
    linked = depends_on(cat, only(5))

    assert linked.owner_id == 5
    assert cat.owner_id == 0
    assert depends_on(linked, only(5)) == linked


def test_graft_plain_object():
    """Plain objects are shallow-copied before assignment."""

    class Box:
        def __init__(self):
            self.item = None

    box = Box()
    filled = graft(box, {"item": 1})

    assert filled.item == 1
    assert box.item is None
    assert graft(box, {}) is box
