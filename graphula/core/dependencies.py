"""
Dependency declaration and injection for fixture types.

A fixture type lists the fields that hold references to other, already
persisted nodes. Dependencies are passed as a tuple ordered like those
fields, or wrapped in Only when there is a single one.

Usage:
    @dataclass(frozen=True)
    class Owner(HasDependencies):
        dependency_fields: ClassVar[Tuple[str, ...]] = ("veterinarian_id",)

        name: str
        veterinarian_id: int = 0

    owner = depends_on(owner, only(vet.key))
"""

import copy
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Tuple, TypeVar

from .errors import DependencyShapeError

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, order=True)
class Only(Generic[A]):
    """
    Single dependency wrapper.

    Plays the role of a 1-tuple so a lone dependency is not confused with
    a value that happens to be a tuple.
    """
    from_only: A

    def map(self, fn: Callable[[A], B]) -> "Only[B]":
        return Only(fn(self.from_only))


def only(value: A) -> Only[A]:
    return Only(value)


def dependency_values(dependencies: Any) -> Tuple[Any, ...]:
    """
    Normalize a dependency descriptor into a tuple.

    Accepts None or () for no dependencies, an Only, or a tuple/list.

    Raises:
        DependencyShapeError: If the descriptor is none of the above
    """
    if dependencies is None:
        return ()
    if isinstance(dependencies, Only):
        return (dependencies.from_only,)
    if isinstance(dependencies, (tuple, list)):
        return tuple(dependencies)
    raise DependencyShapeError(
        f"Dependencies must be a tuple or Only, got {type(dependencies).__name__}; "
        "wrap a single dependency with only()"
    )


def graft(value: A, updates: dict) -> A:
    """
    Return a copy of value with the given fields replaced.

    Dataclasses go through dataclasses.replace, pydantic models through
    model_copy; anything else is shallow-copied and assigned.
    """
    if not updates:
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.replace(value, **updates)
    model_copy = getattr(value, "model_copy", None)
    if callable(model_copy):
        return model_copy(update=updates)
    new_value = copy.copy(value)
    for name, field_value in updates.items():
        setattr(new_value, name, field_value)
    return new_value


class HasDependencies:
    """
    Mixin for fixture types that reference other nodes.

    dependency_fields names the fields filled from the dependency tuple, in
    tuple order. The default depends_on grafts them positionally; override
    it for a hand-written mapping. Either way depends_on must be idempotent:

        x.depends_on(d).depends_on(d) == x.depends_on(d)
    """

    dependency_fields: ClassVar[Tuple[str, ...]] = ()

    def depends_on(self, dependencies: Any):
        fields = type(self).dependency_fields
        values = dependency_values(dependencies)
        if len(values) != len(fields):
            raise DependencyShapeError(
                f"{type(self).__name__} declares {len(fields)} dependencies "
                f"{fields!r}, got {len(values)}"
            )
        return graft(self, dict(zip(fields, values)))


def declared_dependencies(node_type: type) -> Tuple[str, ...]:
    """Dependency fields declared by node_type (empty when it has none)."""
    if isinstance(node_type, type) and issubclass(node_type, HasDependencies):
        return tuple(node_type.dependency_fields)
    return ()


def depends_on(value: A, dependencies: Any) -> A:
    """
    Inject dependencies into value.

    Values that do not implement HasDependencies have no dependencies and
    only accept an empty descriptor.

    Raises:
        DependencyShapeError: If the descriptor does not fit the value's type
    """
    if isinstance(value, HasDependencies):
        return value.depends_on(dependencies)
    if dependency_values(dependencies):
        raise DependencyShapeError(
            f"{type(value).__name__} does not declare dependencies"
        )
    return value
