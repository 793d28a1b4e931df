"""
Fixture types shared by the test suite.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, List, Optional, Tuple

from graphula.core.dependencies import HasDependencies
from graphula.runtime.frontend import Entity, Frontend

NAMES = ["rex", "fido", "max", "bella", "luna", "rocky", "daisy", "milo"]


@dataclass(frozen=True)
class Veterinarian:
    name: str
    years: int

    @classmethod
    def arbitrary(cls, rng: random.Random) -> "Veterinarian":
        return cls(name=f"dr-{rng.randint(0, 10**9)}", years=rng.randint(0, 40))


@dataclass(frozen=True)
class Owner(HasDependencies):
    dependency_fields: ClassVar[Tuple[str, ...]] = ("veterinarian_id",)

    name: str
    veterinarian_id: int = 0

    @classmethod
    def arbitrary(cls, rng: random.Random) -> "Owner":
        return cls(name=f"owner-{rng.randint(0, 10**9)}", veterinarian_id=rng.randint(1000, 9999))


@dataclass(frozen=True)
class Dog(HasDependencies):
    dependency_fields: ClassVar[Tuple[str, ...]] = ("owner_id", "veterinarian_id")

    name: str
    owner_id: int = 0
    veterinarian_id: int = 0

    @classmethod
    def arbitrary(cls, rng: random.Random) -> "Dog":
        return cls(name=rng.choice(NAMES), owner_id=-1, veterinarian_id=-1)


class ScriptedFrontend(Frontend):
    """
    Frontend rejecting the first `reject` inserts of reject_type.

    reject=None rejects that type forever. Everything else is accepted
    with sequential keys.
    """

    def __init__(self, reject_type: Optional[type] = None, reject: Optional[int] = 0) -> None:
        self.reject_type = reject_type
        self.reject = reject
        self.attempts: List[Any] = []
        self.entities: List[Entity] = []

    def insert(self, value: Any) -> Optional[Entity]:
        self.attempts.append(value)
        if isinstance(value, self.reject_type or ()):
            tried = sum(1 for v in self.attempts if isinstance(v, self.reject_type))
            if self.reject is None or tried <= self.reject:
                return None
        entity = Entity(key=len(self.entities) + 1, value=value)
        self.entities.append(entity)
        return entity


def counting(generate: Callable[[random.Random], Any], calls: List[Any]) -> Callable[[random.Random], Any]:
    """Wrap a generator so every produced value is recorded in calls."""

    def wrapper(rng: random.Random) -> Any:
        value = generate(rng)
        calls.append(value)
        return value

    return wrapper
