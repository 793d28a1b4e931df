"""
Persistence frontends.

A frontend receives every Insert and returns the stored entity, or None to
reject the value (typically a uniqueness violation). Rejected nodes are
regenerated by the graph. Runners also accept a plain callable with the
same contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Entity(Generic[A]):
    """
    A persisted node.

    Fields:
        key: Identifier assigned by the frontend
        value: Stored value
    """
    key: int
    value: A


class Frontend(ABC):
    """Persistence side of a graph run."""

    @abstractmethod
    def insert(self, value: Any) -> Optional[Any]:
        """
        Persist value.

        Returns:
            The stored entity, or None when value is rejected
        """
        ...

    def __call__(self, value: Any) -> Optional[Any]:
        return self.insert(value)


class IdentityFrontend(Frontend):
    """Accepts every value and returns it unchanged."""

    def insert(self, value: Any) -> Optional[Any]:
        return value


class InMemoryFrontend(Frontend):
    """
    In-memory store with per-type uniqueness.

    unique_keys maps a node type to a function extracting its unique key.
    A value whose key is already stored for that type is rejected.

    Usage:
        frontend = InMemoryFrontend(unique_keys={Dog: lambda d: d.name})
    """

    def __init__(self, unique_keys: Optional[Dict[type, Callable[[Any], Any]]] = None) -> None:
        self.unique_keys = dict(unique_keys or {})
        self.entities: List[Entity] = []
        self.rejected: List[Any] = []
        self._seen: Dict[Tuple[type, Any], int] = {}

    def insert(self, value: Any) -> Optional[Entity]:
        key_fn = self.unique_keys.get(type(value))
        unique = None
        if key_fn is not None:
            unique = (type(value), key_fn(value))
            if unique in self._seen:
                self.rejected.append(value)
                return None

        entity = Entity(key=len(self.entities) + 1, value=value)
        self.entities.append(entity)
        if unique is not None:
            self._seen[unique] = entity.key
        return entity

    def of_type(self, node_type: type) -> List[Entity]:
        return [e for e in self.entities if isinstance(e.value, node_type)]
