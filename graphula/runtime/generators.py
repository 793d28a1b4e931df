"""
Random node generation for live runs.

A type gets its generator either from the registry or from an
``arbitrary(rng)`` classmethod:

    @dataclass
    class Dog:
        name: str

        @classmethod
        def arbitrary(cls, rng: random.Random) -> "Dog":
            return cls(name=rng.choice(["rex", "fido", "max"]))

    @register_arbitrary(Cat)
    def arbitrary_cat(rng):
        return Cat(lives=rng.randint(1, 9))
"""

import random
from typing import Any, Callable, Dict, Optional

from ..core.errors import ArbitraryError

# Generator signature: (rng) -> value
Arbitrary = Callable[[random.Random], Any]

_DEFAULT_REGISTRY: Dict[type, Arbitrary] = {}


def register_arbitrary(node_type: type, registry: Optional[Dict[type, Arbitrary]] = None):
    """Decorator registering fn as the generator for node_type."""
    target = _DEFAULT_REGISTRY if registry is None else registry

    def decorator(fn: Arbitrary) -> Arbitrary:
        target[node_type] = fn
        return fn

    return decorator


class ArbitraryGenerator:
    """
    Random value source keyed by requested type.

    Uses a private Random instance; pass a seed for repeatable live runs.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        registry: Optional[Dict[type, Arbitrary]] = None,
    ) -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        self._registry: Dict[type, Arbitrary] = dict(_DEFAULT_REGISTRY)
        if registry:
            self._registry.update(registry)

    def register(self, node_type: type, fn: Arbitrary) -> None:
        self._registry[node_type] = fn

    def resolve(self, node_type: type) -> Arbitrary:
        """
        Find the generator for node_type.

        Raises:
            ArbitraryError: If neither a registered generator nor an
                arbitrary classmethod exists
        """
        fn = self._registry.get(node_type)
        if fn is not None:
            return fn
        method = getattr(node_type, "arbitrary", None)
        if callable(method):
            return method
        raise ArbitraryError(
            f"No arbitrary generator for {getattr(node_type, '__name__', node_type)}"
        )

    def generate(self, node_type: type) -> Any:
        return self.resolve(node_type)(self._rng)
