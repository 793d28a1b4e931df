"""
JSON codec for graph log lines.

Each generated node is stored as one canonical JSON line. Encoding goes
through pydantic's TypeAdapter, so dataclasses, pydantic models, TypedDicts
and plain containers all work without per-type code.
"""

import json
from typing import Any, Dict

from pydantic import TypeAdapter, ValidationError


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic single-line JSON.

    Sorted keys, no whitespace, non-ASCII kept as is. Never contains a
    newline, so it is safe as one log line.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class JsonCodec:
    """
    Encode nodes to log lines and decode them back.

    Usage:
        codec = JsonCodec()
        line = codec.encode(dog)
        same_dog = codec.decode(Dog, line)
    """

    def __init__(self) -> None:
        self._adapters: Dict[Any, TypeAdapter] = {}

    def adapter(self, node_type: Any) -> TypeAdapter:
        adapter = self._adapters.get(node_type)
        if adapter is None:
            adapter = TypeAdapter(node_type)
            self._adapters[node_type] = adapter
        return adapter

    def encode(self, value: Any) -> str:
        """Encode value as one canonical JSON line (without newline)."""
        data = self.adapter(type(value)).dump_python(value, mode="json")
        return canonical_json_str(data)

    def decode(self, node_type: Any, line: str) -> Any:
        """
        Decode one line as node_type.

        Raises:
            ValueError: If line is not valid JSON for node_type
        """
        try:
            return self.adapter(node_type).validate_json(line)
        except ValidationError as ex:
            raise ValueError(str(ex)) from ex
