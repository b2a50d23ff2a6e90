"""
Document serializers.

A serializer is a pair of pure functions converting a document to and from
its durable text encoding. The store takes one at construction time so the
encoding can be swapped (or instrumented) without touching sync logic.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import yaml


def stringify(doc: Any) -> str:
    """Encode a document as indented JSON with sorted keys."""
    return json.dumps(doc, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def _yaml_dump(doc: Any) -> str:
    return yaml.safe_dump(doc, sort_keys=True, default_flow_style=False, allow_unicode=True)


@dataclass(frozen=True)
class Serializer:
    """Serialize/deserialize strategy.

    Attributes:
        serialize: Document -> text
        deserialize: text -> Document
        errors: Exception types raised by ``deserialize`` for invalid input.
            The store reports these as MalformedInputError.
        name: Label used in logs
    """

    serialize: Callable[[Any], str]
    deserialize: Callable[[str], Any]
    errors: tuple[type[Exception], ...] = field(default=(ValueError,))
    name: str = "custom"


JSON_SERIALIZER = Serializer(
    serialize=stringify,
    deserialize=json.loads,
    errors=(ValueError,),  # json.JSONDecodeError is a ValueError
    name="json",
)

YAML_SERIALIZER = Serializer(
    serialize=_yaml_dump,
    deserialize=yaml.safe_load,
    errors=(yaml.YAMLError,),
    name="yaml",
)
