#!/usr/bin/env python3

from dataclasses import dataclass, field

PRIMITIVE_KINDS = ("null", "boolean", "integer", "number", "string")


def get_json_type(value):
    """Maps a parsed JSON value to its JSON kind."""
    if isinstance(value, str):
        return "string"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, int):
        return "integer"
    elif isinstance(value, float):
        return "number"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    elif value is None:
        return "null"
    else:
        # Fallback for unexpected types
        return "unknown"


@dataclass(frozen=True)
class Primitive:
    """A scalar type. A kind of "null" stands for the language's any type."""
    kind: str


@dataclass(frozen=True)
class ArrayOf:
    """A collection type; optional means a null was seen among the elements."""
    element: object
    optional: bool = False


@dataclass(frozen=True)
class Named:
    """Reference to a record defined elsewhere in the output."""
    name: str


@dataclass(frozen=True)
class Field:
    key: str
    type: object


@dataclass
class RecordDefinition:
    name: str
    fields: list = field(default_factory=list)

    def add_field(self, key, inferred):
        self.fields.append(Field(key, inferred))

    @property
    def keys(self):
        return [f.key for f in self.fields]
