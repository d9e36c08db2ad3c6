"""
Attribute types for the apigraph design IR.

This module contains the transport agnostic type system used to describe
headers, parameters and payloads: primitive types, object types and the
attribute specification tying them to documentation and validations.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Primitive(str, Enum):
    """Primitive data types."""

    BOOLEAN = "boolean"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BYTES = "bytes"
    ANY = "any"


class ObjectType(BaseModel):
    """
    Object data type: an ordered set of named attributes.

    Keys may use the "attribute:element" notation when the object holds
    headers or parameters (see MappedAttribute).
    """

    fields: dict[str, AttributeSpec] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=False)


class AttributeSpec(BaseModel):
    """
    Specification of a single attribute.

    Attributes:
        type: Primitive type or object type
        description: Optional documentation
        required: Names of required child attributes (object types only)
        default: Optional default value
        metadata: Generator specific key/values
    """

    type: Primitive | ObjectType = Primitive.STRING
    description: str | None = None
    required: list[str] = Field(default_factory=list)
    default: Any = None
    metadata: dict[str, list[str]] = Field(default_factory=dict)

    # Mutable: the DSL adds fields incrementally
    model_config = ConfigDict(frozen=False)

    @classmethod
    def object(cls, description: str | None = None) -> AttributeSpec:
        """Create an empty object attribute."""
        return cls(type=ObjectType(), description=description)

    @property
    def is_object(self) -> bool:
        return isinstance(self.type, ObjectType)

    def _object_type(self) -> ObjectType:
        if not isinstance(self.type, ObjectType):
            raise TypeError(f"attribute of type '{self.type.value}' has no fields")
        return self.type

    def add_field(self, name: str, attribute: AttributeSpec, required: bool = False) -> None:
        """Add or replace a child attribute."""
        self._object_type().fields[name] = attribute
        if required and name not in self.required:
            self.required.append(name)

    def field(self, name: str) -> AttributeSpec | None:
        if not isinstance(self.type, ObjectType):
            return None
        return self.type.fields.get(name)

    def field_names(self) -> list[str]:
        if not isinstance(self.type, ObjectType):
            return []
        return list(self.type.fields)

    def delete_field(self, name: str) -> None:
        if isinstance(self.type, ObjectType):
            self.type.fields.pop(name, None)
        if name in self.required:
            self.required.remove(name)

    def is_required(self, name: str) -> bool:
        return name in self.required


ObjectType.model_rebuild()
AttributeSpec.model_rebuild()
