"""
apigraph design IR types.

Transport agnostic building blocks consumed by the HTTP layer: primitive and
object types, attributes, mapped attributes, and the API/service/method
design. All types are re-exported from this package.
"""

# Attributes
from .attributes import (
    AttributeSpec,
    ObjectType,
    Primitive,
)

# Design
from .design import (
    APIDesign,
    DesignRoot,
    DocsSpec,
    MethodDesign,
    ServerSpec,
    ServiceDesign,
)

# Mapped attributes
from .mapped import MappedAttribute

__all__ = [
    "APIDesign",
    "AttributeSpec",
    "DesignRoot",
    "DocsSpec",
    "MappedAttribute",
    "MethodDesign",
    "ObjectType",
    "Primitive",
    "ServerSpec",
    "ServiceDesign",
]
