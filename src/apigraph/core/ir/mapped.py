"""
Mapped attributes: object attributes keyed by "attribute:element" names.

HTTP headers and parameters are declared with keys such as
``"token:Authorization"`` meaning the attribute ``token`` is carried by the
``Authorization`` header. A MappedAttribute keeps the attribute keyed by the
attribute name alone and remembers the element name separately, which makes
layering API, service and endpoint declarations a plain merge.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..paths import name_map
from .attributes import AttributeSpec


class MappedAttribute:
    """Merge-aware view over an object attribute using the name-map syntax."""

    def __init__(self) -> None:
        self.attribute = AttributeSpec.object()
        self._elements: dict[str, str] = {}  # attribute name -> element name

    @classmethod
    def from_attribute(cls, attribute: AttributeSpec | None) -> MappedAttribute:
        """
        Build a mapped attribute from an object attribute.

        ``None`` and non-object attributes produce an empty mapped attribute.
        Child attributes are copied so that merging never alters the source.
        """
        mapped = cls()
        if attribute is None or not attribute.is_object:
            return mapped
        required = {name_map(r)[0] for r in attribute.required}
        for key in attribute.field_names():
            att_name, element = name_map(key)
            child = attribute.field(key)
            mapped._set(att_name, element, child.model_copy(deep=True), att_name in required)
        return mapped

    def _set(self, att_name: str, element: str, spec: AttributeSpec, required: bool) -> None:
        self.attribute.add_field(att_name, spec)
        if required:
            if att_name not in self.attribute.required:
                self.attribute.required.append(att_name)
        elif att_name in self.attribute.required:
            self.attribute.required.remove(att_name)
        self._elements[att_name] = element

    def element_name(self, att_name: str) -> str:
        """HTTP element name for the given attribute (itself if unmapped)."""
        return self._elements.get(att_name, att_name)

    def attribute_name(self, element: str) -> str:
        """Attribute name for the given HTTP element (itself if unmapped)."""
        for att_name, el in self._elements.items():
            if el == element:
                return att_name
        return element

    def names(self) -> list[str]:
        return self.attribute.field_names()

    def element_names(self) -> list[str]:
        return [self.element_name(n) for n in self.names()]

    def items(self) -> Iterator[tuple[str, str, AttributeSpec]]:
        """Iterate over (attribute name, element name, attribute)."""
        for att_name in self.names():
            yield att_name, self.element_name(att_name), self.attribute.field(att_name)

    def get(self, att_name: str) -> AttributeSpec | None:
        return self.attribute.field(att_name)

    def is_required(self, att_name: str) -> bool:
        return self.attribute.is_required(att_name)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, att_name: object) -> bool:
        return att_name in self._elements

    def merge(self, other: MappedAttribute | None) -> None:
        """Add the attributes of other, overriding attributes with the same name."""
        if other is None:
            return
        for att_name, element, spec in other.items():
            self._set(att_name, element, spec.model_copy(deep=True), other.is_required(att_name))

    def remove(self, att_name: str) -> None:
        self.attribute.delete_field(att_name)
        self._elements.pop(att_name, None)

    def copy(self) -> MappedAttribute:
        dup = MappedAttribute()
        dup.merge(self)
        return dup

    def remap(self) -> AttributeSpec:
        """Return an object attribute keyed back with "attribute:element" names."""
        out = AttributeSpec.object()
        for att_name, element, spec in self.items():
            key = att_name if element == att_name else f"{att_name}:{element}"
            out.add_field(key, spec.model_copy(deep=True), required=self.is_required(att_name))
        return out

    def __repr__(self) -> str:
        pairs = ", ".join(f"{a}:{e}" if a != e else a for a, e, _ in self.items())
        return f"MappedAttribute({pairs})"
