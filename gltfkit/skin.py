"""Skins over a parsed glTF document.

A document is the decoded glTF JSON object, a mapping such as the one
returned by ``json.load``. Accessors are handed back as their JSON objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from .scene import Node

__all__ = ["Skin"]

Document = Mapping[str, Any]
Accessor = Mapping[str, Any]


@dataclass(frozen=True)
class Skin:
    """Joints and matrices defining a skin."""

    document: Document = field(repr=False, hash=False)
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this skin."""
        return self.document["skins"][self.index]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def inverse_bind_matrices(self) -> Accessor | None:
        """The accessor holding the 4x4 inverse-bind matrices.

        ``None`` means every matrix is the identity, i.e. the inverse-bind
        matrices were pre-applied.
        """
        index = self.json.get("inverseBindMatrices")
        return None if index is None else self.document["accessors"][index]

    def joints(self) -> Iterator[Node]:
        """Visit the skeleton nodes used as joints, in order.

        Raises ``KeyError`` when the skin has no ``joints`` list.
        """
        for index in self.json["joints"]:
            yield Node(self.document, index)

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def skeleton(self) -> Node | None:
        """The skeleton root node; ``None`` means the scene root."""
        index = self.json.get("skeleton")
        return None if index is None else Node(self.document, index)