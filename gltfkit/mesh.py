"""Meshes, their primitives and morph targets over a parsed glTF document.

A document is the decoded glTF JSON object, a mapping such as the one
returned by ``json.load``. Accessors are handed back as their JSON objects.
Vertex attribute semantics are the glTF attribute names, e.g. ``"POSITION"``
or ``"TEXCOORD_0"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Mapping, TypeVar

__all__ = ["Bounds", "Mesh", "Primitive", "MorphTarget"]

T = TypeVar("T")

Document = Mapping[str, Any]
Accessor = Mapping[str, Any]

POSITIONS = "POSITION"
NORMALS = "NORMAL"
TANGENTS = "TANGENT"

#: Primitive mode used when a primitive does not name one (TRIANGLES).
DEFAULT_MODE = 4


def _accessor(document: Document, index: int) -> Accessor:
    return document["accessors"][index]


def _vec3(values: Any, what: str) -> tuple[float, float, float]:
    if values is None:
        raise ValueError(f"POSITION accessor has no {what} value")
    try:
        x, y, z = values
    except (TypeError, ValueError):
        raise ValueError(f"POSITION accessor {what} must have three components") from None
    return (float(x), float(y), float(z))


@dataclass(frozen=True)
class Bounds(Generic[T]):
    """The minimum and maximum values of an accessor."""

    min: T
    max: T


@dataclass(frozen=True)
class MorphTarget:
    """A single morph target of a mesh primitive."""

    positions: Accessor | None = None
    normals: Accessor | None = None
    tangents: Accessor | None = None


@dataclass(frozen=True)
class Mesh:
    """A set of primitives to be rendered."""

    document: Document = field(repr=False, hash=False)
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this mesh."""
        return self.document["meshes"][self.index]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def primitives(self) -> Iterator[Primitive]:
        """Visit the primitives of the mesh in order."""
        for index, _ in enumerate(self.json.get("primitives", ())):
            yield Primitive(self, index)

    def weights(self) -> list[float] | None:
        """Weights applied to the morph targets, if given."""
        weights = self.json.get("weights")
        return None if weights is None else list(weights)


@dataclass(frozen=True)
class Primitive:
    """Geometry to be rendered with a material."""

    mesh: Mesh
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this primitive."""
        return self.mesh.json["primitives"][self.index]

    @property
    def _document(self) -> Document:
        return self.mesh.document

    def bounding_box(self) -> Bounds[tuple[float, float, float]]:
        """Bounds of the ``POSITION`` vertex attribute.

        Raises ``KeyError`` when there is no ``POSITION`` attribute and
        ``ValueError`` when its accessor lacks three-component bounds.
        """
        accessor = _accessor(self._document, self.json["attributes"][POSITIONS])
        return Bounds(
            min=_vec3(accessor.get("min"), "min"),
            max=_vec3(accessor.get("max"), "max"),
        )

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def get(self, semantic: str) -> Accessor | None:
        """The accessor for the given attribute semantic, if present."""
        index = self.json.get("attributes", {}).get(semantic)
        return None if index is None else _accessor(self._document, index)

    def indices(self) -> Accessor | None:
        """The accessor holding the primitive indices, if present."""
        index = self.json.get("indices")
        return None if index is None else _accessor(self._document, index)

    def attributes(self) -> Iterator[tuple[str, Accessor]]:
        """Visit the vertex attributes as ``(semantic, accessor)`` pairs."""
        for semantic, index in self.json.get("attributes", {}).items():
            yield semantic, _accessor(self._document, index)

    def mode(self) -> int:
        """The type of primitives to render."""
        return self.json.get("mode", DEFAULT_MODE)

    def morph_targets(self) -> Iterator[MorphTarget]:
        """Visit the morph targets of the primitive."""
        document = self._document
        for target in self.json.get("targets") or ():
            def lookup(key: str) -> Accessor | None:
                index = target.get(key)
                return None if index is None else _accessor(document, index)

            yield MorphTarget(
                positions=lookup(POSITIONS),
                normals=lookup(NORMALS),
                tangents=lookup(TANGENTS),
            )