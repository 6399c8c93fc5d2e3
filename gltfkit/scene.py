"""Nodes, scenes and node transforms over a parsed glTF document.

A document is the decoded glTF JSON object, a mapping such as the one
returned by ``json.load``. Matrices are column-major lists of four columns.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping, Sequence, Union

from .math import Matrix3, Matrix4, Quaternion, Vector3
from .mesh import Mesh

if TYPE_CHECKING:
    from .skin import Skin

__all__ = [
    "MatrixTransform",
    "DecomposedTransform",
    "Transform",
    "Node",
    "Scene",
]

Document = Mapping[str, Any]

Decomposition = tuple[list[float], list[float], list[float]]

DEFAULT_TRANSLATION = (0.0, 0.0, 0.0)
DEFAULT_ROTATION = (0.0, 0.0, 0.0, 1.0)
DEFAULT_SCALE = (1.0, 1.0, 1.0)


def _floats(values: Iterable[float], count: int, what: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{what} must have {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class MatrixTransform:
    """A transform given as a 4x4 column-major matrix."""

    columns: tuple[tuple[float, float, float, float], ...]

    def __post_init__(self) -> None:
        columns = tuple(_floats(col, 4, "matrix column") for col in self.columns)
        if len(columns) != 4:
            raise ValueError(f"matrix must have 4 columns, got {len(columns)}")
        object.__setattr__(self, "columns", columns)

    def matrix(self) -> list[list[float]]:
        """The matrix as four columns of four values."""
        return [list(col) for col in self.columns]

    def decomposed(self) -> Decomposition:
        """Extract ``(translation, rotation, scale)`` from the matrix.

        The rotation is an ``[x, y, z, w]`` quaternion. A negative
        determinant is folded into the z scale.
        """
        m = self.columns
        translation = [m[3][0], m[3][1], m[3][2]]
        i = Matrix3.from_columns(
            m[0][0], m[0][1], m[0][2],
            m[1][0], m[1][1], m[1][2],
            m[2][0], m[2][1], m[2][2],
        )
        sx = i.x.magnitude()
        sy = i.y.magnitude()
        sz = math.copysign(1.0, i.determinant()) * i.z.magnitude()
        rotation_matrix = Matrix3(i.x * (1.0 / sx), i.y * (1.0 / sy), i.z * (1.0 / sz))
        r = Quaternion.from_matrix(rotation_matrix)
        return translation, [r.v.x, r.v.y, r.v.z, r.s], [sx, sy, sz]


@dataclass(frozen=True)
class DecomposedTransform:
    """A transform given as translation, rotation and scale."""

    translation: tuple[float, float, float] = DEFAULT_TRANSLATION
    rotation: tuple[float, float, float, float] = DEFAULT_ROTATION
    scale: tuple[float, float, float] = DEFAULT_SCALE

    def __post_init__(self) -> None:
        object.__setattr__(self, "translation", _floats(self.translation, 3, "translation"))
        object.__setattr__(self, "rotation", _floats(self.rotation, 4, "rotation"))
        object.__setattr__(self, "scale", _floats(self.scale, 3, "scale"))

    def matrix(self) -> list[list[float]]:
        """The matrix ``translation @ rotation @ scale``."""
        tx, ty, tz = self.translation
        rx, ry, rz, rw = self.rotation
        sx, sy, sz = self.scale
        t = Matrix4.from_translation(Vector3(tx, ty, tz))
        r = Matrix4.from_quaternion(Quaternion.from_parts(rw, rx, ry, rz))
        s = Matrix4.from_nonuniform_scale(sx, sy, sz)
        return (t @ r @ s).as_array()

    def decomposed(self) -> Decomposition:
        """The ``(translation, rotation, scale)`` components."""
        return list(self.translation), list(self.rotation), list(self.scale)


Transform = Union[MatrixTransform, DecomposedTransform]


@dataclass(frozen=True)
class Node:
    """A node in the node hierarchy."""

    document: Document = field(repr=False, hash=False)
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this node."""
        return self.document["nodes"][self.index]

    def children(self) -> Iterator[Node]:
        """Visit the node's children in order."""
        for index in self.json.get("children") or ():
            yield Node(self.document, index)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def mesh(self) -> Mesh | None:
        """The mesh referenced by this node, if any."""
        index = self.json.get("mesh")
        return None if index is None else Mesh(self.document, index)

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def transform(self) -> Transform:
        """The node's transform, as a matrix when one is given."""
        json = self.json
        values: Sequence[float] | None = json.get("matrix")
        if values is not None:
            values = _floats(values, 16, "matrix")
            return MatrixTransform(tuple(tuple(values[c:c + 4]) for c in range(0, 16, 4)))
        return DecomposedTransform(
            translation=json.get("translation", DEFAULT_TRANSLATION),
            rotation=json.get("rotation", DEFAULT_ROTATION),
            scale=json.get("scale", DEFAULT_SCALE),
        )

    def skin(self) -> Skin | None:
        """The skin referenced by this node, if any."""
        from .skin import Skin

        index = self.json.get("skin")
        return None if index is None else Skin(self.document, index)

    def weights(self) -> list[float] | None:
        """Weights of the instantiated morph target, if given."""
        weights = self.json.get("weights")
        return None if weights is None else list(weights)


@dataclass(frozen=True)
class Scene:
    """The root nodes of a scene."""

    document: Document = field(repr=False, hash=False)
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this scene."""
        return self.document["scenes"][self.index]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def nodes(self) -> Iterator[Node]:
        """Visit each root node of the scene."""
        for index in self.json.get("nodes") or ():
            yield Node(self.document, index)