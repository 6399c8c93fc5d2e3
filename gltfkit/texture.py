"""Textures, samplers and texture references over a parsed glTF document.

A document is the decoded glTF JSON object, a mapping such as the one
returned by ``json.load``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

__all__ = [
    "MagFilter",
    "MinFilter",
    "WrappingMode",
    "Sampler",
    "Texture",
    "Info",
    "TextureTransform",
]

Document = Mapping[str, Any]

_EXTENSION_TEXTURE_TRANSFORM = "KHR_texture_transform"


class MagFilter(IntEnum):
    """Magnification filter."""

    NEAREST = 9728
    LINEAR = 9729


class MinFilter(IntEnum):
    """Minification filter."""

    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrappingMode(IntEnum):
    """Texture co-ordinate wrapping mode."""

    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


@dataclass(frozen=True)
class Sampler:
    """Texture sampler properties for filtering and wrapping modes.

    ``index`` is ``None`` for the default sampler.
    """

    document: Document = field(repr=False, hash=False)
    index: int | None = None

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this sampler (empty when default)."""
        if self.index is None:
            return {}
        return self.document["samplers"][self.index]

    def mag_filter(self) -> MagFilter | None:
        """Magnification filter, if given."""
        value = self.json.get("magFilter")
        return None if value is None else MagFilter(value)

    def min_filter(self) -> MinFilter | None:
        """Minification filter, if given."""
        value = self.json.get("minFilter")
        return None if value is None else MinFilter(value)

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def wrap_s(self) -> WrappingMode:
        """``s`` wrapping mode."""
        return WrappingMode(self.json.get("wrapS", WrappingMode.REPEAT))

    def wrap_t(self) -> WrappingMode:
        """``t`` wrapping mode."""
        return WrappingMode(self.json.get("wrapT", WrappingMode.REPEAT))

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


@dataclass(frozen=True)
class Texture:
    """A texture and its sampler."""

    document: Document = field(repr=False, hash=False)
    index: int

    @property
    def json(self) -> Mapping[str, Any]:
        """The JSON object describing this texture."""
        return self.document["textures"][self.index]

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")

    def sampler(self) -> Sampler:
        """The sampler used by this texture, or the default sampler."""
        return Sampler(self.document, self.json.get("sampler"))

    def source_index(self) -> int:
        """Index of the image used by this texture.

        Raises ``KeyError`` when the texture names no source.
        """
        return self.json["source"]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


@dataclass(frozen=True)
class TextureTransform:
    """Offset, rotation and scale applied to texture co-ordinates."""

    json: Mapping[str, Any] = field(hash=False)

    def offset(self) -> list[float]:
        """UV origin offset as a factor of the texture dimensions."""
        return [float(v) for v in self.json.get("offset", (0.0, 0.0))]

    def rotation(self) -> float:
        """Counter-clockwise UV rotation in radians."""
        return float(self.json.get("rotation", 0.0))

    def scale(self) -> list[float]:
        """Scale factor applied to the UV components."""
        return [float(v) for v in self.json.get("scale", (1.0, 1.0))]

    def tex_coord(self) -> int | None:
        """Overriding ``TEXCOORD`` set index, if given."""
        return self.json.get("texCoord")

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


@dataclass(frozen=True)
class Info:
    """A reference to a texture from a material."""

    document: Document = field(repr=False, hash=False)
    json: Mapping[str, Any] = field(hash=False)

    def tex_coord(self) -> int:
        """The set index of the texture's ``TEXCOORD`` attribute."""
        return self.json.get("texCoord", 0)

    def texture(self) -> Texture:
        """The referenced texture."""
        return Texture(self.document, self.json["index"])

    def texture_transform(self) -> TextureTransform | None:
        """The ``KHR_texture_transform`` data, if present."""
        extensions = self.json.get("extensions") or {}
        transform = extensions.get(_EXTENSION_TEXTURE_TRANSFORM)
        return None if transform is None else TextureTransform(transform)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")