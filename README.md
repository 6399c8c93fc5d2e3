# gltfkit

Read-only views over a glTF 2.0 document that has already been decoded from
JSON, plus the small amount of linear algebra needed to work with node
transforms. The package has no runtime dependencies.

A *document* here is the decoded glTF JSON object, a mapping such as the one
`json.load` returns. Views are small frozen dataclasses holding the document
and an index into one of its top-level arrays (`meshes`, `nodes`, `scenes`,
`skins`, `textures`, `samplers`). Accessors are handed back as their JSON
objects.

## Modules

| Module              | Contents                                                                          |
|---------------------|-----------------------------------------------------------------------------------|
| `gltfkit.math`      | `Vector3`, `Vector4`, `Matrix3`, `Matrix4`, `Quaternion`                          |
| `gltfkit.mesh`      | `Mesh`, `Primitive`, `MorphTarget`, `Bounds`                                      |
| `gltfkit.scene`     | `Node`, `Scene`, `MatrixTransform`, `DecomposedTransform`, `Transform`            |
| `gltfkit.skin`      | `Skin`                                                                            |
| `gltfkit.texture`   | `Texture`, `Sampler`, `Info`, `TextureTransform`, `MagFilter`, `MinFilter`, `WrappingMode` |
| `gltfkit.casting`   | `ReadIndices`, `ReadJoints`, `IndexType`, `JointType`, `CastingIter`              |

## Installing

```
pip install gltfkit
```

To run the test suite:

```
pip install "gltfkit[test]"
pytest
```

## Transform math

Matrices are stored column-major, as in glTF: `Matrix4.x` is the first
column. Matrix products use the `@` operator, and vectors multiply by a
scalar with `*`.

```python
import math
from gltfkit.math import Matrix4, Quaternion, Vector3

translate = Matrix4.from_translation(Vector3(1.0, 2.0, 3.0))
rotate = Matrix4.from_quaternion(
    Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
)
scale = Matrix4.from_nonuniform_scale(2.0, 2.0, 2.0)

model = translate @ rotate @ scale
print(model.as_array())   # four columns of four floats
```

`Matrix3` offers `from_columns`, `determinant()` and `trace()`;
`Quaternion.from_matrix` converts a 3x3 rotation matrix to a quaternion and
`Quaternion.from_parts(w, x, y, z)` builds one from its components.

## Node transforms

`Node.transform()` returns a `MatrixTransform` when the node has a `matrix`,
and a `DecomposedTransform` otherwise, with missing parts defaulting to no
translation, the identity rotation and unit scale. Both answer the same two
questions:

* `matrix()` gives the 4x4 column-major matrix as nested lists; a decomposed
  transform is composed as `translation @ rotation @ scale`.
* `decomposed()` gives `(translation, rotation, scale)`, where the rotation is
  an `[x, y, z, w]` quaternion. A matrix is decomposed by taking the column
  lengths as scale (the sign of the determinant goes on the z scale) and
  converting the remaining rotation matrix to a quaternion.

Components of the wrong length raise `ValueError`.

## Meshes, scenes, skins and textures

```python
import json
from gltfkit.mesh import Mesh

with open("model.gltf") as f:
    document = json.load(f)

mesh = Mesh(document, 0)
for primitive in mesh.primitives():
    for semantic, accessor in primitive.attributes():
        print(semantic, accessor.get("count"))
    print(primitive.bounding_box())
```

* `Mesh.primitives()` visits each `Primitive`. `Primitive.attributes()` yields
  `(semantic, accessor)` pairs, `Primitive.get(semantic)` looks one up by its
  glTF name (e.g. `"TEXCOORD_0"`), and `Primitive.bounding_box()` returns the
  `Bounds` of the `POSITION` accessor's `min` and `max` (a `KeyError` without
  a `POSITION` attribute, a `ValueError` without three-component bounds).
  `Primitive.mode()` defaults to 4 (triangles); `Primitive.indices()` and
  `Primitive.morph_targets()` complete the picture.
* `Scene.nodes()` visits the root nodes; `Node.children()`, `Node.mesh()`,
  `Node.skin()` and `Node.weights()` follow a node's references.
* `Skin.joints()` visits the joint nodes, `Skin.skeleton()` gives the skeleton
  root if one is set, and `Skin.inverse_bind_matrices()` the accessor holding
  them.
* `Texture.sampler()` returns the texture's `Sampler`, or the default sampler
  (index `None`) when none is referenced, and `Texture.source_index()` the
  index of its image. `Sampler.wrap_s()` and `Sampler.wrap_t()` always return
  a `WrappingMode`, `REPEAT` by default; the filters may be `None`.
  `Info.texture_transform()` exposes the `KHR_texture_transform` offset,
  rotation and scale when present.

Most views also have `name()` and `extras()`.

## Widening vertex data

`ReadIndices` and `ReadJoints` hold index and joint values tagged with the
component type they were stored as; values outside that type's range raise
`ValueError`, non-integers `TypeError`. `ReadIndices.into_u32()` and
`ReadJoints.into_u16()` return a `CastingIter` that yields each item widened
to the largest type, reports the items left with `len()`, and gives the
original data back with `unwrap()`.

```python
from gltfkit.casting import IndexType, ReadIndices

indices = ReadIndices(IndexType.U16, (0, 1, 2))
print(list(indices.into_u32()))   # [0, 1, 2]
```

## What it does not do

gltfkit does not open files or parse JSON itself, and it does not read
binary `.glb` containers, buffers or images: vertex data is never decoded
from buffer bytes, so `ReadIndices` and `ReadJoints` are built from values
you supply. There are no views for accessors, buffers, images, materials,
cameras, animations or lights, and nothing is written back out. There is no
command-line tool.