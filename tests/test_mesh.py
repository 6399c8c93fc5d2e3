import pytest

from gltfkit.mesh import Bounds, Mesh, MorphTarget, Primitive


def _document():
    return {
        "accessors": [
            {
                "bufferView": 0,
                "componentType": 5126,
                "count": 3,
                "type": "VEC3",
                "min": [-0.03, -0.04, -0.05],
                "max": [1.0, 1.01, 0.02],
            },
            {"bufferView": 1, "componentType": 5123, "count": 3, "type": "SCALAR"},
            {"bufferView": 2, "componentType": 5126, "count": 3, "type": "VEC3"},
            {"bufferView": 3, "componentType": 5126, "count": 3, "type": "VEC3"},
        ],
        "meshes": [
            {
                "name": "triangle",
                "extras": {"tag": "demo"},
                "weights": [0.5],
                "primitives": [
                    {
                        "attributes": {"POSITION": 0, "NORMAL": 2},
                        "indices": 1,
                        "targets": [{"POSITION": 3}, {"NORMAL": 2, "TANGENT": 3}],
                    },
                    {"attributes": {"NORMAL": 2}, "mode": 1},
                ],
            },
            {"primitives": []},
        ],
    }


def _first_primitive(doc=None):
    mesh = Mesh(doc or _document(), 0)
    return next(mesh.primitives())


def test_accessor_bounds():
    bounds = _first_primitive().bounding_box()
    assert bounds == Bounds(min=(-0.03, -0.04, -0.05), max=(1.0, 1.01, 0.02))


def test_mesh_name_extras_weights():
    mesh = Mesh(_document(), 0)
    assert mesh.name() == "triangle"
    assert mesh.extras() == {"tag": "demo"}
    assert mesh.weights() == [0.5]


def test_mesh_without_optional_fields():
    mesh = Mesh(_document(), 1)
    assert mesh.name() is None
    assert mesh.extras() is None
    assert mesh.weights() is None
    assert list(mesh.primitives()) == []


def test_primitives_indices_in_order():
    mesh = Mesh(_document(), 0)
    assert [p.index for p in mesh.primitives()] == [0, 1]


def test_attributes_pairs():
    doc = _document()
    prim = _first_primitive(doc)
    attrs = list(prim.attributes())
    assert [s for s, _ in attrs] == ["POSITION", "NORMAL"]
    assert attrs[0][1] is doc["accessors"][0]
    assert attrs[1][1] is doc["accessors"][2]


def test_get_and_indices():
    doc = _document()
    prim = _first_primitive(doc)
    assert prim.get("NORMAL") is doc["accessors"][2]
    assert prim.get("TEXCOORD_0") is None
    assert prim.indices() is doc["accessors"][1]
    second = Primitive(Mesh(doc, 0), 1)
    assert second.indices() is None


def test_mode_default_and_explicit():
    doc = _document()
    assert Primitive(Mesh(doc, 0), 0).mode() == 4
    assert Primitive(Mesh(doc, 0), 1).mode() == 1


def test_morph_targets():
    doc = _document()
    targets = list(_first_primitive(doc).morph_targets())
    assert len(targets) == 2
    assert targets[0].positions is doc["accessors"][3]
    assert targets[0].normals is None
    assert targets[0].tangents is None
    assert targets[1] == MorphTarget(
        positions=None, normals=doc["accessors"][2], tangents=doc["accessors"][3]
    )


def test_no_morph_targets():
    prim = Primitive(Mesh(_document(), 0), 1)
    assert list(prim.morph_targets()) == []


def test_bounding_box_without_position_raises():
    prim = Primitive(Mesh(_document(), 0), 1)
    with pytest.raises(KeyError):
        prim.bounding_box()


def test_bounding_box_without_min_raises():
    doc = _document()
    del doc["accessors"][0]["min"]
    with pytest.raises(ValueError):
        _first_primitive(doc).bounding_box()


def test_bounding_box_wrong_length_raises():
    doc = _document()
    doc["accessors"][0]["max"] = [1.0, 2.0]
    with pytest.raises(ValueError):
        _first_primitive(doc).bounding_box()


def test_primitive_extras():
    doc = _document()
    doc["meshes"][0]["primitives"][0]["extras"] = {"k": 1}
    assert _first_primitive(doc).extras() == {"k": 1}
    assert Primitive(Mesh(doc, 0), 1).extras() is None