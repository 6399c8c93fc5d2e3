import pytest

from gltfkit.scene import Node
from gltfkit.skin import Skin


@pytest.fixture
def document():
    return {
        "nodes": [
            {"name": "root", "children": [1, 2], "skin": 0},
            {"name": "hip"},
            {"name": "knee"},
        ],
        "accessors": [
            {"count": 2, "type": "MAT4", "componentType": 5126},
        ],
        "skins": [
            {
                "name": "rig",
                "joints": [1, 2],
                "skeleton": 0,
                "inverseBindMatrices": 0,
                "extras": {"tag": "a"},
            },
            {"joints": [2]},
            {},
        ],
    }


def test_joints_visit_nodes_in_order(document):
    joints = list(Skin(document, 0).joints())
    assert [j.index for j in joints] == [1, 2]
    assert [j.name() for j in joints] == ["hip", "knee"]


def test_skeleton_and_matrices(document):
    skin = Skin(document, 0)
    assert skin.skeleton() == Node(document, 0)
    assert skin.inverse_bind_matrices() is document["accessors"][0]


def test_name_and_extras(document):
    skin = Skin(document, 0)
    assert skin.name() == "rig"
    assert skin.extras() == {"tag": "a"}


def test_optional_fields_absent(document):
    skin = Skin(document, 1)
    assert skin.skeleton() is None
    assert skin.inverse_bind_matrices() is None
    assert skin.name() is None
    assert skin.extras() is None


def test_missing_joints_raises(document):
    with pytest.raises(KeyError):
        list(Skin(document, 2).joints())


def test_node_skin_reference(document):
    assert Node(document, 0).skin() == Skin(document, 0)
    assert Node(document, 1).skin() is None