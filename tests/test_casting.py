import pytest

from gltfkit.casting import IndexType, JointType, ReadIndices, ReadJoints


@pytest.mark.parametrize("index_type", list(IndexType))
def test_indices_into_u32_preserves_values(index_type):
    data = ReadIndices(index_type, (0, 1, 2, 2, 1, 0))
    assert list(data.into_u32()) == [0, 1, 2, 2, 1, 0]


@pytest.mark.parametrize(
    "index_type, limit",
    [
        (IndexType.U8, 255),
        (IndexType.U16, 65535),
        (IndexType.U32, 4294967295),
    ],
)
def test_index_type_limits(index_type, limit):
    assert index_type.max_value == limit
    assert list(ReadIndices(index_type, (limit,)).into_u32()) == [limit]
    with pytest.raises(ValueError):
        ReadIndices(index_type, (limit + 1,))


def test_indices_max_values_fit():
    data = ReadIndices(IndexType.U16, (65535,))
    assert list(data.into_u32()) == [65535]


def test_indices_out_of_range_rejected():
    with pytest.raises(ValueError):
        ReadIndices(IndexType.U8, (256,))
    with pytest.raises(ValueError):
        ReadIndices(IndexType.U32, (-1,))


def test_indices_non_integer_rejected():
    with pytest.raises(TypeError):
        ReadIndices(IndexType.U16, (1.5,))


def test_indices_len_and_iter():
    data = ReadIndices(IndexType.U8, [3, 4, 5])
    assert len(data) == 3
    assert list(data) == [3, 4, 5]


def test_casting_iter_len_counts_remaining():
    data = ReadIndices(IndexType.U8, (7, 8, 9))
    it = data.into_u32()
    assert len(it) == 3
    assert next(it) == 7
    assert len(it) == 2
    assert list(it) == [8, 9]
    assert len(it) == 0


def test_casting_iter_unwrap_returns_source():
    data = ReadIndices(IndexType.U32, (10, 20))
    assert data.into_u32().unwrap() is data


def test_empty_indices():
    data = ReadIndices(IndexType.U16, ())
    assert len(data) == 0
    assert list(data.into_u32()) == []


@pytest.mark.parametrize("joint_type", list(JointType))
def test_joints_into_u16_preserves_values(joint_type):
    data = ReadJoints(joint_type, [(0, 1, 2, 3), (4, 5, 6, 7)])
    assert list(data.into_u16()) == [(0, 1, 2, 3), (4, 5, 6, 7)]


def test_joints_accept_lists_and_store_tuples():
    data = ReadJoints(JointType.U8, [[1, 2, 3, 4]])
    assert list(data) == [(1, 2, 3, 4)]
    assert len(data) == 1


def test_joints_wrong_arity_rejected():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U16, [(1, 2, 3)])


def test_joints_out_of_range_rejected():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U8, [(0, 0, 0, 256)])


def test_joints_max_u16_fits():
    data = ReadJoints(JointType.U16, [(65535, 0, 0, 65535)])
    assert next(data.into_u16()) == (65535, 0, 0, 65535)


def test_joint_casting_iter_len_and_unwrap():
    data = ReadJoints(JointType.U8, [(1, 1, 1, 1), (2, 2, 2, 2)])
    it = data.into_u16()
    assert len(it) == len(data)
    next(it)
    assert len(it) == len(data) - 1
    assert it.unwrap() is data


def test_exhausted_iterator_raises_stop_iteration():
    it = ReadIndices(IndexType.U8, (1,)).into_u32()
    assert next(it) == 1
    with pytest.raises(StopIteration):
        next(it)