import pytest

from blockworld.nibble import NibbleArray


def test_new_array_is_zeroed():
    array = NibbleArray(10)
    assert len(array) == 10
    assert [array.get(i) for i in range(len(array))] == [0] * 10


@pytest.mark.parametrize("value", range(-8, 8))
def test_set_get_round_trip(value):
    array = NibbleArray(8)
    array.set(3, value)
    assert array.get(3) == value


def test_values_read_back_signed():
    array = NibbleArray(4)
    array.set(0, 15)
    assert array.get(0) == -1


def test_neighbours_are_independent():
    array = NibbleArray(8)
    array.set(4, 3)
    array.set(5, -2)
    assert array.get(4) == 3
    assert array.get(5) == -2
    assert array.get(3) == 0
    assert array.get(6) == 0


def test_low_nibble_comes_first():
    array = NibbleArray(4)
    array.set(0, 1)
    array.set(1, 2)
    assert array.tobytes()[:1] == b"\x21"


def test_fill_two_values():
    array = NibbleArray(6)
    array.fill(3, 5)
    assert [array.get(i) for i in range(0, 6, 2)] == [3, 3, 3]
    assert [array.get(i) for i in range(1, 6, 2)] == [5, 5, 5]


def test_fill_single_value():
    array = NibbleArray(6)
    array.fill(7)
    assert {array.get(i) for i in range(6)} == {7}


def test_nbytes_is_half_the_length():
    array = NibbleArray(64)
    assert array.nbytes * 2 == len(array)
    assert len(array.tobytes()) == array.nbytes


def test_load_round_trip():
    source = NibbleArray(16)
    for i in range(16):
        source.set(i, i - 8)
    target = NibbleArray(16)
    target.load(source.tobytes())
    assert target.tobytes() == source.tobytes()
    assert [target.get(i) for i in range(16)] == list(range(-8, 8))


def test_load_prefix_keeps_rest():
    array = NibbleArray(8)
    array.fill(4)
    array.load(b"\x21")
    assert array.get(0) == 1
    assert array.get(1) == 2
    assert array.get(2) == 4


def test_load_too_long_raises():
    array = NibbleArray(4)
    with pytest.raises(ValueError):
        array.load(b"\x00" * (array.nbytes + 1))


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_index_out_of_range(index):
    array = NibbleArray(8)
    with pytest.raises(IndexError):
        array.get(index)
    with pytest.raises(IndexError):
        array.set(index, 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        NibbleArray(-2)