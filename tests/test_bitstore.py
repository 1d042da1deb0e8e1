import pytest

from bloomset import BitStore, MalformedSnapshot


def test_storage_length():
    assert len(BitStore(1)) == 1
    assert len(BitStore(8)) == 1
    assert len(BitStore(9)) == 2
    assert len(BitStore(9586)) == 1199


def test_set_and_test_lsb_first():
    bs = BitStore(16)
    bs.set(0)
    bs.set(9)
    assert bs.test(0) and bs.test(9)
    assert not bs.test(1)
    assert bs.to_list() == [1, 2]


def test_set_is_idempotent():
    bs = BitStore(10)
    bs.set(3)
    bs.set(3)
    assert bs.count() == 1


def test_count():
    bs = BitStore(20)
    assert bs.count() == 0
    for i in (0, 5, 7, 8, 19):
        bs.set(i)
    assert bs.count() == 5


@pytest.mark.parametrize("i", [-1, 10, 16])
def test_out_of_range(i):
    bs = BitStore(10)
    with pytest.raises(IndexError):
        bs.set(i)
    with pytest.raises(IndexError):
        bs.test(i)


def test_from_bytes_checks_length():
    assert BitStore.from_bytes(16, b"\x01\x80").test(15)
    with pytest.raises(MalformedSnapshot):
        BitStore.from_bytes(16, b"\x01")
    with pytest.raises(MalformedSnapshot):
        BitStore.from_bytes(16, b"\x01\x02\x03")


def test_non_positive_size():
    with pytest.raises(ValueError):
        BitStore(0)
