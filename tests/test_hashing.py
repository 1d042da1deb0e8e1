import pytest

from bloomset import hash_a, hash_b, indices, TypeMismatch
from bloomset.hashing import canonical_key, base_hashes

# pinned: changing any of these breaks every existing snapshot
PINNED = [
    ("", 305419896, 2271560481),
    ("a", 1748700666, 626896292),
    ("alpha", 3551851043, 2426232438),
    ("hello world", 3729502604, 599159360),
    ("\u00e9", 1923202599, 3647099244),
    ("\U0001F600", 3671163640, 1338096477),
]


@pytest.mark.parametrize("key, h1, h2", PINNED)
def test_pinned_values(key, h1, h2):
    assert hash_a(key) == h1
    assert hash_b(key) == h2
    assert base_hashes(canonical_key(key)) == (h1, h2)


def test_hashes_are_uint32_and_distinct():
    for i in range(200):
        key = f"key-{i}"
        a, b = hash_a(key), hash_b(key)
        assert 0 <= a < 2 ** 32
        assert 0 <= b < 2 ** 32
        assert a != b


def test_deterministic():
    assert hash_a("repeat") == hash_a("repeat")
    assert hash_b("repeat") == hash_b("repeat")


@pytest.mark.parametrize("bad", [b"bytes", 42, None, ["a"]])
def test_non_str_rejected(bad):
    with pytest.raises(TypeMismatch):
        hash_a(bad)
    with pytest.raises(TypeMismatch):
        canonical_key(bad)


def test_indices_use_exact_arithmetic():
    h1 = h2 = 2 ** 32 - 1
    m = 9586
    got = list(indices(h1, h2, 40, m))
    assert got == [(h1 + i * h2) % m for i in range(40)]
    # 32-bit wraparound before the modulo would give different bits
    wrapped = [((h1 + i * h2) & 0xFFFFFFFF) % m for i in range(40)]
    assert got != wrapped


def test_indices_in_range():
    for bit in indices(hash_a("x"), hash_b("x"), 7, 13):
        assert 0 <= bit < 13
