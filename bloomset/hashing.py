# ==================================================
# bloomset/hashing.py
# ==================================================
import struct
from typing import Iterator

from .const import (UINT32_MASK, KEY_ENCODING,
                    HASH_A_SEED, HASH_A_MUL, HASH_A_SHIFT,
                    HASH_B_SEED, HASH_B_MUL, HASH_B_SHIFT)
from .errors import TypeMismatch

_unit = struct.Struct("<H")


# -- key boundary ----------------------------------------------------------
def canonical_key(item) -> bytes:
    """The only accepted key type is str; everything downstream sees bytes."""
    if not isinstance(item, str):
        raise TypeMismatch(f"key must be str, got {type(item).__name__}")
    # surrogatepass keeps lone surrogates hashable, same as a JS string
    return item.encode(KEY_ENCODING, "surrogatepass")


def _mix(data:bytes, seed:int, mul:int, shift:int) -> int:
    h = seed
    for (c,) in _unit.iter_unpack(data):
        h ^= c
        h = (h * mul) & UINT32_MASK
        h ^= h >> shift
    return h


# -- hash functions --------------------------------------------------------
def hash_a(s:str) -> int:
    return _mix(canonical_key(s), HASH_A_SEED, HASH_A_MUL, HASH_A_SHIFT)


def hash_b(s:str) -> int:
    return _mix(canonical_key(s), HASH_B_SEED, HASH_B_MUL, HASH_B_SHIFT)


def base_hashes(data:bytes) -> tuple[int, int]:
    """(h1, h2) for an already canonicalised key."""
    return (_mix(data, HASH_A_SEED, HASH_A_MUL, HASH_A_SHIFT),
            _mix(data, HASH_B_SEED, HASH_B_MUL, HASH_B_SHIFT))


# -- double hashing --------------------------------------------------------
def indices(h1:int, h2:int, k:int, m:int) -> Iterator[int]:
    # python ints never wrap, so h1 + i*h2 is exact before the modulo
    for i in range(k):
        yield (h1 + i * h2) % m
