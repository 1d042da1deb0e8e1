# ==================================================
# bloomset/bitstore.py
# ==================================================
from __future__ import annotations

import numpy as np

from .errors import MalformedSnapshot


def nbytes_for(nbits:int) -> int:
    return (nbits + 7) // 8


class BitStore:
    """Packed bit array.  Bit ``i`` is ``1 << (i & 7)`` of byte ``i // 8``."""

    def __init__(self, nbits:int, data:bytearray | None = None):
        if nbits <= 0:
            raise ValueError(f"nbits must be positive, got {nbits}")
        self.nbits = nbits
        self.bits = data if data is not None else bytearray(nbytes_for(nbits))

    # ----------------------------------------------------------------------
    def _check(self, i:int):
        if not 0 <= i < self.nbits:
            raise IndexError(f"bit {i} outside [0, {self.nbits})")

    def set(self, i:int):
        self._check(i)
        self.bits[i >> 3] |= 1 << (i & 7)

    def test(self, i:int) -> bool:
        self._check(i)
        return bool(self.bits[i >> 3] & (1 << (i & 7)))

    def count(self) -> int:
        if not self.bits:
            return 0
        return int(np.unpackbits(np.frombuffer(self.bits, dtype=np.uint8)).sum())

    # ----------------------------------------------------------------------
    def to_list(self) -> list[int]:
        return list(self.bits)

    def __bytes__(self):
        return bytes(self.bits)

    def __len__(self):
        return len(self.bits)

    def __eq__(self, other):
        if not isinstance(other, BitStore):
            return NotImplemented
        return self.nbits == other.nbits and self.bits == other.bits

    @classmethod
    def from_bytes(cls, nbits:int, data) -> BitStore:
        bits = bytearray(data)
        if len(bits) != nbytes_for(nbits):
            raise MalformedSnapshot(
                f"bit array holds {len(bits)} bytes, {nbytes_for(nbits)} expected for {nbits} bits")
        return cls(nbits, bits)
