# ==================================================
# bloomset/filter.py
# ==================================================
from __future__ import annotations

import json
import logging
import struct
from collections.abc import Mapping, Sequence

from .bitstore import BitStore, nbytes_for
from .compression import compress, decompress
from .const import (DEFAULT_EXPECTED_ITEMS, DEFAULT_FP_RATE,
                    SNAP_SIZE, SNAP_HASH_COUNT, SNAP_ITEM_COUNT, SNAP_BITS,
                    MAGIC, HEADER_FMT, HEADER_SIZE, VERSION)
from .errors import InvalidArgument, MalformedSnapshot
from .hashing import canonical_key, base_hashes, indices
from .params import calculate

log = logging.getLogger(__name__)

_header = struct.Struct(HEADER_FMT)


def _positive_int(record:Mapping, field:str) -> int:
    value = record.get(field)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise MalformedSnapshot(f"{field!r} must be a positive integer, got {value!r}")
    return value


class BloomFilter:
    """Bloom filter over str keys.

    ``has`` never returns False for a key that was ``add``-ed to the same
    instance; it may return True for keys that never were.
    """

    def __init__(self, expected_items=DEFAULT_EXPECTED_ITEMS,
                 false_positive_prob=DEFAULT_FP_RATE):
        m, k = calculate(expected_items, false_positive_prob)
        self.expected_items = expected_items
        self.false_positive_prob = false_positive_prob
        self.size = m
        self.hash_count = k
        self.store = BitStore(m)
        self.item_count = 0
        log.debug("bloom filter for %s items @ p=%s: m=%d bits, k=%d, %d bytes",
                  expected_items, false_positive_prob, m, k, len(self.store))

    @classmethod
    def _restore(cls, size:int, hash_count:int, store:BitStore, item_count:int) -> BloomFilter:
        bf = cls.__new__(cls)
        bf.expected_items = None          # capacity is not part of a snapshot
        bf.false_positive_prob = None
        bf.size = size
        bf.hash_count = hash_count
        bf.store = store
        bf.item_count = item_count
        return bf

    # -- hashing helpers ---------------------------------------------------
    def _probes(self, data:bytes):
        h1, h2 = base_hashes(data)
        return indices(h1, h2, self.hash_count, self.size)

    # ----------------------------------------------------------------------
    def _insert(self, data:bytes):
        for bit in self._probes(data):
            self.store.set(bit)
        self.item_count += 1
        cap = self.expected_items
        if cap is not None and self.item_count - 1 <= cap < self.item_count:
            log.warning("bloom filter past its capacity of %s items; false positive rate "
                        "now exceeds %s", self.expected_items, self.false_positive_prob)

    def add(self, item:str):
        self._insert(canonical_key(item))

    def bulk_add(self, items:Sequence[str]):
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes, bytearray)):
            raise InvalidArgument(f"bulk_add expects a sequence of str, got {type(items).__name__}")
        # reject the whole batch before touching any bit
        keys = [canonical_key(item) for item in items]
        for data in keys:
            self._insert(data)

    def has(self, item:str) -> bool:
        test = self.store.test
        for bit in self._probes(canonical_key(item)):
            if not test(bit):
                return False      # definitely absent
        return True               # possibly present

    def __contains__(self, item:str) -> bool:
        return self.has(item)

    def __len__(self):
        return self.item_count

    def __repr__(self):
        return (f"<BloomFilter size={self.size} hash_count={self.hash_count} "
                f"item_count={self.item_count}>")

    # -- statistics --------------------------------------------------------
    def load_factor(self) -> float:
        return self.store.count() / self.size

    def stats(self) -> dict:
        load = self.load_factor()
        nbytes = len(self.store)
        return {
            "size": self.size,
            "hash_count": self.hash_count,
            "item_count": self.item_count,
            "load_factor": load,
            "expected_fp_rate": load ** self.hash_count,
            "memory_bytes": nbytes,
            "memory_mb": nbytes / 1024 / 1024,
        }

    # -- snapshot record ---------------------------------------------------
    def serialize(self) -> dict:
        return {
            SNAP_SIZE: self.size,
            SNAP_HASH_COUNT: self.hash_count,
            SNAP_ITEM_COUNT: self.item_count,
            SNAP_BITS: self.store.to_list(),
        }

    @classmethod
    def deserialize(cls, record:Mapping) -> BloomFilter:
        if not isinstance(record, Mapping):
            raise MalformedSnapshot(f"snapshot must be a mapping, got {type(record).__name__}")
        size = _positive_int(record, SNAP_SIZE)
        hash_count = _positive_int(record, SNAP_HASH_COUNT)

        item_count = record.get(SNAP_ITEM_COUNT)
        if item_count is None:
            item_count = 0
        elif not isinstance(item_count, int) or isinstance(item_count, bool) or item_count < 0:
            raise MalformedSnapshot(f"{SNAP_ITEM_COUNT!r} must be a non-negative integer, "
                                    f"got {item_count!r}")

        raw = record.get(SNAP_BITS)
        if not isinstance(raw, (Sequence, bytes, bytearray)) or isinstance(raw, str):
            raise MalformedSnapshot(f"{SNAP_BITS!r} must be a sequence of byte values")
        try:
            data = bytearray(raw)
        except (TypeError, ValueError) as e:
            raise MalformedSnapshot(f"{SNAP_BITS!r} must hold integers 0..255: {e}") from e

        store = BitStore.from_bytes(size, data)
        log.debug("restored bloom filter: m=%d, k=%d, %d items", size, hash_count, item_count)
        return cls._restore(size, hash_count, store, item_count)

    # -- json --------------------------------------------------------------
    def to_json(self) -> str:
        return json.dumps(self.serialize(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text) -> BloomFilter:
        try:
            record = json.loads(text)
        except (TypeError, ValueError) as e:
            raise MalformedSnapshot(f"snapshot is not valid JSON: {e}") from e
        return cls.deserialize(record)

    # -- binary (header + zstd bit array) -----------------------------------
    def to_bytes(self) -> bytes:
        """Optional compact transport form of the same snapshot record.

        Carries nothing beyond serialize(); callers that only need the
        record should use serialize() or to_json().
        """
        header = _header.pack(MAGIC, VERSION, self.size, self.hash_count, self.item_count)
        body = compress(bytes(self.store))
        log.debug("encoded bloom filter: %d bit bytes -> %d compressed", len(self.store), len(body))
        return header + body

    @classmethod
    def from_bytes(cls, blob:bytes) -> BloomFilter:
        if not isinstance(blob, (bytes, bytearray, memoryview)):
            raise MalformedSnapshot(f"binary snapshot must be bytes, got {type(blob).__name__}")
        if len(blob) < HEADER_SIZE:
            raise MalformedSnapshot(f"blob of {len(blob)} bytes is shorter than the header")
        magic, version, size, hash_count, item_count = _header.unpack_from(blob, 0)
        if magic != MAGIC:
            raise MalformedSnapshot("Invalid snapshot magic")
        if version != VERSION:
            raise MalformedSnapshot(f"Unsupported snapshot version {version}")
        if size == 0 or hash_count == 0:
            raise MalformedSnapshot("size and hash count must be positive")
        data = decompress(bytes(blob[HEADER_SIZE:]), nbytes_for(size))
        return cls._restore(size, hash_count, BitStore.from_bytes(size, data), item_count)
