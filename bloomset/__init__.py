from .errors import (BloomError, InvalidParameter, TypeMismatch,
                     InvalidArgument, MalformedSnapshot)
from .params import calculate, estimate_false_positive_rate
from .hashing import hash_a, hash_b, indices
from .bitstore import BitStore
from .filter import BloomFilter

__all__ = [
    "BloomFilter",
    "BitStore",
    "calculate",
    "estimate_false_positive_rate",
    "hash_a",
    "hash_b",
    "indices",
    "BloomError",
    "InvalidParameter",
    "TypeMismatch",
    "InvalidArgument",
    "MalformedSnapshot",
]
