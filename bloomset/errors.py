# ==================================================
# bloomset/errors.py
# ==================================================

class BloomError(Exception):
    """Base class for every error raised by bloomset."""


class InvalidParameter(BloomError, ValueError):
    """Capacity or false-positive rate out of range."""


class TypeMismatch(BloomError, TypeError):
    """Key is not a str."""


class InvalidArgument(BloomError, TypeError):
    """bulk_add() was handed something that is not an ordered sequence."""


class MalformedSnapshot(BloomError, ValueError):
    """Snapshot record or blob does not describe a valid filter."""
