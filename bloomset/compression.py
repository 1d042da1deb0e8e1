# ==================================================
# bloomset/compression.py
# ==================================================
import zstandard as zstd

from .const import ZSTD_LEVEL
from .errors import MalformedSnapshot

# -------- zstd wrappers ---------------------------------------------------

cctx = zstd.ZstdCompressor(level=ZSTD_LEVEL)
dctx = zstd.ZstdDecompressor()

def compress(data:bytes) -> bytes:
    return cctx.compress(data)

def decompress(data:bytes, expected_size:int) -> bytes:
    # the frame must declare its size up front; never let a header size drive allocation
    try:
        declared = zstd.frame_content_size(data)
    except zstd.ZstdError as e:
        raise MalformedSnapshot(f"corrupt bit array payload: {e}") from e
    if declared != expected_size:
        raise MalformedSnapshot(
            f"bit array frame declares {declared} bytes, {expected_size} expected")
    try:
        out = dctx.decompress(data, max_output_size=expected_size)
    except zstd.ZstdError as e:
        raise MalformedSnapshot(f"corrupt bit array payload: {e}") from e
    if len(out) != expected_size:
        raise MalformedSnapshot(
            f"bit array decompressed to {len(out)} bytes, {expected_size} expected")
    return out
