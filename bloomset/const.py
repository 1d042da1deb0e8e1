# ==================================================
# bloomset/const.py
# ==================================================
import os

# -------- defaults (env overridable) --------------------------------------
DEFAULT_EXPECTED_ITEMS = int(os.getenv("BLOOMSET_EXPECTED_ITEMS", "1000000"))
DEFAULT_FP_RATE        = float(os.getenv("BLOOMSET_FP_RATE", "0.01"))
ZSTD_LEVEL             = int(os.getenv("BLOOMSET_ZSTD_LEVEL", "3"))

# -------- hash engine -----------------------------------------------------
UINT32_MASK = 0xFFFFFFFF

HASH_A_SEED  = 0x12345678
HASH_A_MUL   = 0x5bd1e995
HASH_A_SHIFT = 15

HASH_B_SEED  = 0x87654321
HASH_B_MUL   = 0xcc9e2d51
HASH_B_SHIFT = 13

KEY_ENCODING = "utf-16-le"   # one 16-bit character code per unit

# -------- snapshot record -------------------------------------------------
SNAP_SIZE       = "size"
SNAP_HASH_COUNT = "hashCount"
SNAP_ITEM_COUNT = "itemCount"
SNAP_BITS       = "bitArray"

# -------- binary snapshot -------------------------------------------------
MAGIC       = b"BLM1"
HEADER_FMT  = "<4sHQLQ"      # magic, version (H), size (Q), hash_count (L), item_count (Q)
HEADER_SIZE = 26             # bytes (4+2+8+4+8)
VERSION     = 1
