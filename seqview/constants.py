# seqview/constants.py
"""
seqview Constants

This module defines constants used throughout the sequence engine:

ELEMENTS
- SUPPORTED_KINDS: NumPy dtype kinds a View may borrow (signed, unsigned, float)
- BYTE_DTYPE: element type that unlocks the byte (text) capabilities

REDUCTION
- VECTOR_REGISTER_BYTES: width of the vector register the chunked reducer
  emulates (32 bytes = one AVX2 register)

ENVIRONMENT
- ENV_LOG_LEVEL / ENV_VECTOR_BYTES: variables read once at import time
"""
import numpy as np


# =============================================================================
# ELEMENTS
# =============================================================================

SUPPORTED_KINDS = frozenset("iuf")   # int, uint, float
BYTE_DTYPE = np.dtype(np.uint8)


# =============================================================================
# REDUCTION
# =============================================================================

# Lanes per chunk = VECTOR_REGISTER_BYTES // itemsize
#   uint8 -> 32 lanes, int32/float32 -> 8 lanes, int64/float64 -> 4 lanes
VECTOR_REGISTER_BYTES = 32

assert VECTOR_REGISTER_BYTES >= 0, "vector register width must be non-negative"


# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_LOG_LEVEL = "SEQVIEW_LOG_LEVEL"
ENV_VECTOR_BYTES = "SEQVIEW_VECTOR_BYTES"
DEFAULT_LOG_LEVEL = "warn"
