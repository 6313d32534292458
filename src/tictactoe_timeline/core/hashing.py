"""
Board hashing utilities - optimized for int8 arrays.
"""

import hashlib

import numpy as np


def hash_cells(cells: np.ndarray) -> str:
    """
    Stable hash for a board.

    Boards are normalized to contiguous int8 first, so a list, a tuple
    and an array holding the same values hash identically.
    """
    data = np.ascontiguousarray(cells, dtype=np.int8).tobytes()
    return hashlib.sha256(data).hexdigest()[:16]
