"""
Array evaluation of the SquirrelNoise5 functions.

numpy ``uint32`` arithmetic already wraps modulo 2**32, so the same mixing
steps as the scalar core produce bit-identical results element-wise.
"""

from __future__ import annotations

import numpy as np

from ..core.bits import INT32_MAX, UINT32_MAX, sanitize_seed
from ..core.hashing import (
    SQ5_BIT_NOISE1,
    SQ5_BIT_NOISE2,
    SQ5_BIT_NOISE3,
    SQ5_BIT_NOISE4,
    SQ5_BIT_NOISE5,
)
from ..core.noise import PRIME1, PRIME2, PRIME3

GRID_MODES = ("raw", "zero_to_one", "neg_one_to_one")

_PRIMES = (np.uint32(PRIME1), np.uint32(PRIME2), np.uint32(PRIME3))


def _as_uint32(values):
    # Booleans count as 0/1, matching how plain ints treat True and False.
    arr = np.asarray(values)
    if not (np.issubdtype(arr.dtype, np.integer) or arr.dtype == np.bool_):
        raise TypeError(f"Coordinates must be integer arrays, got dtype {arr.dtype}")
    return arr.astype(np.uint32)


def _mix(mangled, seed):
    with np.errstate(over="ignore"):
        mangled = mangled * np.uint32(SQ5_BIT_NOISE1)
        mangled = mangled + np.uint32(sanitize_seed(seed))
        mangled = mangled ^ (mangled >> np.uint32(9))
        mangled = mangled + np.uint32(SQ5_BIT_NOISE2)
        mangled = mangled ^ (mangled >> np.uint32(11))
        mangled = mangled * np.uint32(SQ5_BIT_NOISE3)
        mangled = mangled ^ (mangled >> np.uint32(13))
        mangled = mangled + np.uint32(SQ5_BIT_NOISE4)
        mangled = mangled ^ (mangled >> np.uint32(15))
        mangled = mangled * np.uint32(SQ5_BIT_NOISE5)
        mangled = mangled ^ (mangled >> np.uint32(17))
    return mangled


def _fold(coords):
    if not 1 <= len(coords) <= 4:
        raise ValueError(
            f"Expected 1 to 4 coordinate arrays, got {len(coords)}"
        )
    arrays = np.broadcast_arrays(*[_as_uint32(coord) for coord in coords])
    combined = arrays[0].copy()
    with np.errstate(over="ignore"):
        for prime, arr in zip(_PRIMES, arrays[1:]):
            combined = combined + arr * prime
    return combined


def hash_array(indices, seed=0):
    """Element-wise ``scalar_hash`` over an integer array."""
    return _mix(_as_uint32(indices), seed)


def noise_array(*coords, seed=0):
    """Raw noise for 1 to 4 broadcastable coordinate arrays.

    Returns:
        ``numpy.uint32`` array with the broadcast shape of ``coords``.
    """
    return _mix(_fold(coords), seed)


def zero_to_one_array(*coords, seed=0):
    raw = noise_array(*coords, seed=seed)
    return np.asarray(raw, dtype=np.float64) / UINT32_MAX


def neg_one_to_one_array(*coords, seed=0):
    raw = noise_array(*coords, seed=seed)
    return (np.asarray(raw, dtype=np.float64) - UINT32_MAX) / INT32_MAX


def noise_grid(shape, origin=None, seed=0, mode="raw"):
    """Evaluate noise on an integer lattice.

    ``grid[i, j, ...]`` holds the noise at ``(origin[0] + i, origin[1] + j, ...)``.

    Args:
        shape: Extent per axis, 1 to 4 non-negative ints.
        origin: Lattice coordinate of ``grid[0, ...]``; defaults to zeros.
        seed: Field selector.
        mode: One of ``GRID_MODES``.
    """
    shape = tuple(int(size) for size in shape)
    if not 1 <= len(shape) <= 4:
        raise ValueError(f"Grid must have 1 to 4 axes, got {len(shape)}")
    if any(size < 0 for size in shape):
        raise ValueError(f"Grid extents must be >= 0, got {shape}")
    if origin is None:
        origin = (0,) * len(shape)
    origin = tuple(int(start) for start in origin)
    if len(origin) != len(shape):
        raise ValueError(
            f"origin has {len(origin)} axes but shape has {len(shape)}"
        )
    if mode not in GRID_MODES:
        available = ", ".join(GRID_MODES)
        raise ValueError(f"Unknown grid mode '{mode}'. Available: {available}")

    axes = [
        np.arange(start, start + size, dtype=np.int64)
        for start, size in zip(origin, shape)
    ]
    coords = np.meshgrid(*axes, indexing="ij")
    if mode == "zero_to_one":
        return zero_to_one_array(*coords, seed=seed)
    if mode == "neg_one_to_one":
        return neg_one_to_one_array(*coords, seed=seed)
    return noise_array(*coords, seed=seed)
