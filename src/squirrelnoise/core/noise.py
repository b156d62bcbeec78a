"""
Dimensional folding and float normalization on top of the hash core.

N-dimensional coordinates are hashed down to one 32-bit index with large
primes, so results are not unique but should not look locally repetitive.
"""

from .bits import INT32_MAX, UINT32_MAX, fake_uint32_overflow
from .hashing import scalar_hash

# Large primes with non-boring bits.
PRIME1 = 198491317
PRIME2 = 6542989
PRIME3 = 357239


def fold_2d(pos_x, pos_y):
    return pos_x + fake_uint32_overflow(PRIME1 * pos_y)


def fold_3d(pos_x, pos_y, pos_z):
    return fold_2d(pos_x, pos_y) + fake_uint32_overflow(PRIME2 * pos_z)


def fold_4d(pos_x, pos_y, pos_z, pos_t):
    return fold_3d(pos_x, pos_y, pos_z) + fake_uint32_overflow(PRIME3 * pos_t)


def noise_1d(index, seed=0):
    return scalar_hash(index, seed)


def noise_2d(pos_x, pos_y, seed=0):
    return scalar_hash(fold_2d(pos_x, pos_y), seed)


def noise_3d(pos_x, pos_y, pos_z, seed=0):
    return scalar_hash(fold_3d(pos_x, pos_y, pos_z), seed)


def noise_4d(pos_x, pos_y, pos_z, pos_t, seed=0):
    return scalar_hash(fold_4d(pos_x, pos_y, pos_z, pos_t), seed)


def to_zero_to_one(value):
    """Map a raw noise value onto ``[0, 1]``."""
    return float(value) / UINT32_MAX


def to_neg_one_to_one(value):
    """Map a raw noise value with SquirrelNoise5's signed remap.

    Subtracts the unsigned max and divides by the signed max. The results
    therefore lie in roughly ``[-2, 0]`` rather than ``[-1, 1]``.
    """
    return (float(value) - UINT32_MAX) / INT32_MAX


def noise_1d_zero_to_one(index, seed=0):
    return to_zero_to_one(noise_1d(index, seed))


def noise_2d_zero_to_one(pos_x, pos_y, seed=0):
    return to_zero_to_one(noise_2d(pos_x, pos_y, seed))


def noise_3d_zero_to_one(pos_x, pos_y, pos_z, seed=0):
    return to_zero_to_one(noise_3d(pos_x, pos_y, pos_z, seed))


def noise_4d_zero_to_one(pos_x, pos_y, pos_z, pos_t, seed=0):
    return to_zero_to_one(noise_4d(pos_x, pos_y, pos_z, pos_t, seed))


def noise_1d_neg_one_to_one(index, seed=0):
    return to_neg_one_to_one(noise_1d(index, seed))


def noise_2d_neg_one_to_one(pos_x, pos_y, seed=0):
    return to_neg_one_to_one(noise_2d(pos_x, pos_y, seed))


def noise_3d_neg_one_to_one(pos_x, pos_y, pos_z, seed=0):
    return to_neg_one_to_one(noise_3d(pos_x, pos_y, pos_z, seed))


def noise_4d_neg_one_to_one(pos_x, pos_y, pos_z, pos_t, seed=0):
    return to_neg_one_to_one(noise_4d(pos_x, pos_y, pos_z, pos_t, seed))


NOISE_BY_DIMENSION = {
    1: noise_1d,
    2: noise_2d,
    3: noise_3d,
    4: noise_4d,
}
