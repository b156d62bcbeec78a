"""Public package interface for squirrelnoise."""

from importlib.metadata import PackageNotFoundError, version

from .api.hasher import BitNoiseHasher
from .core.bits import (
    INT32_MAX,
    UINT32_MAX,
    fake_int32_overflow,
    fake_uint32_overflow,
    sanitize_seed,
)
from .core.hashing import scalar_hash, squirrel_noise5
from .core.noise import (
    noise_1d,
    noise_1d_neg_one_to_one,
    noise_1d_zero_to_one,
    noise_2d,
    noise_2d_neg_one_to_one,
    noise_2d_zero_to_one,
    noise_3d,
    noise_3d_neg_one_to_one,
    noise_3d_zero_to_one,
    noise_4d,
    noise_4d_neg_one_to_one,
    noise_4d_zero_to_one,
)
from .engine.vectorized import (
    hash_array,
    neg_one_to_one_array,
    noise_array,
    noise_grid,
    zero_to_one_array,
)

try:
    __version__ = version("squirrelnoise")
except PackageNotFoundError:
    __version__ = "0.1.0"


__all__ = [
    "BitNoiseHasher",
    "INT32_MAX",
    "UINT32_MAX",
    "fake_int32_overflow",
    "fake_uint32_overflow",
    "hash_array",
    "neg_one_to_one_array",
    "noise_1d",
    "noise_1d_neg_one_to_one",
    "noise_1d_zero_to_one",
    "noise_2d",
    "noise_2d_neg_one_to_one",
    "noise_2d_zero_to_one",
    "noise_3d",
    "noise_3d_neg_one_to_one",
    "noise_3d_zero_to_one",
    "noise_4d",
    "noise_4d_neg_one_to_one",
    "noise_4d_zero_to_one",
    "noise_array",
    "noise_grid",
    "sanitize_seed",
    "scalar_hash",
    "squirrel_noise5",
    "zero_to_one_array",
]
