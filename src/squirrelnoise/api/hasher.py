"""Value-type front end for the noise functions."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..core import noise as _noise
from ..core.hashing import scalar_hash
from ..defaults import DEFAULT_SEED
from ..engine import vectorized as _vectorized


@dataclass(frozen=True)
class BitNoiseHasher:
    """Stateless noise source bound to a default seed.

    Holds no mutable fields, so one instance can be shared freely across
    threads. Every method accepts a ``seed`` keyword that overrides the
    bound seed for that call only.
    """

    seed: int = DEFAULT_SEED

    def _seed(self, seed: int | None) -> int:
        return self.seed if seed is None else seed

    def with_seed(self, seed: int) -> BitNoiseHasher:
        """Return a copy bound to ``seed``."""

        return replace(self, seed=seed)

    def hash(self, index: int, seed: int | None = None) -> int:
        return scalar_hash(index, self._seed(seed))

    def noise(self, *coords: int, seed: int | None = None) -> int:
        """Raw uint32 noise for 1 to 4 integer coordinates."""

        func = _noise.NOISE_BY_DIMENSION.get(len(coords))
        if func is None:
            raise ValueError(
                f"Expected 1 to 4 coordinates, got {len(coords)}. "
                f"Available: {sorted(_noise.NOISE_BY_DIMENSION)}"
            )
        return func(*coords, self._seed(seed))

    def zero_to_one(self, *coords: int, seed: int | None = None) -> float:
        return _noise.to_zero_to_one(self.noise(*coords, seed=seed))

    def neg_one_to_one(self, *coords: int, seed: int | None = None) -> float:
        return _noise.to_neg_one_to_one(self.noise(*coords, seed=seed))

    def noise_array(self, *coords, seed: int | None = None):
        return _vectorized.noise_array(*coords, seed=self._seed(seed))

    def zero_to_one_array(self, *coords, seed: int | None = None):
        return _vectorized.zero_to_one_array(*coords, seed=self._seed(seed))

    def neg_one_to_one_array(self, *coords, seed: int | None = None):
        return _vectorized.neg_one_to_one_array(*coords, seed=self._seed(seed))

    def grid(
        self,
        shape,
        origin=None,
        seed: int | None = None,
        mode: str = "raw",
    ):
        """Evaluate the field on an integer lattice (see ``noise_grid``)."""

        return _vectorized.noise_grid(
            shape, origin=origin, seed=self._seed(seed), mode=mode
        )
