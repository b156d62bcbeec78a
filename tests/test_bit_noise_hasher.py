import dataclasses
import threading
import unittest

import numpy as np

from squirrelnoise import BitNoiseHasher
from squirrelnoise.core import noise as n
from squirrelnoise.core.hashing import scalar_hash


class BitNoiseHasherTests(unittest.TestCase):
    def test_default_seed_is_zero(self):
        hasher = BitNoiseHasher()
        self.assertEqual(hasher.seed, 0)
        self.assertEqual(hasher.hash(0), 377036288)
        self.assertEqual(hasher.noise(0, 0, 0, 0), 377036288)

    def test_noise_dispatches_on_coordinate_count(self):
        hasher = BitNoiseHasher(seed=4)
        self.assertEqual(hasher.noise(7), n.noise_1d(7, 4))
        self.assertEqual(hasher.noise(7, 8), n.noise_2d(7, 8, 4))
        self.assertEqual(hasher.noise(1, 2, 3), n.noise_3d(1, 2, 3, 4))
        self.assertEqual(hasher.noise(1, 2, 3, 4), n.noise_4d(1, 2, 3, 4, 4))

    def test_noise_rejects_unsupported_coordinate_count(self):
        hasher = BitNoiseHasher()
        with self.assertRaises(ValueError):
            hasher.noise()
        with self.assertRaises(ValueError) as exc:
            hasher.noise(1, 2, 3, 4, 5)
        self.assertIn("Available:", str(exc.exception))

    def test_per_call_seed_overrides_bound_seed(self):
        hasher = BitNoiseHasher(seed=1)
        self.assertEqual(hasher.noise(3, 5, seed=99), 2519907639)
        self.assertEqual(hasher.hash(42, seed=1337), scalar_hash(42, 1337))
        self.assertEqual(hasher.noise(3, 5, seed=0), n.noise_2d(3, 5, 0))
        self.assertEqual(hasher.noise(3, 5), n.noise_2d(3, 5, 1))

    def test_normalized_values(self):
        hasher = BitNoiseHasher(seed=12)
        self.assertEqual(hasher.zero_to_one(5, 6), n.noise_2d_zero_to_one(5, 6, 12))
        self.assertEqual(
            hasher.neg_one_to_one(5, 6, 7), n.noise_3d_neg_one_to_one(5, 6, 7, 12)
        )
        self.assertEqual(
            hasher.zero_to_one(1, seed=3), n.noise_1d_zero_to_one(1, 3)
        )

    def test_is_frozen_and_with_seed_returns_copy(self):
        hasher = BitNoiseHasher(seed=1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            hasher.seed = 2
        other = hasher.with_seed(2)
        self.assertEqual(hasher.seed, 1)
        self.assertEqual(other.seed, 2)
        self.assertEqual(other, BitNoiseHasher(seed=2))
        self.assertEqual(hash(other), hash(BitNoiseHasher(seed=2)))

    def test_array_methods_use_bound_seed(self):
        hasher = BitNoiseHasher(seed=21)
        xs = np.arange(-5, 5)
        self.assertEqual(
            hasher.noise_array(xs).tolist(), [n.noise_1d(int(x), 21) for x in xs]
        )
        self.assertEqual(
            hasher.zero_to_one_array(xs, xs).tolist(),
            [n.noise_2d_zero_to_one(int(x), int(x), 21) for x in xs],
        )
        self.assertEqual(
            hasher.neg_one_to_one_array(xs, seed=2).tolist(),
            [n.noise_1d_neg_one_to_one(int(x), 2) for x in xs],
        )

    def test_grid_uses_bound_seed(self):
        hasher = BitNoiseHasher(seed=6)
        grid = hasher.grid((2, 3), origin=(4, 5), mode="zero_to_one")
        self.assertEqual(grid.shape, (2, 3))
        self.assertEqual(grid[1, 2], n.noise_2d_zero_to_one(5, 7, 6))
        self.assertEqual(
            int(hasher.grid((2,), seed=9)[1]), n.noise_1d(1, 9)
        )

    def test_shared_instance_is_thread_safe(self):
        hasher = BitNoiseHasher(seed=77)
        expected = [hasher.noise(i, i * 3) for i in range(300)]
        results = {}

        def worker(name, order):
            results[name] = {i: hasher.noise(i, i * 3) for i in order}

        threads = [
            threading.Thread(target=worker, args=("forward", range(300))),
            threading.Thread(target=worker, args=("backward", range(299, -1, -1))),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for name in ("forward", "backward"):
            self.assertEqual([results[name][i] for i in range(300)], expected)


if __name__ == "__main__":
    unittest.main()
