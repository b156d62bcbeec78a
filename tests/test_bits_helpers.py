import unittest

from squirrelnoise.core.bits import (
    INT32_MAX,
    UINT32_MAX,
    fake_int32_overflow,
    fake_uint32_overflow,
    sanitize_seed,
)


class BitsHelpersTests(unittest.TestCase):
    def test_constants_match_32_bit_limits(self):
        self.assertEqual(UINT32_MAX, 4294967295)
        self.assertEqual(INT32_MAX, 2147483647)

    def test_fake_uint32_overflow_wraps_both_directions(self):
        self.assertEqual(fake_uint32_overflow(0), 0)
        self.assertEqual(fake_uint32_overflow(UINT32_MAX), UINT32_MAX)
        self.assertEqual(fake_uint32_overflow(UINT32_MAX + 1), 0)
        self.assertEqual(fake_uint32_overflow(UINT32_MAX + 6), 5)
        self.assertEqual(fake_uint32_overflow(-1), UINT32_MAX)
        self.assertEqual(fake_uint32_overflow(198491317 * 5), 992456585)

    def test_fake_int32_overflow_folds_values_above_int32_max(self):
        self.assertEqual(fake_int32_overflow(-5), -5)
        self.assertEqual(fake_int32_overflow(INT32_MAX), INT32_MAX)
        self.assertEqual(fake_int32_overflow(INT32_MAX + 1), -(2**31))
        self.assertEqual(fake_int32_overflow(INT32_MAX + 2), -INT32_MAX)
        self.assertEqual(fake_int32_overflow(2 * INT32_MAX - 1), -3)
        # Diverges from two's complement at the very top of the range.
        self.assertEqual(fake_int32_overflow(UINT32_MAX), -(2**31))

    def test_sanitize_seed_drops_sign_and_masks(self):
        self.assertEqual(sanitize_seed(0), 0)
        self.assertEqual(sanitize_seed(None), 0)
        self.assertEqual(sanitize_seed(1337), 1337)
        self.assertEqual(sanitize_seed(-1337), 1337)
        self.assertEqual(sanitize_seed(-(2**31)), 2**31)
        self.assertEqual(sanitize_seed(2**32 + 7), 7)
        self.assertEqual(sanitize_seed(-(2**32 + 7)), 7)


if __name__ == "__main__":
    unittest.main()
