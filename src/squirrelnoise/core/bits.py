"""
Fixed-width integer helpers shared by the hash core and the folding wrappers.

Python ints never overflow, so every 32-bit step has to be masked explicitly.
"""

UINT32_MAX = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF


def fake_uint32_overflow(number):
    """Wrap ``number`` into the unsigned 32-bit range."""
    return number & UINT32_MAX


def fake_int32_overflow(number):
    """Fold values above ``INT32_MAX`` back into the negative range.

    Agrees with a two's complement reinterpretation only for values up to
    ``2 * INT32_MAX - 1``.
    """
    if number <= INT32_MAX:
        return number
    return (number % INT32_MAX) - INT32_MAX - 2


def sanitize_seed(seed):
    # Sign is discarded: seeds s and -s select the same field.
    return abs(seed or 0) & UINT32_MAX
