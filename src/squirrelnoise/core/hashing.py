"""
SquirrelNoise5 bit-noise hash.

Squirrel Eiserloh's fifth raw noise function: an int32 position plus a seed
become 32 well-scrambled bits. Every input bit affects every output bit.
Released under CC-BY-3.0 US; attribution in source comments is sufficient.
"""

from .bits import UINT32_MAX, sanitize_seed

SQ5_BIT_NOISE1 = 0xD2A80A3F  # 11010010101010000000101000111111
SQ5_BIT_NOISE2 = 0xA884F197  # 10101000100001001111000110010111
SQ5_BIT_NOISE3 = 0x6C736F4B  # 01101100011100110110111101001011
SQ5_BIT_NOISE4 = 0xB79F3ABB  # 10110111100111110011101010111011
SQ5_BIT_NOISE5 = 0x1B56C4F5  # 00011011010101101100010011110101


def scalar_hash(combined_index, seed=0):
    """Hash a single (already folded) index and a seed into a uint32.

    Args:
        combined_index: Position or folded coordinate; read modulo 2**32.
        seed: Field selector; sanitized to ``abs(seed) & 0xFFFFFFFF``.

    Returns:
        Integer in ``[0, 0xFFFFFFFF]``.
    """
    mangled = combined_index & UINT32_MAX
    seed = sanitize_seed(seed)

    mangled = (mangled * SQ5_BIT_NOISE1) & UINT32_MAX
    mangled = (mangled + seed) & UINT32_MAX
    mangled = (mangled ^ (mangled >> 9)) & UINT32_MAX
    mangled = (mangled + SQ5_BIT_NOISE2) & UINT32_MAX
    mangled = (mangled ^ (mangled >> 11)) & UINT32_MAX
    mangled = (mangled * SQ5_BIT_NOISE3) & UINT32_MAX
    mangled = (mangled ^ (mangled >> 13)) & UINT32_MAX
    mangled = (mangled + SQ5_BIT_NOISE4) & UINT32_MAX
    mangled = (mangled ^ (mangled >> 15)) & UINT32_MAX
    mangled = (mangled * SQ5_BIT_NOISE5) & UINT32_MAX
    mangled = (mangled ^ (mangled >> 17)) & UINT32_MAX

    return mangled


squirrel_noise5 = scalar_hash
