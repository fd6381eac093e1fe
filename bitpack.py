from dataclasses import dataclass
from typing import Dict, Iterable

HEX_DIGITS = "0123456789ABCDEF"
BITS_PER_SYMBOL = 8 # baseline: one byte per input symbol


@dataclass
class CompressionStats:
    original_size: int  # bits
    compressed_size: int  # bits
    ratio: float
    reduction: float


def pack_bits(symbols: Iterable, codes: Dict) -> str: # symbols in original input order, codes: dict of symbol -> bit string
    return "".join(codes[s] for s in symbols)


def compression_stats(input_length: int, compressed_size: int) -> CompressionStats:
    original_size = BITS_PER_SYMBOL * input_length
    ratio = compressed_size / original_size if original_size else 0.0
    return CompressionStats(
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=ratio,
        reduction=1.0 - ratio,
    )


def bits_to_hex(bits: str) -> str:
    """
    Converts a bit string to hex, one digit per 4-bit group from the most significant end.
    A short final group is padded with zero bits on the right, so the pad count is lost:
    keep len(bits) alongside the result to get the exact bits back (see hex_to_bits).
    """
    out = []
    for i in range(0, len(bits), 4):
        nibble = bits[i:i + 4].ljust(4, "0")
        out.append(HEX_DIGITS[int(nibble, 2)])
    return "".join(out)


def hex_to_bits(hex_string: str, bit_count: int) -> str:
    """
    Inverse of bits_to_hex given the exact number of bits that were packed
    """
    if not hex_string:
        if bit_count != 0:
            raise ValueError("bit count must be 0 for an empty hex string")
        return ""

    max_bits = 4 * len(hex_string)
    if not max_bits - 3 <= bit_count <= max_bits: # at most 3 pad bits in the last digit
        raise ValueError(f"bit count {bit_count} does not fit {len(hex_string)} hex digits")

    bits = "".join(format(int(digit, 16), "04b") for digit in hex_string)
    if "1" in bits[bit_count:]:
        raise ValueError("padding bits must be zero")
    return bits[:bit_count]
