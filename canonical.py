from fractions import Fraction
from typing import Dict, List


def to_bit_string(value: int, length: int) -> str: # value written as exactly `length` bits, zero padded on the left
    return format(value, "b").zfill(length) if length > 0 else ""


def canonical_order(code_lengths: Dict) -> List:
    return sorted(code_lengths, key=lambda s: (code_lengths[s], s))


def build_canonical_codes(code_lengths: Dict) -> Dict: # code_lengths: dict of symbol -> bit length
    """
    Assign canonical codes from lengths alone.
    Symbols are taken in (length, symbol) order; each code is the previous code plus one,
    shifted left whenever the length grows. The tree shape plays no part here.
    """
    codes = {}
    code = 0
    prev_len = None

    for symbol in canonical_order(code_lengths):
        length = code_lengths[symbol]
        if prev_len is not None:
            code += 1
            if length > prev_len:
                code <<= (length - prev_len)
        codes[symbol] = to_bit_string(code, length)
        prev_len = length

    return codes


def kraft_sum(code_lengths: Dict) -> Fraction:
    return sum((Fraction(1, 2 ** length) for length in code_lengths.values()), Fraction(0))


def is_prefix_free(codes: Dict) -> bool:
    # After sorting, a prefix always sorts directly before some word it prefixes
    words = sorted(codes.values())
    return all(not words[i + 1].startswith(words[i]) for i in range(len(words) - 1))


def decode_bits(bits: str, codes: Dict) -> list: # bits: string of '0'/'1', codes: dict of symbol -> canonical code
    """
    Greedy prefix matching over a prefix-free code table
    Raises ValueError on bits that match no code or a dangling partial code at the end
    """
    lookup = {code: symbol for symbol, code in codes.items()}
    max_len = max((len(c) for c in lookup), default=0)

    decoded = []
    current = ""
    for bit in bits:
        if bit not in "01":
            raise ValueError(f"Invalid bit {bit!r} in bit string")
        current += bit
        if current in lookup:
            decoded.append(lookup[current])
            current = ""
        elif len(current) >= max_len:
            raise ValueError("Invalid bitstream: no matching Huffman code.")

    if current:
        raise ValueError(f"Invalid bitstream: {len(current)} trailing bits do not form a code.")
    return decoded
