"""
Command-line report for the canonical Huffman encoder

Reads one line of text, checks it, encodes it and prints the coding report.

How to run:
  echo "the quick brown fox jumps over the lazy dog" | python report.py
  python report.py --input line.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import encoder
from huffman import render_symbol

MIN_LENGTH = 30
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
BITS_PREVIEW = 128
HEX_PREVIEW = 64


class InputValidationError(ValueError):
    pass


def read_input(stream) -> str:
    """
    First line of the stream without its line ending.
    Byte streams are decoded one character per byte so stray non-ASCII bytes reach validation.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("latin-1")
    line = line.rstrip("\n")
    if line.endswith("\r"): # only one CR belongs to the line ending
        line = line[:-1]
    return line


def validate_input(text: str, min_length: int = MIN_LENGTH) -> None:
    if len(text) < min_length:
        raise InputValidationError(f"Input must contain at least {min_length} characters.")
    for ch in text:
        code = ord(ch)
        if code < PRINTABLE_MIN or code > PRINTABLE_MAX:
            raise InputValidationError(f"Invalid character detected (ASCII {code}).")
    if not text: # only reachable with min_length 0
        raise InputValidationError("No valid characters to encode.")


def preview(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def format_report(text: str, result: encoder.EncodingResult) -> str:
    stats = result.stats
    lines: List[str] = [
        "",
        "=== Huffman Coding Report ===",
        f"Input length (characters): {len(text)}",
        f"Original size (bits): {stats.original_size}",
        f"Compressed size (bits): {stats.compressed_size}",
        f"Compression ratio: {stats.ratio:.4f}",
        f"Reduction: {stats.reduction * 100.0:.4f}%",
        "",
        "Frequency table (sorted by symbol):",
        "Symbol  ASCII  Freq",
    ]
    for symbol in sorted(result.frequencies):
        lines.append(f"{render_symbol(symbol):>4}{ord(symbol):>7}{result.frequencies[symbol]:>7}")

    lines += [
        "",
        "Symbol details (sorted by code length then symbol):",
        "Symbol  Freq  Length  TreeCode  Canonical",
    ]
    lengths = result.code_lengths
    for symbol in sorted(lengths, key=lambda s: (lengths[s], s)):
        lines.append(
            f"{render_symbol(symbol):>4}"
            f"{result.frequencies[symbol]:>7}"
            f"{lengths[symbol]:>8}"
            f"{result.raw_tree_codes[symbol]:>10}"
            f"{result.canonical_codes[symbol]:>11}"
        )

    lines += [
        "",
        "Huffman tree (preorder with parentheses):",
        result.tree_shape,
        "",
        f"Compressed output (first {BITS_PREVIEW} bits):",
        preview(result.compressed_bits, BITS_PREVIEW),
        f"Total compressed bits: {result.bit_count}",
        "Compressed output (hex):",
        preview(result.compressed_hex, HEX_PREVIEW),
    ]
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Canonical Huffman coding report for one line of printable ASCII text")
    ap.add_argument("--input", type=str, default=None, help="Read the line from this file instead of stdin")
    ap.add_argument("--min-length", type=int, default=MIN_LENGTH, help="Minimum number of characters required")
    args = ap.parse_args(argv)

    try:
        if args.input is None:
            text = read_input(getattr(sys.stdin, "buffer", sys.stdin))
        else:
            with open(args.input, "rb") as f:
                text = read_input(f)
        validate_input(text, args.min_length)
    except (OSError, InputValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = encoder.encode(text)
    sys.stdout.write(format_report(text, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
