from dataclasses import dataclass
from typing import Dict, List, Sequence

import bitpack
import canonical
import huffman


@dataclass
class EncodingResult:
    frequencies: Dict
    code_lengths: Dict
    canonical_codes: Dict
    raw_tree_codes: Dict  # tree-shape codes, display only
    tree_shape: str
    compressed_bits: str
    compressed_hex: str
    bit_count: int  # exact length of compressed_bits, needed to undo the hex padding
    stats: bitpack.CompressionStats


@dataclass
class Codebook:
    frequencies: Dict
    code_lengths: Dict
    canonical_codes: Dict
    raw_tree_codes: Dict  # tree-shape codes, display only
    tree_shape: str


def build_codebook(symbols: Sequence) -> Codebook: # symbols: non-empty, already validated sequence
    ft = huffman.count_frequencies(symbols)
    tree = huffman.build_huffman_tree(ft)
    code_lengths, raw_codes = huffman.extract_code_lengths(tree)
    return Codebook(
        frequencies=ft,
        code_lengths=code_lengths,
        canonical_codes=canonical.build_canonical_codes(code_lengths),
        raw_tree_codes=raw_codes,
        tree_shape=huffman.render_tree(tree),
    )


def encode_with(codebook: Codebook, symbols: Sequence) -> EncodingResult:
    bits = bitpack.pack_bits(symbols, codebook.canonical_codes)
    return EncodingResult(
        frequencies=codebook.frequencies,
        code_lengths=codebook.code_lengths,
        canonical_codes=codebook.canonical_codes,
        raw_tree_codes=codebook.raw_tree_codes,
        tree_shape=codebook.tree_shape,
        compressed_bits=bits,
        compressed_hex=bitpack.bits_to_hex(bits),
        bit_count=len(bits),
        stats=bitpack.compression_stats(len(symbols), len(bits)),
    )


def encode(symbols: Sequence) -> EncodingResult:
    return encode_with(build_codebook(symbols), symbols)


def decode(result: EncodingResult) -> List:
    """
    Recover the symbol sequence from the hex payload, its bit count and the canonical table
    """
    bits = bitpack.hex_to_bits(result.compressed_hex, result.bit_count)
    return canonical.decode_bits(bits, result.canonical_codes)
