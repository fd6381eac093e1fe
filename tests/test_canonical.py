from fractions import Fraction

import pytest

import canonical
import huffman


def test_to_bit_string_pads_left():
    assert canonical.to_bit_string(2, 4) == "0010"
    assert canonical.to_bit_string(0, 1) == "0"


def test_canonical_codes_from_lengths():
    codes = canonical.build_canonical_codes({"a": 1, "b": 2, "c": 3, "d": 3})
    assert codes == {"a": "0", "b": "10", "c": "110", "d": "111"}


def test_equal_lengths_ordered_by_symbol():
    codes = canonical.build_canonical_codes({"b": 1, "a": 1})
    assert codes == {"a": "0", "b": "1"}


def test_length_jump_shifts_code():
    codes = canonical.build_canonical_codes({"a": 1, "b": 3, "c": 3, "d": 3, "e": 3})
    assert codes == {"a": "0", "b": "100", "c": "101", "d": "110", "e": "111"}


def test_single_symbol():
    assert canonical.build_canonical_codes({"z": 1}) == {"z": "0"}


def test_codes_increase_in_canonical_order():
    lengths, _ = huffman.extract_code_lengths(
        huffman.build_huffman_tree(huffman.count_frequencies("she sells sea shells by the sea shore")))
    codes = canonical.build_canonical_codes(lengths)
    ordered = canonical.canonical_order(lengths)
    for prev, cur in zip(ordered, ordered[1:]):
        shift = lengths[cur] - lengths[prev]
        assert int(codes[cur], 2) >= (int(codes[prev], 2) + 1) << shift
    assert all(len(codes[s]) == lengths[s] for s in lengths)
    assert canonical.is_prefix_free(codes)


def test_same_lengths_give_same_codes_regardless_of_tree():
    ft1 = {"a": 5, "b": 2, "c": 1, "d": 1}
    ft2 = {"a": 10, "b": 4, "c": 3, "d": 2}
    l1, raw1 = huffman.extract_code_lengths(huffman.build_huffman_tree(ft1))
    l2, raw2 = huffman.extract_code_lengths(huffman.build_huffman_tree(ft2))
    assert l1 == l2
    assert raw1 != raw2
    assert canonical.build_canonical_codes(l1) == canonical.build_canonical_codes(l2)


def test_kraft_sum():
    assert canonical.kraft_sum({"a": 1, "b": 2, "c": 3, "d": 3}) == 1
    assert canonical.kraft_sum({"a": 1}) == Fraction(1, 2)


def test_is_prefix_free_detects_prefix():
    assert not canonical.is_prefix_free({"a": "0", "b": "01"})
    assert canonical.is_prefix_free({"a": "0", "b": "10", "c": "11"})


def test_decode_bits():
    codes = {"a": "0", "b": "10", "c": "110", "d": "111"}
    assert canonical.decode_bits("0101101110", codes) == list("abcda")


@pytest.mark.parametrize("bits", ["01", "0111x", "11"])
def test_decode_bits_rejects_bad_input(bits):
    codes = {"a": "0", "b": "10", "c": "110", "d": "111"}
    with pytest.raises(ValueError):
        canonical.decode_bits(bits, codes)


def test_decode_bits_rejects_unmatched_code():
    # "1" matches nothing in a single-symbol table
    with pytest.raises(ValueError):
        canonical.decode_bits("001", {"a": "0"})
