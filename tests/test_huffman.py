import pytest

import huffman


def test_count_frequencies():
    assert huffman.count_frequencies("abracadabra") == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_count_frequencies_bytes():
    assert huffman.count_frequencies(b"\x00\x01\x00") == {0: 2, 1: 1}


def test_build_tree_empty_raises():
    with pytest.raises(ValueError):
        huffman.build_huffman_tree({})


def test_single_symbol_tree_is_one_leaf():
    tree = huffman.build_huffman_tree({"a": 30})
    assert len(tree) == 1
    root = tree.node(tree.root)
    assert root.is_leaf()
    assert root.symbol == "a"

    lengths, raw = huffman.extract_code_lengths(tree)
    assert lengths == {"a": 1}
    assert raw == {"a": "0"}
    assert huffman.render_tree(tree) == "a"


def test_two_symbols_merge_lowest_first():
    tree = huffman.build_huffman_tree({"a": 20, "b": 10})
    root = tree.node(tree.root)
    assert root.frequency == 30
    assert root.min_symbol == "a"
    assert tree.node(root.left).symbol == "b"
    assert tree.node(root.right).symbol == "a"
    assert huffman.render_tree(tree) == "(ba)"


def test_tie_break_on_min_symbol():
    ft = {"a": 5, "b": 2, "c": 1, "d": 1}
    tree = huffman.build_huffman_tree(ft)
    lengths, raw = huffman.extract_code_lengths(tree)
    assert lengths == {"a": 1, "b": 2, "c": 3, "d": 3}
    assert raw == {"b": "00", "c": "010", "d": "011", "a": "1"}
    assert huffman.render_tree(tree) == "((b(cd))a)"


def test_tree_is_deterministic_regardless_of_insertion_order():
    ft1 = {"x": 3, "y": 3, "z": 3, "w": 3}
    ft2 = {"w": 3, "z": 3, "y": 3, "x": 3}
    t1 = huffman.build_huffman_tree(ft1)
    t2 = huffman.build_huffman_tree(ft2)
    assert huffman.render_tree(t1) == huffman.render_tree(t2)
    assert huffman.extract_code_lengths(t1) == huffman.extract_code_lengths(t2)


def test_children_precede_parents_in_arena():
    tree = huffman.build_huffman_tree(huffman.count_frequencies("mississippi river"))
    for index, node in enumerate(tree.nodes):
        if not node.is_leaf():
            assert node.left < index and node.right < index
            assert node.frequency == tree.node(node.left).frequency + tree.node(node.right).frequency
            assert node.min_symbol == min(tree.node(node.left).min_symbol, tree.node(node.right).min_symbol)
    assert tree.root == len(tree) - 1
    # a full binary tree with n leaves has 2n - 1 nodes
    assert len(tree) == 2 * len(set("mississippi river")) - 1


def test_space_renders_as_placeholder():
    tree = huffman.build_huffman_tree({" ": 4, "a": 1})
    assert huffman.render_tree(tree) == "(a<sp>)"


def test_full_byte_alphabet_does_not_recurse():
    # skewed frequencies give a tree as deep as the alphabet
    ft = {b: 2 ** min(b, 60) for b in range(256)}
    tree = huffman.build_huffman_tree(ft)
    lengths, _ = huffman.extract_code_lengths(tree)
    assert len(lengths) == 256
    assert max(lengths.values()) > 60
    assert huffman.render_tree(tree).count("(") == 255
