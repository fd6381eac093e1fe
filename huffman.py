import heapq
from typing import Dict, Iterable, List, Optional, Tuple


class HuffmanNode: # Arena record for the Huffman tree
    def __init__(self, symbol, frequency, min_symbol, left=None, right=None):
        self.symbol = symbol    # symbol for leaves, None for internal nodes
        self.frequency = frequency
        self.min_symbol = min_symbol # smallest symbol in this subtree, used for tie-breaks
        self.left = left    # arena index of left child or None
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree: # nodes live in one list, children always come before their parent
    def __init__(self, nodes: List[HuffmanNode], root: int):
        self.nodes = nodes
        self.root = root

    def __len__(self):
        return len(self.nodes)

    def node(self, index: int) -> HuffmanNode:
        return self.nodes[index]


def count_frequencies(symbols: Iterable) -> Dict: # symbols: any iterable of hashable, ordered symbols
    ft = {}
    for s in symbols:
        ft[s] = ft.get(s, 0) + 1
    return ft


def build_huffman_tree(frequency_table: Dict) -> HuffmanTree: # frequency_table: dict of symbol -> frequency
    if not frequency_table:
        raise ValueError("cannot build a Huffman tree from an empty frequency table")

    nodes: List[HuffmanNode] = []
    priority_queue = []
    for symbol in sorted(frequency_table):
        nodes.append(HuffmanNode(symbol, frequency_table[symbol], symbol))
        # min_symbol is unique among live nodes, so the index never decides order
        priority_queue.append((frequency_table[symbol], symbol, len(nodes) - 1))
    heapq.heapify(priority_queue)

    while len(priority_queue) > 1:
        left_freq, left_min, left = heapq.heappop(priority_queue)
        right_freq, right_min, right = heapq.heappop(priority_queue)
        merged = HuffmanNode(None, left_freq + right_freq, min(left_min, right_min), left, right)
        nodes.append(merged) # node id is its arena index
        heapq.heappush(priority_queue, (merged.frequency, merged.min_symbol, len(nodes) - 1))

    return HuffmanTree(nodes, priority_queue[0][2]) # root of the tree


def extract_code_lengths(tree: HuffmanTree) -> Tuple[Dict, Dict]:
    """
    Walk the tree depth first (left = '0', right = '1')
    Returns (code_lengths, raw_codes); raw codes depend on tree shape and are only for display
    """
    lengths = {}
    raw_codes = {}

    root = tree.node(tree.root)
    if root.is_leaf():
        # A lone leaf still needs one bit per symbol
        lengths[root.symbol] = 1
        raw_codes[root.symbol] = "0"
        return lengths, raw_codes

    stack = [(tree.root, "")]
    while stack:
        index, path = stack.pop()
        node = tree.node(index)
        if node.is_leaf():
            lengths[node.symbol] = len(path)
            raw_codes[node.symbol] = path
            continue
        # right pushed first so the left subtree is visited first
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))

    return lengths, raw_codes


def render_symbol(symbol) -> str:
    return "<sp>" if symbol == " " else str(symbol)


def render_tree(tree: HuffmanTree) -> str:
    """
    Preorder rendering: leaves as their symbol, internal nodes as (left right)
    """
    out = []
    stack: List[Optional[int]] = [tree.root]
    while stack:
        index = stack.pop()
        if index is None: # closes an internal node
            out.append(")")
            continue
        node = tree.node(index)
        if node.is_leaf():
            out.append(render_symbol(node.symbol))
        else:
            out.append("(")
            stack.append(None)
            stack.append(node.right)
            stack.append(node.left)
    return "".join(out)
