# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Huffman tree construction, code derivation and bit-by-bit decoding.
"""
from bitarray import bitarray

from huffarc.errors import CorruptStreamError

__all__ = ['Node', 'HuffmanTree', 'DecodeCursor',
           'build_tree', 'find_min', 'huffman_code']


class Node(object):
    """Node(freq, symbol=None, left=None, right=None)

There are two kinds of nodes (both have a 'freq' attribute):
  * leaf node: 'symbol' is the byte value, no children
  * internal node: 'symbol' is None, 'left' and 'right' are the children
"""
    __slots__ = ('freq', 'symbol', 'left', 'right')

    def __init__(self, freq, symbol=None, left=None, right=None):
        self.freq = freq
        self.symbol = symbol
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.symbol is not None

    def __repr__(self):
        if self.is_leaf:
            return 'Node(%d, symbol=%d)' % (self.freq, self.symbol)
        return 'Node(%d, left=%r, right=%r)' % (self.freq, self.left,
                                                self.right)


def find_min(nodes):
    """find_min(list) -> int

Return the index of the node with the lowest frequency.  On ties, the
first such node wins.  Raises `ValueError` for an empty list.
"""
    if not nodes:
        raise ValueError("find_min() arg is an empty list")
    imin = 0
    for i in range(1, len(nodes)):
        if nodes[i].freq < nodes[imin].freq:
            imin = i
    return imin


def build_tree(table):
    """build_tree(table) -> Node or None

Given a frequency table, construct a Huffman tree and return its root node.
Returns None when the table has no symbols.
"""
    # leaf nodes in ascending symbol order
    nodes = [Node(freq, sym) for sym, freq in table.entries()]

    # Repeatedly merge the two nodes with lowest frequencies.  With at most
    # 256 symbols, the quadratic scan is fine.
    while len(nodes) >= 2:
        left = nodes.pop(find_min(nodes))
        right = nodes.pop(find_min(nodes))
        nodes.append(Node(left.freq + right.freq, None, left, right))

    return nodes[0] if nodes else None


def huffman_code(root, endian='little'):
    """huffman_code(root, endian='little') -> dict

Traverse the tree and return the Huffman code, i.e. a dict mapping symbols
to bitarrays.  A left edge is represented by a 1 bit, a right edge by a
0 bit.  When the root is a leaf, its code is a single 1 bit (an empty code
could not be decoded).
"""
    result = {}
    if root is None:
        return result

    if root.is_leaf:
        result[root.symbol] = bitarray('1', endian)
        return result

    def traverse(nd, prefix):
        if nd.is_leaf:
            result[nd.symbol] = prefix
            return
        traverse(nd.left, prefix + '1')
        traverse(nd.right, prefix + '0')

    traverse(root, bitarray(0, endian))
    return result


class DecodeCursor(object):
    """DecodeCursor(root)

Position within a Huffman tree, used to decode a bitstream one symbol at a
time.  The cursor keeps its position between calls to `advance()`, so bits
may be supplied in arbitrary portions.
"""
    __slots__ = ('root', 'node')

    def __init__(self, root):
        self.root = root
        self.node = root

    def reset(self):
        self.node = self.root

    def advance(self, queue):
        """advance(queue) -> int or None

Consume bits from the front of `queue` until a leaf is reached, and return
its symbol.  Returns None when the queue runs out of bits before that; the
next call continues from the same position.  Raises `CorruptStreamError`
when the bits lead to a child which does not exist.
"""
        nd = self.node
        if nd is not None and nd is self.root and nd.is_leaf:
            # single symbol tree: each symbol is represented by one bit
            if not queue:
                return None
            queue.popleft()
            return nd.symbol

        while nd is not None and not nd.is_leaf and queue:
            nd = nd.left if queue.popleft() else nd.right
        self.node = nd

        if nd is None:
            raise CorruptStreamError("bits do not match any prefix code")
        if nd.is_leaf:
            self.reset()
            return nd.symbol
        return None


class HuffmanTree(object):
    """HuffmanTree(table)

Huffman tree built from a frequency table, along with its code.
"""
    def __init__(self, table):
        self.root = build_tree(table)
        self.codebook = huffman_code(self.root)

    def cursor(self):
        "Return a new decode cursor positioned at the root."
        return DecodeCursor(self.root)

    def nodes(self):
        "Iterate over all nodes (pre-order)."
        stack = [self.root] if self.root is not None else []
        while stack:
            nd = stack.pop()
            yield nd
            for child in nd.right, nd.left:
                if child is not None:
                    stack.append(child)

    def leaves(self):
        "Return the number of leaf nodes."
        return sum(1 for nd in self.nodes() if nd.is_leaf)

    def internal_nodes(self):
        "Return the number of internal nodes."
        return sum(1 for nd in self.nodes() if not nd.is_leaf)
