# filename: huffman_core.py

import heapq
import itertools
import logging

logger = logging.getLogger(__name__)

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE


class HuffmanNode:
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


class HuffmanLogic:
    def count_frequencies(self, source):
        """Consume source once and count every 8-bit word in it."""
        counts = [0] * ALPH_SIZE
        while True:
            word = source.read_bits(BITS_PER_WORD)
            if word is None:
                break
            counts[word] += 1
        return counts

    def build_tree(self, counts):
        """
        Build the Huffman tree for counts plus the end-of-stream symbol.

        Nodes leave the heap lightest first; equal weights leave in the
        order they were created, so the same counts always give the same
        tree.
        """
        order = itertools.count()
        priority_queue = []
        for symbol, count in enumerate(counts):
            if count > 0:
                priority_queue.append((count, next(order), HuffmanNode(symbol, count)))

        # An empty input would leave the EOF leaf alone at the root with an
        # empty code, so pair it with a weightless placeholder.
        if not priority_queue:
            priority_queue.append((0, next(order), HuffmanNode(0, 0)))
        priority_queue.append((1, next(order), HuffmanNode(PSEUDO_EOF, 1)))
        heapq.heapify(priority_queue)
        logger.debug("building tree from %d leaves", len(priority_queue))

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            _, _, left = heapq.heappop(priority_queue)
            _, _, right = heapq.heappop(priority_queue)
            weight = left.weight + right.weight
            merged = HuffmanNode(None, weight, left, right)
            heapq.heappush(priority_queue, (weight, next(order), merged))

        return priority_queue[0][2]

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
        if node.is_leaf:
            codes[node.symbol] = current_code
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes
