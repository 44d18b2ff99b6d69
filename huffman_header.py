# filename: huffman_header.py

import enum
import logging

from huffman_core import ALPH_SIZE, PSEUDO_EOF, HuffmanLogic, HuffmanNode
from huffman_errors import HuffmanFormatError, TruncatedStreamError

logger = logging.getLogger(__name__)

BITS_PER_INT = 32
BITS_PER_SYMBOL = 9
HUFF_NUMBER = 0xFACE8200

# A tree of ALPH_SIZE + 1 leaves is never deeper than this
MAX_TREE_DEPTH = ALPH_SIZE


class HeaderFormat(enum.Enum):
    """Header layouts, valued by the tag written in front of them."""

    TREE = HUFF_NUMBER | 1
    COUNTS = HUFF_NUMBER | 2

    @classmethod
    def from_tag(cls, tag):
        try:
            return cls(tag)
        except ValueError:
            raise HuffmanFormatError(f"unrecognized header tag {tag:#010x}") from None


def _read(source, n, what):
    value = source.read_bits(n)
    if value is None:
        raise TruncatedStreamError(f"input ended while reading {what}")
    return value


def write_tree_header(root, out):
    """Pre-order: 0 for an internal node, 1 plus a 9-bit symbol for a leaf."""
    if root.is_leaf:
        out.write_bits(1, 1)
        out.write_bits(BITS_PER_SYMBOL, root.symbol)
        return
    out.write_bits(1, 0)
    write_tree_header(root.left, out)
    write_tree_header(root.right, out)


def read_tree_header(source):
    root = _read_tree_node(source, 0)
    if root.is_leaf:
        raise HuffmanFormatError("tree header holds a single leaf")
    return root


def _read_tree_node(source, depth):
    if depth > MAX_TREE_DEPTH:
        raise HuffmanFormatError(f"tree header deeper than {MAX_TREE_DEPTH} levels")
    if _read(source, 1, "tree header") == 0:
        left = _read_tree_node(source, depth + 1)
        right = _read_tree_node(source, depth + 1)
        return HuffmanNode(None, left.weight + right.weight, left, right)

    symbol = _read(source, BITS_PER_SYMBOL, "tree header")
    if symbol > PSEUDO_EOF:
        raise HuffmanFormatError(f"leaf symbol {symbol} out of range")
    # Weights are not needed once the codes are fixed
    return HuffmanNode(symbol, 1)


def write_counts_header(counts, out):
    for count in counts:
        if count >= 1 << BITS_PER_INT:
            raise HuffmanFormatError(f"count {count} does not fit the counts header")
        out.write_bits(BITS_PER_INT, count)


def read_counts_header(source, logic=None):
    """Read ALPH_SIZE counts and rebuild the compressor's tree from them."""
    counts = [_read(source, BITS_PER_INT, "counts header") for _ in range(ALPH_SIZE)]
    return (logic or HuffmanLogic()).build_tree(counts)


def write_header(header_format, root, counts, out):
    logger.debug("writing %s header", header_format.name.lower())
    out.write_bits(BITS_PER_INT, header_format.value)
    if header_format is HeaderFormat.TREE:
        write_tree_header(root, out)
    else:
        write_counts_header(counts, out)


def read_header(source, logic=None):
    tag = source.read_bits(BITS_PER_INT)
    if tag is None:
        raise HuffmanFormatError("input too short to hold a header tag")
    header_format = HeaderFormat.from_tag(tag)
    logger.debug("reading %s header", header_format.name.lower())
    if header_format is HeaderFormat.TREE:
        return read_tree_header(source)
    return read_counts_header(source, logic)
