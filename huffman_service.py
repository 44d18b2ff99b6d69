# // filename: huffman_service.py

import logging

from bit_stream import BitInputStream, BitOutputStream
from huffman_core import BITS_PER_WORD, PSEUDO_EOF, HuffmanLogic
from huffman_errors import MissingCodeError, TruncatedStreamError
from huffman_header import HeaderFormat, read_header, write_header

logger = logging.getLogger(__name__)


class HuffmanService:
    """
    Two-pass compressor: count, build the tree, write tag and header,
    then rewind the input and write one code per byte plus the EOF code.

    header_format only picks what compression writes; decompression
    follows the tag found in the data.
    """

    def __init__(self, header_format=HeaderFormat.TREE):
        self.logic = HuffmanLogic()
        self.header_format = header_format

    def compress(self, data):
        out = BitOutputStream()
        self.compress_stream(BitInputStream(data), out)
        return out.getvalue()

    def decompress(self, blob):
        out = BitOutputStream()
        try:
            self.decompress_stream(BitInputStream(blob), out)
        except TruncatedStreamError as exc:
            exc.partial = out.getvalue()
            raise
        return out.getvalue()

    def compress_stream(self, inp, out):
        counts = self.logic.count_frequencies(inp)
        root = self.logic.build_tree(counts)
        codes = self.logic.generate_codes(root)
        logger.debug("%d distinct bytes, %d input bytes",
                     sum(1 for c in counts if c), sum(counts))

        write_header(self.header_format, root, counts, out)
        inp.reset()
        self.write_compressed_bits(inp, codes, out)
        logger.debug("compressed to %d bits", len(out))

    def decompress_stream(self, inp, out):
        root = read_header(inp, self.logic)
        self.read_compressed_bits(root, inp, out)

    def write_compressed_bits(self, inp, codes, out):
        while True:
            word = inp.read_bits(BITS_PER_WORD)
            if word is None:
                break
            code = codes.get(word)
            if code is None:
                raise MissingCodeError(word)
            out.write_code(code)
        if PSEUDO_EOF not in codes:
            raise MissingCodeError(PSEUDO_EOF)
        out.write_code(codes[PSEUDO_EOF])

    def read_compressed_bits(self, root, inp, out):
        node = root
        written = 0
        while True:
            bit = inp.read_bits(1)
            if bit is None:
                logger.warning("input ended before the end-of-stream code, %d bytes decoded", written)
                raise TruncatedStreamError(
                    f"input ended before the end-of-stream code after {written} bytes")
            node = node.right if bit else node.left
            if node.is_leaf:
                if node.symbol == PSEUDO_EOF:
                    break
                out.write_bits(BITS_PER_WORD, node.symbol)
                written += 1
                node = root
