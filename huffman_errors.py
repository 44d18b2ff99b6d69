# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the compressor."""


class HuffmanFormatError(HuffmanError):
    """The compressed data is not in a recognized format."""


class TruncatedStreamError(HuffmanError):
    """
    Input ran out before the end-of-stream code was read.

    Bytes decoded before the failure are kept in ``partial``; they are
    never rolled back.
    """

    def __init__(self, message, partial=b""):
        super().__init__(message)
        self.partial = partial


class MissingCodeError(HuffmanError, KeyError):
    """The code table has no entry for a symbol being encoded."""

    def __init__(self, symbol):
        super().__init__(f"no code for symbol {symbol}")
        self.symbol = symbol

    def __str__(self):
        return self.args[0]
