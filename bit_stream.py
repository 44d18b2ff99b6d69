# filename: bit_stream.py

from bitarray import bitarray
from bitarray.util import ba2int, int2ba


class BitInputStream:
    """Reads fixed-width groups of bits, most significant bit first."""

    def __init__(self, data=b""):
        self.bits = bitarray(endian="big")
        self.bits.frombytes(bytes(data))
        self.pos = 0

    @classmethod
    def from_file(cls, fp):
        stream = cls()
        stream.bits.fromfile(fp)
        return stream

    def read_bits(self, n):
        """
        Return the next n bits as an unsigned int, or None when fewer
        than n bits are left. The position only moves on a full read.
        """
        if self.pos + n > len(self.bits):
            return None
        if n == 1:
            val = self.bits[self.pos]
        else:
            val = ba2int(self.bits[self.pos:self.pos + n])
        self.pos += n
        return val

    def reset(self):
        self.pos = 0

    def bits_remaining(self):
        return len(self.bits) - self.pos


class BitOutputStream:
    """Collects bits in memory; the last byte is zero padded on output."""

    def __init__(self):
        self.bits = bitarray(endian="big")

    def write_bits(self, n, value):
        # Only the low n bits of value are kept
        if n <= 0:
            return
        self.bits.extend(int2ba(value & ((1 << n) - 1), length=n, endian="big"))

    def write_code(self, code):
        # code is a string of '0' and '1' characters
        self.bits.extend(code)

    def getvalue(self):
        return self.bits.tobytes()

    def flush(self, fp):
        fp.write(self.getvalue())

    def __len__(self):
        return len(self.bits)
