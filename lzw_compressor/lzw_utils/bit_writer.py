from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba


class BitWriter:
    """
    Packs fixed-width codes MSB-first into an output byte stream.

    Codes are appended to a bitarray accumulator and every complete byte is
    written out straight away, so at most 7 bits are ever left pending.
    """

    def __init__(self, out_stream: BinaryIO, code_bits: int) -> None:
        """
        Args:
            out_stream: Binary stream receiving the packed bytes
            code_bits: Width of every code in bits
        """
        self.out_stream = out_stream
        self.code_bits = code_bits
        self.bits = bitarray(endian="big")
        self.bytes_written = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits buffered but not yet written."""
        return len(self.bits)

    def emit(self, code: int) -> None:
        """
        Append one code and write out every complete byte.

        Raises:
            ValueError: If the code does not fit in code_bits
        """
        if code < 0 or code >> self.code_bits:
            raise ValueError(f"Code {code} does not fit in {self.code_bits} bits")
        self.bits.extend(int2ba(code, length=self.code_bits, endian="big"))

        ready = len(self.bits) // 8 * 8
        if ready:
            self.out_stream.write(self.bits[:ready].tobytes())
            del self.bits[:ready]
            self.bytes_written += ready // 8
