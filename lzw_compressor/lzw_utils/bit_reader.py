from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int

from .errors import MalformedStreamError


class BitReader:
    """
    Reads fixed-width codes MSB-first from a packed byte stream.
    """

    def __init__(self, in_stream: BinaryIO, code_bits: int) -> None:
        """
        Load the whole stream into a bitarray.

        Args:
            in_stream: Binary stream holding the packed codes
            code_bits: Width of every code in bits
        """
        data = in_stream.read()
        self.code_bits = code_bits
        self.bits = bitarray(endian="big")
        self.bits.frombytes(data)
        self.bytes_read = len(data)
        self.pos = 0

    def bits_left(self) -> int:
        return len(self.bits) - self.pos

    def read_code(self) -> int:
        """
        Read the next code.

        Raises:
            MalformedStreamError: If the stream ends in the middle of a code
        """
        end = self.pos + self.code_bits
        if end > len(self.bits):
            raise MalformedStreamError(
                f"Stream truncated: {self.bits_left()} bits left, "
                f"{self.code_bits} needed for the next code"
            )
        code = ba2int(self.bits[self.pos:end])
        self.pos = end
        return code

    def check_end(self) -> None:
        """
        Verify that only the flush code follows the end-of-stream code.

        The writer never stores the last partial byte, so up to 7 low-order
        bits of the flush code may be missing; the rest must be zero.

        Raises:
            MalformedStreamError: If the flush code is cut short or other
                data follows it
        """
        left = self.bits_left()
        if left < self.code_bits - 7:
            raise MalformedStreamError(
                f"Stream truncated: flush code has only {left} bits"
            )
        if left > self.code_bits or self.bits[self.pos:].any():
            raise MalformedStreamError("Unexpected data after end-of-stream code")
