"""
LZW compression and decompression with a fixed code width.

Compressed layout: big-endian packed codes of `bits` bits each, ending with
the end-of-stream code (all ones) and a zero flush code. There is no header,
so both sides must agree on the code width.
"""

from typing import BinaryIO

from compressor_ABC import Compressor
from .lzw_utils.bit_reader import BitReader
from .lzw_utils.bit_writer import BitWriter
from .lzw_utils.dictionary import DecoderDictionary, EncoderDictionary
from .lzw_utils.errors import MalformedStreamError


class LZWCompressor(Compressor):
    """
    LZW codec with a fixed code width and a hashed string table.
    """

    BITS = 14
    # Primes larger than 2**bits, one per supported code width
    TABLE_SIZES = {12: 5021, 13: 9029, 14: 18041}

    def __init__(self, bits: int | None = None, verbose: bool = False) -> None:
        super().__init__(verbose=verbose)
        if bits is None:
            bits = self.BITS
        if bits not in self.TABLE_SIZES:
            raise ValueError(
                f"Unsupported code width {bits}, expected one of "
                f"{sorted(self.TABLE_SIZES)}"
            )
        self.bits = bits
        self.table_size = self.TABLE_SIZES[bits]
        self.max_value = (1 << bits) - 1  # end-of-stream code
        self.max_code = self.max_value - 1

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Greedy longest-match LZW encoding.

        The current match is extended byte by byte while the dictionary
        knows it. On a miss its code is emitted, the extended string is
        learned if there is room, and matching restarts from the new byte.
        """
        self._reset()
        data = input_stream.read()
        self.decompressed_size = len(data)

        dictionary = EncoderDictionary(self.bits, self.table_size)
        writer = BitWriter(output_stream, self.bits)

        if data:
            current = data[0]
            for i in range(1, len(data)):
                char = data[i]
                code, slot = dictionary.lookup(current, char)
                if code is not None:
                    current = code
                    continue
                dictionary.insert(slot, current, char)
                writer.emit(current)
                current = char
            writer.emit(current)

        writer.emit(self.max_value)
        writer.emit(0)  # drains the end-of-stream code

        self.compressed_size = writer.bytes_written
        self._log_summary(len(dictionary), dictionary.is_full)
        return "\n".join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Rebuild the encoder's dictionary while expanding its codes.

        Raises:
            MalformedStreamError: If the input is truncated, has trailing
                data or holds codes the encoder could not have produced
        """
        self._reset()
        reader = BitReader(input_stream, self.bits)
        self.compressed_size = reader.bytes_read

        dictionary = DecoderDictionary(self.bits)
        result = bytearray()

        old_code = reader.read_code()
        if old_code != self.max_value:
            if old_code > 255:
                raise MalformedStreamError(
                    f"First code {old_code} is not a literal byte"
                )
            result.append(old_code)
            last_char = old_code

            stack = bytearray()
            new_code = reader.read_code()
            while new_code != self.max_value:
                if new_code > dictionary.next_code:
                    raise MalformedStreamError(
                        f"Code {new_code} is not defined yet "
                        f"(next code is {dictionary.next_code})"
                    )
                stack.clear()
                if new_code == dictionary.next_code:
                    # String being defined by this very step: old + first char of old
                    stack.append(last_char)
                    dictionary.expand(old_code, stack)
                else:
                    dictionary.expand(new_code, stack)

                last_char = stack[-1]
                stack.reverse()
                result += stack

                dictionary.add(old_code, last_char)
                old_code = new_code
                new_code = reader.read_code()

        reader.check_end()
        output_stream.write(result)

        self.decompressed_size = len(result)
        self._log_summary(len(dictionary), dictionary.is_full)
        return "\n".join(self.log)

    def _log_summary(self, learned: int, full: bool) -> None:
        self._log(f"Decompressed size: {self.decompressed_size} B")
        self._log(f"Compressed size: {self.compressed_size} B")
        self._log(f"Ratio: {self.ratio:.2f}%")
        self._log(
            f"Dictionary codes learned: {learned} of {self.max_code - 255}"
            + (" (full)" if full else "")
        )
