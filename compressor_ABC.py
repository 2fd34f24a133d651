from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Callable, Tuple


class Compressor(ABC):
    """
    Interface for compressing and decompressing files with a single
    stream-to-stream algorithm.

    After every call the instance holds the size of the compressed and the
    decompressed side, so callers can report sizes and ratio afterwards.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.log: list[str] = []
        self.compressed_size = 0
        self.decompressed_size = 0

    @property
    def ratio(self) -> float:
        """Compressed size as a percentage of the decompressed size."""
        if not self.decompressed_size:
            return 0.0
        return self.compressed_size / self.decompressed_size * 100.0

    def _reset(self) -> None:
        self.log.clear()
        self.compressed_size = 0
        self.decompressed_size = 0

    def _log(self, line: str) -> None:
        self.log.append(line)
        if self.verbose:
            print(line)

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read all bytes from input_stream, compress them and write the
        result to output_stream.

        Args:
            input_stream: Stream with the raw data
            output_stream: Stream receiving the compressed data

        Returns:
            Log information
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read a compressed stream, restore the original bytes and write
        them to output_stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream receiving the raw data

        Returns:
            Log information
        """

    def compress_file(self, input_file: str, output_file: str) -> Tuple[int, int]:
        """
        Compress a file.

        Args:
            input_file: Path to the file to compress
            output_file: Path of the compressed file to create

        Returns:
            (compressed_size, decompressed_size)
        """
        self._process_file(self.compress, input_file, output_file)
        return self.compressed_size, self.decompressed_size

    def decompress_file(self, input_file: str, output_file: str) -> Tuple[int, int]:
        """
        Decompress a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path of the restored file to create

        Returns:
            (compressed_size, decompressed_size)
        """
        self._process_file(self.decompress, input_file, output_file)
        return self.compressed_size, self.decompressed_size

    def _process_file(
        self,
        operation: Callable[[BinaryIO, BinaryIO], str],
        input_file: str,
        output_file: str,
    ) -> None:
        # A partially written output file is removed on any failure
        with open(input_file, "rb") as in_file:
            out_file = open(output_file, "wb")
            try:
                with out_file:
                    operation(in_file, out_file)
            except BaseException:
                if os.path.exists(output_file):
                    os.remove(output_file)
                raise

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper for compressing bytes in memory.

        Args:
            data: Raw data
            **kwargs: Passed to the compressor constructor

        Returns:
            (compressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper for decompressing bytes in memory.

        Args:
            data: Compressed data
            **kwargs: Passed to the compressor constructor

        Returns:
            (decompressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
