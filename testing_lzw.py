import hashlib
import sys
import time
from pathlib import Path

from lzw_compressor.LZW import LZWCompressor


class TestLZW:
    """Round-trips every file in a sample directory and reports the results."""

    def __init__(self, test_dir: str = "test", results_dir: str = "test_results"):
        self.lzw = LZWCompressor()
        self.test_dir = Path(test_dir)
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(exist_ok=True)

    def _calculate_file_hash(self, file_path: Path) -> str:
        """Calculate SHA-256 hash of a file"""
        sha256_hash = hashlib.sha256()
        with open(file_path, "rb") as f:
            for byte_block in iter(lambda: f.read(4096), b""):
                sha256_hash.update(byte_block)
        return sha256_hash.hexdigest()

    def run_test(self, input_path: Path) -> dict:
        """Run compression and decompression on a single file"""
        compressed_path = self.results_dir / f"{input_path.name}.lzw"
        decompressed_path = self.results_dir / f"decompressed_{input_path.name}"

        print(f"\nTesting file: {input_path.name}")

        start_time = time.perf_counter()
        compressed_size, original_size = self.lzw.compress_file(
            str(input_path), str(compressed_path)
        )
        compress_time = time.perf_counter() - start_time
        ratio = self.lzw.ratio

        start_time = time.perf_counter()
        self.lzw.decompress_file(str(compressed_path), str(decompressed_path))
        decompress_time = time.perf_counter() - start_time

        success = self._calculate_file_hash(input_path) == self._calculate_file_hash(
            decompressed_path
        )
        print(f"Original size: {original_size / 1024:.2f} KB")
        print(f"Compressed size: {compressed_size / 1024:.2f} KB ({ratio:.2f}%)")
        print(f"Compression time: {compress_time:.2f} seconds")
        print(f"Decompression time: {decompress_time:.2f} seconds")
        print("Files match" if success else "Files don't match")

        return {
            "file": input_path.name,
            "original_size": original_size,
            "compressed_size": compressed_size,
            "compression_ratio": ratio,
            "compress_time": compress_time,
            "decompress_time": decompress_time,
            "success": success,
        }

    def run_all_tests(self) -> bool:
        """Run every regular file found in the sample directory"""
        if not self.test_dir.is_dir():
            print(f"Directory not found: {self.test_dir}")
            return False

        results = [
            self.run_test(path)
            for path in sorted(self.test_dir.iterdir())
            if path.is_file()
        ]

        print("\nTest Summary:")
        print("=" * 50)
        for result in results:
            status = "OK  " if result["success"] else "FAIL"
            print(
                f"{status} {result['file']}: "
                f"{result['original_size'] / 1024:.2f} KB -> "
                f"{result['compressed_size'] / 1024:.2f} KB "
                f"({result['compression_ratio']:.2f}%)"
            )
        print("-" * 50)
        return all(result["success"] for result in results)


if __name__ == "__main__":
    directory = sys.argv[1] if len(sys.argv) > 1 else "test"
    tester = TestLZW(test_dir=directory)
    sys.exit(0 if tester.run_all_tests() else 1)
