"""
Command-line front end for the LZW file compressor.

    python lzw_cli.py --compress notes.txt      -> notes_compressed.txt
    python lzw_cli.py --decompress notes_compressed.txt
                                                -> notes_compressed_decompressed.txt
"""
import argparse
import os
import sys
import time

from lzw_compressor.LZW import LZWCompressor
from lzw_compressor.lzw_utils.errors import LZWError


def derive_output_path(input_path: str, suffix: str) -> str:
    """Build '<dir>/<name>_<suffix><ext>' next to the input file."""
    directory, file_name = os.path.split(input_path)
    stem, ext = os.path.splitext(file_name)
    return os.path.join(directory, f"{stem}_{suffix}{ext}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lzw-compressor", description="LZW File Compressor"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", "--compress", metavar="FILE", help="Compress file.")
    mode.add_argument("-d", "--decompress", metavar="FILE", help="Decompress file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse command-line arguments and run compression or decompression."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 1
    args = parser.parse_args(argv)

    lzw = LZWCompressor()
    start_time = time.perf_counter()
    try:
        if args.compress is not None:
            output_path = derive_output_path(args.compress, "compressed")
            lzw.compress_file(args.compress, output_path)
        else:
            output_path = derive_output_path(args.decompress, "decompressed")
            lzw.decompress_file(args.decompress, output_path)
    except (OSError, LZWError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    action = "compressed" if args.compress is not None else "decompressed"
    print(f"File has been {action} successfully!")
    print(f"Output written to {output_path}")
    print(f"Time Elapsed in milliseconds: {elapsed_ms:.3f}ms")
    if args.compress is not None:
        print(f"Decompressed size: {lzw.decompressed_size} B")
        print(f"Compressed size: {lzw.compressed_size} B")
    else:
        print(f"Compressed size: {lzw.compressed_size} B")
        print(f"Decompressed size: {lzw.decompressed_size} B")
    print(f"Ratio: {lzw.ratio:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
