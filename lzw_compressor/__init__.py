"""
Fixed-width LZW file compressor.
"""
from .LZW import LZWCompressor
from .lzw_utils.errors import LZWError, MalformedStreamError

__all__ = ["LZWCompressor", "LZWError", "MalformedStreamError"]
