class LZWError(Exception):
    """Base class for errors raised by the LZW codec."""


class MalformedStreamError(LZWError, ValueError):
    """
    The compressed input is truncated, corrupted or was not produced
    by this codec with the same code width.
    """
