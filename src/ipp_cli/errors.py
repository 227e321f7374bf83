"""Exception types for IPP CLI."""


class IppError(Exception):
    """Base class for all errors raised by ipp_cli."""


class InvalidRangeError(IppError, ValueError):
    """Raised when a byte range cannot be applied to a buffer."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"Invalid range [{start}, {end}) for buffer of length {length}")


class ConfigError(IppError):
    """Raised when ipp.yml exists but cannot be interpreted."""
