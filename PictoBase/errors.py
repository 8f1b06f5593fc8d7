"""
Decode errors for PictoBase.

Encoding never fails. Decoding raises one of the DecodeError subclasses
at the first violation it meets; nothing is silently corrected.
"""

from typing import Optional


class DecodeError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnknownSymbol(DecodeError):
    """A symbol is not part of any alphabet."""

    def __init__(self, symbol: str, position: int):
        codepoints = " ".join(f"U+{ord(c):04X}" for c in symbol)
        super().__init__(f"Unknown symbol {symbol!r} ({codepoints}) at position {position}", position)
        self.symbol = symbol


class MalformedPadding(DecodeError):
    """A padding symbol is out of place, repeated, or leaves non-zero bits."""

    def __init__(self, position: int, reason: str):
        super().__init__(f"Malformed padding at position {position}: {reason}", position)
        self.reason = reason


class TruncatedStream(DecodeError):
    """Regular symbols ended without byte alignment and without padding."""

    def __init__(self, position: int, bit_count: int):
        super().__init__(
            f"Truncated stream after {position} symbols: {bit_count} unaligned bits left", position
        )
        self.bit_count = bit_count
