"""
Alphabet kinds for PictoBase symbols.
"""

from enum import Enum


class AlphabetKind(Enum):
    """
    The alphabet a symbol belongs to.

    REGULAR carries a full 10-bit group. The padding kinds close a stream
    and carry the residual bits of its last 1, 2, 3 or 4 bytes.
    """

    REGULAR = "regular"
    PAD1 = "pad1"
    PAD2 = "pad2"
    PAD3 = "pad3"
    PAD4 = "pad4"

    @property
    def bits(self) -> int:
        return _BITS[self]

    @property
    def size(self) -> int:
        """Number of symbols in an alphabet of this kind."""
        return 1 << self.bits

    @property
    def is_padding(self) -> bool:
        return self is not AlphabetKind.REGULAR

    @classmethod
    def from_residual(cls, bit_count: int) -> "AlphabetKind":
        """Gets the padding kind for a tail of ``bit_count`` bits."""
        try:
            return _RESIDUAL[bit_count]
        except KeyError:
            raise ValueError(f"No padding alphabet for a {bit_count}-bit tail") from None


_BITS = {
    AlphabetKind.REGULAR: 10,
    AlphabetKind.PAD1: 8,
    AlphabetKind.PAD2: 6,
    AlphabetKind.PAD3: 4,
    AlphabetKind.PAD4: 2,
}

_RESIDUAL = {
    8: AlphabetKind.PAD1,
    6: AlphabetKind.PAD2,
    4: AlphabetKind.PAD3,
    2: AlphabetKind.PAD4,
}

PADDING_KINDS = (
    AlphabetKind.PAD1,
    AlphabetKind.PAD2,
    AlphabetKind.PAD3,
    AlphabetKind.PAD4,
)
