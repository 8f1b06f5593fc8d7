"""
Bit accumulators converting between bytes and 10-bit groups.

Both directions keep their accumulator (value + bit count) between calls,
so a stream can be fed in arbitrary chunks.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from PictoBase.alphabet.kinds import AlphabetKind
from PictoBase.alphabet.constants import GROUP_BITS, BYTE_BITS

GROUP_MASK = (1 << GROUP_BITS) - 1
BYTE_MASK = (1 << BYTE_BITS) - 1


class BitPacker:
    """
    Packs a byte stream into 10-bit groups, most significant bit first.

    Full groups are tagged REGULAR. The residual bits left at the end of
    the stream (always 2, 4, 6 or 8 of them) are returned by ``flush``
    tagged with the padding kind of their width.
    """

    def __init__(self):
        self.value = 0
        self.bit_count = 0

    def push(self, data: Iterable[int]) -> Iterator[Tuple[int, AlphabetKind]]:
        """
        Feeds bytes into the accumulator.

        Args:
            data: Bytes to pack

        Yields:
            (value, REGULAR) for every group completed by ``data``
        """
        for byte in data:
            self.value = (self.value << BYTE_BITS) | byte
            self.bit_count += BYTE_BITS
            if self.bit_count >= GROUP_BITS:
                self.bit_count -= GROUP_BITS
                yield self.value >> self.bit_count, AlphabetKind.REGULAR
                self.value &= (1 << self.bit_count) - 1

    def flush(self) -> Optional[Tuple[int, AlphabetKind]]:
        """
        Ends the stream.

        Returns:
            (residual bits, padding kind), or None if the stream ended on a
            group boundary
        """
        if self.bit_count == 0:
            return None

        group = (self.value, AlphabetKind.from_residual(self.bit_count))
        self.reset()
        return group

    def reset(self) -> None:
        self.value = 0
        self.bit_count = 0


class BitUnpacker:
    """
    Unpacks groups of variable width back into bytes.

    Bits that do not yet fill a byte stay in the accumulator.
    """

    def __init__(self):
        self.value = 0
        self.bit_count = 0

    def push(self, value: int, width: int) -> List[int]:
        """
        Appends ``width`` bits of ``value`` and drains whole bytes.

        Returns:
            List of completed byte values
        """
        self.value = (self.value << width) | value
        self.bit_count += width

        out = []
        while self.bit_count >= BYTE_BITS:
            self.bit_count -= BYTE_BITS
            out.append((self.value >> self.bit_count) & BYTE_MASK)
        self.value &= (1 << self.bit_count) - 1
        return out

    def residual(self) -> Tuple[int, int]:
        """Gets (value, bit count) of the bits not yet emitted."""
        return self.value, self.bit_count

    def reset(self) -> None:
        self.value = 0
        self.bit_count = 0
