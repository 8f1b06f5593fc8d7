"""
Encoding of byte sequences into PictoBase symbols.
"""

from typing import Iterator, Optional

from PictoBase.alphabet.table import SymbolTable, get_symbol_table
from PictoBase.encoding.packer import BitPacker


class Encoder:
    """
    Incremental encoder.

    Feed bytes with ``update`` and close the stream with ``finish``; the
    concatenated return values equal ``encode`` of the concatenated input.
    """

    def __init__(self, table: Optional[SymbolTable] = None):
        self.table = table or get_symbol_table()
        self.packer = BitPacker()
        self.finished = False

    def update(self, data: bytes) -> str:
        """
        Encodes the next chunk of input.

        Args:
            data: Next bytes of the stream

        Returns:
            Symbols for every 10-bit group completed so far
        """
        return "".join(self.symbols(data))

    def symbols(self, data: bytes) -> Iterator[str]:
        """Like ``update``, but yields the symbols one at a time."""
        if self.finished:
            raise RuntimeError("Encoder has already been finished.")
        regular = self.table.regular
        for value, _ in self.packer.push(data):
            yield regular[value]

    def finish(self) -> str:
        """Closes the stream and returns the padding symbol, if any."""
        if self.finished:
            raise RuntimeError("Encoder has already been finished.")
        self.finished = True

        tail = self.packer.flush()
        if tail is None:
            return ""
        value, kind = tail
        return self.table.symbol(value, kind)


def encode(data: bytes) -> str:
    """
    Encodes bytes into a string of symbols.

    Every 10 bits of input become one regular symbol. A stream whose bit
    length is not a multiple of 10 ends with one padding symbol carrying
    the remaining 2, 4, 6 or 8 bits.

    Args:
        data: Input bytes

    Returns:
        Encoded symbol string (empty for empty input)
    """
    encoder = Encoder()
    return encoder.update(data) + encoder.finish()


def encoded_length(byte_count: int) -> int:
    """Gets the number of symbols ``encode`` produces for ``byte_count`` bytes."""
    return (byte_count * 8 + 9) // 10
