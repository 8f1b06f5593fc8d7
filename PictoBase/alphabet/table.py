"""
Symbol table for PictoBase.

Holds the regular 1024-symbol alphabet and the four padding alphabets
used to close a stream whose bit length is not a multiple of 10.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from PictoBase.alphabet.kinds import AlphabetKind, PADDING_KINDS
from PictoBase.alphabet.constants import GROUP_BITS, SYMBOL_RANGES, VARIATION_SELECTOR
from PictoBase.utils.logging import get_logger


@dataclass(frozen=True)
class SymbolTable:
    """
    Immutable forward table: (value, kind) -> symbol.

    Each alphabet is a tuple indexed by value. Alphabets must be pairwise
    disjoint so that every symbol resolves to exactly one (value, kind).
    """

    regular: Tuple[str, ...]
    pad1: Tuple[str, ...]
    pad2: Tuple[str, ...]
    pad3: Tuple[str, ...]
    pad4: Tuple[str, ...]

    def alphabet(self, kind: AlphabetKind) -> Tuple[str, ...]:
        """Gets the ordered alphabet of the given kind."""
        if kind is AlphabetKind.REGULAR:
            return self.regular
        elif kind is AlphabetKind.PAD1:
            return self.pad1
        elif kind is AlphabetKind.PAD2:
            return self.pad2
        elif kind is AlphabetKind.PAD3:
            return self.pad3
        else:
            return self.pad4

    def symbol(self, value: int, kind: AlphabetKind = AlphabetKind.REGULAR) -> str:
        """Gets the symbol encoding ``value`` in the alphabet of ``kind``."""
        return self.alphabet(kind)[value]

    def items(self) -> Iterator[Tuple[str, int, AlphabetKind]]:
        """Iterates over (symbol, value, kind) for every symbol in the table."""
        for kind in AlphabetKind:
            for value, symbol in enumerate(self.alphabet(kind)):
                yield symbol, value, kind

    def validate(self) -> None:
        """
        Checks alphabet sizes and disjointness.

        Raises:
            ValueError: If an alphabet has the wrong size, contains an
                empty symbol, or a symbol appears more than once.
        """
        for kind in AlphabetKind:
            alphabet = self.alphabet(kind)
            if len(alphabet) != kind.size:
                raise ValueError(
                    f"Alphabet {kind.value} has {len(alphabet)} symbols, expected {kind.size}"
                )

        seen: Dict[str, AlphabetKind] = {}
        for symbol, value, kind in self.items():
            if not symbol:
                raise ValueError(f"Empty symbol at {kind.value}[{value}]")
            if symbol in seen:
                raise ValueError(
                    f"Symbol {symbol!r} appears in both {seen[symbol].value} and {kind.value}"
                )
            seen[symbol] = kind

    def __len__(self) -> int:
        return sum(len(self.alphabet(kind)) for kind in AlphabetKind)


def _codepoints(ranges: Sequence[Tuple[int, int]]) -> Iterator[int]:
    for start, end in ranges:
        yield from range(start, end + 1)


def build_symbol_table() -> SymbolTable:
    """
    Materializes and validates the symbol table from the codepoint pool.

    Codepoints are handed out in ascending order. The padding symbol for a
    tail of ``w`` bits with value ``v`` is placed right before the regular
    symbol ``v << (10 - w)``, the first group whose top ``w`` bits equal
    ``v``. Comparing two encodings symbol by symbol then gives the same
    result as comparing the input bytes.

    Returns:
        A validated SymbolTable
    """
    pool = _codepoints(SYMBOL_RANGES)
    alphabets: Dict[AlphabetKind, List[str]] = {kind: [] for kind in AlphabetKind}
    padding = sorted(PADDING_KINDS, key=lambda kind: kind.bits)

    for value in range(AlphabetKind.REGULAR.size):
        for kind in padding:
            shift = GROUP_BITS - kind.bits
            if value % (1 << shift) == 0:
                alphabets[kind].append(chr(next(pool)))
        alphabets[AlphabetKind.REGULAR].append(chr(next(pool)))

    table = SymbolTable(
        regular=tuple(alphabets[AlphabetKind.REGULAR]),
        pad1=tuple(alphabets[AlphabetKind.PAD1]),
        pad2=tuple(alphabets[AlphabetKind.PAD2]),
        pad3=tuple(alphabets[AlphabetKind.PAD3]),
        pad4=tuple(symbol + VARIATION_SELECTOR for symbol in alphabets[AlphabetKind.PAD4]),
    )
    table.validate()
    get_logger().debug(f"Built symbol table with {len(table)} symbols")
    return table


_table: Optional[SymbolTable] = None

def get_symbol_table() -> SymbolTable:
    global _table
    if _table is None:
        _table = build_symbol_table()
    return _table
