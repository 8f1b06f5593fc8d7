"""
Reverse index for PictoBase: symbol -> (value, kind).
"""

from typing import Dict, FrozenSet, NamedTuple, Optional

from PictoBase.alphabet.kinds import AlphabetKind
from PictoBase.alphabet.table import SymbolTable, get_symbol_table
from PictoBase.errors import UnknownSymbol
from PictoBase.utils.logging import get_logger


class IndexEntry(NamedTuple):
    value: int
    kind: AlphabetKind


class ReverseIndex:
    """
    Constant-time lookup from an observed symbol to its value and alphabet.

    Also records what the tokenizer needs to split text into symbols:
    the longest symbol length and every proper prefix of a
    multi-codepoint symbol.
    """

    def __init__(self, table: SymbolTable):
        entries: Dict[str, IndexEntry] = {}
        prefixes = set()

        for symbol, value, kind in table.items():
            if symbol in entries:
                raise ValueError(f"Symbol {symbol!r} is not unique across alphabets")
            entries[symbol] = IndexEntry(value, kind)
            for i in range(1, len(symbol)):
                prefixes.add(symbol[:i])

        self._entries = entries
        self.prefixes: FrozenSet[str] = frozenset(prefixes)
        self.max_symbol_length = max(len(symbol) for symbol in entries)

    def lookup(self, symbol: str, position: int = 0) -> IndexEntry:
        """
        Resolves a symbol.

        Args:
            symbol: Symbol to resolve
            position: Index of the symbol in its input, for error reporting

        Returns:
            IndexEntry with the symbol's value and alphabet kind

        Raises:
            UnknownSymbol: If the symbol is not in any alphabet
        """
        entry = self._entries.get(symbol)
        if entry is None:
            raise UnknownSymbol(symbol, position)
        return entry

    def get(self, symbol: str) -> Optional[IndexEntry]:
        return self._entries.get(symbol)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_index: Optional[ReverseIndex] = None

def get_reverse_index() -> ReverseIndex:
    global _index
    if _index is None:
        _index = ReverseIndex(get_symbol_table())
        get_logger().debug(f"Built reverse index with {len(_index)} symbols")
    return _index
