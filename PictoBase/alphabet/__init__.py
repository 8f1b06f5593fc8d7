"""
Symbol alphabets for PictoBase.

Provides the forward symbol table and the reverse index built from it.
"""

from PictoBase.alphabet.kinds import AlphabetKind, PADDING_KINDS
from PictoBase.alphabet.table import SymbolTable, build_symbol_table, get_symbol_table
from PictoBase.alphabet.index import IndexEntry, ReverseIndex, get_reverse_index

__all__ = [
    "AlphabetKind",
    "PADDING_KINDS",
    "SymbolTable",
    "build_symbol_table",
    "get_symbol_table",
    "IndexEntry",
    "ReverseIndex",
    "get_reverse_index",
]
