"""
PictoBase - Pictographic Base-1024 Codec

Encodes arbitrary bytes as a string of pictographs, ten bits per symbol,
and decodes them back exactly.
"""

from PictoBase.version import __version__

from PictoBase.encoding.encoder import Encoder, encode, encoded_length
from PictoBase.encoding.decoder import Decoder, decode, decode_symbols, decode_to_string, tokenize
from PictoBase.encoding.batch import encode_batch, decode_batch
from PictoBase.interface.streams import encode_stream, decode_stream
from PictoBase.alphabet.kinds import AlphabetKind
from PictoBase.alphabet.table import SymbolTable, get_symbol_table
from PictoBase.alphabet.index import ReverseIndex, get_reverse_index
from PictoBase.errors import DecodeError, UnknownSymbol, MalformedPadding, TruncatedStream
from PictoBase.config import CodecConfig

from PictoBase import alphabet
from PictoBase import encoding
from PictoBase import interface

__all__ = [
    "__version__",
    "Encoder",
    "encode",
    "encoded_length",
    "Decoder",
    "decode",
    "decode_symbols",
    "decode_to_string",
    "tokenize",
    "encode_batch",
    "decode_batch",
    "encode_stream",
    "decode_stream",
    "AlphabetKind",
    "SymbolTable",
    "get_symbol_table",
    "ReverseIndex",
    "get_reverse_index",
    "DecodeError",
    "UnknownSymbol",
    "MalformedPadding",
    "TruncatedStream",
    "CodecConfig",
    "alphabet",
    "encoding",
    "interface",
]
