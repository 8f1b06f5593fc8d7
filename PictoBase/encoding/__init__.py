"""
Symbol encoding and decoding for PictoBase.

Handles conversion between bytes and pictographic symbol strings.
"""

from PictoBase.encoding.packer import BitPacker, BitUnpacker
from PictoBase.encoding.encoder import Encoder, encode, encoded_length
from PictoBase.encoding.decoder import (
    Decoder,
    Tokenizer,
    tokenize,
    decode,
    decode_symbols,
    decode_to_string,
)
from PictoBase.encoding.batch import (
    bytes_to_groups,
    groups_to_symbols,
    encode_batch,
    decode_batch,
)

__all__ = [
    "BitPacker",
    "BitUnpacker",
    "Encoder",
    "encode",
    "encoded_length",
    "Decoder",
    "Tokenizer",
    "tokenize",
    "decode",
    "decode_symbols",
    "decode_to_string",
    "bytes_to_groups",
    "groups_to_symbols",
    "encode_batch",
    "decode_batch",
]
