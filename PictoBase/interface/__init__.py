"""
PictoBase interface module.
"""

from PictoBase.interface.streams import encode_stream, decode_stream
from PictoBase.interface.cli import main

__all__ = [
    "encode_stream",
    "decode_stream",
    "main",
]
