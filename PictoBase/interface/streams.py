"""
Stream wrappers around the PictoBase encoder and decoder.
"""

import codecs
from typing import BinaryIO, Iterable, Optional

from PictoBase.config import CodecConfig
from PictoBase.encoding.encoder import Encoder
from PictoBase.encoding.decoder import Decoder

_LINE_BREAKS = str.maketrans("", "", "\r\n")


class _LineWriter:
    """Writes symbols as UTF-8, breaking lines every ``wrap`` symbols."""

    def __init__(self, destination: BinaryIO, wrap: int = 0):
        self.destination = destination
        self.wrap = wrap
        self.column = 0
        self.bytes_written = 0

    def write(self, symbols: Iterable[str]) -> None:
        if self.wrap:
            parts = []
            for symbol in symbols:
                parts.append(symbol)
                self.column += 1
                if self.column == self.wrap:
                    parts.append("\n")
                    self.column = 0
            text = "".join(parts)
        else:
            text = "".join(symbols)
        self._write_text(text)

    def close(self) -> None:
        if self.column:
            self._write_text("\n")
            self.column = 0

    def _write_text(self, text: str) -> None:
        if text:
            data = text.encode("utf-8")
            self.destination.write(data)
            self.bytes_written += len(data)


def encode_stream(
    source: BinaryIO,
    destination: BinaryIO,
    config: Optional[CodecConfig] = None,
) -> int:
    """
    Encodes everything readable from ``source`` into ``destination``.

    Args:
        source: Binary file object to read from
        destination: Binary file object receiving UTF-8 encoded symbols
        config: Chunk size and line wrapping (default: CodecConfig())

    Returns:
        Number of bytes written to ``destination``
    """
    config = config or CodecConfig()
    encoder = Encoder()
    writer = _LineWriter(destination, config.wrap)

    while True:
        chunk = source.read(config.chunk_size)
        if not chunk:
            break
        writer.write(encoder.symbols(chunk))

    tail = encoder.finish()
    if tail:
        writer.write([tail])
    writer.close()
    return writer.bytes_written


def decode_stream(
    source: BinaryIO,
    destination: BinaryIO,
    config: Optional[CodecConfig] = None,
) -> int:
    """
    Decodes UTF-8 encoded symbols from ``source`` into ``destination``.

    Line breaks between symbols are ignored, so wrapped output decodes.
    Partial output may already be written when an error is raised.

    Returns:
        Number of bytes written to ``destination``

    Raises:
        DecodeError: If the symbols are invalid
        UnicodeDecodeError: If the input is not valid UTF-8
    """
    config = config or CodecConfig()
    decoder = Decoder()
    text_decoder = codecs.getincrementaldecoder("utf-8")()
    bytes_written = 0

    while True:
        chunk = source.read(config.chunk_size)
        if not chunk:
            break
        text = text_decoder.decode(chunk).translate(_LINE_BREAKS)
        out = decoder.update(text)
        destination.write(out)
        bytes_written += len(out)

    text = text_decoder.decode(b"", final=True).translate(_LINE_BREAKS)
    out = decoder.update(text) + decoder.finish()
    destination.write(out)
    bytes_written += len(out)
    return bytes_written
