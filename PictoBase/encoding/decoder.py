"""
Decoding of PictoBase symbols back into bytes.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from PictoBase.alphabet.kinds import AlphabetKind
from PictoBase.alphabet.index import IndexEntry, ReverseIndex, get_reverse_index
from PictoBase.encoding.packer import BitUnpacker
from PictoBase.errors import MalformedPadding, TruncatedStream, UnknownSymbol


class Tokenizer:
    """
    Splits text into whole symbols by longest match against the index.

    A multi-codepoint symbol is never split. When a chunk ends in the
    middle of one, the partial symbol is kept until the next ``feed``.
    """

    def __init__(self, index: Optional[ReverseIndex] = None):
        self.index = index or get_reverse_index()
        self.pending = ""

    def feed(self, text: str, final: bool = False) -> Iterator[Tuple[str, Optional[IndexEntry]]]:
        """
        Tokenizes the next chunk of text.

        Args:
            text: Next chunk of input
            final: Whether this is the last chunk

        Yields:
            (token, entry) pairs; entry is None for a codepoint that starts
            no known symbol
        """
        index = self.index
        buf = self.pending + text
        self.pending = ""
        end = len(buf)
        max_length = index.max_symbol_length

        i = 0
        while i < end:
            remaining = end - i
            if not final and remaining < max_length and buf[i:] in index.prefixes:
                self.pending = buf[i:]
                return

            for length in range(min(max_length, remaining), 0, -1):
                token = buf[i:i + length]
                entry = index.get(token)
                if entry is not None:
                    break
            else:
                token, length = buf[i], 1

            yield token, entry
            i += length


def tokenize(text: str) -> List[str]:
    """
    Splits encoded text into its symbols.

    Raises:
        UnknownSymbol: If the text contains a symbol outside all alphabets
    """
    symbols = []
    for position, (token, entry) in enumerate(Tokenizer().feed(text, final=True)):
        if entry is None:
            raise UnknownSymbol(token, position)
        symbols.append(token)
    return symbols


class Decoder:
    """
    Incremental decoder.

    Feed text with ``update`` and close the stream with ``finish``. A
    padding symbol closes the stream; anything after it is an error.
    """

    def __init__(self, index: Optional[ReverseIndex] = None):
        self.index = index or get_reverse_index()
        self.tokenizer = Tokenizer(self.index)
        self.unpacker = BitUnpacker()
        self.position = 0
        self.closed = False
        self.finished = False

    def update(self, text: str) -> bytes:
        """
        Decodes the next chunk of text.

        Returns:
            Bytes completed so far

        Raises:
            DecodeError: On the first invalid symbol
        """
        return self._feed(text, final=False)

    def update_symbols(self, symbols: Iterable[str]) -> bytes:
        """
        Decodes already tokenized symbols.

        Text held back by a previous ``update`` is resolved first, so a
        partial symbol left there is reported as unknown.
        """
        out = bytearray(self._feed("", final=True))
        for symbol in symbols:
            out.extend(self._push(self.index.lookup(symbol, self.position)))
        return bytes(out)

    def finish(self) -> bytes:
        """
        Ends the stream.

        Returns:
            Remaining decoded bytes

        Raises:
            DecodeError: If the held-back text is invalid or the stream
                ends on unaligned bits without padding
        """
        out = self._feed("", final=True)
        self.finished = True

        if not self.closed:
            _, bit_count = self.unpacker.residual()
            if bit_count:
                raise TruncatedStream(self.position, bit_count)
        return out

    def _feed(self, text: str, final: bool) -> bytes:
        self._check_open()
        out = bytearray()
        for token, entry in self.tokenizer.feed(text, final=final):
            if entry is None:
                raise UnknownSymbol(token, self.position)
            out.extend(self._push(entry))
        return bytes(out)

    def _push(self, entry: IndexEntry) -> List[int]:
        if self.closed:
            if entry.kind.is_padding:
                reason = "more than one padding symbol"
            else:
                reason = "padding symbol is not the last symbol"
            raise MalformedPadding(self.position, reason)

        out = self.unpacker.push(entry.value, entry.kind.bits)
        if entry.kind is not AlphabetKind.REGULAR:
            # the padding width must end the stream on a byte boundary
            _, bit_count = self.unpacker.residual()
            if bit_count:
                raise MalformedPadding(
                    self.position, f"padding leaves {bit_count} leftover bits"
                )
            self.unpacker.reset()
            self.closed = True

        self.position += 1
        return out

    def _check_open(self) -> None:
        if self.finished:
            raise RuntimeError("Decoder has already been finished.")


def decode(text: str) -> bytes:
    """
    Decodes a string of symbols back into bytes.

    Args:
        text: Encoded symbol string

    Returns:
        Decoded bytes

    Raises:
        UnknownSymbol: A symbol is not in any alphabet
        MalformedPadding: A padding symbol is not last, is repeated, or
            leaves non-zero bits
        TruncatedStream: Regular symbols end on unaligned bits
    """
    decoder = Decoder()
    return decoder.update(text) + decoder.finish()


def decode_symbols(symbols: Iterable[str]) -> bytes:
    """Decodes a sequence of individual symbols."""
    decoder = Decoder()
    return decoder.update_symbols(symbols) + decoder.finish()


def decode_to_string(text: str, encoding: str = "utf-8") -> str:
    """Decodes symbols and interprets the result as text."""
    return decode(text).decode(encoding)
