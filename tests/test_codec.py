import random

import pytest

from PictoBase import (
    Decoder,
    Encoder,
    decode,
    decode_symbols,
    decode_to_string,
    encode,
    encoded_length,
    get_symbol_table,
    tokenize,
)
from PictoBase.alphabet import AlphabetKind, get_reverse_index

REGULAR_0 = "\u2604"
PAD4_0 = "\u2600\ufe0f"


def _random_bytes(rng: random.Random, length: int) -> bytes:
    return bytes(rng.randrange(256) for _ in range(length))


def test_empty():
    assert encode(b"") == ""
    assert decode("") == b""


def test_four_zero_bytes():
    text = encode(b"\x00\x00\x00\x00")
    assert text == REGULAR_0 * 3 + PAD4_0
    assert tokenize(text) == [REGULAR_0] * 3 + [PAD4_0]
    assert decode(text) == b"\x00\x00\x00\x00"


def test_single_byte_is_one_pad1_symbol():
    text = encode(b"\xff")
    symbols = tokenize(text)
    assert len(symbols) == 1
    entry = get_reverse_index().lookup(symbols[0])
    assert entry.kind is AlphabetKind.PAD1
    assert entry.value == 0xFF


def test_five_bytes_use_regular_symbols_only():
    table = get_symbol_table()
    text = encode(b"\xab\xcd\xef\x01\x23")
    assert text == "".join(table.regular[i] for i in (687, 222, 960, 291))
    assert text == "\U0001F4D9\u2729\U0001F647\u2786"


def test_two_bytes():
    table = get_symbol_table()
    assert encode(b"\x00\x01") == table.regular[0] + table.pad2[1]


@pytest.mark.parametrize("length", range(0, 21))
def test_round_trip_every_residual_class(length):
    rng = random.Random(length)
    for _ in range(20):
        data = _random_bytes(rng, length)
        assert decode(encode(data)) == data


def test_round_trip_extremes():
    for length in range(1, 11):
        for fill in (b"\x00", b"\xff", b"\x55", b"\xaa"):
            data = fill * length
            assert decode(encode(data)) == data


def test_round_trip_large():
    data = _random_bytes(random.Random(1234), 10_007)
    assert decode(encode(data)) == data


def test_deterministic():
    data = b"deterministic output"
    assert encode(data) == encode(data)
    text = encode(data)
    assert decode(text) == decode(text)


@pytest.mark.parametrize("length", range(0, 21))
def test_length_depends_only_on_input_length(length):
    expected = (8 * length + 9) // 10
    assert encoded_length(length) == expected
    for fill in (0x00, 0x5A, 0xFF):
        assert len(tokenize(encode(bytes([fill]) * length))) == expected


def test_encoding_preserves_sort_order():
    assert b"ab" < b"b"
    assert encode(b"ab") < encode(b"b")
    words = [b"", b"a", b"ab", b"abc", b"abcd", b"abcde", b"abcdef", b"ac", b"b", b"ba", b"\xff", b"\xff\x00"]
    assert sorted(words, key=encode) == sorted(words)


def test_random_inputs_sort_like_their_encodings():
    rng = random.Random(1024)
    inputs = [_random_bytes(rng, rng.randrange(13)) for _ in range(300)]
    # few distinct byte values give many shared prefixes
    inputs += [bytes(rng.choice(b"\x00\x01\xfe\xff") for _ in range(rng.randrange(13))) for _ in range(300)]
    encoded = sorted(encode(data) for data in inputs)
    assert [decode(text) for text in encoded] == sorted(inputs)


def test_decode_symbols():
    data = b"symbols"
    assert decode_symbols(tokenize(encode(data))) == data


def test_decode_to_string():
    message = "héllo wörld"
    assert decode_to_string(encode(message.encode("utf-8"))) == message


def test_streaming_encoder_matches_one_shot():
    data = _random_bytes(random.Random(7), 23)
    expected = encode(data)
    for split in range(len(data) + 1):
        encoder = Encoder()
        text = encoder.update(data[:split]) + encoder.update(data[split:]) + encoder.finish()
        assert text == expected


def test_streaming_decoder_matches_one_shot():
    for length in (4, 9, 14, 19):
        data = _random_bytes(random.Random(length), length)
        text = encode(data)
        # splits include the point inside a two-codepoint padding symbol
        for split in range(len(text) + 1):
            decoder = Decoder()
            out = decoder.update(text[:split]) + decoder.update(text[split:]) + decoder.finish()
            assert out == data


def test_decoder_holds_back_partial_symbol():
    decoder = Decoder()
    assert decoder.update(REGULAR_0 * 3 + "\u2600") == b"\x00\x00\x00"
    assert decoder.update("\ufe0f") == b"\x00"
    assert decoder.finish() == b""


def test_codepoint_at_a_time():
    data = b"\x00\x00\x00\x00"
    decoder = Decoder()
    out = b"".join(decoder.update(c) for c in encode(data)) + decoder.finish()
    assert out == data


def test_finished_encoder_and_decoder_reject_input():
    encoder = Encoder()
    encoder.finish()
    with pytest.raises(RuntimeError):
        encoder.update(b"x")

    decoder = Decoder()
    decoder.finish()
    with pytest.raises(RuntimeError):
        decoder.update(REGULAR_0)
