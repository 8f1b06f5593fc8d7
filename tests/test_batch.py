import random

import numpy as np

from PictoBase import decode, encode
from PictoBase.alphabet import AlphabetKind
from PictoBase.encoding import bytes_to_groups, decode_batch, encode_batch, groups_to_symbols


def test_bytes_to_groups():
    values, tail = bytes_to_groups(b"\xab\xcd\xef\x01\x23\xff")
    assert values.dtype == np.uint16
    assert values.tolist() == [687, 222, 960, 291]
    assert tail == (0xFF, AlphabetKind.PAD1)


def test_bytes_to_groups_empty():
    values, tail = bytes_to_groups(b"")
    assert values.size == 0
    assert tail is None
    assert groups_to_symbols(values, tail) == ""


def test_bytes_to_groups_short_input():
    values, tail = bytes_to_groups(b"\x00\x01\x02")
    assert values.tolist() == [0, 16]
    assert tail == (2, AlphabetKind.PAD3)


def test_batch_matches_scalar_encoder():
    rng = random.Random(99)
    payloads = [bytes(rng.randrange(256) for _ in range(n)) for n in range(0, 64)]
    assert encode_batch(payloads) == [encode(p) for p in payloads]


def test_batch_round_trip():
    payloads = [b"", b"a", b"ab", b"abc", b"abcd", b"abcde", bytes(range(256))]
    texts = encode_batch(payloads)
    assert decode_batch(texts) == payloads
    assert [decode(t) for t in texts] == payloads
