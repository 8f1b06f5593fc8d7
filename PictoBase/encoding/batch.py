"""
Batch encoding and decoding of many payloads, vectorized with numpy.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from PictoBase.alphabet.kinds import AlphabetKind
from PictoBase.alphabet.table import SymbolTable, get_symbol_table
from PictoBase.alphabet.constants import BLOCK_BYTES, GROUP_BITS, GROUPS_PER_BLOCK
from PictoBase.encoding.packer import BitPacker, GROUP_MASK
from PictoBase.encoding.decoder import decode

_BYTE_SHIFTS = np.array([32, 24, 16, 8, 0], dtype=np.uint64)
_GROUP_SHIFTS = np.array(
    [GROUP_BITS * (GROUPS_PER_BLOCK - 1 - i) for i in range(GROUPS_PER_BLOCK)],
    dtype=np.uint64,
)


def bytes_to_groups(data: bytes) -> Tuple[np.ndarray, Optional[Tuple[int, AlphabetKind]]]:
    """
    Splits bytes into 10-bit groups.

    Every complete 5-byte block is exactly four groups, so all blocks are
    converted at once; the remaining bytes go through a BitPacker.

    Args:
        data: Input bytes

    Returns:
        Tuple of (regular group values as uint16 array, tail group or None)
    """
    full = len(data) // BLOCK_BYTES * BLOCK_BYTES

    if full:
        blocks = np.frombuffer(data, dtype=np.uint8, count=full)
        blocks = blocks.reshape(-1, BLOCK_BYTES).astype(np.uint64)
        combined = np.bitwise_or.reduce(blocks << _BYTE_SHIFTS, axis=1)
        groups = (combined[:, None] >> _GROUP_SHIFTS) & np.uint64(GROUP_MASK)
        values = groups.reshape(-1).astype(np.uint16)
    else:
        values = np.empty(0, dtype=np.uint16)

    packer = BitPacker()
    rest = [value for value, _ in packer.push(data[full:])]
    if rest:
        values = np.concatenate([values, np.array(rest, dtype=np.uint16)])

    return values, packer.flush()


def groups_to_symbols(
    values: np.ndarray,
    tail: Optional[Tuple[int, AlphabetKind]] = None,
    table: Optional[SymbolTable] = None,
) -> str:
    """
    Maps regular group values and an optional tail group to symbols.
    """
    table = table or get_symbol_table()
    regular = np.array(table.regular, dtype=object)

    text = "".join(regular[values].tolist())
    if tail is not None:
        value, kind = tail
        text += table.symbol(value, kind)
    return text


def encode_batch(payloads: Sequence[bytes]) -> List[str]:
    """
    Encodes a batch of payloads.

    Args:
        payloads: Byte strings to encode

    Returns:
        List of encoded symbol strings, same order as input
    """
    table = get_symbol_table()
    return [groups_to_symbols(*bytes_to_groups(payload), table=table) for payload in payloads]


def decode_batch(texts: Sequence[str]) -> List[bytes]:
    """
    Decodes a batch of symbol strings.

    Raises:
        DecodeError: On the first invalid entry
    """
    return [decode(text) for text in texts]
