"""Fixed-width big-endian integer encoding for service responses.

Values are written as unsigned 16-bit or 32-bit big-endian words with no
framing, length prefix or checksum. Values wider than the word are masked
(silent truncation); INF, or None, is written as the reserved 16-bit word
``0xFFFF``.

Two 16-bit indices are packed into one 32-bit word with the first index in
the high half:

    >>> pack_index_pair(1, 2).hex()
    '00010002'
"""

from __future__ import annotations

import struct
from typing import Iterable, List, Union

import numpy as np

from intgraph.types.base import INF, UNREACHABLE_16, Weight, is_inf

_MASK_16 = 0xFFFF
_MASK_32 = 0xFFFFFFFF


def _word16(value: Weight | None) -> int:
    if is_inf(value):
        return UNREACHABLE_16
    return int(value) & _MASK_16


def encode16(value: Weight | None) -> bytes:
    """Encode a value as a 2-byte big-endian unsigned integer.

    Args:
        value: Integer to encode, or INF/None for the unreachable sentinel.

    Returns:
        Two bytes; ``b"\\xff\\xff"`` for INF.
    """
    return struct.pack(">H", _word16(value))


def encode32(value: int) -> bytes:
    """Encode a value as a 4-byte big-endian unsigned integer (masked)."""
    return struct.pack(">I", int(value) & _MASK_32)


def pack_index_pair(first: int, second: int) -> bytes:
    """Pack two indices into one 32-bit word, ``first`` in the high 16 bits."""
    return encode32(((first & _MASK_16) << 16) + (second & _MASK_16))


def encode16_many(values: Iterable[Weight | None]) -> bytes:
    """Concatenate the 16-bit encodings of `values`.

    Equivalent to ``b"".join(encode16(v) for v in values)``.
    """
    words = [_word16(v) for v in values]
    if not words:
        return b""
    return np.asarray(words, dtype=">u2").tobytes()


def decode16_many(
    data: Union[bytes, bytearray], unreachable_as_inf: bool = False
) -> List[Weight]:
    """Decode a buffer of 16-bit big-endian words.

    Args:
        data: Buffer whose length is a multiple of two.
        unreachable_as_inf: Map ``0xFFFF`` back to INF instead of 65535.

    Returns:
        Decoded integers in buffer order.

    Raises:
        ValueError: If the buffer length is odd.
    """
    if len(data) % 2:
        raise ValueError(f"Buffer length {len(data)} is not a multiple of 2")
    words = np.frombuffer(bytes(data), dtype=">u2").tolist()
    if unreachable_as_inf:
        return [INF if w == UNREACHABLE_16 else w for w in words]
    return words
