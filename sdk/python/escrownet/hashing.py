"""Encoding of SDK inputs into Starknet field elements."""

from __future__ import annotations

from typing import Union

from starknet_py.hash.utils import compute_hash_on_elements

# A felt holds 251 bits, so 31 bytes always fit
_CHUNK_BYTES = 31


def _text_to_felts(text: str) -> list[int]:
    raw = text.encode("utf-8")
    return [
        int.from_bytes(raw[i : i + _CHUNK_BYTES], "big")
        for i in range(0, len(raw), _CHUNK_BYTES)
    ]


def to_felt(value: Union[int, str]) -> int:
    """Convert an int, a 0x-hex string or a decimal string to an integer."""
    if isinstance(value, int):
        return value
    if value.lower().startswith("0x"):
        return int(value, 16)
    return int(value)


def hash_text(text: str) -> int:
    """Canonicalize a string into a single field element.

    The UTF-8 bytes are split into 31-byte chunks and the chunk sequence is
    Pedersen-hashed with ``compute_hash_on_elements``, so the result is
    deterministic and valid for any string length.
    """
    return compute_hash_on_elements(_text_to_felts(text))

