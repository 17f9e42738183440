# fnvhash/core/fnv1a.py
"""
FNV-1a Hash Engine (16 / 32 / 64 bit)

Intent
- Fold a byte sequence into a fixed-width unsigned integer with FNV-1a
  (XOR the byte in, then multiply by the width's prime, modulo 2**width).
- Output values are a stable contract: callers build dispatch tables and
  checksums from them, so every constant below must stay bit-exact.

Primary functions
- fnv1a_hash_64(data, limit=None, case=False) -> int
- fnv1a_hash_32(data, limit=None, case=False) -> int
- fnv1a_hash_16_xor(data, limit=None) -> int
- fnv1a_hash_str_64(text) / fnv1a_hash_str_32(text) / fnv1a_hash_str_16_xor(text)
- fnv1a_hash(data, width=32, limit=None, case=False) -> int  (width dispatcher)

Key behaviors / guarantees
- **Limit**: only the first `limit` bytes are hashed when 0 < limit <= len(data).
  None, zero, negative or oversize limits hash the full input. Never an error.
- **Case folding (case=True)**: every byte with bit 5 (0x20) set has it cleared
  before folding. This is a raw bit test, not an alphabetic one: lowercase
  letters fold onto uppercase, but digits, space, '{', '|', '}' and any
  non-ASCII byte with bit 5 set are toggled as well.
- **16-bit**: XOR of the high and low halves of the 32-bit hash, case folding
  always off. Defined on the integer value, so the result is the same on
  little- and big-endian hosts.
- **Text entry points**: UTF-8 encode, no limit, case folding off.
- Pure functions: no logging, no shared state, safe from any thread.

Error handling
- TypeError for input that is not a byte buffer (or not str for text entry points).
- ValueError from fnv1a_hash() for unsupported widths or case=True at width 16.
"""

from __future__ import annotations

from typing import Optional, Union

ByteLike = Union[bytes, bytearray, memoryview]

FNV_OFFSET_BASIS_32 = 0x811C9DC5
FNV_OFFSET_BASIS_64 = 0xCBF29CE484222325

FNV_PRIME_32 = 0x01000193
FNV_PRIME_64 = 0x00000100000001B3

ASCII_CASE_MASK = 0b0010_0000

_MASK_16 = 0xFFFF
_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

SUPPORTED_WIDTHS = (16, 32, 64)


# ---------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------


def _as_bytes(data: ByteLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, bytearray):
        return bytes(data)
    if isinstance(data, memoryview):
        return data.tobytes()
    raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")


def _effective_length(size: int, limit: Optional[int]) -> int:
    """
    limit is honoured only when 0 < limit <= size; anything else means "whole input".
    """
    if limit is not None and 0 < limit <= size:
        return limit
    return size


def _fold(data: ByteLike, limit: Optional[int], case: bool, basis: int, prime: int, mask: int) -> int:
    buf = _as_bytes(data)
    n = _effective_length(len(buf), limit)

    h = basis
    for i in range(n):
        b = buf[i]
        if case and (b & ASCII_CASE_MASK) == ASCII_CASE_MASK:
            b ^= ASCII_CASE_MASK
        h ^= b
        h = (h * prime) & mask
    return h


def _encode(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.encode("utf-8")


# ---------------------------------------------------------------------
# Byte entry points
# ---------------------------------------------------------------------


def fnv1a_hash_64(data: ByteLike, limit: Optional[int] = None, case: bool = False) -> int:
    """
    64-bit FNV-1a of `data`, or of its first `limit` bytes when 0 < limit <= len(data).
    """
    return _fold(data, limit, case, FNV_OFFSET_BASIS_64, FNV_PRIME_64, _MASK_64)


def fnv1a_hash_32(data: ByteLike, limit: Optional[int] = None, case: bool = False) -> int:
    """
    32-bit FNV-1a of `data`, or of its first `limit` bytes when 0 < limit <= len(data).
    """
    return _fold(data, limit, case, FNV_OFFSET_BASIS_32, FNV_PRIME_32, _MASK_32)


def fnv1a_hash_16_xor(data: ByteLike, limit: Optional[int] = None) -> int:
    """
    16-bit hash: 32-bit FNV-1a (never case folded) with its two halves XORed together.
    """
    h = fnv1a_hash_32(data, limit, False)
    upper = (h >> 16) & _MASK_16
    lower = h & _MASK_16
    return upper ^ lower


# ---------------------------------------------------------------------
# Text entry points
# ---------------------------------------------------------------------


def fnv1a_hash_str_64(text: str) -> int:
    return fnv1a_hash_64(_encode(text), None, False)


def fnv1a_hash_str_32(text: str) -> int:
    return fnv1a_hash_32(_encode(text), None, False)


def fnv1a_hash_str_16_xor(text: str) -> int:
    return fnv1a_hash_16_xor(_encode(text), None)


# ---------------------------------------------------------------------
# Width dispatcher
# ---------------------------------------------------------------------


def fnv1a_hash(
    data: ByteLike,
    width: int = 32,
    limit: Optional[int] = None,
    case: bool = False,
) -> int:
    """
    Hash `data` at the requested width (16, 32 or 64).

    Notes:
    - width=16 has no case-folding variant; case=True raises ValueError
      instead of silently ignoring the flag.
    """
    if width == 64:
        return fnv1a_hash_64(data, limit, case)
    if width == 32:
        return fnv1a_hash_32(data, limit, case)
    if width == 16:
        if case:
            raise ValueError("16-bit FNV-1a does not support case folding")
        return fnv1a_hash_16_xor(data, limit)
    raise ValueError(f"Unsupported hash width: {width}. Expected one of: 16|32|64")


__all__ = [
    "FNV_OFFSET_BASIS_32",
    "FNV_OFFSET_BASIS_64",
    "FNV_PRIME_32",
    "FNV_PRIME_64",
    "ASCII_CASE_MASK",
    "SUPPORTED_WIDTHS",
    "fnv1a_hash_64",
    "fnv1a_hash_32",
    "fnv1a_hash_16_xor",
    "fnv1a_hash_str_64",
    "fnv1a_hash_str_32",
    "fnv1a_hash_str_16_xor",
    "fnv1a_hash",
]
