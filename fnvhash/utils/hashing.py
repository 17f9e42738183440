# fnvhash/utils/hashing.py
"""
Hashing utilities (hex digests)

Intent
- Short, stable FNV-1a fingerprints for text and files (checksums, cache keys).
- Intended for *fingerprinting*, not security.

Notes
- Digest = zero-padded lowercase hex, width // 4 chars (4 / 8 / 16).
- Files are read whole; there is no incremental hashing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from fnvhash.core.fnv1a import fnv1a_hash

PathLike = Union[str, Path]


def _hexdigest(value: int, width: int) -> str:
    return f"{value:0{width // 4}x}"


def fnv1a_text(s: str, width: int = 32) -> str:
    """
    FNV-1a hex digest of a text string (UTF-8).
    """
    return _hexdigest(fnv1a_hash(s.encode("utf-8"), width), width)


def fnv1a_file(path: PathLike, width: int = 32) -> str:
    """
    FNV-1a hex digest of a file's raw bytes.
    """
    b = Path(path).read_bytes()
    return _hexdigest(fnv1a_hash(b, width), width)


__all__ = ["fnv1a_text", "fnv1a_file"]
