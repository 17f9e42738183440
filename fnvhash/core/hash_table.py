# fnvhash/core/hash_table.py
"""
Hash Table Builder — precomputed FNV-1a dispatch tables

Intent
- Hash a list of string keys once, up front, so callers can dispatch on the
  integer value (switch-style tables, protocol ids, asset lookups).
- Detect collisions before the table is used: a colliding table silently
  routes two keys to the same slot.

Primary API
- build_hash_table(keys, *, width=32, case=False, limit=None, strict=False) -> HashTable
- HashTable.lookup(key) -> Optional[str]
- HashTable.to_records() -> list[dict]   (JSON-serializable)
- HashTable.to_dataframe() -> pandas.DataFrame

Key behaviors / guarantees
- Keys are UTF-8 encoded and hashed with the same (width, case, limit) settings
  that lookup() uses.
- Entry order = first appearance of each distinct key (duplicates skipped).
- Collisions: hash value -> sorted distinct keys, only for values shared by >1 key.
  With case=True, "ab" and "AB" are distinct keys with equal hashes and are
  reported as a collision.
- strict=True raises HashCollisionError on any collision.

External calls
- fnvhash.core.fnv1a.fnv1a_hash
- pandas.DataFrame (to_dataframe only)
- fnvhash.utils.logging.get_logger
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from fnvhash.core.fnv1a import ASCII_CASE_MASK, SUPPORTED_WIDTHS, fnv1a_hash
from fnvhash.utils.logging import get_logger


class HashCollisionError(ValueError):
    """Raised by build_hash_table(strict=True) when two distinct keys share a hash."""

    def __init__(self, collisions: Dict[int, List[str]], width: int) -> None:
        self.collisions = collisions
        self.width = width
        sample = ", ".join(
            f"{_hex(v, width)}={keys}" for v, keys in list(sorted(collisions.items()))[:5]
        )
        super().__init__(f"{len(collisions)} hash collision(s) at width {width}: {sample}")


def _hex(value: int, width: int) -> str:
    return f"0x{value:0{width // 4}x}"


@dataclass(frozen=True)
class HashEntry:
    key: str
    value: int
    width: int

    @property
    def hex(self) -> str:
        return _hex(self.value, self.width)


@dataclass
class HashTable:
    width: int
    case: bool = False
    limit: Optional[int] = None
    entries: List[HashEntry] = field(default_factory=list)
    collisions: Dict[int, List[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._by_value: Dict[int, HashEntry] = {}
        self._folded: set[bytes] = set()
        for e in self.entries:
            self._by_value.setdefault(e.value, e)
            self._folded.add(self._fold_key(e.key))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        """
        True when `key` is equivalent to a stored key: same bytes after the
        table's limit and case folding. A key that merely shares a hash value
        with a stored key is not a member (lookup() would still return one).
        """
        return isinstance(key, str) and self._fold_key(key) in self._folded

    @property
    def has_collisions(self) -> bool:
        return bool(self.collisions)

    def _fold_key(self, key: str) -> bytes:
        b = key.encode("utf-8")
        if self.limit is not None and 0 < self.limit <= len(b):
            b = b[: self.limit]
        if self.case:
            b = bytes(c ^ ASCII_CASE_MASK if c & ASCII_CASE_MASK else c for c in b)
        return b

    def hash_key(self, key: str) -> int:
        return fnv1a_hash(key.encode("utf-8"), self.width, self.limit, self.case)

    def lookup(self, key: str) -> Optional[str]:
        """
        Return the stored key whose hash equals hash(key), or None.

        Dispatch semantics: any key with the same hash value resolves to the
        stored key, even one that was never added. Use `in` for key membership.
        With a colliding value the first stored key wins.
        """
        e = self._by_value.get(self.hash_key(key))
        return e.key if e is not None else None

    def to_records(self) -> List[Dict[str, Any]]:
        return [{"key": e.key, "hash": e.value, "hex": e.hex} for e in self.entries]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_records(), columns=["key", "hash", "hex"])


def build_hash_table(
    keys: Iterable[str],
    *,
    width: int = 32,
    case: bool = False,
    limit: Optional[int] = None,
    strict: bool = False,
) -> HashTable:
    """
    Hash every distinct key and collect collisions.
    """
    logger = get_logger(__name__)

    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported hash width: {width}. Expected one of: 16|32|64")
    if width == 16 and case:
        raise ValueError("16-bit FNV-1a does not support case folding")

    seen: set[str] = set()
    entries: List[HashEntry] = []
    by_value: Dict[int, List[str]] = {}

    for key in keys:
        if not isinstance(key, str):
            raise TypeError(f"hash table keys must be str, got {type(key).__name__}")
        if key in seen:
            continue
        seen.add(key)

        value = fnv1a_hash(key.encode("utf-8"), width, limit, case)
        entries.append(HashEntry(key=key, value=value, width=width))
        by_value.setdefault(value, []).append(key)

    collisions = {v: sorted(ks) for v, ks in by_value.items() if len(ks) > 1}

    if collisions:
        for v, ks in sorted(collisions.items()):
            logger.warning("Hash collision %s: %s", _hex(v, width), ks)
        if strict:
            raise HashCollisionError(collisions, width)

    logger.info(
        "Built hash table: keys=%d width=%d case=%s limit=%s collisions=%d",
        len(entries),
        width,
        case,
        limit,
        len(collisions),
    )
    return HashTable(width=width, case=case, limit=limit, entries=entries, collisions=collisions)


__all__ = ["HashEntry", "HashTable", "HashCollisionError", "build_hash_table"]
