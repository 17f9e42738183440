# tests/test_hash_table.py

from __future__ import annotations

import json

import pytest

from fnvhash.core.fnv1a import fnv1a_hash_32, fnv1a_hash_str_64
from fnvhash.core.hash_table import HashCollisionError, HashEntry, HashTable, build_hash_table


def test_build_table_preserves_order_and_skips_duplicates():
    table = build_hash_table(["GET", "POST", "GET", "PUT"])

    assert [e.key for e in table.entries] == ["GET", "POST", "PUT"]
    assert len(table) == 3
    assert table.entries[0].value == fnv1a_hash_32(b"GET")
    assert not table.has_collisions


def test_entry_hex_is_zero_padded_to_width():
    t16 = build_hash_table([""], width=16)
    assert t16.entries[0].hex == "0x1cd9"

    t64 = build_hash_table(["a"], width=64)
    assert t64.entries[0].hex == "0xaf63dc4c8601ec8c"
    assert t64.entries[0].value == fnv1a_hash_str_64("a")


def test_lookup_and_contains():
    table = build_hash_table(["alpha", "beta"], width=64)

    assert table.lookup("alpha") == "alpha"
    assert table.lookup("gamma") is None
    assert "beta" in table
    assert "gamma" not in table
    assert 42 not in table


def test_case_insensitive_lookup():
    table = build_hash_table(["CONTENT-TYPE"], width=32, case=True)
    assert table.lookup("content-type") == "CONTENT-TYPE"
    assert table.lookup("Content-Type") == "CONTENT-TYPE"


def test_case_variants_reported_as_collision():
    table = build_hash_table(["ab", "AB"], case=True)

    assert table.has_collisions
    (keys,) = table.collisions.values()
    assert keys == ["AB", "ab"]


def test_limit_makes_shared_prefixes_collide():
    table = build_hash_table(["prefix_one", "prefix_two", "other"], limit=6)
    assert list(table.collisions.values()) == [["prefix_one", "prefix_two"]]


def test_strict_raises_on_collision():
    with pytest.raises(HashCollisionError) as e:
        build_hash_table(["ab", "AB"], case=True, strict=True)

    assert isinstance(e.value, ValueError)
    assert e.value.width == 32
    assert "collision" in str(e.value).lower()


def test_bad_settings_rejected():
    with pytest.raises(ValueError):
        build_hash_table(["x"], width=8)
    with pytest.raises(ValueError):
        build_hash_table(["x"], width=16, case=True)
    with pytest.raises(TypeError):
        build_hash_table([b"x"])  # type: ignore[list-item]


def test_records_and_dataframe():
    table = build_hash_table(["a", "foobar"])

    records = table.to_records()
    assert records == [
        {"key": "a", "hash": 0xE40C292C, "hex": "0xe40c292c"},
        {"key": "foobar", "hash": 0xBF9CF968, "hex": "0xbf9cf968"},
    ]
    json.dumps(records)

    df = table.to_dataframe()
    assert list(df.columns) == ["key", "hash", "hex"]
    assert df.shape == (2, 3)
    assert df.loc[1, "hex"] == "0xbf9cf968"


def test_empty_table():
    table = build_hash_table([])
    assert len(table) == 0
    assert table.to_records() == []
    assert list(table.to_dataframe().columns) == ["key", "hash", "hex"]


def test_membership_requires_equivalent_key_not_just_equal_hash():
    # entry "x" stored under the hash value of "y": same value, different key
    table = HashTable(width=32, entries=[HashEntry(key="x", value=fnv1a_hash_32(b"y"), width=32)])

    assert table.lookup("y") == "x"
    assert "y" not in table
    assert "x" in table


def test_membership_follows_limit_and_case_folding():
    table = build_hash_table(["prefix_one", "Other"], limit=6, case=True)

    # equivalent under the table's settings: same first 6 bytes after folding
    assert "PREFIX_zzz" in table
    assert table.lookup("prefix_zzz") == "prefix_one"
    assert "OTHER" in table
    assert "prefi" not in table
    assert "other_thing" not in table


def test_membership_without_case_folding_is_exact():
    table = build_hash_table(["ab"])
    assert "ab" in table
    assert "AB" not in table
