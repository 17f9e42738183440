import json
from pathlib import Path

import pandas as pd

from fnvhash.io.writers import ensure_parent_dir, write_csv, write_json, write_psv


def test_ensure_parent_dir_creates(tmp_path: Path):
    out = tmp_path / "a" / "b" / "file.json"
    assert not out.parent.exists()
    ensure_parent_dir(out)
    assert out.parent.exists()


def test_write_json_sorted_and_unicode(tmp_path: Path):
    out = tmp_path / "x" / "out.json"
    write_json(out, {"b": 2, "a": "ไทย"})

    text = out.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert text.index('"a"') < text.index('"b"')
    assert json.loads(text)["a"] == "ไทย"


def test_write_csv_writes_and_creates_parent(tmp_path: Path):
    out = tmp_path / "reports" / "t.csv"
    df = pd.DataFrame({"b": [2, 3], "a": [1, 4]})

    write_csv(out, df)

    text = out.read_text(encoding="utf-8").splitlines()
    assert text[0] == "b,a"
    assert text[1] == "2,1"
    assert text[2] == "3,4"


def test_write_psv_table(tmp_path: Path):
    out = tmp_path / "t.psv"
    df = pd.DataFrame([{"key": "GET", "hash": 1, "hex": "0x00000001"}])

    write_psv(out, df)

    assert out.read_text(encoding="utf-8") == "key|hash|hex\nGET|1|0x00000001\n"
