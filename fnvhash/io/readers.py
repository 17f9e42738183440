# fnvhash/io/readers.py
"""
Readers (key lists for the hash table builder)

Intent
- Load the keys to hash from a delimited table (csv/tsv/psv) or a plain
  text file with one key per line.

External calls
- pandas.read_csv

Primary functions
- read_input_table(path, fmt, encoding="utf-8") -> pandas.DataFrame
- validate_required_columns(df, required_columns) -> None (raise ValueError if missing)
- read_keys(path, fmt, column="key", encoding="utf-8") -> list[str]

Key behaviors / guarantees
- **File existence check**: raises FileNotFoundError if the input file path does not exist.
- **Supported formats**: csv, tsv, psv, txt (case-insensitive).
- **No cell-value trimming**: keys are hashed byte-for-byte, so "abc" and "abc "
  stay distinct. Only column names are trimmed.
- **txt**: one key per line. Only "\\n" separates keys (\\r\\n and \\r are
  translated on read); empty lines are dropped, whitespace-only lines are keys.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Literal

import pandas as pd

InputFormat = Literal["csv", "tsv", "psv", "txt"]


_DELIMS = {
    "csv": ",",
    "tsv": "\t",
    "psv": "|",
}


def validate_required_columns(df: pd.DataFrame, required_columns: Iterable[str]) -> None:
    """
    Raise ValueError if any required column is missing.
    """
    required = list(required_columns)
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Found columns: {list(df.columns)}")


def _trim_column_names(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]
    return df


def _read_lines(p: Path, encoding: str) -> pd.DataFrame:
    # read_text translates \r\n and \r to \n; other control characters stay in the key
    lines = p.read_text(encoding=encoding).split("\n")
    keys = [ln for ln in lines if ln]
    return pd.DataFrame({"key": keys}, dtype=str)


def read_input_table(
    path: str | Path,
    fmt: InputFormat,
    encoding: str = "utf-8",
) -> pd.DataFrame:
    """
    Read an input table from csv/tsv/psv, or a txt key list as a single "key" column.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input file not found: {str(p)}")

    fmt = fmt.lower().strip()  # type: ignore[assignment]
    if fmt in _DELIMS:
        df = pd.read_csv(p, sep=_DELIMS[fmt], encoding=encoding, dtype=str, keep_default_na=False)
        return _trim_column_names(df)

    if fmt == "txt":
        return _read_lines(p, encoding)

    raise ValueError(f"Unsupported input format: {fmt}. Expected one of: csv|tsv|psv|txt")


def read_keys(
    path: str | Path,
    fmt: InputFormat,
    column: str = "key",
    encoding: str = "utf-8",
) -> List[str]:
    """
    Return the key column as a list of strings (order preserved, duplicates kept).

    For txt input the column name is ignored.
    """
    df = read_input_table(path, fmt, encoding=encoding)
    col = "key" if fmt.lower().strip() == "txt" else column
    validate_required_columns(df, [col])
    return [str(v) for v in df[col].tolist()]


__all__ = ["InputFormat", "read_input_table", "validate_required_columns", "read_keys"]
