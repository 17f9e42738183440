# fnvhash/io/writers.py
"""
Writers (Deterministic Artifacts I/O)

Intent
- Provide a single, deterministic way to write hash table artifacts to disk:
  - JSON (readable, deterministic)
  - DELIMITED for PSV/CSV exports of the table

External calls
- json.dumps
- pandas.DataFrame.to_csv
- fnvhash.utils.logging.get_logger

Key behaviors / guarantees
- JSON: UTF-8, sort_keys=True, ensure_ascii=False, indent 2, trailing newline.
- CSV/DELIMITED: UTF-8, index=False, '\\n' line terminator, column order = df.columns.
- Parent directories are created automatically.
- Every write emits one INFO log with the path and size/shape.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

import pandas as pd

from fnvhash.utils.logging import get_logger


def ensure_parent_dir(path: str | Path) -> None:
    """
    Ensure parent directory exists for the given file path.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_json(
    path: str | Path,
    obj: Any,
    *,
    indent: int = 2,
    sort_keys: bool = True,
) -> None:
    """
    Write an object to JSON deterministically.

    Caller must ensure `obj` is JSON-serializable (e.g. HashTable.to_records()).
    """
    logger = get_logger(__name__)
    ensure_parent_dir(path)

    p = Path(path)
    text = json.dumps(obj, ensure_ascii=False, sort_keys=sort_keys, indent=indent) + "\n"
    p.write_text(text, encoding="utf-8")

    logger.info("Wrote JSON: %s (bytes=%d)", str(p), len(text.encode("utf-8")))


def write_delimited(path: str | Path, df: pd.DataFrame, *, sep: str = "|") -> None:
    """
    Write DataFrame to a delimited text file deterministically (e.g., PSV/CSV).
    """
    logger = get_logger(__name__)
    ensure_parent_dir(path)

    p = Path(path)
    df.to_csv(
        p,
        index=False,
        encoding="utf-8",
        sep=sep,
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
    )

    logger.info(
        "Wrote DELIMITED: %s (sep=%s rows=%d, cols=%d)",
        str(p),
        str(sep),
        int(df.shape[0]),
        int(df.shape[1]),
    )


def write_csv(path: str | Path, df: pd.DataFrame) -> None:
    return write_delimited(path, df, sep=",")


def write_psv(path: str | Path, df: pd.DataFrame) -> None:
    return write_delimited(path, df, sep="|")


__all__ = [
    "ensure_parent_dir",
    "write_json",
    "write_delimited",
    "write_csv",
    "write_psv",
]
