# fnvhash/utils/paths.py
"""
Path helpers

Intent
- Make pipeline behavior independent of CWD.
- Standardize: configs/parameters.yaml => repo root, and input/output paths
  in parameters.yaml are relative to that root.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


def repo_root_from_parameters_path(parameters_path: str | Path) -> Path:
    """
    .../repo/configs/parameters.yaml -> .../repo
    """
    return Path(parameters_path).resolve().parents[1]


def resolve_path(path_like: Optional[str | Path], *, base_dir: str | Path) -> Optional[Path]:
    """
    Resolve a path relative to base_dir unless already absolute. None passes through.
    """
    if path_like is None:
        return None
    p = Path(path_like)
    if p.is_absolute():
        return p
    return (Path(base_dir) / p).resolve()


__all__ = ["repo_root_from_parameters_path", "resolve_path"]
