# fnvhash/utils/config.py
"""
Config Loader — fnvhash table builder (Typed YAML Configs)

Intent
- Load + validate configs/parameters.yaml for the build-table pipeline.
- Return **typed** configuration objects (Pydantic).
- Ensure output directories exist.

What this module guarantees
- **Strict validation:** invalid configs fail fast with actionable Pydantic errors.
- **Unicode whitespace hardening:** NBSP/BOM/narrow NBSP are normalized before YAML parsing.
- **Limit normalization:** `hash.limit` accepts null / "none" / int / numeric string;
  values <= 0 become None, the same "no limit" rule the hash engine applies.
- **Deterministic defaults:** if a key is omitted, model defaults apply.

Config models (high level)
- HashConfig: width (16|32|64), case_insensitive, limit, fail_on_collision
- InputConfig: path, format (csv|tsv|psv|txt), column, encoding
- OutputsConfig: json_path, psv_path (nullable)
- LoggingConfig: level, log_file (nullable)
- ParametersConfig: groups above

Primary functions
- load_parameters(path="configs/parameters.yaml") -> ParametersConfig
- ensure_dirs(params) -> None

External dependencies
- PyYAML (yaml.safe_load)
- Pydantic v2 (BaseModel, field_validator, model_validator)
- Local: fnvhash.utils.logging.get_logger
"""


from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from fnvhash.utils.logging import get_logger


# -----------------------------
# Parameter models
# -----------------------------
class HashConfig(BaseModel):
    width: Literal[16, 32, 64] = 32
    case_insensitive: bool = False

    # Optional: byte limit (None means "hash the whole key")
    limit: Optional[int] = None

    # Pipeline returns non-zero when the table has collisions
    fail_on_collision: bool = True

    @field_validator("limit", mode="before")
    @classmethod
    def _validate_limit(cls, v: Any) -> Optional[int]:
        """
        Accept:
        - null / None -> None
        - "none" -> None
        - int -> int (<=0 treated as None)
        - "10" -> 10 (<=0 treated as None)
        """
        if v is None:
            return None

        if isinstance(v, bool):
            raise ValueError('hash.limit must be "none", null, or an integer')

        if isinstance(v, str):
            s = v.strip().lower()
            if s in ("none", ""):
                return None
            try:
                iv = int(s)
            except Exception as e:
                raise ValueError('hash.limit must be "none", null, or an integer') from e
            return None if iv <= 0 else iv

        if isinstance(v, int):
            return None if v <= 0 else v

        raise ValueError('hash.limit must be "none", null, or an integer')

    @model_validator(mode="after")
    def _no_case_folding_at_16(self) -> "HashConfig":
        if self.width == 16 and self.case_insensitive:
            raise ValueError("hash.case_insensitive is not supported with hash.width=16")
        return self


class InputConfig(BaseModel):
    path: str = "raw_data/keys.txt"
    format: Literal["csv", "tsv", "psv", "txt"] = "txt"
    column: str = "key"
    encoding: str = "utf-8"

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class OutputsConfig(BaseModel):
    json_path: str = "artifacts/hash_table.json"
    psv_path: Optional[str] = "artifacts/hash_table.psv"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_file: Optional[str] = None


class ParametersConfig(BaseModel):
    hash: HashConfig = Field(default_factory=HashConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    outputs: OutputsConfig = Field(default_factory=OutputsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# -----------------------------
# YAML helpers
# -----------------------------
def _load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with p.open("r", encoding="utf-8") as f:
        text = f.read()

    # sanitize BEFORE YAML parse (fix NBSP / BOM / narrow NBSP)
    for ch in ["\u00A0", "\u2007", "\u202F", "\uFEFF"]:
        text = text.replace(ch, " ")

    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/object: {path}")
    return data


def load_parameters(path: str | Path = "configs/parameters.yaml") -> ParametersConfig:
    """
    Load and validate parameters.yaml into a typed ParametersConfig.
    """
    logger = get_logger(__name__)
    raw = _load_yaml(path)
    try:
        params = ParametersConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid parameters.yaml: %s", e)
        raise
    return params


def ensure_dirs(params: ParametersConfig) -> None:
    """
    Ensure configured output directories exist.
    """
    files = [params.outputs.json_path, params.outputs.psv_path, params.logging.log_file]
    for f in files:
        if f:
            Path(f).parent.mkdir(parents=True, exist_ok=True)


__all__ = [
    "HashConfig",
    "InputConfig",
    "OutputsConfig",
    "LoggingConfig",
    "ParametersConfig",
    "load_parameters",
    "ensure_dirs",
]
