# fnvhash/batch/pipeline_build_table.py
"""
Pipeline — Build an FNV-1a dispatch table from a key list.

Intent
- Read the configured key list (csv/tsv/psv/txt).
- Hash every key with the configured width / case folding / limit.
- Emit a readable JSON artifact (and optionally a PSV table) for code
  generation or inspection.

Exit codes
- 0: table written
- 1: table written but has collisions and hash.fail_on_collision is true

Output
- {outputs.json_path}: {"meta": {..., "run_id"}, "entries": [...], "collisions": {hex: [keys]}}
- {outputs.psv_path}: key|hash|hex (skipped when null)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from fnvhash.core.hash_table import HashTable, build_hash_table
from fnvhash.io.readers import read_keys
from fnvhash.io.writers import write_json, write_psv
from fnvhash.utils.config import ParametersConfig, ensure_dirs, load_parameters
from fnvhash.utils.hashing import fnv1a_file
from fnvhash.utils.logging import configure_logging_from_params, get_logger
from fnvhash.utils.paths import repo_root_from_parameters_path, resolve_path


def build_payload(table: HashTable, params: ParametersConfig, run_id: str) -> Dict[str, Any]:
    """
    JSON-serializable view of the table (dict / list / primitives only).
    """
    hex_by_value = {e.value: e.hex for e in table.entries}
    return {
        "meta": {
            "width": table.width,
            "case_insensitive": table.case,
            "limit": table.limit,
            "n_keys": len(table),
            "n_collisions": len(table.collisions),
            "input_format": params.input.format,
            "run_id": run_id,
        },
        "entries": table.to_records(),
        "collisions": {hex_by_value[v]: keys for v, keys in table.collisions.items()},
    }


def main(parameters_path: str | Path = "configs/parameters.yaml") -> int:
    # ------------------------------------------------------------------
    # Load config + ensure filesystem layout
    # ------------------------------------------------------------------
    params = load_parameters(parameters_path)
    base_dir = repo_root_from_parameters_path(parameters_path)

    params.outputs.json_path = str(resolve_path(params.outputs.json_path, base_dir=base_dir))
    if params.outputs.psv_path:
        params.outputs.psv_path = str(resolve_path(params.outputs.psv_path, base_dir=base_dir))
    if params.logging.log_file:
        params.logging.log_file = str(resolve_path(params.logging.log_file, base_dir=base_dir))

    configure_logging_from_params(params)
    logger = get_logger(__name__)
    ensure_dirs(params)

    # Same parameters file => same run id, so artifacts can be traced to their config
    run_id = fnv1a_file(parameters_path)
    logger.info("[run=%s] Build-table pipeline started: %s", run_id, str(parameters_path))

    # ------------------------------------------------------------------
    # Read keys + build table
    # ------------------------------------------------------------------
    input_path = resolve_path(params.input.path, base_dir=base_dir)
    keys = read_keys(
        input_path,
        params.input.format,
        column=params.input.column,
        encoding=params.input.encoding,
    )
    logger.info("[run=%s] Read %d keys from %s", run_id, len(keys), str(input_path))

    table = build_hash_table(
        keys,
        width=params.hash.width,
        case=params.hash.case_insensitive,
        limit=params.hash.limit,
    )

    # ------------------------------------------------------------------
    # Write artifacts
    # ------------------------------------------------------------------
    write_json(params.outputs.json_path, build_payload(table, params, run_id), indent=2, sort_keys=True)
    if params.outputs.psv_path:
        write_psv(params.outputs.psv_path, table.to_dataframe())

    if table.has_collisions and params.hash.fail_on_collision:
        logger.error(
            "[run=%s] Hash table has %d colliding value(s) at width %d; see %s",
            run_id,
            len(table.collisions),
            table.width,
            params.outputs.json_path,
        )
        return 1

    logger.info("[run=%s] Build-table pipeline completed: %s", run_id, params.outputs.json_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
