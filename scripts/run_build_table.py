"""
Manual runner — Build-table pipeline (REAL execution)

This script:
- Ensures repo root is on PYTHONPATH
- Uses the real configs/parameters.yaml (or the path given as first argument)
- Runs pipeline_build_table.main()
- Does NOT clean up files (inspect outputs freely)

Usage:
    python scripts/run_build_table.py [configs/parameters.yaml]
"""

from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------------------
# Ensure repo root is on PYTHONPATH so `import fnvhash.*` works
# ---------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# ---------------------------------------------------------------------
# Imports AFTER path fix
# ---------------------------------------------------------------------
from fnvhash.batch.pipeline_build_table import main as build_table_main
from fnvhash.utils.logging import get_logger


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    params_path = Path(argv[0]) if argv else REPO_ROOT / "configs/parameters.yaml"

    logger = get_logger(__name__)

    logger.info("=" * 80)
    logger.info("RUNNING BUILD-TABLE PIPELINE")
    logger.info("Parameters: %s", params_path)
    logger.info("Working directory: %s", Path.cwd())
    logger.info("=" * 80)

    if not params_path.exists():
        raise FileNotFoundError(f"Required file missing: {params_path}")

    rc = build_table_main(params_path)

    logger.info("Build-table pipeline finished with return code: %s", rc)
    logger.info("=" * 80)

    return rc


if __name__ == "__main__":
    raise SystemExit(main())
