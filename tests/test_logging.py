# tests/test_logging.py
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

import fnvhash.utils.logging as log_mod


@pytest.fixture(autouse=True)
def _fresh_module_state(monkeypatch):
    # pytest keeps its own capture handlers on root; only module state and level are reset
    monkeypatch.setattr(log_mod, "_CONFIGURED", False, raising=True)
    monkeypatch.setattr(log_mod, "_CURRENT_LOG_FILE", None, raising=True)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def _file_handlers_for(path: Path):
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path.resolve()
    ]


def test_repeated_configure_keeps_handler_count():
    log_mod.configure_logging()
    n = len(logging.getLogger().handlers)

    for _ in range(3):
        log_mod.configure_logging(level="DEBUG")
    assert len(logging.getLogger().handlers) == n
    assert logging.getLogger().level == logging.DEBUG


def test_log_file_handler_attached_once_and_written(tmp_path: Path):
    log_file = tmp_path / "logs" / "build.log"

    log_mod.configure_logging(log_file=str(log_file))
    log_mod.configure_logging(log_file=str(log_file))

    handlers = _file_handlers_for(log_file)
    try:
        assert len(handlers) == 1
        assert log_mod._CURRENT_LOG_FILE == str(log_file)

        logging.getLogger("fnvhash.test").warning("table has %d collisions", 2)
        handlers[0].flush()
        line = log_file.read_text(encoding="utf-8").strip()
        assert line.endswith("| WARNING | fnvhash.test | table has 2 collisions")
    finally:
        for h in handlers:
            logging.getLogger().removeHandler(h)
            h.close()


def test_get_logger_configures_on_first_use():
    assert log_mod._CONFIGURED is False

    lg = log_mod.get_logger("fnvhash.core.hash_table")
    assert lg is logging.getLogger("fnvhash.core.hash_table")
    assert log_mod._CONFIGURED is True


def test_from_params_reads_logging_block_and_explicit_level_wins():
    params = SimpleNamespace(logging=SimpleNamespace(level="error", log_file=None))

    log_mod.configure_logging_from_params(params)
    assert logging.getLogger().level == logging.ERROR

    log_mod.configure_logging_from_params(params, level="INFO")
    assert logging.getLogger().level == logging.INFO


def test_from_params_without_logging_block_uses_defaults():
    log_mod.configure_logging_from_params(SimpleNamespace())
    assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize("bad", ["NOT_A_LEVEL", "loud", ""])
def test_invalid_level_raises(bad):
    with pytest.raises(ValueError) as e:
        log_mod.configure_logging(level=bad)
    assert "invalid log level" in str(e.value).lower()
