# tests/test_logging_utils.py

from __future__ import annotations

import logging

from utils.logging_utils import configure_root_logger, get_logger


def test_get_logger_is_cached():
    a = get_logger("prng.cache_check")
    b = get_logger("prng.cache_check")
    assert a is b


def test_get_logger_default_name():
    assert get_logger().name == "__main__"


def test_configure_root_logger_writes_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    configure_root_logger(
        level=logging.INFO,
        log_to_file=True,
        log_to_stdout=False,
        filename="run.log",
        log_dir=tmp_path / "logs",
    )
    handlers = list(root.handlers)
    try:
        logging.getLogger("prng.file_check").warning("stream split")
    finally:
        for h in handlers:
            h.flush()
            h.close()

    text = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    assert "[WARNING] prng.file_check: stream split" in text


def test_configure_root_logger_keeps_existing_handlers(monkeypatch):
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])
    monkeypatch.setattr(root, "level", root.level)

    configure_root_logger(level=logging.DEBUG, log_to_file=False)
    assert root.handlers == [sentinel]
    assert root.level == logging.DEBUG
