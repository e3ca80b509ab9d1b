from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import cellstyle.__main__ as entry


@contextmanager
def _bare_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.disable(logging.NOTSET)


def test_logging_disabled_by_default(monkeypatch) -> None:
    monkeypatch.delenv("CELLSTYLE_LOGGING", raising=False)

    with _bare_root_logger() as root:
        root.addHandler(logging.NullHandler())
        entry._setup_logging()

        assert root.handlers == []
        assert logging.root.manager.disable == logging.CRITICAL


def test_logging_to_stderr_at_info(monkeypatch) -> None:
    monkeypatch.setenv("CELLSTYLE_LOGGING", "1")
    monkeypatch.delenv("CELLSTYLE_DEBUG", raising=False)
    monkeypatch.delenv("CELLSTYLE_LOG_FILE", raising=False)

    with _bare_root_logger() as root:
        entry._setup_logging()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert type(root.handlers[0]) is logging.StreamHandler


def test_debug_logging_to_file(monkeypatch, tmp_path) -> None:
    log_file = tmp_path / "logs" / "cellstyle.log"
    monkeypatch.setenv("CELLSTYLE_LOGGING", "yes")
    monkeypatch.setenv("CELLSTYLE_DEBUG", "on")
    monkeypatch.setenv("CELLSTYLE_LOG_FILE", str(log_file))

    with _bare_root_logger() as root:
        entry._setup_logging()

        assert root.level == logging.DEBUG
        (handler,) = root.handlers
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(log_file)

        logging.getLogger("cellstyle.tests").debug("palette swapped")
        handler.flush()

    assert "DEBUG cellstyle.tests: palette swapped" in log_file.read_text(encoding="utf-8")


def test_main_sets_up_logging_before_demo(monkeypatch, tmp_path, capsys) -> None:
    log_file = tmp_path / "run.log"
    monkeypatch.setenv("CELLSTYLE_LOGGING", "1")
    monkeypatch.delenv("CELLSTYLE_DEBUG", raising=False)
    monkeypatch.setenv("CELLSTYLE_LOG_FILE", str(log_file))

    with _bare_root_logger() as root:
        assert entry.main(["--tags"]) == 0
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

    assert "<default/default>" in capsys.readouterr().out
    assert log_file.exists()
