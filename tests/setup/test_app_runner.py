"""Tests for `gildsmith_init.setup.app_runner`."""

import logging
from pathlib import Path

import pytest

from gildsmith_init import config
from gildsmith_init.setup import app_runner, i18n
from gildsmith_init.setup.pipeline import orchestrator


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_parse_cli_args_defaults():
    ns = app_runner.parse_cli_args([])
    assert ns.verbose is False
    assert ns.core_only is False
    assert ns.lang == "en"
    assert ns.log_level is None
    assert ns.root is None


def test_parse_cli_args_flags(tmp_path: Path):
    ns = app_runner.parse_cli_args(
        ["-v", "--lang", "sv", "--core-only", "--log-level", "debug", "--root", str(tmp_path)]
    )
    assert ns.verbose is True
    assert ns.lang == "sv"
    assert ns.core_only is True
    assert ns.log_level == "DEBUG"
    assert ns.root == tmp_path


def test_parse_cli_args_rejects_unknown_language():
    with pytest.raises(SystemExit) as excinfo:
        app_runner.parse_cli_args(["--lang", "de"])
    assert excinfo.value.code == 2


def test_run_builds_context_and_returns_exit_code(monkeypatch, tmp_path: Path):
    seen = {}

    def fake_run_setup(context, steps=None, core_only=False):
        seen["context"] = context
        seen["core_only"] = core_only
        return orchestrator.EXIT_STEP_FAILED

    monkeypatch.setattr(app_runner, "run_setup", fake_run_setup)
    args = app_runner.parse_cli_args(["--verbose", "--core-only", "--lang", "sv", "--root", str(tmp_path)])

    assert app_runner.run(args) == 1
    assert seen["context"].root == tmp_path.resolve()
    assert seen["context"].verbose is True
    assert seen["core_only"] is True
    assert i18n.LANG == "sv"


def test_run_handles_keyboard_interrupt(monkeypatch, tmp_path: Path, capsys):
    def interrupted(context, steps=None, core_only=False):
        raise KeyboardInterrupt

    monkeypatch.setattr(app_runner, "run_setup", interrupted)
    args = app_runner.parse_cli_args(["--root", str(tmp_path)])
    assert app_runner.run(args) == app_runner.EXIT_INTERRUPTED
    assert "Setup interrupted." in capsys.readouterr().out


def test_entry_point_exits_with_run_status(monkeypatch, tmp_path: Path, fake_runner):
    monkeypatch.setattr(app_runner, "configure_logging", lambda *a, **k: None)
    with pytest.raises(SystemExit) as excinfo:
        app_runner.entry_point(["--root", str(tmp_path), "--core-only"])
    assert excinfo.value.code == 0
    assert (tmp_path / "gildsmith" / "package.json").is_file()


def test_configure_logging_without_file(monkeypatch):
    monkeypatch.setenv("DISABLE_FILE_LOGS", "1")
    app_runner.configure_logging("INFO")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.INFO


def test_configure_logging_writes_file(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("DISABLE_FILE_LOGS", raising=False)
    monkeypatch.setattr(config, "LOG_DIR", tmp_path / "logs")
    try:
        app_runner.configure_logging()
        logging.getLogger("gildsmith_init.test").debug("debug line for the file")
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "debug line for the file" in (tmp_path / "logs" / config.LOG_FILENAME).read_text()
    finally:
        app_runner.configure_logging(enable_file=False)


def test_configure_logging_survives_unwritable_log_dir(monkeypatch, tmp_path: Path):
    blocker = tmp_path / "logs"
    blocker.write_text("a file, not a directory")
    monkeypatch.delenv("DISABLE_FILE_LOGS", raising=False)
    monkeypatch.setattr(config, "LOG_DIR", blocker)

    app_runner.configure_logging()

    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
    app_runner.configure_logging(enable_file=False)
