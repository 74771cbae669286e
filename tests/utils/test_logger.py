import io
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import pytest
import structlog

from utils.logger import init_logger, trace_method


def _write_cfg(tmp_path: Path, cfg: dict) -> Path:
    p = tmp_path / "logcfg.json"
    p.write_text(json.dumps(cfg))
    return p


def _find_handler(handlers, klass):
    return next((h for h in handlers if isinstance(h, klass)), None)


@pytest.fixture(autouse=True)
def _quiet_colour(monkeypatch):
    monkeypatch.delenv("LOG_CONSOLE_RENDERER", raising=False)
    monkeypatch.setattr("utils.logger._supports_colour", lambda: False)


def test_env_renderer_overrides_config(monkeypatch, tmp_path):
    cfg_path = _write_cfg(tmp_path, {"logging": {"level": "DEBUG", "console": {"renderer": "pretty"}}})
    monkeypatch.setenv("LOG_CONSOLE_RENDERER", "json")
    monkeypatch.setattr("sys.stdout", io.StringIO())

    init_logger(cfg_path)

    stream_h = _find_handler(logging.getLogger().handlers, logging.StreamHandler)
    assert isinstance(stream_h.formatter, structlog.stdlib.ProcessorFormatter)
    assert isinstance(stream_h.formatter.processors[-1], structlog.processors.JSONRenderer)


@pytest.mark.parametrize(
    "renderer, expected",
    [("pretty", structlog.dev.ConsoleRenderer), ("json", structlog.processors.JSONRenderer)],
)
def test_config_renderer_is_used(tmp_path, renderer, expected):
    cfg_path = _write_cfg(tmp_path, {"logging": {"console": {"enabled": True, "renderer": renderer}}})

    init_logger(cfg_path)

    stream_h = _find_handler(logging.getLogger().handlers, logging.StreamHandler)
    assert isinstance(stream_h.formatter.processors[-1], expected)


def test_defaults_to_pretty_console_at_info(tmp_path):
    init_logger(_write_cfg(tmp_path, {"logging": {}}))

    root = logging.getLogger()
    assert root.level == logging.INFO
    stream_h = _find_handler(root.handlers, logging.StreamHandler)
    assert isinstance(stream_h.formatter.processors[-1], structlog.dev.ConsoleRenderer)


def test_console_can_be_disabled(tmp_path):
    init_logger(_write_cfg(tmp_path, {"logging": {"console": {"enabled": False}}}))
    assert logging.getLogger().handlers == []


def test_reinitialising_replaces_handlers(tmp_path):
    cfg_path = _write_cfg(tmp_path, {"logging": {}})
    init_logger(cfg_path)
    init_logger(cfg_path)
    assert len(logging.getLogger().handlers) == 1


def test_file_defaults_when_enabled_minimally(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    init_logger(_write_cfg(tmp_path, {"logging": {"console": {"enabled": False}, "file": {"enabled": True}}}))

    file_h = _find_handler(logging.getLogger().handlers, logging.FileHandler)
    assert Path(file_h.baseFilename) == tmp_path / "logs" / "app.log"
    assert isinstance(file_h, RotatingFileHandler)
    assert file_h.level == logging.DEBUG
    assert isinstance(file_h.formatter.processors[-1], structlog.processors.JSONRenderer)


def test_plain_file_handler_when_rotation_disabled(tmp_path):
    log_path = tmp_path / "plain.log"
    cfg = {
        "logging": {
            "console": {"enabled": False},
            "file": {"enabled": True, "path": str(log_path), "rotation": {"enabled": False}},
        }
    }
    init_logger(_write_cfg(tmp_path, cfg))

    file_h = _find_handler(logging.getLogger().handlers, logging.FileHandler)
    assert file_h is not None and not isinstance(file_h, RotatingFileHandler)
    assert Path(file_h.baseFilename) == log_path


def test_library_levels_are_applied(tmp_path):
    init_logger(_write_cfg(tmp_path, {"logging": {"libraries": {"httpx": "ERROR", "LiteLLM": "warning"}}}))

    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("LiteLLM").level == logging.WARNING


def test_invalid_console_renderer_raises(tmp_path):
    cfg_path = _write_cfg(tmp_path, {"logging": {"console": {"enabled": True, "renderer": "invalid"}}})
    with pytest.raises(ValueError, match=r"Invalid console logging renderer option: 'invalid'.*Allowed: json, pretty"):
        init_logger(cfg_path)


def test_missing_config_path_raises():
    with pytest.raises(FileNotFoundError):
        init_logger("/nonexistent/path/config.json")


def test_invalid_json_raises(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{ not: valid }")
    with pytest.raises(ValueError):
        init_logger(bad)


def test_trace_method_logs_entry_exit_and_errors(monkeypatch):
    calls = []

    class Capture:
        def debug(self, event, **kwargs):  # type: ignore[no-untyped-def]
            calls.append((event, kwargs))

    monkeypatch.setattr("utils.logger.get_logger", lambda name: Capture())

    class Sample:
        @trace_method
        def ok(self):  # type: ignore[no-untyped-def]
            return "OK"

        @trace_method
        def fail(self):  # type: ignore[no-untyped-def]
            raise RuntimeError("X")

    s = Sample()
    assert s.ok() == "OK"
    assert [c[0] for c in calls] == ["method_entry", "method_exit"]
    assert calls[1][1] == {"method": "Sample.ok", "success": True}

    calls.clear()
    with pytest.raises(RuntimeError):
        s.fail()
    assert calls[1][1]["method"] == "Sample.fail"
    assert calls[1][1]["success"] is False
    assert calls[1][1]["error"] == "X"
