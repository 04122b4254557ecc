from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path

import pytest

from emmet_volt.core.global_paths import GlobalPath
from emmet_volt.util.log import Log, LogFormat, LogLevel


def test_log_writes_console_and_file(monkeypatch, tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=True, file=True, dev=True)

    log = Log.create({"service": "test.log"})
    log.info("npm available", {"version": "10.8.2"})
    Log.close()

    captured = capsys.readouterr()
    text = (tmp_path / "dev.log").read_text(encoding="utf-8")

    assert captured.out == ""
    assert 'msg="npm available"' in captured.err
    assert "service=test.log" in captured.err
    assert "version=10.8.2" in text


def test_log_supports_json_format(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=False, file=True, dev=True)

    log = Log.create({"service": "test.json"})
    log.info("starting language server", {"args": ["--stdio"]})
    Log.close()

    payload = json.loads((tmp_path / "dev.log").read_text(encoding="utf-8").strip())

    assert payload["level"] == "info"
    assert payload["msg"] == "starting language server"
    assert payload["service"] == "test.json"
    assert payload["args"] == ["--stdio"]


def test_level_filtering(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.WARN, console=True, file=False)

    log = Log.create({"service": "test.level"})
    log.info("hidden")
    log.error("shown", {"error": RuntimeError("outer")})

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "msg=shown" in err
    assert "error=outer" in err


def test_timer_logs_start_and_completion(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=True, file=False)

    with Log.create({"service": "test.timer"}).time("installing", {"package": "emmet-ls"}):
        pass

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert [line["status"] for line in lines] == ["started", "completed"]
    assert "duration" in lines[1]


def test_loggers_are_cached_by_service() -> None:
    assert Log.create({"service": "lsp.plugin"}) is Log.create({"service": "lsp.plugin"})
    assert Log.create() is not Log.create()


def test_old_log_files_are_rotated(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    now = time.time()
    for index in range(12):
        path = tmp_path / f"2026-01-{index + 1:02d}T000000.log"
        path.write_text("old\n", encoding="utf-8")
        os.utime(path, (now - 1000 + index, now - 1000 + index))

    Log.configure(console=False, file=True, dev=True)
    Log.close()

    remaining = sorted(p.name for p in tmp_path.glob("????-??-??T??????.log"))
    assert len(remaining) == 10
    assert "2026-01-01T000000.log" not in remaining
    assert "2026-01-02T000000.log" not in remaining


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", LogLevel.DEBUG), ("WARNING", LogLevel.WARN), (None, LogLevel.INFO)],
)
def test_log_level_parse(value, expected) -> None:  # type: ignore[no-untyped-def]
    assert LogLevel.parse(value) is expected


def test_log_level_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        LogLevel.parse("verbose")


def test_rotation_counts_the_new_log_file(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    now = time.time()
    for index in range(12):
        path = tmp_path / f"2026-01-{index + 1:02d}T000000.log"
        path.write_text("old\n", encoding="utf-8")
        os.utime(path, (now - 1000 + index, now - 1000 + index))

    Log.configure(console=False, file=True, dev=False)
    current = Path(Log.file())
    Log.close()

    remaining = sorted(p.name for p in tmp_path.glob("????-??-??T??????.log"))
    assert len(remaining) == 10
    assert current.name in remaining
    assert "2026-01-03T000000.log" not in remaining
    assert "2026-01-04T000000.log" in remaining


def test_console_sink_never_writes_to_stdout(monkeypatch, capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.INFO, console=True, file=False)
    monkeypatch.setattr(sys, "stderr", sys.stdout)

    Log.create({"service": "test.stdout"}).info("would corrupt the host channel")

    assert capsys.readouterr().out == ""


def test_session_header(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=False, file=True, dev=True)

    Log.session("serve", {"version": "0.1.0"})
    Log.close()

    record = json.loads((tmp_path / "dev.log").read_text(encoding="utf-8").strip())
    assert record["msg"] == "session started"
    assert record["service"] == "session"
    assert record["command"] == "serve"
    assert record["version"] == "0.1.0"
    assert record["pid"] == os.getpid()
    assert record["log_file"] == str(tmp_path / "dev.log")
