from collections.abc import Iterator
from pathlib import Path

import pytest

from emmet_volt.lsp import installer
from emmet_volt.util.log import Log, LogFormat, LogLevel


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ("VOLT_ARCH", "VOLT_OS", "VOLT_URI"):
        monkeypatch.delenv(key, raising=False)
    for key in ("NPM", "PACKAGE", "LOG_LEVEL", "LOG_FORMAT", "LOG_CONSOLE", "LOG_FILE", "LOG_DEV"):
        monkeypatch.delenv(f"EMMET_VOLT_{key}", raising=False)
    monkeypatch.setenv("EMMET_VOLT_DATA_DIR", str(tmp_path / "data"))
    # Keep commands as written so assertions do not depend on the machine's PATH.
    monkeypatch.setattr(installer, "_which", lambda cmd: cmd)


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=False, file=False)
