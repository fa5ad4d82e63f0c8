"""Root test configuration: helpers for writing input files"""

from pathlib import Path

import pytest


@pytest.fixture(name="write_lines")
def write_lines_fixture(tmp_path):
    """Factory writing a list of lines to tmp_path/<name>, newline-terminated."""
    def _write(name: str, lines: list[str]) -> Path:
        p = tmp_path / name
        p.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return p
    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LINEDIFF_* variables from the outer environment out of tests."""
    for name in ("LINEDIFF_MAX_DEPTH", "LINEDIFF_COLOR", "LINEDIFF_LOG_LEVEL", "LINEDIFF_APP_NAME"):
        monkeypatch.delenv(name, raising=False)
