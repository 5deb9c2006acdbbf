from __future__ import annotations

import io
import json
import os
from pathlib import Path

import pytest


class TtyBytesIO(io.BytesIO):
    """Stand-in for an interactive terminal on stdin."""

    def isatty(self) -> bool:
        return True

    def read(self, *args, **kwargs) -> bytes:
        raise AssertionError("a terminal must never be read")


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run from a temp directory with a private environment so neither a real local.env
    nor KEEBOX_* variables from the developer's shell leak into tests.
    """
    monkeypatch.setattr(os, "environ", {k: v for k, v in os.environ.items() if not k.startswith("KEEBOX_")})
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def keybox_file(tmp_path: Path) -> Path:
    path = tmp_path / "keybox.json"
    path.write_text(json.dumps({"a": "1"}), encoding="utf-8")
    return path
