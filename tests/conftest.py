from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("RAIDRES_HTTP_CACHE", "off")


@pytest.fixture(scope="session")
def exports_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SRPLUS_DATA_DIR", str(tmp_path / "srplus"))
