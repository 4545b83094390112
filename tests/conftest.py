from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ladle.internal.config import Config
from ladle.main import create_server


@pytest.fixture
def write_config(tmp_path: Path):
    """Write an INI file into a temp dir and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "config.ini"
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def config(write_config) -> Config:
    return Config(write_config("[PALETTE]\ndefault_count = 3\n"))


@pytest.fixture
def client(config):
    with TestClient(create_server(config)) as test_client:
        yield test_client
