import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Fixture restoring root logger handlers/level, since the CLI reconfigures logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_file(tmp_path):
    """Fixture returning a helper that writes bytes to a file under tmp_path."""
    def _make(content: bytes, name: str = "data.bin"):
        p = tmp_path / name
        p.write_bytes(content)
        return p
    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Fixture removing SHAHASH_* overrides from the environment."""
    for var in ("SHAHASH_DEFAULT_ALGORITHM", "SHAHASH_CHUNK_SIZE", "SHAHASH_NO_CLIPBOARD"):
        monkeypatch.delenv(var, raising=False)
