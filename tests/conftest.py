from pathlib import Path

import pytest


@pytest.fixture
def project(tmp_path: Path):
    """Create a base dir with ``src/`` and return a helper to add files."""
    (tmp_path / "src").mkdir()

    def write(relative: str, content: bytes) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    write.root = tmp_path
    return write
