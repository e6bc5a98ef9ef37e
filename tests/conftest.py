from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_ppm(tmp_path: Path) -> Callable[..., Path]:
    """Writes raw bytes into a file under tmp_path and returns its path."""
    def _write(content: bytes, name: str = "image.ppm") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return _write
