from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures() -> Path:
    """Directory holding the sample style sheets."""
    return FIXTURES


@pytest.fixture
def valid_source() -> str:
    return (FIXTURES / "valid.qss").read_text(encoding="utf-8")


@pytest.fixture
def write_qss(tmp_path):
    """Write a style sheet into a temporary directory and return its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
