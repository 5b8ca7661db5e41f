"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed eib package.
"""

import shutil
from pathlib import Path

import pytest

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def full_definition_bytes() -> bytes:
    """Raw bytes of the definition that sets every field."""
    return (TESTDATA / "full-valid-example.yaml").read_bytes()


@pytest.fixture
def config_dir(tmp_path) -> Path:
    """Image configuration directory holding the full definition as definition.yaml."""
    shutil.copy(TESTDATA / "full-valid-example.yaml", tmp_path / "definition.yaml")
    return tmp_path
