"""Shared fixtures for scalarconf tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the sample configuration files."""
    return DATA_DIR


@pytest.fixture
def sample_mapping():
    return {"foo": "bar", "bif": "baz", "true": True, "onetwothree": 123}
