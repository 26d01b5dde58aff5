"""Shared fixtures for wordtally tests."""

import pytest

SAMPLE_TEXT = (
    "The cat sat on the mat. The dog sat on the log. "
    "Cats and dogs, don't they fight? The cat ran!"
)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path):
    """Write the sample text to a UTF-8 file and return its path."""
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
