"""Pytest fixtures for sesh tests."""

from __future__ import annotations

import pytest

from tests.helpers import RecordingRunner


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def write_spec(tmp_path):
    def _write(text: str, name: str = "spec.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
