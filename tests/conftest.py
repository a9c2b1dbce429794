"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from tests.helpers import Deferred, Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def deferred() -> Deferred:
    return Deferred()
