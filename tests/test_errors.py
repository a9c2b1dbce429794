from __future__ import annotations

from datetime import timedelta

import pytest

from tipjar._duration import resolve_duration
from tipjar.errors import (
    ConfigurationError,
    HandlerReusedError,
    TipjarError,
    UnhandledCaseError,
)

pytestmark = pytest.mark.unit


def test_hint_defaults_to_none() -> None:
    err = TipjarError("fail")

    assert str(err) == "fail"
    assert err.hint is None


def test_subclass_hierarchy() -> None:
    for cls in (ConfigurationError, HandlerReusedError):
        assert issubclass(cls, TipjarError)
    assert isinstance(UnhandledCaseError(1), TipjarError)


def test_resolve_duration_accepts_either_form() -> None:
    assert resolve_duration(seconds=1.5) == timedelta(seconds=1.5)
    assert resolve_duration(duration=timedelta(minutes=2)) == timedelta(minutes=2)
    assert resolve_duration(seconds=0) == timedelta(0)


def test_resolve_duration_rejects_missing_and_both() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_duration()
    assert exc_info.value.hint is not None

    with pytest.raises(ConfigurationError):
        resolve_duration(seconds=1, duration=timedelta(seconds=1))


def test_resolve_duration_rejects_negative() -> None:
    with pytest.raises(ConfigurationError, match="negative"):
        resolve_duration(duration=timedelta(seconds=-1))
