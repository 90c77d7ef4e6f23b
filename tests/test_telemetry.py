from __future__ import annotations

import pytest

from spantext.runtime import telemetry


def test_configure_rejects_config_with_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="chatty")


def test_loggers_are_cached_per_name() -> None:
    assert telemetry.get_logger("spantext.a") is telemetry.get_logger("spantext.a")


def test_span_yields_stringified_metadata() -> None:
    with telemetry.span("test::span", metadata={"start": 1, "end": "x"}) as handle:
        assert handle.metadata == {"start": "1", "end": "x"}


def test_span_reraises_failures() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::fail", component="builder"):
            raise KeyError("missing")
