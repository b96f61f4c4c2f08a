from __future__ import annotations

import pytest

from buffer_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_reraises_and_keeps_working() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::boom", component="tests", metadata={"k": 1}):
            raise KeyError("boom")

    with telemetry.span("test::ok", component="tests") as handle:
        handle.add_metadata("rows", 3)

    assert handle.metadata == {"rows": "3"}
    assert telemetry.get_logger() is telemetry.get_logger()
