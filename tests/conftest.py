from __future__ import annotations

import pytest

from spantext.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    telemetry.configure(preset="quiet")
