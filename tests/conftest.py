from __future__ import annotations

import pytest

from editor_registers.runtime import telemetry


@pytest.fixture(autouse=True)
def quiet_telemetry():
    telemetry.configure(preset="quiet")
    yield
    telemetry.configure(preset="quiet")
