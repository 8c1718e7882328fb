from __future__ import annotations

import pytest

from text_cursor.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry() -> None:
    telemetry.configure(preset="quiet")
