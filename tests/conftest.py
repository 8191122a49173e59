from __future__ import annotations

from datetime import date

import pytest

from tests.tables import table, workweek


@pytest.fixture
def week_of_8_5_hours() -> str:
    # Mon 03.01.2022 - Fri 07.01.2022, 8.5h each
    return table(*workweek(end="16:30"))


@pytest.fixture
def fixed_today() -> date:
    return date(2022, 1, 10)
