import datetime

import pytest

from taghelper.clock import FixedClock
from taghelper.html.tags import TagHelper

TODAY = datetime.date(2024, 2, 10)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def helper(clock: FixedClock) -> TagHelper:
    return TagHelper(clock=clock)


@pytest.fixture
def colors() -> list[dict[str, str]]:
    return [
        {"title": "Red", "value": "red"},
        {"title": "Green", "value": "green"},
    ]
