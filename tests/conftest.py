"""Shared restriction fixtures."""

from copy import deepcopy

import pytest

BASE_RESTRICTIONS: dict = {
    "workTime": [
        {
            "dayOfWeek": "all",
            "start": "10:00",
            "stop": "20:00",
            "break": "00:00-00:00",
            "selfService": {"start": "10:00", "stop": "20:00", "break": "00:00-00:00"},
        }
    ],
    "periodPossibleForOrder": 20160,
    "timezone": "Asia/Yekaterinburg",
    "minDeliveryTime": "60",
}


@pytest.fixture
def restrictions() -> dict:
    return deepcopy(BASE_RESTRICTIONS)
