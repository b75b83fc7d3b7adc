from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ.setdefault("APP_ENV", "testing")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 0, 0)
