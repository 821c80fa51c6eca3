"""
Общие фикстуры для тестов контекста бронирования.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from room_booking.infrastructure import FixedClock

NOW = datetime(2026, 1, 19, 10, 0)


@pytest.fixture
def clock() -> FixedClock:
    """Часы, зафиксированные на 2026-01-19 10:00."""
    return FixedClock(NOW)


@pytest.fixture
def logger() -> MagicMock:
    """Мок логгера, чтобы тесты не печатали в консоль."""
    return MagicMock()
