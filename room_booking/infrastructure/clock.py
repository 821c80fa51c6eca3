from datetime import datetime, timedelta


class SystemClock:
    """Системные часы: локальное время без часового пояса."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Часы с зафиксированным временем. Используются в тестах и демонстрациях."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta) -> None:
        self._instant += delta
