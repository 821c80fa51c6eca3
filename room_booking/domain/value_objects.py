"""
Объекты-значения контекста бронирования.
"""

from datetime import datetime, timedelta
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, model_validator

from room_booking.domain.exceptions import InvalidTimeWindow

# Идентификаторы комнат и бронирований непрозрачны для домена
EntityId = str


def generate_id() -> EntityId:
    """Генерирует новый уникальный идентификатор."""
    return str(uuid4())


class TimeSlot(BaseModel):
    """Полуоткрытый временной интервал [start, end)."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def end_after_start(self) -> "TimeSlot":
        if self.end <= self.start:
            raise InvalidTimeWindow()
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: "TimeSlot") -> bool:
        """Проверяет пересечение интервалов. Смежные интервалы не пересекаются."""
        return self.start < other.end and other.start < self.end

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end
