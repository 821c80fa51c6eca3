from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from room_booking.domain.exceptions import InvalidTimeWindow
from room_booking.domain.value_objects import EntityId, TimeSlot, generate_id


class Booking(BaseModel):
    """Бронирование комнаты на полуоткрытый интервал [start_time, end_time).

    Неизменяемо после создания: отмена удаляет бронирование из комнаты,
    а не меняет его состояние.
    """

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    room_id: EntityId
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def end_after_start(self) -> "Booking":
        if self.end_time <= self.start_time:
            raise InvalidTimeWindow()
        return self

    @classmethod
    def create(cls, room_id: EntityId, start: datetime, end: datetime) -> Booking:
        """Создает новое бронирование со свежим идентификатором."""
        return cls(room_id=room_id, start_time=start, end_time=end)

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(start=self.start_time, end=self.end_time)

    def has_started(self, now: datetime) -> bool:
        """Бронирование началось (или закончилось), если его начало не в будущем."""
        return self.start_time <= now
