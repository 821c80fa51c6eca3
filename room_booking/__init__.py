"""
Контекст бронирования переговорных комнат (Room Booking Context).

Отвечает за:
- Бронирование комнат на временной интервал без пересечений
- Отмену будущих бронирований
- Поиск свободных комнат на интервал
"""

from . import application, domain, infrastructure
from .bootstrap import bootstrap_app
from .config import BookingSettings

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "bootstrap_app",
    "BookingSettings",
]
