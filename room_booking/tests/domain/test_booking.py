from datetime import datetime

import pytest

from room_booking.domain import Booking, InvalidTimeWindow

START = datetime(2026, 1, 19, 13, 0)
END = datetime(2026, 1, 19, 14, 0)


def test_booking_creation():
    """Тест создания бронирования со свежим идентификатором."""
    booking = Booking.create(room_id="R1", start=START, end=END)

    assert booking.room_id == "R1"
    assert booking.start_time == START
    assert booking.end_time == END
    assert isinstance(booking.id, str) and booking.id


def test_each_booking_gets_unique_id():
    first = Booking.create(room_id="R1", start=START, end=END)
    second = Booking.create(room_id="R1", start=START, end=END)

    assert first.id != second.id


def test_booking_creation_fails_when_end_not_after_start():
    with pytest.raises(InvalidTimeWindow, match="end time must be after start time"):
        Booking.create(room_id="R1", start=END, end=START)


def test_booking_is_immutable():
    booking = Booking.create(room_id="R1", start=START, end=END)

    with pytest.raises(Exception):
        booking.end_time = datetime(2026, 1, 19, 15, 0)
    assert booking.end_time == END


def test_has_started():
    booking = Booking.create(room_id="R1", start=START, end=END)

    assert not booking.has_started(datetime(2026, 1, 19, 12, 59))
    assert booking.has_started(START)  # начало ровно сейчас - уже началось
    assert booking.has_started(datetime(2026, 1, 19, 15, 0))


def test_slot_matches_booking_window():
    booking = Booking.create(room_id="R1", start=START, end=END)

    assert booking.slot.start == START
    assert booking.slot.end == END
