"""
Тесты для репозиториев комнат: копирование агрегатов, версии,
сохранение в JSON-файл.
"""

import json
from datetime import datetime

import pytest

from room_booking.application import ConcurrencyException, StoreError
from room_booking.domain import Booking, Room
from room_booking.infrastructure import (
    InMemoryRoomRepository,
    JsonFileRoomRepository,
    repositories,
)


def at(hour: int) -> datetime:
    return datetime(2026, 1, 19, hour, 0)


def booking_for(room_id: str, start: int, end: int) -> Booking:
    return Booking(room_id=room_id, start_time=at(start), end_time=at(end))


class TestInMemoryRoomRepository:
    """Тесты для InMemoryRoomRepository."""

    def test_empty_repository(self):
        repo = InMemoryRoomRepository()

        assert repo.find_by_id("R1") is None
        assert repo.find_all() == []

    def test_seeded_rooms_are_stored_with_first_version(self):
        repo = InMemoryRoomRepository([Room(id="R1"), Room(id="R2")])

        assert [room.id for room in repo.find_all()] == ["R1", "R2"]
        assert repo.find_by_id("R1").version == 1

    def test_loaded_room_is_an_independent_copy(self):
        repo = InMemoryRoomRepository([Room(id="R1")])

        room = repo.find_by_id("R1")
        room.add_booking(booking_for("R1", 9, 10))

        assert repo.find_by_id("R1").bookings == ()

    def test_save_bumps_version(self):
        repo = InMemoryRoomRepository([Room(id="R1")])
        room = repo.find_by_id("R1")
        room.add_booking(booking_for("R1", 9, 10))

        repo.save(room)

        assert room.version == 2
        stored = repo.find_by_id("R1")
        assert stored.version == 2
        assert len(stored.bookings) == 1

    def test_same_object_can_be_saved_twice(self):
        repo = InMemoryRoomRepository([Room(id="R1")])
        room = repo.find_by_id("R1")

        repo.save(room)
        repo.save(room)

        assert repo.find_by_id("R1").version == 3

    def test_stale_version_is_rejected(self):
        repo = InMemoryRoomRepository([Room(id="R1")])
        stale = repo.find_by_id("R1")
        repo.save(repo.find_by_id("R1"))

        with pytest.raises(ConcurrencyException) as exc_info:
            repo.save(stale)

        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2
        assert stale.version == 1

    def test_new_room_must_start_at_version_zero(self):
        repo = InMemoryRoomRepository()

        with pytest.raises(StoreError):
            repo.save(Room(id="R1", version=5))
        assert repo.find_by_id("R1") is None


class TestJsonFileRoomRepository:
    """Тесты для JsonFileRoomRepository."""

    def test_missing_file_is_empty_store(self, tmp_path):
        repo = JsonFileRoomRepository(tmp_path / "rooms.json")

        assert repo.find_all() == []
        assert repo.find_by_id("R1") is None

    def test_blank_file_is_empty_store(self, tmp_path):
        path = tmp_path / "rooms.json"
        path.write_text("   \n", encoding="utf-8")

        assert JsonFileRoomRepository(path).find_all() == []

    def test_rooms_and_bookings_survive_reopen(self, tmp_path):
        path = tmp_path / "data" / "rooms.json"
        room = Room(id="R1", name="Переговорная 1")
        booking = booking_for("R1", 13, 14)
        room.add_booking(booking)

        JsonFileRoomRepository(path).save(room)
        loaded = JsonFileRoomRepository(path).find_by_id("R1")

        assert loaded is not None
        assert loaded.name == "Переговорная 1"
        assert loaded.version == 1
        assert loaded.get_booking(booking.id) == booking
        assert not loaded.is_available(at(13), at(14))

    def test_file_contains_readable_json(self, tmp_path):
        path = tmp_path / "rooms.json"
        room = Room(id="R1")
        room.add_booking(booking_for("R1", 13, 14))

        JsonFileRoomRepository(path).save(room)
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data[0]["id"] == "R1"
        assert data[0]["bookings"][0]["start_time"] == "2026-01-19T13:00:00"

    def test_stale_version_is_rejected(self, tmp_path):
        repo = JsonFileRoomRepository(tmp_path / "rooms.json")
        repo.save(Room(id="R1"))
        first = repo.find_by_id("R1")
        second = repo.find_by_id("R1")

        first.add_booking(booking_for("R1", 9, 10))
        repo.save(first)

        with pytest.raises(ConcurrencyException):
            repo.save(second)
        assert len(repo.find_by_id("R1").bookings) == 1

    def test_corrupted_file_raises_store_error(self, tmp_path):
        path = tmp_path / "rooms.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StoreError):
            JsonFileRoomRepository(path).find_all()

    def test_second_repository_on_same_file_sees_committed_version(self, tmp_path):
        path = tmp_path / "rooms.json"
        JsonFileRoomRepository(path).save(Room(id="R1"))
        repo_a = JsonFileRoomRepository(path)
        repo_b = JsonFileRoomRepository(path)
        room_a = repo_a.find_by_id("R1")
        room_b = repo_b.find_by_id("R1")

        room_b.add_booking(
            Booking(id="b", room_id="R1", start_time=at(9), end_time=at(10))
        )
        repo_b.save(room_b)
        room_a.add_booking(
            Booking(id="a", room_id="R1", start_time=at(9), end_time=at(10))
        )

        with pytest.raises(ConcurrencyException):
            repo_a.save(room_a)
        stored = JsonFileRoomRepository(path).find_by_id("R1")
        assert [b.id for b in stored.bookings] == ["b"]
        assert stored.version == 2

    def test_save_blocks_while_another_repository_holds_the_file(self, tmp_path):
        """Проверка версии и запись одного репозитория не перемежаются с другим."""
        path = tmp_path / "rooms.json"
        holder = JsonFileRoomRepository(path)
        holder.save(Room(id="R1"))
        waiting = JsonFileRoomRepository(path, lock_timeout=0.1)
        room = waiting.find_by_id("R1")
        room.add_booking(booking_for("R1", 9, 10))

        with holder._locked():
            with pytest.raises(StoreError, match="Cannot lock"):
                waiting.save(room)

        assert holder.find_by_id("R1").bookings == ()
        waiting.save(room)
        assert len(holder.find_by_id("R1").bookings) == 1

    def test_failed_write_keeps_previous_contents(self, tmp_path, monkeypatch):
        path = tmp_path / "rooms.json"
        repo = JsonFileRoomRepository(path)
        repo.save(Room(id="R1", name="Переговорная 1"))

        def broken_dump(data, f, **kwargs):
            f.write('[{"id": ')
            raise OSError("disk full")

        monkeypatch.setattr(repositories.json, "dump", broken_dump)
        with pytest.raises(StoreError, match="disk full"):
            repo.save(Room(id="R2"))
        monkeypatch.undo()

        assert [room.id for room in repo.find_all()] == ["R1"]
        assert list(tmp_path.glob(".rooms.json.*.tmp")) == []

    @pytest.mark.parametrize(
        "content",
        [
            "5",
            "null",
            '{"id": "R1"}',
            '[{"id": "R1", "bookings": [{"id": "x", "room_id": "R2", '
            '"start_time": "2026-01-19T13:00:00", "end_time": "2026-01-19T14:00:00"}]}]',
            '[{"id": "R1", "bookings": [{"id": "x", "room_id": "R1", '
            '"start_time": "2026-01-19T14:00:00", "end_time": "2026-01-19T13:00:00"}]}]',
        ],
        ids=["number", "null", "object", "foreign-booking", "inverted-window"],
    )
    def test_malformed_store_raises_store_error(self, tmp_path, content):
        path = tmp_path / "rooms.json"
        path.write_text(content, encoding="utf-8")
        repo = JsonFileRoomRepository(path)

        with pytest.raises(StoreError):
            repo.find_all()
        with pytest.raises(StoreError):
            repo.find_by_id("R1")
