from room_booking.domain import Booking


class ConsoleNotificationService:
    """Сервис уведомлений, который выводит письма-подтверждения в консоль."""

    def __init__(self, sender_address: str = "bookings@example.com"):
        self._sender_address = sender_address

    def send_booking_confirmation(self, booking: Booking) -> None:
        """Отправляет подтверждение бронирования."""
        self._print_email(
            subject=f"Booking confirmed: room {booking.room_id}",
            body=(
                f"  Your booking {booking.id} is confirmed.\n"
                f"  From: {booking.start_time:%Y-%m-%d %H:%M}\n"
                f"  To:   {booking.end_time:%Y-%m-%d %H:%M}"
            ),
        )

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        """Отправляет подтверждение отмены."""
        self._print_email(
            subject=f"Booking cancelled: room {booking.room_id}",
            body=(
                f"  Your booking {booking.id} "
                f"({booking.start_time:%Y-%m-%d %H:%M} - "
                f"{booking.end_time:%Y-%m-%d %H:%M}) has been cancelled."
            ),
        )

    def _print_email(self, subject: str, body: str) -> None:
        print("\n--- [Notification Service] ---")
        print(f"From: {self._sender_address}")
        print(f"Subject: {subject}")
        print("Body:")
        print(body)
        print("--- [End of Notification] ---\n")


class NullNotificationService:
    """Сервис уведомлений, который ничего не отправляет."""

    def send_booking_confirmation(self, booking: Booking) -> None:
        pass

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        pass
