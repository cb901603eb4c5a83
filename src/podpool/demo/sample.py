from __future__ import annotations

from datetime import datetime, timedelta

from podpool.booking import Booking

# (id, minutes after the previous booking's start, duration, headcount)
_SAMPLE = [
    ("a", 0, 30, 1),
    ("b", 35, 30, 1),
    ("c", 20, 20, 4),
    ("d", 10, 35, 8),
    ("e", 65, 26, 3),
    ("f", 65, 60, 5),
]


def sample_bookings(now: datetime) -> list[Booking]:
    """Six-booking demonstration batch; offsets accumulate from ``now``."""
    bookings = []
    start = now
    for booking_id, offset, duration, headcount in _SAMPLE:
        start = start + timedelta(minutes=offset)
        bookings.append(Booking(booking_id, start, duration, headcount))
    return bookings
