from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Tuple

from podpool.booking import Booking

OrderKey = Callable[[Booking], Any]


def start_time_first(booking: Booking) -> Tuple[datetime, int, int]:
    return booking.start, -booking.headcount, -booking.duration


def headcount_first(booking: Booking) -> Tuple[int, datetime, int]:
    # Fills large groups before the pool fragments.
    return -booking.headcount, booking.start, -booking.duration


POLICIES: dict[str, OrderKey] = {
    "start_time_first": start_time_first,
    "headcount_first": headcount_first,
}
