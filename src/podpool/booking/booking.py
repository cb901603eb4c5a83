from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from numbers import Integral
from typing import Iterable, Sequence

from ._exceptions import BookingError


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise BookingError(f"{name} must be an integer; got {value!r}.")
    if value < 1:
        raise BookingError(f"{name} must be positive; got {value}.")
    return int(value)


@dataclass(frozen=True)
class Booking:
    """
    Request for ``headcount`` pods, all held from ``start`` for
    ``duration`` minutes.
    """

    id: str
    start: datetime
    duration: int
    headcount: int

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise BookingError(f"Booking id must be a non-empty string; got {self.id!r}.")
        if not isinstance(self.start, datetime):
            raise BookingError(
                f"Booking {self.id!r}: start must be a datetime; got {self.start!r}."
            )
        try:
            object.__setattr__(self, "duration", _positive_int("duration", self.duration))
            object.__setattr__(self, "headcount", _positive_int("headcount", self.headcount))
        except BookingError as exc:
            raise BookingError(f"Booking {self.id!r}: {exc}") from None

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration)


@dataclass(frozen=True)
class Allocation:
    start: datetime
    end: datetime
    booking_id: str

    @classmethod
    def for_booking(cls, booking: Booking) -> Allocation:
        return cls(start=booking.start, end=booking.end, booking_id=booking.id)


def validate_batch(bookings: Iterable[Booking]) -> Sequence[Booking]:
    """
    Check a batch as a whole and return it as a list.

    Ids must be unique, and starts must be either all naive or all
    timezone-aware (the two cannot be ordered against each other).
    """
    batch = list(bookings)
    seen: set[str] = set()
    aware: set[bool] = set()
    for booking in batch:
        if not isinstance(booking, Booking):
            raise BookingError(f"Expected a Booking; got {booking!r}.")
        if booking.id in seen:
            raise BookingError(f"Duplicate booking id {booking.id!r} in batch.")
        seen.add(booking.id)
        aware.add(booking.start.utcoffset() is not None)
    if len(aware) > 1:
        raise BookingError("Batch mixes naive and timezone-aware start times.")
    return batch
