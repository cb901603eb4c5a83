"""
podpool.booking
~~~~~~~~~~~~~~~

Input and output records of an allocation run.  A Booking asks for
``headcount`` pods for ``duration`` minutes from ``start``; an Allocation
binds one pod to one booking for that window.

Basic usage::

    from datetime import datetime
    from podpool.booking import Booking, Allocation

    booking = Booking("a", datetime(2024, 5, 1, 9, 0), duration=30, headcount=2)
    booking.end                          # → datetime(2024, 5, 1, 9, 30)
    Allocation.for_booking(booking)      # one pod's share of the booking

Public API
----------
Booking          Immutable request record.
Allocation       Immutable pod/booking binding.
validate_batch   Batch-level checks (unique ids, consistent timezones).
BookingError     Raised for malformed bookings or batches.
"""

from __future__ import annotations

from podpool.booking._exceptions import BookingError
from podpool.booking.booking import Allocation, Booking, validate_batch

__all__ = [
    "Allocation",
    "Booking",
    "BookingError",
    "validate_batch",
]
