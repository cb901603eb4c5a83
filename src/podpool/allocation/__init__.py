"""
podpool.allocation
~~~~~~~~~~~~~~~~~~

Greedy, all-or-nothing assignment of a booking batch to a fixed pod pool.

Bookings are taken in priority order.  Each one is seated on the
lowest-numbered pods that are free for its whole window (changeover buffer
included on both sides), or rejected outright when fewer than ``headcount``
pods are free.  A booking is never split across fewer pods than it asked for.

Basic usage::

    from podpool.allocation import allocate_bookings

    pods = allocate_bookings(pod_count=14, changeover=5, bookings=batch)

With rejections and totals::

    from podpool.allocation import AllocationEngine

    result = AllocationEngine(14, changeover=5).run(batch)
    result.rejections          # [Rejection(booking_id='d', reason=...)]
    result.requested, result.seated

Ordering policies
-----------------
start_time_first   Earliest start, then larger headcount, then longer
                   duration (default).
headcount_first    Larger headcount, then earliest start, then longer
                   duration.

Any ``Callable[[Booking], key]`` can be passed as ``order``; ties keep batch
order.
"""

from podpool.allocation.engine import (
    AllocationEngine,
    AllocationResult,
    Rejection,
    allocate_bookings,
)
from podpool.allocation.policy import POLICIES, headcount_first, start_time_first

__all__ = [
    "AllocationEngine",
    "AllocationResult",
    "POLICIES",
    "Rejection",
    "allocate_bookings",
    "headcount_first",
    "start_time_first",
]
