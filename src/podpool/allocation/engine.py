from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterable, Sequence

from podpool.availability import available_pods
from podpool.booking import Allocation, Booking, validate_batch
from podpool.pods import Pod, PodPool, init_pods

from .policy import OrderKey, start_time_first

logger = logging.getLogger(__name__)

INSUFFICIENT_PODS = "insufficient available pods"


@dataclass(frozen=True)
class Rejection:
    booking_id: str
    reason: str = INSUFFICIENT_PODS


@dataclass
class AllocationResult:
    """Final pod state of one run plus what was turned away."""

    pods: list[Pod]
    rejections: list[Rejection] = field(default_factory=list)
    requested: int = 0
    seated: int = 0
    seated_bookings: list[str] = field(default_factory=list)

    @property
    def rejected_bookings(self) -> list[str]:
        return [r.booking_id for r in self.rejections]

    @property
    def utilisation(self) -> float:
        """Share of the requested headcount that was seated."""
        return self.seated / self.requested if self.requested else 1.0

    def allocations_for(self, booking_id: str) -> list[tuple[int, Allocation]]:
        return [
            (pod.number, a)
            for pod in self.pods
            for a in pod.allocations
            if a.booking_id == booking_id
        ]


class AllocationEngine:

    def __init__(
        self,
        pod_count: int,
        changeover: int = 0,
        order: OrderKey = start_time_first,
    ) -> None:
        for name, value in (("Pod count", pod_count), ("Changeover", changeover)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"{name} must be an integer; got {value!r}.")
        if pod_count < 1:
            raise ValueError(f"Pod count must be at least 1; got {pod_count}.")
        if changeover < 0:
            raise ValueError(f"Changeover must be non-negative; got {changeover}.")
        self._pod_count = int(pod_count)
        self._changeover = int(changeover)
        self._order = order

    def run(self, bookings: Iterable[Booking]) -> AllocationResult:
        batch = sorted(validate_batch(bookings), key=self._order)
        pool = init_pods(self._pod_count)
        result = AllocationResult(pods=pool.pods)

        for booking in batch:
            result.requested += booking.headcount
            if self._seat(pool, booking):
                result.seated += booking.headcount
                result.seated_bookings.append(booking.id)
            else:
                result.rejections.append(Rejection(booking.id))
                logger.info(
                    "Booking %s (%d people at %s) rejected: %s",
                    booking.id, booking.headcount, booking.start.isoformat(), INSUFFICIENT_PODS,
                )

        logger.info(
            "Allocated %d of %d requested across %d pods; %d bookings rejected",
            result.seated, result.requested, self._pod_count, len(result.rejections),
        )
        return result

    def _seat(self, pool: PodPool, booking: Booking) -> bool:
        free = available_pods(pool, booking.start, booking.duration, self._changeover)
        if len(free) < booking.headcount:
            return False

        chosen = free[: booking.headcount]
        for pod in chosen:
            pod.attach(Allocation.for_booking(booking))
        logger.debug(
            "Booking %s seated on pods %s", booking.id, [p.number for p in chosen]
        )
        return True

    @property
    def pod_count(self) -> int:
        return self._pod_count

    @property
    def changeover(self) -> int:
        return self._changeover

    @property
    def order(self) -> OrderKey:
        return self._order

    def __repr__(self) -> str:
        return (
            f"AllocationEngine(pod_count={self._pod_count}, "
            f"changeover={self._changeover}, "
            f"order={getattr(self._order, '__name__', self._order)!r})"
        )


def allocate_bookings(
    pod_count: int,
    changeover: int,
    bookings: Sequence[Booking],
    order: OrderKey = start_time_first,
) -> list[Pod]:
    return AllocationEngine(pod_count, changeover, order).run(bookings).pods
