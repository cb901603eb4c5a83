from __future__ import annotations

from podpool.allocation import AllocationResult
from podpool.booking import Allocation


def _time_format(result: AllocationResult) -> str:
    days = {
        moment.date()
        for pod in result.pods
        for a in pod.allocations
        for moment in (a.start, a.end)
    }
    # Rows are only unambiguous without a date when everything falls on one day.
    return "%H:%M" if len(days) <= 1 else "%Y-%m-%d %H:%M"


def _describe(allocation: Allocation, fmt: str) -> str:
    return (
        f"{allocation.booking_id} "
        f"{allocation.start.strftime(fmt)}-{allocation.end.strftime(fmt)}"
    )


def format_report(result: AllocationResult) -> str:
    fmt = _time_format(result)
    width = len(str(len(result.pods))) if result.pods else 1
    lines: list[str] = []
    for pod in result.pods:
        slots = ", ".join(_describe(a, fmt) for a in pod.allocations) or "-"
        lines.append(f"Pod {pod.number:>{width}}: {slots}")

    for rejection in result.rejections:
        lines.append(f"Booking {rejection.booking_id} not allocated: {rejection.reason}")

    lines.append(f"Total bookings: {result.requested}")
    lines.append(f"Total bookings allocated: {result.seated}")
    return "\n".join(lines)
