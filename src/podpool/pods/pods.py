from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator, Tuple

import numpy as np

from podpool.booking import Allocation


def to_datetime64(moment: datetime) -> np.datetime64:
    """Exact microsecond representation; aware datetimes are taken in UTC."""
    if moment.utcoffset() is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return np.datetime64(moment, "us")


class Pod:

    def __init__(self, number: int) -> None:
        self._number = number
        self._allocations: list[Allocation] = []
        self._starts = np.empty(0, dtype="datetime64[us]")
        self._ends = np.empty(0, dtype="datetime64[us]")

    def attach(self, allocation: Allocation) -> None:
        self._allocations.append(allocation)
        self._starts = np.append(self._starts, to_datetime64(allocation.start))
        self._ends = np.append(self._ends, to_datetime64(allocation.end))

    @property
    def number(self) -> int:
        return self._number

    @property
    def allocations(self) -> Tuple[Allocation, ...]:
        return tuple(self._allocations)

    @property
    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        # Read-only views, in assignment order.
        starts, ends = self._starts.view(), self._ends.view()
        starts.flags.writeable = False
        ends.flags.writeable = False
        return starts, ends

    def __repr__(self) -> str:
        return f"Pod(number={self._number}, allocations={len(self._allocations)})"


class PodPool:
    """Pods keyed by number; iteration is in ascending pod number."""

    def __init__(self, pods: dict[int, Pod] | None = None) -> None:
        self._pods: dict[int, Pod] = dict(sorted((pods or {}).items()))

    def __getitem__(self, number: int) -> Pod:
        return self._pods[number]

    def __iter__(self) -> Iterator[Pod]:
        return iter(self._pods.values())

    def __len__(self) -> int:
        return len(self._pods)

    def __contains__(self, number: object) -> bool:
        return number in self._pods

    @property
    def pods(self) -> list[Pod]:
        return list(self._pods.values())

    def __repr__(self) -> str:
        used = sum(1 for pod in self if pod.allocations)
        return f"PodPool(pods={len(self)}, in_use={used})"


def init_pods(count: int) -> PodPool:
    return PodPool({n: Pod(n) for n in range(1, count + 1)})
