from __future__ import annotations

from datetime import datetime
from numbers import Integral

import numpy as np

from podpool.pods import Pod, PodPool, to_datetime64


def _is_free(pod: Pod, lo: np.datetime64, hi: np.datetime64, buffer: np.timedelta64) -> bool:
    starts, ends = pod.bounds
    if starts.size == 0:
        return True
    clear = (ends + buffer <= lo) | (hi + buffer <= starts)
    return bool(clear.all())


def _minutes(name: str, value: int) -> np.timedelta64:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{name} must be a whole number of minutes; got {value!r}.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative; got {value}.")
    return np.timedelta64(int(value), "m")


def availability_mask(
    pool: PodPool,
    start: datetime,
    duration: int,
    buffer: int,
) -> np.ndarray:
    lo = to_datetime64(start)
    hi = lo + _minutes("Duration", duration)
    pad = _minutes("Changeover buffer", buffer)

    mask = np.empty(len(pool), dtype=bool)
    for i, pod in enumerate(pool):
        mask[i] = _is_free(pod, lo, hi, pad)
    return mask


def available_pods(
    pool: PodPool,
    start: datetime,
    duration: int,
    buffer: int,
) -> list[Pod]:
    mask = availability_mask(pool, start, duration, buffer)
    return [pod for pod, free in zip(pool, mask) if free]
