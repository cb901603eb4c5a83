"""
podpool.demo
~~~~~~~~~~~~

A runnable demonstration: allocate the sample batch and print the report.

    $ PODPOOL_POD_COUNT=10 python -m podpool.demo

Settings are read from ``PODPOOL_*`` environment variables (pod_count,
changeover, policy, log_level).
"""

from __future__ import annotations

import logging
from datetime import datetime

from podpool.allocation import POLICIES, AllocationEngine
from podpool.demo.sample import sample_bookings
from podpool.demo.settings import PodpoolSettings, get_settings
from podpool.report import format_report

__all__ = ["PodpoolSettings", "get_settings", "main", "sample_bookings"]


def main(settings: PodpoolSettings | None = None, now: datetime | None = None) -> str:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    engine = AllocationEngine(
        settings.pod_count, settings.changeover, order=POLICIES[settings.policy]
    )
    now = now or datetime.now().replace(second=0, microsecond=0)
    return format_report(engine.run(sample_bookings(now)))
