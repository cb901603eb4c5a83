"""
podpool.report
~~~~~~~~~~~~~~

Plain-text rendering of an AllocationResult: one line per pod, then the
rejected bookings and the headcount totals.
"""

from podpool.report.report import format_report

__all__ = ["format_report"]
