"""
tests/availability/test_availability.py

Covers:
  - Idle pools
  - Padded-interval non-overlap test, before and after existing sessions
  - Boundary behaviour (half-open intervals, exact buffer gaps)
  - Result ordering and mask shape
  - Purity (no pod state mutated)
  - Argument validation
"""

from datetime import datetime, timedelta

import numpy as np
import pytest

from podpool.availability import availability_mask, available_pods
from podpool.booking import Allocation
from podpool.pods import init_pods


T0 = datetime(2024, 5, 1, 9, 0)


def at(minutes):
    return T0 + timedelta(minutes=minutes)


def occupy(pod, start_min, end_min, booking_id="x"):
    pod.attach(Allocation(at(start_min), at(end_min), booking_id))


def numbers(pods):
    return [p.number for p in pods]


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def pool1():
    """One pod busy 60-90."""
    pool = init_pods(1)
    occupy(pool[1], 60, 90)
    return pool


@pytest.fixture
def pool5():
    return init_pods(5)


# ── Idle pools ────────────────────────────────────────────────────────────────

class TestIdle:

    def test_all_pods_free(self, pool5):
        assert numbers(available_pods(pool5, T0, 30, 5)) == [1, 2, 3, 4, 5]

    def test_empty_pool(self):
        assert available_pods(init_pods(0), T0, 30, 5) == []
        assert availability_mask(init_pods(0), T0, 30, 5).shape == (0,)


# ── Overlap with buffer ───────────────────────────────────────────────────────

class TestOverlap:

    def test_well_before_is_free(self, pool1):
        # 0-30, +5 buffer → 35 <= 60
        assert numbers(available_pods(pool1, at(0), 30, 5)) == [1]

    def test_well_after_is_free(self, pool1):
        assert numbers(available_pods(pool1, at(120), 30, 5)) == [1]

    def test_inside_existing_is_busy(self, pool1):
        assert available_pods(pool1, at(70), 10, 5) == []

    def test_covering_existing_is_busy(self, pool1):
        # New session starts before and ends after the existing one
        assert available_pods(pool1, at(50), 60, 0) == []

    def test_overlapping_start_is_busy(self, pool1):
        assert available_pods(pool1, at(40), 30, 0) == []

    def test_overlapping_end_is_busy(self, pool1):
        assert available_pods(pool1, at(80), 30, 0) == []

    def test_buffer_blocks_before(self, pool1):
        # Ends 57, +5 buffer = 62 > 60
        assert available_pods(pool1, at(27), 30, 5) == []

    def test_buffer_blocks_after(self, pool1):
        # Existing ends 90, +5 = 95 > 93
        assert available_pods(pool1, at(93), 30, 5) == []

    def test_any_conflicting_allocation_blocks(self, pool1):
        occupy(pool1[1], 200, 230)
        assert available_pods(pool1, at(210), 10, 0) == []
        assert numbers(available_pods(pool1, at(120), 10, 0)) == [1]


# ── Boundaries ────────────────────────────────────────────────────────────────

class TestBoundaries:

    def test_back_to_back_without_buffer(self, pool1):
        assert numbers(available_pods(pool1, at(90), 30, 0)) == [1]

    def test_ending_as_existing_starts_without_buffer(self, pool1):
        assert numbers(available_pods(pool1, at(30), 30, 0)) == [1]

    def test_exact_buffer_gap_after(self, pool1):
        assert numbers(available_pods(pool1, at(95), 30, 5)) == [1]

    def test_exact_buffer_gap_before(self, pool1):
        assert numbers(available_pods(pool1, at(25), 30, 5)) == [1]

    def test_one_minute_short_of_buffer(self, pool1):
        assert available_pods(pool1, at(94), 30, 5) == []
        assert available_pods(pool1, at(26), 30, 5) == []

    def test_sub_minute_precision(self, pool1):
        assert available_pods(pool1, at(95) - timedelta(microseconds=1), 30, 5) == []


# ── Ordering and mask ─────────────────────────────────────────────────────────

class TestOrdering:

    def test_ascending_pod_numbers(self, pool5):
        occupy(pool5[1], 0, 30)
        occupy(pool5[4], 0, 30)
        assert numbers(available_pods(pool5, at(10), 10, 5)) == [2, 3, 5]

    def test_mask_matches_pods(self, pool5):
        occupy(pool5[2], 0, 30)
        mask = availability_mask(pool5, at(10), 10, 5)
        np.testing.assert_array_equal(mask, [True, False, True, True, True])
        assert mask.dtype == bool


# ── Purity ────────────────────────────────────────────────────────────────────

class TestPurity:

    def test_no_state_mutated(self, pool5):
        occupy(pool5[3], 0, 30)
        before = [p.allocations for p in pool5]
        available_pods(pool5, at(10), 10, 5)
        assert [p.allocations for p in pool5] == before

    def test_repeatable(self, pool5):
        occupy(pool5[3], 0, 30)
        first = numbers(available_pods(pool5, at(10), 10, 5))
        assert numbers(available_pods(pool5, at(10), 10, 5)) == first


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    def test_negative_duration_raises(self, pool5):
        with pytest.raises(ValueError, match="Duration"):
            available_pods(pool5, T0, -1, 0)

    def test_negative_buffer_raises(self, pool5):
        with pytest.raises(ValueError, match="buffer"):
            available_pods(pool5, T0, 10, -1)

    @pytest.mark.parametrize("buffer", [2.5, 5.0, "5", True])
    def test_non_integer_buffer_raises(self, pool1, buffer):
        with pytest.raises(ValueError, match="whole number of minutes"):
            available_pods(pool1, at(0), 30, buffer)

    @pytest.mark.parametrize("duration", [29.5, 30.0, None])
    def test_non_integer_duration_raises(self, pool1, duration):
        with pytest.raises(ValueError, match="whole number of minutes"):
            available_pods(pool1, at(0), duration, 0)

    def test_numpy_integers_accepted(self, pool1):
        assert numbers(available_pods(pool1, at(95), np.int64(30), np.int32(5))) == [1]
