from datetime import datetime, timezone

import pytest

from workhours.core.time_utils import (
    format_duration,
    format_goal_hours,
    hhmm_to_minutes,
    to_local_naive,
)


def test_format_duration_hh_mm():
    assert format_duration(0) == "00:00"
    assert format_duration(65) == "01:05"
    assert format_duration(600) == "10:00"
    assert format_duration(6000) == "100:00"


def test_hhmm_to_minutes():
    assert hhmm_to_minutes("01:05") == 65
    assert hhmm_to_minutes(" 10:00 ") == 600
    with pytest.raises(ValueError):
        hhmm_to_minutes("1:2:3")
    with pytest.raises(ValueError):
        hhmm_to_minutes("01:75")


def test_format_goal_hours_drops_minutes():
    assert format_goal_hours(0) == "00:00"
    assert format_goal_hours(90) == "01:00"
    assert format_goal_hours(3000) == "50:00"


def test_to_local_naive_converts_aware_and_keeps_naive():
    aware = datetime(2026, 3, 1, 2, 30, tzinfo=timezone.utc)
    assert to_local_naive(aware, "America/Sao_Paulo") == datetime(2026, 2, 28, 23, 30)

    naive = datetime(2026, 3, 1, 2, 30)
    assert to_local_naive(naive, "America/Sao_Paulo") == naive
