"""Metric aggregation: trailing-window averages, percent changes and trends.

Every function accepts ``(day, value)`` points in any order and never
returns NaN or Infinity. Missing history is reported through
``ChangeStatus`` rather than raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

import numpy as np
import pandas as pd

from recovery_engine.models.enums import ChangeStatus
from recovery_engine.models.metrics import WindowSummary

Point = tuple[date, float]


def _to_series(points: Iterable[Point]) -> pd.Series:
    """Build a float Series indexed by day, oldest first."""
    points = list(points)
    if not points:
        return pd.Series(dtype=np.float64)
    index = pd.DatetimeIndex([pd.Timestamp(day) for day, _ in points])
    series = pd.Series([float(v) for _, v in points], index=index, dtype=np.float64)
    return series.sort_index(kind="mergesort")


def _window(series: pd.Series, start: date, end: date) -> pd.Series:
    """Values with ``start < day <= end``."""
    if series.empty:
        return series
    mask = (series.index > pd.Timestamp(start)) & (series.index <= pd.Timestamp(end))
    return series[mask]


def _mean(series: pd.Series) -> float | None:
    if series.empty:
        return None
    return float(series.mean())


def percent_change(recent: float | None, older: float | None) -> tuple[float | None, ChangeStatus]:
    """``(recent - older) / older * 100`` guarded against missing or zero baselines.

    Returns:
        ``(value, ChangeStatus.OK)`` or ``(None, NOT_ENOUGH_DATA | UNDEFINED)``.
    """
    if recent is None or older is None:
        return None, ChangeStatus.NOT_ENOUGH_DATA
    if older == 0:
        return None, ChangeStatus.UNDEFINED
    return (recent - older) / older * 100.0, ChangeStatus.OK


def summarize_window(
    points: Iterable[Point],
    window_days: int,
    as_of: date | None = None,
) -> WindowSummary:
    """Summarize a series over the trailing window ending at ``as_of``.

    The percent change compares the recent window with the equal-length
    window immediately before it.

    Args:
        points: ``(day, value)`` pairs.
        window_days: Window length in days.
        as_of: Last day of the recent window. Defaults to the latest point.

    Returns:
        A WindowSummary. Fewer than 2 points, or an empty comparison window,
        yields ``NOT_ENOUGH_DATA``; a zero comparison average yields
        ``UNDEFINED``.
    """
    series = _to_series(points)
    if series.empty:
        return WindowSummary(
            average=None,
            latest=None,
            percent_change=None,
            change_status=ChangeStatus.NOT_ENOUGH_DATA,
        )

    end = as_of or series.index[-1].date()
    recent_start = end - timedelta(days=window_days)
    older_start = recent_start - timedelta(days=window_days)

    recent = _window(series, recent_start, end)
    older = _window(series, older_start, recent_start)

    average = _mean(recent)
    latest = float(recent.iloc[-1]) if not recent.empty else None

    if len(recent) + len(older) < 2:
        change, status = None, ChangeStatus.NOT_ENOUGH_DATA
    else:
        change, status = percent_change(average, _mean(older))

    return WindowSummary(
        average=average,
        latest=latest,
        percent_change=change,
        change_status=status,
        count=len(recent),
    )


def summarize_last(values: Sequence[float], size: int) -> WindowSummary:
    """Summarize the last ``size`` values against the ``size`` values before them.

    Used for count-based windows (e.g. the last 7 HRV samples) where the
    samples are not one-per-day.
    """
    if not values:
        return WindowSummary(None, None, None, ChangeStatus.NOT_ENOUGH_DATA)

    recent = np.asarray(values[-size:], dtype=np.float64)
    older = np.asarray(values[-2 * size:-size], dtype=np.float64) if len(values) > size else np.array([])

    average = float(recent.mean())
    if len(recent) + len(older) < 2 or older.size == 0:
        change, status = None, ChangeStatus.NOT_ENOUGH_DATA
    else:
        change, status = percent_change(average, float(older.mean()))

    return WindowSummary(
        average=average,
        latest=float(recent[-1]),
        percent_change=change,
        change_status=status,
        count=int(recent.size),
    )


def daily_totals(points: Iterable[Point]) -> list[Point]:
    """Sum all values that share a day. Output is sorted oldest first."""
    series = _to_series(points)
    if series.empty:
        return []
    totals = series.groupby(level=0).sum()
    return [(ts.date(), float(v)) for ts, v in totals.items()]


def rolling_average(points: Iterable[Point], window_days: int) -> list[Point]:
    """Trailing calendar-day rolling mean evaluated at each point's day."""
    series = _to_series(points)
    if series.empty:
        return []
    series = series.groupby(level=0).mean()
    rolled = series.rolling(f"{window_days}D").mean()
    return [(ts.date(), float(v)) for ts, v in rolled.items()]


def linear_trend(points: Iterable[Point]) -> float | None:
    """Least-squares slope in units per day, or None with under two distinct days."""
    series = _to_series(points)
    if series.empty:
        return None
    series = series.groupby(level=0).mean()
    if len(series) < 2:
        return None
    origin = series.index[0]
    x = np.array([(ts - origin).days for ts in series.index], dtype=np.float64)
    slope, _intercept = np.polyfit(x, series.to_numpy(), 1)
    return float(slope)


def mean_or_none(values: Iterable[float]) -> float | None:
    """Arithmetic mean, or None for an empty input."""
    arr = np.fromiter(values, dtype=np.float64)
    if arr.size == 0:
        return None
    return float(arr.mean())
