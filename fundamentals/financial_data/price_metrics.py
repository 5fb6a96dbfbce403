"""
Price Metrics.
Time-range filtering, session-over-session change and benchmark overlay for a
price series (ascending by date, as returned by the data loader).
"""

from datetime import datetime
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

import pandas as pd

from config.analysis_config import PRICE_TIME_RANGES
from utils.helpers import to_naive_datetimes
from utils.numeric_utils import clean_numeric
from utils.unified_schema import PricePoint, SeriesPoint

PRICE_COLUMNS = ['date', 'open', 'high', 'low', 'close', 'adjusted_close', 'volume']


@dataclass
class PriceChange:
    current_price: Optional[float] = None
    previous_price: Optional[float] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None


def prices_to_frame(prices: Sequence[PricePoint]) -> pd.DataFrame:
    """
    DataFrame with columns: date, open, high, low, close, adjusted_close, volume.
    Dates are parsed to timestamps and rows sorted ascending.
    """
    df = pd.DataFrame([p.model_dump() for p in prices], columns=PRICE_COLUMNS)
    df['date'] = to_naive_datetimes(df['date'])
    return df.sort_values('date').reset_index(drop=True)


def filter_by_range(
    prices: Sequence[PricePoint],
    time_range: str,
    now: Optional[datetime] = None
) -> Tuple[PricePoint, ...]:
    """
    Keep points dated on or after `now - days(time_range)`.

    Args:
        prices: Price series
        time_range: One of PRICE_TIME_RANGES ('1D', '5D', '1M', '6M', '1Y', '5Y', 'Max')
        now: Reference time (defaults to the current time)

    Raises:
        ValueError: Unknown time range
    """
    if time_range not in PRICE_TIME_RANGES:
        raise ValueError(
            f"Unknown time range '{time_range}'. Expected one of {', '.join(PRICE_TIME_RANGES)}"
        )

    days = PRICE_TIME_RANGES[time_range]
    if days is None:
        return tuple(prices)

    cutoff = pd.Timestamp(now or datetime.now()) - pd.Timedelta(days=days)
    dates = to_naive_datetimes([p.date for p in prices])
    # Unparseable dates compare False and are dropped
    keep = (dates >= cutoff).tolist()
    return tuple(p for p, kept in zip(prices, keep) if kept)


def price_change(prices: Sequence[PricePoint]) -> PriceChange:
    """Latest close versus the previous session's close."""
    current = prices[-1].close if len(prices) > 0 else None
    previous = prices[-2].close if len(prices) > 1 else None

    result = PriceChange(current_price=current, previous_price=previous)
    # A zero close is treated as missing
    if current and previous:
        result.change = clean_numeric(current - previous)
        result.change_percent = clean_numeric((current - previous) / previous * 100)
    return result


def rescale_benchmark(
    prices: Sequence[PricePoint],
    benchmark: Sequence[PricePoint]
) -> Tuple[SeriesPoint, ...]:
    """
    Benchmark closes rescaled so that the benchmark's first close maps onto the
    subject's first close. One point per subject date; dates the benchmark lacks
    have value None.
    """
    if not prices:
        return ()

    base_price = prices[0].close
    benchmark_base = benchmark[0].close if benchmark else None
    subject = pd.DataFrame({'date': [p.date for p in prices]})

    if not base_price or not benchmark_base:
        return tuple(SeriesPoint(date=d) for d in subject['date'])

    bench = pd.DataFrame({
        'date': [p.date for p in benchmark],
        'benchmark_close': [p.close for p in benchmark],
    }).drop_duplicates('date')

    merged = subject.merge(bench, on='date', how='left')
    closes = pd.to_numeric(merged['benchmark_close'], errors='coerce')
    scaled = closes / benchmark_base * base_price

    return tuple(
        SeriesPoint(date=d, value=clean_numeric(v))
        for d, v in zip(merged['date'], scaled)
    )
