"""
Series Builders - statement reports to dated value series.

Builders sort ascending by fiscal date (chart order). Lookups that read
"latest" use provider order, where index 0 is the newest report.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from fundamentals.financial_data.ratios import yoy_growth
from utils.field_registry import DISPLAY_FIELDS, PeriodType
from utils.helpers import date_sort_key, format_field_label
from utils.unified_schema import (
    SeriesPoint,
    StatementDocument,
    StatementReport,
    StatementRow,
    TrendPoint,
)


def sort_reports_by_date(reports: Iterable[StatementReport]) -> List[StatementReport]:
    """Reports sorted newest-first by fiscal date."""
    return sorted(reports, key=lambda r: date_sort_key(r.fiscal_date_ending), reverse=True)


def _ascending(reports: Iterable[StatementReport]) -> List[StatementReport]:
    return sorted(reports, key=lambda r: date_sort_key(r.fiscal_date_ending))


def build_series(reports: Iterable[StatementReport], field_name: str) -> Tuple[SeriesPoint, ...]:
    """
    One point per report, ascending by fiscal date.

    Args:
        reports: Annual or quarterly reports, any order
        field_name: Provider key ('totalRevenue') or schema name ('total_revenue')
    """
    return tuple(
        SeriesPoint(date=report.fiscal_date_ending, value=report.value(field_name))
        for report in _ascending(reports)
    )


def free_cash_flow(reports: Iterable[StatementReport]) -> Tuple[SeriesPoint, ...]:
    """
    Free cash flow per report, ascending by fiscal date.

    Formula:
        FCF = Operating Cash Flow - Capital Expenditures

    Missing operating cash flow gives None. Missing capex is treated as zero.
    """
    points = []
    for report in _ascending(reports):
        operating_cashflow = report.operating_cashflow
        capex = report.capital_expenditures

        if operating_cashflow is None:
            value = None
        elif capex is None:
            value = operating_cashflow
        else:
            value = operating_cashflow - capex

        points.append(SeriesPoint(date=report.fiscal_date_ending, value=value))
    return tuple(points)


def trend_series(points: Sequence[SeriesPoint]) -> Tuple[TrendPoint, ...]:
    """Attach the change versus the previous point (percent) to each point."""
    trend = []
    previous: Optional[float] = None
    for i, point in enumerate(points):
        yoy = yoy_growth(point.value, previous) if i > 0 else None
        trend.append(TrendPoint(date=point.date, value=point.value, yoy=yoy))
        previous = point.value
    return tuple(trend)


def statement_rows(report: StatementReport, fields: Iterable[str]) -> Tuple[StatementRow, ...]:
    """Display rows for one report, in the order of `fields`."""
    return tuple(
        StatementRow(
            label=format_field_label(field_name),
            value=report.value(field_name),
            date=report.fiscal_date_ending
        )
        for field_name in fields
    )


def document_rows(
    document: Optional[StatementDocument],
    period: Union[PeriodType, str] = PeriodType.ANNUAL
) -> Tuple[StatementRow, ...]:
    """Display rows for the latest report (provider order) using the statement family's display fields."""
    if document is None:
        return ()
    reports = document.reports(period)
    if not reports:
        return ()
    return statement_rows(reports[0], DISPLAY_FIELDS[document.statement_type])


def latest_value(
    document: Optional[StatementDocument],
    field_name: str,
    period: Union[PeriodType, str] = PeriodType.ANNUAL
) -> Optional[float]:
    if document is None:
        return None
    reports = document.reports(period)
    if not reports:
        return None
    return reports[0].value(field_name)


def field_values_over_time(reports: Iterable[StatementReport], field_name: str) -> Tuple[SeriesPoint, ...]:
    # Provider order, unsorted
    return tuple(
        SeriesPoint(date=report.fiscal_date_ending, value=report.value(field_name))
        for report in reports
    )


def report_dates(reports: Sequence[StatementReport], limit: Optional[int] = None) -> List[str]:
    return [report.fiscal_date_ending for report in reports][:limit]
