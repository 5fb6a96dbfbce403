"""
Base calculator class with data-gap warning framework.
"""

from typing import List, Optional, Tuple, Union
from dataclasses import dataclass

from utils.field_registry import PeriodType
from utils.logger import setup_logger
from utils.unified_schema import StatementDocument, StatementReport


@dataclass
class MetricWarning:
    """Represents a warning/anomaly detected during calculation."""
    metric_name: str
    warning_type: str  # 'data_missing', 'data_insufficient', 'calculation_error'
    message: str
    severity: str  # 'info', 'warning', 'error'
    value: Optional[float] = None


class CalculatorBase:
    """
    Base class for all financial calculators.
    Provides report selection and warning bookkeeping.
    """

    def __init__(self, symbol: str):
        """
        Initialize calculator.

        Args:
            symbol: Stock ticker symbol
        """
        self.symbol = symbol
        self.logger = setup_logger(f'{self.__class__.__name__}_{symbol}')

    @staticmethod
    def select_reports(
        document: Optional[StatementDocument],
        period: Union[PeriodType, str] = PeriodType.ANNUAL
    ) -> Tuple[StatementReport, ...]:
        if document is None:
            return ()
        return document.reports(period)

    @classmethod
    def latest_report(
        cls,
        document: Optional[StatementDocument],
        period: Union[PeriodType, str] = PeriodType.ANNUAL
    ) -> Optional[StatementReport]:
        """
        First report of the period in provider order (the provider lists newest first).
        """
        reports = cls.select_reports(document, period)
        return reports[0] if reports else None

    def warn(
        self,
        warnings: List[MetricWarning],
        metric_name: str,
        warning_type: str,
        message: str,
        severity: str = 'warning',
        value: Optional[float] = None
    ):
        """Record a warning on a metrics container and log it."""
        warnings.append(MetricWarning(
            metric_name=metric_name,
            warning_type=warning_type,
            message=message,
            severity=severity,
            value=value
        ))
        self.logger.warning(f"[{metric_name}] {message}")
