"""
Valuation multiples as published on the company overview.
"""

from typing import Optional
from dataclasses import dataclass

from utils.unified_schema import CompanyOverview


@dataclass
class ValuationMetrics:
    pe_ratio: Optional[float] = None
    forward_pe: Optional[float] = None
    price_to_sales: Optional[float] = None
    price_to_book: Optional[float] = None
    ev_to_sales: Optional[float] = None
    ev_to_ebitda: Optional[float] = None


def valuation_metrics(overview: Optional[CompanyOverview]) -> ValuationMetrics:
    """Collect the overview's multiples; absent overview gives all-None metrics."""
    if overview is None:
        return ValuationMetrics()

    return ValuationMetrics(
        pe_ratio=overview.pe_ratio,
        forward_pe=overview.forward_pe,
        price_to_sales=overview.price_to_sales,
        price_to_book=overview.price_to_book,
        ev_to_sales=overview.ev_to_sales,
        ev_to_ebitda=overview.ev_to_ebitda,
    )
