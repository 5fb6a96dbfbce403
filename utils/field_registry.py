"""
Centralized Field Registry - Single source of truth for statement line items.

This registry defines:
1. The known numeric line items of each statement family (provider name -> schema name)
2. The display field lists used to render statement tables

Anything the provider sends that is not listed here is kept as a raw string on
StatementReport.additional_fields, so schema drift never loses data.
"""

from typing import Dict, List, Tuple
from dataclasses import dataclass
from enum import Enum


class StatementType(Enum):
    """Statement families; each is fetched and normalized independently."""
    INCOME = 'income'
    BALANCE = 'balance'
    CASHFLOW = 'cashflow'


class PeriodType(Enum):
    ANNUAL = 'annual'
    QUARTERLY = 'quarterly'


@dataclass(frozen=True)
class FieldDefinition:
    """A known statement line item."""
    unified_name: str    # attribute on StatementReport
    provider_name: str   # Alpha Vantage key
    statement: StatementType


def _defs(statement: StatementType, pairs: List[Tuple[str, str]]) -> List[FieldDefinition]:
    return [FieldDefinition(unified, provider, statement) for unified, provider in pairs]


# =============================================================================
# INCOME STATEMENT
# =============================================================================
INCOME_FIELDS = _defs(StatementType.INCOME, [
    ('gross_profit', 'grossProfit'),
    ('total_revenue', 'totalRevenue'),
    ('cost_of_revenue', 'costOfRevenue'),
    ('cost_of_goods_and_services_sold', 'costofGoodsAndServicesSold'),
    ('operating_income', 'operatingIncome'),
    ('selling_general_and_administrative', 'sellingGeneralAndAdministrative'),
    ('research_and_development', 'researchAndDevelopment'),
    ('operating_expenses', 'operatingExpenses'),
    ('interest_expense', 'interestExpense'),
    ('depreciation_and_amortization', 'depreciationAndAmortization'),
    ('income_before_tax', 'incomeBeforeTax'),
    ('income_tax_expense', 'incomeTaxExpense'),
    ('net_income_from_continuing_operations', 'netIncomeFromContinuingOperations'),
    ('ebit', 'ebit'),
    ('ebitda', 'ebitda'),
    ('net_income', 'netIncome'),
    ('eps', 'eps'),
    ('shares_outstanding', 'sharesOutstanding'),
])

# =============================================================================
# BALANCE SHEET
# =============================================================================
BALANCE_FIELDS = _defs(StatementType.BALANCE, [
    ('total_assets', 'totalAssets'),
    ('total_current_assets', 'totalCurrentAssets'),
    ('cash_and_cash_equivalents_at_carrying_value', 'cashAndCashEquivalentsAtCarryingValue'),
    ('inventory', 'inventory'),
    ('current_net_receivables', 'currentNetReceivables'),
    ('total_non_current_assets', 'totalNonCurrentAssets'),
    ('short_term_investments', 'shortTermInvestments'),
    ('long_term_investments', 'longTermInvestments'),
    ('total_liabilities', 'totalLiabilities'),
    ('total_current_liabilities', 'totalCurrentLiabilities'),
    ('total_non_current_liabilities', 'totalNonCurrentLiabilities'),
    ('short_long_term_debt_total', 'shortLongTermDebtTotal'),
    ('total_debt', 'totalDebt'),
    ('total_shareholder_equity', 'totalShareholderEquity'),
    ('retained_earnings', 'retainedEarnings'),
    ('common_stock_shares_outstanding', 'commonStockSharesOutstanding'),
])

# =============================================================================
# CASH FLOW
# =============================================================================
CASHFLOW_FIELDS = _defs(StatementType.CASHFLOW, [
    ('operating_cashflow', 'operatingCashflow'),
    ('capital_expenditures', 'capitalExpenditures'),
    ('free_cash_flow', 'freeCashFlow'),
    ('cashflow_from_investment', 'cashflowFromInvestment'),
    ('cashflow_from_financing', 'cashflowFromFinancing'),
    ('dividend_payout', 'dividendPayout'),
    ('payments_for_repurchase_of_common_stock', 'paymentsForRepurchaseOfCommonStock'),
    ('net_cashflow', 'netCashflow'),
    ('change_in_cash_and_cash_equivalents', 'changeInCashAndCashEquivalents'),
])

ALL_FIELDS: List[FieldDefinition] = INCOME_FIELDS + BALANCE_FIELDS + CASHFLOW_FIELDS

# provider key -> attribute name (one flat namespace, families never collide)
PROVIDER_TO_UNIFIED: Dict[str, str] = {f.provider_name: f.unified_name for f in ALL_FIELDS}
UNIFIED_NAMES = frozenset(PROVIDER_TO_UNIFIED.values())


def get_unified_name(field_name: str):
    """
    Resolve a provider key or attribute name to the StatementReport attribute.

    Returns:
        Attribute name, or None if the field is not a known line item
    """
    if field_name in PROVIDER_TO_UNIFIED:
        return PROVIDER_TO_UNIFIED[field_name]
    if field_name in UNIFIED_NAMES:
        return field_name
    return None


# =============================================================================
# DISPLAY FIELD LISTS (statement tables)
# =============================================================================
INCOME_STATEMENT_FIELDS = (
    'totalRevenue',
    'costOfRevenue',
    'grossProfit',
    'operatingExpenses',
    'operatingIncome',
    'incomeBeforeTax',
    'incomeTaxExpense',
    'netIncome',
    'ebitda',
    'eps',
    'sharesOutstanding',
)

BALANCE_SHEET_FIELDS = (
    'totalAssets',
    'totalCurrentAssets',
    'totalNonCurrentAssets',
    'totalLiabilities',
    'totalCurrentLiabilities',
    'totalNonCurrentLiabilities',
    'totalShareholderEquity',
    'commonStockSharesOutstanding',
    'cashAndCashEquivalentsAtCarryingValue',
    'shortTermInvestments',
    'longTermInvestments',
    'totalDebt',
)

CASH_FLOW_FIELDS = (
    'operatingCashflow',
    'capitalExpenditures',
    'freeCashFlow',
    'cashflowFromInvestment',
    'cashflowFromFinancing',
    'netCashflow',
    'changeInCashAndCashEquivalents',
)

DISPLAY_FIELDS: Dict[StatementType, Tuple[str, ...]] = {
    StatementType.INCOME: INCOME_STATEMENT_FIELDS,
    StatementType.BALANCE: BALANCE_SHEET_FIELDS,
    StatementType.CASHFLOW: CASH_FLOW_FIELDS,
}
