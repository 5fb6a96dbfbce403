"""
Ticker Insights - Single Stock Analyzer
Orchestrates the analysis pipeline:
1. Data Acquisition (overview, statements, daily prices)
2. Fundamental Metrics (growth, profitability, efficiency, valuation multiples)
3. Forecast (default assumptions, implied price, upside)

Usage:
    python run_analysis.py AAPL
"""

import sys
import os
import logging

# Add project root to path
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

from data_acquisition import StockDataLoader, AcquisitionError
from fundamentals.financial_data import (
    EfficiencyCalculator,
    GrowthCalculator,
    ProfitabilityCalculator,
    free_cash_flow,
    valuation_metrics,
)
from fundamentals.financial_data.price_metrics import price_change
from fundamentals.valuation import default_inputs, project, upside
from utils.helpers import format_currency, format_percentage
from utils.numeric_utils import safe_format
from utils.logger import setup_logger

logger = setup_logger('run_analysis')


def suppress_sub_module_logs():
    """
    Suppress all logs from sub-modules during run_analysis.py execution.
    Only show ERROR and above for cleaner console output.
    """
    noisy_loggers = [
        # Data acquisition
        'data_loader', 'alphavantage_fetcher', 'key_rotation_client',
        'normalizer', 'http_utils',
        # Metrics and forecast
        'forecast_model',
    ]
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.ERROR)


def suppress_dynamic_calculators():
    """Suppress dynamically created calculator loggers (e.g., GrowthCalculator_AAPL)."""
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if 'Calculator_' in logger_name:
            logging.getLogger(logger_name).setLevel(logging.ERROR)


def print_header(title):
    print("\n" + "="*80)
    print(f"  {title}")
    print("="*80)


def print_step(step_num, total, title):
    print(f"\n[{step_num}/{total}] {title}...")


def format_signed_currency(value, decimals=2):
    """'+$1.50' / '-$1.50': sign ahead of the currency symbol."""
    sign = '+' if value >= 0 else '-'
    return f"{sign}{format_currency(abs(value), decimals)}"


def format_signed_percent(value, decimals=2):
    sign = '+' if value >= 0 else '-'
    return f"{sign}{abs(value):.{decimals}f}%"


def main():
    print_header("TICKER INSIGHTS")

    suppress_sub_module_logs()

    # --- Input ---
    if len(sys.argv) > 1:
        symbol = sys.argv[1].strip().upper()
    else:
        symbol = input("Enter stock symbol (e.g., AAPL): ").strip().upper()

    if not symbol:
        print("[ERROR] Symbol is required.")
        return 1

    loader = StockDataLoader()

    # ==============================================================================
    # STEP 1: Data Acquisition
    # ==============================================================================
    print_step(1, 3, "Data Acquisition")
    try:
        stock_data = loader.load_stock_data(symbol)
    except AcquisitionError as e:
        print(f"[ERROR] {e.error_category}: {e.message}")
        return 1

    overview = stock_data.overview
    print(f"  ✓ {overview.name or symbol} ({overview.sector or 'Unknown sector'})")
    print(f"  ✓ Market Cap: {format_currency(overview.market_cap, 2)}")

    current_price = None
    try:
        prices = loader.get_daily_prices(symbol)
        change = price_change(prices)
        current_price = change.current_price
        if change.change_percent is not None:
            print(
                f"  ✓ Last Close: {format_currency(current_price, 2)} "
                f"({format_signed_currency(change.change)}, {format_signed_percent(change.change_percent)})"
            )
    except AcquisitionError as e:
        print(f"  [WARN] Prices unavailable - {e.error_category}: {e.message}")

    # ==============================================================================
    # STEP 2: Fundamental Metrics
    # ==============================================================================
    print_step(2, 3, "Calculating Fundamental Metrics")

    growth = GrowthCalculator(symbol).calculate_all(stock_data.income_statement)
    profitability = ProfitabilityCalculator(symbol).calculate_all(
        stock_data.income_statement, stock_data.balance_sheet
    )
    efficiency = EfficiencyCalculator(symbol).calculate_all(
        stock_data.income_statement, stock_data.balance_sheet
    )
    valuation = valuation_metrics(overview)
    suppress_dynamic_calculators()

    fcf = free_cash_flow(stock_data.cash_flow.annual_reports)
    latest_fcf = fcf[-1].value if fcf else None

    print(
        f"  ✓ Growth: Revenue YoY {format_percentage(growth.revenue_yoy)} | "
        f"Net Income YoY {format_percentage(growth.net_income_yoy)} | "
        f"Revenue CAGR 3Y {format_percentage(growth.revenue_cagr_3y)} | "
        f"5Y {format_percentage(growth.revenue_cagr_5y)}"
    )
    print(
        f"  ✓ Profitability: Gross {format_percentage(profitability.gross_margin)} | "
        f"Operating {format_percentage(profitability.operating_margin)} | "
        f"Net {format_percentage(profitability.net_margin)} | "
        f"ROE {format_percentage(profitability.roe)} | ROA {format_percentage(profitability.roa)}"
    )
    print(
        f"  ✓ Efficiency: Asset Turnover {safe_format(efficiency.asset_turnover)} | "
        f"Working Capital {safe_format(efficiency.working_capital_efficiency)}"
    )
    print(
        f"  ✓ Valuation: P/E {safe_format(valuation.pe_ratio)} | "
        f"Fwd P/E {safe_format(valuation.forward_pe)} | "
        f"P/S {safe_format(valuation.price_to_sales)} | P/B {safe_format(valuation.price_to_book)} | "
        f"EV/EBITDA {safe_format(valuation.ev_to_ebitda)}"
    )
    print(f"  ✓ Free Cash Flow (latest): {format_currency(latest_fcf, 2)}")

    # ==============================================================================
    # STEP 3: Forecast
    # ==============================================================================
    print_step(3, 3, "Forecast")
    inputs = default_inputs(stock_data.income_statement, overview)
    outputs = project(inputs)
    implied_upside = upside(outputs.implied_price, current_price)

    print(f"  ✓ Revenue: {format_currency(outputs.projected_revenue, 2)}")
    print(f"  ✓ Net Income: {format_currency(outputs.projected_net_income, 2)}")
    print(f"  ✓ EPS: ${outputs.projected_eps:.2f} at P/E {inputs.pe_multiple:.1f}")
    if implied_upside is not None:
        print(
            f"  ✓ Implied Price: ${outputs.implied_price:.2f} "
            f"({format_signed_percent(implied_upside, 1)})"
        )
    else:
        print(f"  ✓ Implied Price: ${outputs.implied_price:.2f}")

    print("\n" + "="*80)
    print("  ANALYSIS COMPLETE")
    print("="*80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
