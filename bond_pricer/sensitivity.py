"""Deterministic sweeps of the bond price.

The two sweeps implemented here are:

1) Price vs yield at a fixed settlement date (price/yield curve)
2) Price vs settlement date at a fixed yield (pull to par, cum/ex jumps)

The functions return ``pandas.DataFrame`` objects in a *long* format: the
first column is the x-axis, the others are the figures at that point.
Prices are left unrounded.
"""

import pandas as pd

from .pricing import price
from .schedule import resolve_schedule


def price_vs_yield(pricer, yields):
    """Clean and all-in price of ``pricer``'s bond for each yield in ``yields``.

    Parameters
    ----------
    pricer : bond_pricer.pricer.BondPricer
    yields : iterable[float]
        Yields in percent.
    """
    rows = []
    for y in yields:
        result = price(pricer.state, y, pricer.cfg)
        rows.append({
            "yield": float(y),
            "clean_price": result.clean_price,
            "all_in_price": result.all_in_price,
        })
    return pd.DataFrame(rows, columns=["yield", "clean_price", "all_in_price"])


def price_vs_settlement(terms, settlement_dates, yield_pct, cfg=None):
    """Price the same bond at one yield across several settlement dates.

    Each date gets its own ``PricingState``; nothing is shared between rows.
    """
    rows = []
    for d in settlement_dates:
        state = resolve_schedule(terms, d, cfg)
        result = price(state, yield_pct, cfg)
        rows.append({
            "settlement_date": state.settlement_date,
            "next_coupon_date": state.next_coupon_date,
            "is_cum_ex": state.is_cum_ex,
            "accrued_interest": state.accrued_interest,
            "clean_price": result.clean_price,
            "all_in_price": result.all_in_price,
        })
    return pd.DataFrame(rows, columns=[
        "settlement_date",
        "next_coupon_date",
        "is_cum_ex",
        "accrued_interest",
        "clean_price",
        "all_in_price",
    ])
