"""Yield-to-price formula for a resolved coupon schedule.

For a state with ``n`` coupons remaining after the next coupon date and a
semi-annual discount factor ``v = 1 / (1 + y / 200)``:

    AIP = v_bp * (CPN + C * v * (1 - v**n) / (1 - v) + 100 * v**n)
    CP  = AIP - AI

where ``C`` is the half-yearly coupon, ``CPN`` the coupon payable on the next
coupon date (``C`` cum, 0 ex) and ``v_bp`` the discount factor over the broken
period between settlement and the next coupon date.

Two regimes are used for the broken period:

- ordinary period: actual fraction of the current coupon period,
  ``v_bp = v ** bp``;
- final period (next coupon is the redemption date): money-market convention,
  ``bp = days / (365 / 2)`` and ``v_bp = v / (v + bp * (1 - v))``.

No yield validation is done. A yield of -200 makes ``v`` infinite and a yield
of 0 makes the annuity term 0/0; both produce non-finite prices under the
default ``numpy_errstate="ignore"`` policy.
"""

from dataclasses import dataclass

import numpy as np
from scipy import optimize

from .config import resolve_config
from .utils import DateUtils


@dataclass(frozen=True)
class PriceResult:
    discount_factor: float
    broken_period: float
    broken_period_discount_factor: float
    all_in_price: float
    clean_price: float


def discount_factor(yield_pct, cfg=None):
    cfg = resolve_config(cfg)
    return 1.0 / (1.0 + np.float64(yield_pct) / (100.0 * cfg.frequency))


def broken_period(state, cfg=None):
    """Fraction of a coupon period between settlement and the next coupon date."""
    cfg = resolve_config(cfg)
    days_to_next = DateUtils.days_between(state.settlement_date, state.next_coupon_date)
    if state.is_final_period:
        return days_to_next / cfg.half_year_days
    period_days = DateUtils.days_between(state.last_coupon_date, state.next_coupon_date)
    return days_to_next / period_days


def broken_period_discount_factor(state, v, bp):
    if state.is_final_period:
        return v / (v + bp * (1.0 - v))
    return np.power(v, bp)


def price(state, yield_pct, cfg=None):
    """Price a bond at ``yield_pct`` (annual %, semi-annual compounding).

    Parameters
    ----------
    state : PricingState
        Output of ``resolve_schedule``.
    yield_pct : float
        Market yield in percent (e.g. 7.5).

    Returns
    -------
    PriceResult
        Unrounded figures per 100 nominal.
    """
    cfg = resolve_config(cfg)
    terms = state.terms
    n = state.remaining_coupon_count
    coupon = terms.basic_coupon_amount(cfg.frequency)

    with np.errstate(all=cfg.numpy_errstate):
        v = discount_factor(yield_pct, cfg)
        bp = broken_period(state, cfg)
        v_bp = broken_period_discount_factor(state, v, bp)

        vn = np.power(v, n)
        annuity = coupon * v * (1.0 - vn) / (1.0 - v)
        all_in = v_bp * (state.coupon_payable + annuity + cfg.redemption * vn)

    return PriceResult(
        discount_factor=float(v),
        broken_period=float(bp),
        broken_period_discount_factor=float(v_bp),
        all_in_price=float(all_in),
        clean_price=float(all_in - state.accrued_interest),
    )


def implied_yield(state, clean_price, bracket=(1e-4, 100.0), cfg=None):
    """Yield (in %) at which the unrounded clean price equals ``clean_price``.

    Solved with Brent's method on ``bracket``. scipy raises ``ValueError`` if
    the bracket does not contain the solution.
    """
    target = float(clean_price)

    def _objective(y):
        return price(state, y, cfg).clean_price - target

    lo, hi = bracket
    return float(optimize.brentq(_objective, float(lo), float(hi), xtol=1e-12, maxiter=200))
