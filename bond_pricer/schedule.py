"""Coupon schedule state of a bond at a given settlement date.

``resolve_schedule`` is a pure function: the same terms and settlement date
always give the same ``PricingState``. Nothing is updated in place; a new
settlement date means a new state.
"""

from dataclasses import dataclass
from datetime import date

import numpy as np

from .config import resolve_config
from .instruments import BondTerms
from .utils import DateUtils


@dataclass(frozen=True)
class PricingState:
    terms: BondTerms
    settlement_date: date
    next_coupon_date: date
    last_coupon_date: date
    books_close_date: date
    remaining_coupon_count: int
    is_cum_ex: bool
    accrued_days: int
    coupon_payable: float
    accrued_interest: float

    @property
    def is_final_period(self):
        """True when the next coupon is the redemption date (money-market period)."""
        return self.next_coupon_date == self.terms.maturity_date


def next_coupon_date(terms, settlement_date):
    """First coupon date strictly after ``settlement_date``."""
    year = settlement_date.year
    first = terms.first_coupon.at_year(year)
    if settlement_date < first:
        return first
    second = terms.second_coupon.at_year(year)
    if settlement_date < second:
        return second
    return terms.first_coupon.at_year(year + 1)


def last_coupon_date(terms, next_coupon):
    """Coupon date one half-year before ``next_coupon``."""
    if next_coupon == terms.first_coupon.at_year(next_coupon.year):
        return terms.second_coupon.at_year(next_coupon.year - 1)
    return terms.first_coupon.at_year(next_coupon.year)


def remaining_coupons(terms, next_coupon, cfg=None):
    """Coupons still to be paid after ``next_coupon``, up to and including maturity.

    Uses the average half-year (365.25 / 2 days) and rounds to the nearest
    integer, so a date a few days off a period boundary may be counted on the
    other side of it.
    """
    cfg = resolve_config(cfg)
    days = DateUtils.days_between(next_coupon, terms.maturity_date)
    return int(np.floor(days / cfg.average_period_days + 0.5))


def resolve_schedule(terms, settlement_date, cfg=None):
    """Derive the full ``PricingState`` for ``terms`` at ``settlement_date``."""
    cfg = resolve_config(cfg)
    settlement = DateUtils.to_date(settlement_date)

    nxt = next_coupon_date(terms, settlement)
    last = last_coupon_date(terms, nxt)
    books_close = terms.books_close_for(nxt)
    cum_ex = settlement < books_close

    if cum_ex:
        accrued_days = DateUtils.days_between(last, settlement)
        coupon_payable = terms.basic_coupon_amount(cfg.frequency)
    else:
        # Negative: the seller keeps the next coupon.
        accrued_days = DateUtils.days_between(nxt, settlement)
        coupon_payable = 0.0

    return PricingState(
        terms=terms,
        settlement_date=settlement,
        next_coupon_date=nxt,
        last_coupon_date=last,
        books_close_date=books_close,
        remaining_coupon_count=remaining_coupons(terms, nxt, cfg),
        is_cum_ex=cum_ex,
        accrued_days=accrued_days,
        coupon_payable=coupon_payable,
        accrued_interest=accrued_days * terms.coupon_rate / cfg.days_in_year,
    )
