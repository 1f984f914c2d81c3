from datetime import date, timedelta

import pytest
import QuantLib as ql

from bond_pricer.bonds import BOND_TABLE
from bond_pricer.schedule import resolve_schedule


R186 = BOND_TABLE["R186"]
R2032 = BOND_TABLE["R2032"]


def test_between_coupons():
    s = resolve_schedule(R186, date(2005, 8, 26))
    assert s.next_coupon_date == date(2005, 12, 21)
    assert s.last_coupon_date == date(2005, 6, 21)
    assert s.books_close_date == date(2005, 12, 11)
    assert s.remaining_coupon_count == 42
    assert s.is_cum_ex is True
    assert s.accrued_days == 66
    assert s.coupon_payable == 5.25
    assert s.accrued_interest == pytest.approx(1.8986301369863, abs=1e-12)


@pytest.mark.parametrize("settlement, expected", [
    (date(2005, 12, 21), date(2006, 6, 21)),  # on the second coupon date
    (date(2005, 6, 21), date(2005, 12, 21)),  # on the first coupon date
    (date(2005, 12, 25), date(2006, 6, 21)),
    (date(2005, 5, 20), date(2005, 6, 21)),
    (date(2005, 1, 1), date(2005, 6, 21)),
    (date(2005, 12, 31), date(2006, 6, 21)),
])
def test_next_coupon_date(settlement, expected):
    assert resolve_schedule(R186, settlement).next_coupon_date == expected


def test_every_date_before_first_anniversary_rolls_to_it():
    d = date(2010, 1, 1)
    while d < date(2010, 6, 21):
        assert resolve_schedule(R186, d).next_coupon_date == date(2010, 6, 21)
        d += timedelta(days=1)


def test_settlement_on_coupon_date_starts_new_period():
    s = resolve_schedule(R186, date(2005, 12, 21))
    assert s.last_coupon_date == date(2005, 12, 21)
    assert s.accrued_days == 0
    assert s.accrued_interest == 0.0


@pytest.mark.parametrize("settlement, expected", [
    (date(2005, 6, 1), date(2004, 12, 21)),
    (date(2006, 1, 1), date(2005, 12, 21)),
])
def test_last_coupon_date(settlement, expected):
    assert resolve_schedule(R186, settlement).last_coupon_date == expected


@pytest.mark.parametrize("settlement, expected", [
    (date(2005, 6, 1), date(2005, 6, 11)),
    (date(2005, 12, 20), date(2005, 12, 11)),
])
def test_books_close_date(settlement, expected):
    assert resolve_schedule(R186, settlement).books_close_date == expected


def test_ex_coupon_after_books_close():
    s = resolve_schedule(R186, date(2005, 6, 12))
    assert s.is_cum_ex is False
    assert s.coupon_payable == 0.0
    # Days counted back from the next coupon date.
    assert s.accrued_days == -9
    assert s.accrued_interest == pytest.approx(-0.258904109589, abs=1e-12)


def test_books_close_date_itself_is_ex():
    s = resolve_schedule(R186, date(2005, 6, 11))
    assert s.is_cum_ex is False
    assert s.coupon_payable == 0.0


def test_day_before_books_close_is_cum():
    s = resolve_schedule(R186, date(2005, 6, 10))
    assert s.is_cum_ex is True
    assert s.coupon_payable == R186.coupon_rate / 2


def test_cum_ex_flag_matches_books_close_over_a_year():
    d = date(2012, 1, 1)
    while d < date(2013, 1, 1):
        s = resolve_schedule(R186, d)
        assert s.is_cum_ex == (d < s.books_close_date)
        assert s.coupon_payable == (5.25 if s.is_cum_ex else 0.0)
        d += timedelta(days=3)


def test_final_period():
    s = resolve_schedule(R186, date(2026, 7, 28))
    assert s.next_coupon_date == R186.maturity_date
    assert s.is_final_period
    assert s.remaining_coupon_count == 0
    assert s.accrued_days == 37


def test_r2032():
    s = resolve_schedule(R2032, date(2024, 5, 16))
    assert s.next_coupon_date == date(2024, 9, 30)
    assert s.last_coupon_date == date(2024, 3, 31)
    assert s.books_close_date == date(2024, 9, 20)
    assert s.remaining_coupon_count == 15
    assert s.accrued_days == 46
    assert s.coupon_payable == 4.125


@pytest.mark.parametrize("settlement", ["2005-08-26", ql.Date(26, 8, 2005)])
def test_settlement_date_coercion(settlement):
    s = resolve_schedule(R186, settlement)
    assert s.settlement_date == date(2005, 8, 26)
    assert s.next_coupon_date == date(2005, 12, 21)


def test_state_is_immutable():
    s = resolve_schedule(R186, date(2005, 8, 26))
    with pytest.raises(AttributeError):
        s.accrued_days = 1
