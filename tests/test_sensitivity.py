from datetime import date, timedelta

import pytest

from bond_pricer.bonds import BOND_TABLE
from bond_pricer.pricer import BondPricer
from bond_pricer.sensitivity import price_vs_settlement, price_vs_yield


def test_price_vs_yield():
    pricer = BondPricer("R186", date(2005, 8, 26))
    df = price_vs_yield(pricer, [6.5, 7.5, 8.5])
    assert list(df.columns) == ["yield", "clean_price", "all_in_price"]
    assert len(df) == 3
    assert df["clean_price"].is_monotonic_decreasing
    row = df[df["yield"] == 7.5].iloc[0]
    assert row["all_in_price"] == pytest.approx(133.547091364729, abs=1e-8)


def test_price_vs_settlement_crosses_books_close():
    dates = [date(2005, 6, 1) + timedelta(days=d) for d in range(0, 30, 5)]
    df = price_vs_settlement(BOND_TABLE["R186"], dates, 7.5)
    assert len(df) == len(dates)
    assert df["settlement_date"].tolist() == dates
    # Books close on 11 June; from 21 June the December coupon is cum again.
    assert df["is_cum_ex"].tolist() == [True, True, False, False, True, True]
    # Settlement on 21 June moves to the December coupon.
    assert df["next_coupon_date"].iloc[-1] == date(2005, 12, 21)
    ex_rows = df[~df["is_cum_ex"] & (df["next_coupon_date"] == date(2005, 6, 21))]
    assert (ex_rows["accrued_interest"] < 0).all()


def test_price_vs_settlement_matches_pricer():
    dates = [date(2005, 8, 26), date(2017, 2, 7)]
    df = price_vs_settlement(BOND_TABLE["R186"], dates, 7.5)
    for d, clean in zip(dates, df["clean_price"]):
        pricer = BondPricer("R186", d)
        assert clean == pytest.approx(pricer.get_clean_price(7.5), abs=6e-6)
