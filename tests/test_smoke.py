from datetime import date

from bond_pricer import BondPricer, PricerConfig, resolve_schedule, price, BOND_TABLE


def test_smoke_run():
    """Basic smoke test: every table bond prices end-to-end.

    This is not a unit test of financial correctness; it checks that the
    public entry points run and return finite figures over a range of dates.
    """
    cfg = PricerConfig()
    cfg.apply_global_settings()

    for name, terms in BOND_TABLE.items():
        pricer = BondPricer(name, date(2020, 1, 15), cfg)
        for settlement in (date(2020, 1, 15), date(2021, 6, 30), date(2023, 11, 2)):
            pricer.set_settlement_date(settlement)
            clean, all_in = pricer.get_bond_prices(9.0)
            assert 0.0 < clean < 200.0
            assert 0.0 < all_in < 200.0
            assert str(pricer).startswith(f"The bond type is: {name}")

            state = resolve_schedule(terms, settlement, cfg)
            assert state == pricer.state
            assert abs(price(state, 9.0, cfg).clean_price - clean) < 1e-5
