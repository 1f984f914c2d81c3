from .bonds import get_bond_terms
from .config import resolve_config
from .instruments import BondTerms
from .pricing import implied_yield, price
from .schedule import resolve_schedule
from .utils import round_half_up


class BondPricer:
    """Settlement-date bound pricer for one bond.

    Responsibilities
    ----------------
    - Hold the ``PricingState`` of the bond at the current settlement date
    - Round accrued interest and prices at the public boundary
    - Provide an unrounded detail dump for inspection

    Notes
    -----
    The state is rebuilt from scratch by ``set_settlement_date``. Instances are
    therefore not meant to be shared between callers; the pure functions
    ``resolve_schedule`` and ``price`` can be used directly instead.
    """

    def __init__(self, bond, settlement_date, cfg=None, name=None):
        """Create a pricer.

        Parameters
        ----------
        bond : str or BondTerms
            Bond identifier from ``BOND_TABLE`` (e.g. ``"R186"``) or explicit terms.
        settlement_date : date, str or QuantLib.Date
            Valuation date.
        cfg : PricerConfig or None
            Conventions and rounding; the default configuration if None.
        name : str or None
            Display name. Defaults to the identifier when ``bond`` is a string.
        """
        self.cfg = resolve_config(cfg)
        if isinstance(bond, BondTerms):
            self.terms = bond
            self.name = name or "CUSTOM"
        else:
            self.terms = get_bond_terms(bond)
            self.name = name or str(bond).strip().upper()
        self.state = None
        self.set_settlement_date(settlement_date)

    @property
    def settlement_date(self):
        return self.state.settlement_date

    def set_settlement_date(self, settlement_date):
        """Set the settlement date and recompute every date dependent value."""
        self.state = resolve_schedule(self.terms, settlement_date, self.cfg)

    def _round(self, value):
        return round_half_up(value, self.cfg.price_decimals)

    def get_accrued_interest(self):
        return self._round(self.state.accrued_interest)

    def get_all_in_price(self, yield_pct):
        """All-in (dirty) price per 100 nominal at ``yield_pct``."""
        return self._round(price(self.state, yield_pct, self.cfg).all_in_price)

    def get_clean_price(self, yield_pct):
        """Clean price per 100 nominal at ``yield_pct``."""
        return self._round(price(self.state, yield_pct, self.cfg).clean_price)

    def get_bond_prices(self, yield_pct):
        """Return ``(clean_price, all_in_price)``, both rounded."""
        result = price(self.state, yield_pct, self.cfg)
        return self._round(result.clean_price), self._round(result.all_in_price)

    def get_implied_yield(self, clean_price, bracket=(1e-4, 100.0)):
        """Yield (in %) that reproduces ``clean_price`` at the current settlement date."""
        return implied_yield(self.state, clean_price, bracket=bracket, cfg=self.cfg)

    def get_bond_details(self, yield_pct):
        """Schedule state and price figures at ``yield_pct`` (unrounded)."""
        s = self.state
        result = price(s, yield_pct, self.cfg)
        return {
            "next_coupon_date": s.next_coupon_date,
            "last_coupon_date": s.last_coupon_date,
            "books_close_date": s.books_close_date,
            "remaining_coupon_count": s.remaining_coupon_count,
            "is_cum_ex": s.is_cum_ex,
            "accrued_days": s.accrued_days,
            "accrued_interest": s.accrued_interest,
            "broken_period": result.broken_period,
            "broken_period_discount_factor": result.broken_period_discount_factor,
            "discount_factor": result.discount_factor,
            "coupon_payable": s.coupon_payable,
            "all_in_price": result.all_in_price,
            "clean_price": result.clean_price,
        }

    def __str__(self):
        s = self.state
        return "\n".join([
            f"The bond type is: {self.name}",
            f"The next coupon date is: {s.next_coupon_date}",
            f"The books close date is: {s.books_close_date}",
            f"Number of remaining coupons: {s.remaining_coupon_count}",
            f"Cum-ex flag: {s.is_cum_ex}",
            f"Days accrued interest: {s.accrued_days}",
            f"Accrued Interest: {s.accrued_interest}",
            f"Coupon at Next Coupon Date: {s.coupon_payable}",
        ])
