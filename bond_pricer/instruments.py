from dataclasses import dataclass
from datetime import date

from .utils import DateUtils, MonthDay


@dataclass(frozen=True)
class BondTerms:
    """Static terms of a fixed-coupon, semi-annual government bond.

    The pricing formula only needs the redemption date, the annual coupon rate
    and four year-independent anniversaries:

        coupon_amount = coupon_rate / 2   (per 100 nominal)

    Notes
    -----
    - ``first_coupon`` and ``second_coupon`` are expected to be six months
      apart, and each books-close anniversary to precede its coupon by a fixed
      number of days. This is part of the input contract and is not checked.
    - Instances are immutable; the pricer never modifies them.
    """

    maturity_date: date
    coupon_rate: float
    first_coupon: MonthDay
    second_coupon: MonthDay
    first_books_close: MonthDay
    second_books_close: MonthDay

    def __post_init__(self):
        # Normalize so that table entries and CSV rows compare equal.
        object.__setattr__(self, "maturity_date", DateUtils.to_date(self.maturity_date))
        object.__setattr__(self, "coupon_rate", float(self.coupon_rate))
        for name in ("first_coupon", "second_coupon", "first_books_close", "second_books_close"):
            value = getattr(self, name)
            if not isinstance(value, MonthDay):
                object.__setattr__(self, name, MonthDay.parse(value))

    def basic_coupon_amount(self, frequency=2):
        """Coupon paid on each coupon date per 100 nominal."""
        return self.coupon_rate / frequency

    def books_close_for(self, coupon_date):
        """Concrete books-close date paired with a concrete coupon date."""
        if coupon_date == self.first_coupon.at_year(coupon_date.year):
            return self.first_books_close.at_year(coupon_date.year)
        return self.second_books_close.at_year(coupon_date.year)
