from dataclasses import dataclass
from datetime import date, datetime

import numpy as np
import pandas as pd
import QuantLib as ql


_ACT365 = ql.Actual365Fixed()


@dataclass(frozen=True)
class MonthDay:
    """Year-independent anniversary (coupon or books-close date)."""

    month: int
    day: int

    @classmethod
    def parse(cls, s):
        """Parse 'MM-DD' (also accepts '--MM-DD' and 'MM/DD')."""
        text = str(s).strip().lstrip("-").replace("/", "-")
        parts = text.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid month-day value: {s!r}")
        return cls(int(parts[0]), int(parts[1]))

    def at_year(self, year):
        """Resolve to a concrete date; 29 Feb falls back to 28 Feb in non-leap years."""
        last_day = ql.Date.endOfMonth(ql.Date(1, self.month, int(year))).dayOfMonth()
        return date(int(year), self.month, min(self.day, last_day))

    def __str__(self):
        return f"{self.month:02d}-{self.day:02d}"


class DateUtils:
    """Small helpers to keep date parsing and day counting in one place."""

    @staticmethod
    def to_date(d):
        """Convert common date representations into ``datetime.date``."""
        if isinstance(d, ql.Date):
            return date(d.year(), d.month(), d.dayOfMonth())
        if isinstance(d, str):
            return pd.to_datetime(d).date()
        if isinstance(d, datetime):
            return d.date()
        if isinstance(d, date):
            return d
        raise TypeError(f"Unsupported date value: {d!r}")

    @staticmethod
    def to_ql_date(d):
        """Convert common Python date representations into QuantLib.Date."""
        if isinstance(d, ql.Date):
            return d
        d = DateUtils.to_date(d)
        return ql.Date(d.day, d.month, d.year)

    @staticmethod
    def days_between(start, end):
        """Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier)."""
        return int(_ACT365.dayCount(DateUtils.to_ql_date(start), DateUtils.to_ql_date(end)))


def round_half_up(value, places):
    """Round half up to ``places`` decimals; ``nan``/``inf`` pass through."""
    scale = 10.0 ** int(places)
    return float(np.floor(np.float64(value) * scale + 0.5) / scale)
