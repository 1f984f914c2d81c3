"""Static reference data: the bonds known to the pricer.

``BOND_TABLE`` is built once at import time and exposed read-only. Additional
bonds can be read from a CSV with ``load_bond_table``, which returns a new
mapping instead of registering anything globally.
"""

from datetime import date
from types import MappingProxyType

import pandas as pd

from .instruments import BondTerms
from .utils import MonthDay


BOND_TABLE = MappingProxyType({
    "R186": BondTerms(
        maturity_date=date(2026, 12, 21),
        coupon_rate=10.5,
        first_coupon=MonthDay(6, 21),
        second_coupon=MonthDay(12, 21),
        first_books_close=MonthDay(6, 11),
        second_books_close=MonthDay(12, 11),
    ),
    "R2032": BondTerms(
        maturity_date=date(2032, 3, 31),
        coupon_rate=8.25,
        first_coupon=MonthDay(3, 31),
        second_coupon=MonthDay(9, 30),
        first_books_close=MonthDay(3, 21),
        second_books_close=MonthDay(9, 20),
    ),
})

CSV_COLUMNS = (
    "bond",
    "maturity_date",
    "coupon_rate",
    "first_coupon",
    "second_coupon",
    "first_books_close",
    "second_books_close",
)


def get_bond_terms(name, table=None):
    """Look up a bond by identifier (case-insensitive).

    Raises
    ------
    KeyError
        If the identifier is not in the table.
    """
    table = BOND_TABLE if table is None else table
    key = str(name).strip().upper()
    for bond, terms in table.items():
        if bond.upper() == key:
            return terms
    raise KeyError(f"Unknown bond {name!r}; available: {', '.join(sorted(table))}")


def load_bond_table(path):
    """Load static bond terms from a CSV and return a read-only mapping.

    Expected columns: ``bond, maturity_date, coupon_rate, first_coupon,
    second_coupon, first_books_close, second_books_close``. Anniversaries are
    written as ``MM-DD``.
    """
    df = pd.read_csv(path, dtype=str)
    df.columns = [c.strip().lower() for c in df.columns]

    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Bond CSV is missing columns: {', '.join(missing)}")

    table = {}
    for _, row in df.iterrows():
        name = str(row["bond"]).strip()
        table[name] = BondTerms(
            maturity_date=pd.to_datetime(row["maturity_date"]).date(),
            coupon_rate=float(row["coupon_rate"]),
            first_coupon=MonthDay.parse(row["first_coupon"]),
            second_coupon=MonthDay.parse(row["second_coupon"]),
            first_books_close=MonthDay.parse(row["first_books_close"]),
            second_books_close=MonthDay.parse(row["second_books_close"]),
        )
    return MappingProxyType(table)
