"""Government bond pricer (JSE bond pricing formula).

This package provides:
- Static bond terms and an immutable lookup table (R186, R2032, CSV loader)
- Coupon schedule resolution at a settlement date (cum/ex, accrued interest)
- Yield-to-price formula (all-in and clean price) and its inverse
- A settlement-date bound ``BondPricer`` with 5-decimal rounded outputs

Prices are quoted per 100 nominal and yields in percent with semi-annual
compounding.
"""

from .config import PricerConfig
from .instruments import BondTerms
from .utils import MonthDay, round_half_up
from .bonds import BOND_TABLE, get_bond_terms, load_bond_table
from .schedule import PricingState, resolve_schedule
from .pricing import PriceResult, implied_yield, price
from .pricer import BondPricer
