import warnings


class PricerConfig:
    """Central configuration object.

    The bond pricing formula is fixed, but its market conventions and the
    numerical behaviour of the engine are collected here so that a run can be
    reproduced from a single snapshot (see ``reporting.save_config_snapshot``).

    Parameters
    ----------
    price_decimals : int
        Number of decimals used when rounding prices and accrued interest at
        the public boundary (round half up).
    numpy_errstate : str
        Policy handed to ``numpy.errstate`` while pricing. ``"ignore"`` lets
        degenerate yields produce ``inf``/``nan``; ``"raise"`` turns them into
        ``FloatingPointError``.

    Notes
    -----
    - ``days_in_year`` is the accrued interest basis and the money-market
      period length (``days_in_year / frequency``).
    - ``average_days_in_year`` is only used to count the remaining coupons.
    """

    def __init__(self, price_decimals=5, numpy_errstate="ignore"):
        self.price_decimals = int(price_decimals)
        self.numpy_errstate = str(numpy_errstate)

        # ----------------
        # Market conventions (semi-annual government bonds)
        # ----------------
        self.frequency = 2
        self.days_in_year = 365
        self.average_days_in_year = 365.25
        self.redemption = 100.0

        # ----------------
        # Global flags
        # ----------------
        self.suppress_warnings = False

    @property
    def half_year_days(self):
        """Length of the money-market period in days (365 / 2)."""
        return self.days_in_year / self.frequency

    @property
    def average_period_days(self):
        """Average coupon period in days (365.25 / 2)."""
        return self.average_days_in_year / self.frequency

    def apply_global_settings(self):
        """Apply global warning filters."""
        if self.suppress_warnings:
            warnings.filterwarnings("ignore", category=RuntimeWarning)


DEFAULT_CONFIG = PricerConfig()


def resolve_config(cfg):
    """Return ``cfg`` or the shared default configuration."""
    return DEFAULT_CONFIG if cfg is None else cfg
