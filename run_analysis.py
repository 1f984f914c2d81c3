from datetime import date, timedelta
from pathlib import Path

import pandas as pd

from bond_pricer.bonds import BOND_TABLE
from bond_pricer.config import PricerConfig
from bond_pricer.pricer import BondPricer
from bond_pricer.reporting import (
    maybe_plot_sensitivity,
    save_bond_details,
    save_config_snapshot,
    save_dataframe,
)
from bond_pricer.sensitivity import price_vs_settlement, price_vs_yield


def main():
    # -------------------------------------------------------------------------
    # 0. Inputs (adjust these for your settlement date / yields)
    # -------------------------------------------------------------------------
    scenarios = [
        ("R186", date(2005, 8, 26), 7.5),
        ("R186", date(2017, 2, 7), 8.75),
        ("R2032", date(2024, 5, 16), 9.5),
    ]

    cfg = PricerConfig()
    cfg.apply_global_settings()

    project_root = Path(__file__).resolve().parent
    out_dir = project_root / "outputs"

    # -------------------------------------------------------------------------
    # 1. Schedule state
    # -------------------------------------------------------------------------
    print("--- 1. Schedule ---")
    for bond, settlement, _ in scenarios:
        print(BondPricer(bond, settlement, cfg))
        print()

    # -------------------------------------------------------------------------
    # 2. Prices
    # -------------------------------------------------------------------------
    print(f"--- 2. Prices (rounded to {cfg.price_decimals} decimals) ---")
    print(f"{'BOND':<8} | {'SETTLE':<10} | {'YIELD':<6} | {'ACCRUED':<10} | {'CLEAN':<10} | {'ALL-IN':<10}")
    print("-" * 70)

    results = []
    for bond, settlement, y in scenarios:
        pricer = BondPricer(bond, settlement, cfg)
        clean, all_in = pricer.get_bond_prices(y)
        accrued = pricer.get_accrued_interest()
        print(f"{bond:<8} | {settlement.isoformat():<10} | {y:<6.2f} | {accrued:<10.5f} | {clean:<10.5f} | {all_in:<10.5f}")
        results.append({
            "bond": bond,
            "settlement_date": settlement,
            "yield": y,
            "accrued_interest": accrued,
            "clean_price": clean,
            "all_in_price": all_in,
        })
        save_bond_details(pricer, y, out_dir)

    save_dataframe(pd.DataFrame(results), out_dir, "results_summary.csv")
    save_config_snapshot(cfg, out_dir)

    # -------------------------------------------------------------------------
    # 3. Sensitivity figures
    # -------------------------------------------------------------------------
    bond, settlement, y = scenarios[0]
    pricer = BondPricer(bond, settlement, cfg)

    # 3.1 Price vs yield
    yields = [y + shift for shift in (-2.0, -1.0, -0.5, 0.0, 0.5, 1.0, 2.0)]
    df_yield = price_vs_yield(pricer, yields)
    save_dataframe(df_yield, out_dir, "sensitivity_price_vs_yield.csv")
    maybe_plot_sensitivity(
        df_yield,
        out_dir,
        x_col="yield",
        title=f"{bond} price vs yield ({settlement.isoformat()})",
        xlabel="Yield (%)",
        ylabel="Price",
        filename_png="price_vs_yield.png",
    )

    # 3.2 Price vs settlement date across one coupon period (cum/ex jump)
    dates = [settlement + timedelta(days=d) for d in range(0, 184, 7)]
    df_settle = price_vs_settlement(BOND_TABLE[bond], dates, y, cfg)
    save_dataframe(df_settle, out_dir, "sensitivity_price_vs_settlement.csv")
    maybe_plot_sensitivity(
        df_settle[["settlement_date", "accrued_interest", "clean_price", "all_in_price"]],
        out_dir,
        x_col="settlement_date",
        title=f"{bond} price vs settlement date (yield {y:.2f}%)",
        xlabel="Settlement date",
        ylabel="Price",
        filename_png="price_vs_settlement.png",
    )

    print(f"\nOutputs written to: {out_dir}")


if __name__ == "__main__":
    main()
