import json
from datetime import date
from pathlib import Path

import pandas as pd


def ensure_dir(path):
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def save_dataframe(df, output_dir, filename):
    """Save a DataFrame to CSV inside ``output_dir``."""
    out = ensure_dir(output_dir)
    p = out / filename
    df.to_csv(p, index=False)
    return p


def details_frame(details):
    """Turn ``BondPricer.get_bond_details`` output into a two-column table."""
    rows = []
    for field, value in details.items():
        if isinstance(value, date):
            value = value.isoformat()
        rows.append({"field": field, "value": value})
    return pd.DataFrame(rows, columns=["field", "value"])


def save_bond_details(pricer, yield_pct, output_dir):
    """Save the unrounded bond details at ``yield_pct`` as CSV.

    The file is named after the bond and the settlement date, e.g.
    ``R186_2005-08-26_details.csv``.
    """
    df = details_frame(pricer.get_bond_details(yield_pct))
    filename = f"{pricer.name}_{pricer.settlement_date.isoformat()}_details.csv"
    return save_dataframe(df, output_dir, filename)


def save_config_snapshot(cfg, output_dir):
    """Persist the configuration fields as JSON (reproducibility)."""
    out = ensure_dir(output_dir)
    path = out / "config_snapshot.json"
    d = {k: v for k, v in cfg.__dict__.items() if isinstance(v, (int, float, str, bool))}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(d, f, indent=2, sort_keys=True)
    return path


def maybe_plot_sensitivity(df, output_dir, x_col, title, xlabel, ylabel, filename_png):
    """Plot every non-x column of a sweep DataFrame against ``x_col``.

    Parameters
    ----------
    df : pandas.DataFrame
        Must contain the x column (``x_col``) and one or more numeric y columns.
    output_dir : str|Path
        Base output directory. The figure is saved under ``output_dir/figures``.
    filename_png : str
        Output filename (e.g. 'price_vs_yield.png').

    If matplotlib is not available, this function does nothing.
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception:
        return None

    fig = plt.figure()
    ax = fig.add_subplot(111)

    x = df[x_col].values
    for col in df.select_dtypes(include="number").columns:
        if col == x_col:
            continue
        ax.plot(x, df[col].values, marker="o", linewidth=1.5, label=str(col))

    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8)
    if not pd.api.types.is_numeric_dtype(df[x_col]):
        fig.autofmt_xdate()
    fig.tight_layout()

    fig_dir = ensure_dir(Path(output_dir) / "figures")
    p = fig_dir / filename_png
    fig.savefig(p, dpi=200)
    plt.close(fig)
    return p
