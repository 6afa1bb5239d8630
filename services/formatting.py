import re

import config.config as cfg

_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_money(value) -> str:
    """Input mask: digits are read as cents, e.g. '123456' -> 'R$ 1.234,56'."""
    digits = re.sub(r"\D", "", str(value))
    if digits == "":
        return ""
    v = f"{int(digits) / 100:.2f}".replace(".", ",")
    return f"{cfg.CURRENCY} " + _THOUSANDS.sub(".", v)


def format_percent(value) -> str:
    digits = re.sub(r"\D", "", str(value))
    if digits == "":
        return ""
    return digits[:3] + "%"


def parse_money(text) -> float:
    if not text:
        return 0.0
    s = str(text).replace(cfg.CURRENCY, "").replace(".", "").replace(",", ".")
    return float(s)


def parse_percent(text) -> float:
    if not text:
        return 0.0
    return float(str(text).replace("%", "")) / 100


def money(value: float) -> str:
    """Display a float the way the money mask shows it."""
    s = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{cfg.CURRENCY} {s}"


TABLE_COLUMNS = {
    "period_index": "Month",
    "units_held": "Units",
    "extra_units": "Extras",
    "capital_at_start": "Investment",
    "gross_profit": "Gross Profit",
    "net_profit": "Net Profit",
    "cumulative_net_profit": "Cumulative",
}


def analytic_table(df_periods, newest_first: bool = True):
    """Display copy of the period frame: renamed columns, money as text."""
    df = df_periods[list(TABLE_COLUMNS)].copy()
    for col in ("capital_at_start", "gross_profit", "net_profit", "cumulative_net_profit"):
        df[col] = df[col].map(money)
    df["period_index"] = df["period_index"].map(lambda m: f"Month {int(m)}")
    df = df.rename(columns=TABLE_COLUMNS)
    return df.iloc[::-1].reset_index(drop=True) if newest_first else df
