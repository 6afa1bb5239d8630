import pandas as pd
import pytest

import config.config as cfg
from services.formatting import (
    format_money, format_percent, parse_money, parse_percent, money, analytic_table,
)
from services.storage import load_form, save_form
from simulation.sim import simulate
from core.params import SimulationParameters


@pytest.mark.parametrize(
    "raw, shown",
    [
        ("123456", "R$ 1.234,56"),
        ("R$ 1.234,567", "R$ 12.345,67"),
        ("5", "R$ 0,05"),
        ("100000000", "R$ 1.000.000,00"),
        ("", ""),
        ("abc", ""),
    ],
)
def test_money_mask(raw, shown):
    assert format_money(raw) == shown


def test_percent_mask_keeps_three_digits():
    assert format_percent("15") == "15%"
    assert format_percent("1234") == "123%"
    assert format_percent("x") == ""


def test_parse_masked_values():
    assert parse_money("R$ 1.234,56") == pytest.approx(1234.56)
    assert parse_money("") == 0.0
    assert parse_percent("15%") == pytest.approx(0.15)
    assert parse_percent(None) == 0.0


def test_money_display():
    assert money(1234.5) == "R$ 1.234,50"
    assert money(-0.5) == "-R$ 0,50"


def test_analytic_table_newest_first():
    df, _ = simulate(SimulationParameters(1000.0, 10.0, 15.0, 600.0))
    table = analytic_table(df)
    assert list(table.columns) == [
        "Month", "Units", "Extras", "Investment", "Gross Profit", "Net Profit", "Cumulative",
    ]
    assert table["Month"].iloc[0] == "Month 3"
    assert table["Investment"].iloc[-1] == "R$ 1.000,00"


def test_form_store_round_trip(tmp_path):
    path = str(tmp_path / "form.json")
    values = {**cfg.DEFAULT_FORM, "variacao": "12%"}
    save_form(values, path=path)
    assert load_form(path=path) == values


def test_form_store_missing_or_corrupt(tmp_path):
    assert load_form(path=str(tmp_path / "nope.json")) == {}
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_form(path=str(bad)) == {}


def test_csv_export_keeps_period_columns(tmp_path):
    df, _ = simulate(SimulationParameters(1000.0, 10.0, 15.0, 600.0))
    out = tmp_path / "periods.csv"
    df.to_csv(out, index=False)
    back = pd.read_csv(out)
    assert back["period_index"].tolist() == [1, 2, 3]
    assert back["extra_units"].tolist() == [10, 11, 12]
