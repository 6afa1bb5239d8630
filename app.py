import streamlit as st
import pandas as pd
import matplotlib.pyplot as plt

import time

# Local modules
import config.config as cfg
from core.params import SimulationParameters
from core.validate import SchemeError, InsufficientCapital, InvalidScheme, minimum_capital
from plots import plot_profits, plot_extras
from services import logger
from services.formatting import (
    format_money, format_percent, parse_money, parse_percent, money, analytic_table,
)
from services.initialize import initialize_run
from services.storage import load_form, save_form
from simulation.sim import iter_outcomes, COLUMNS

st.set_page_config(page_title="Reinvestment Simulator", layout="wide")

st.title("Unit Reinvestment Simulator")

stored = {**cfg.DEFAULT_FORM, **load_form()}

with st.sidebar:
    st.header("Parameters")
    investimento = format_money(st.text_input("Initial investment", value=stored["investimento"]))
    custo = format_money(st.text_input("Unit cost", value=stored["custo"]))
    ganho = format_money(st.text_input("Unit revenue", value=stored["ganho"]))
    target = format_money(st.text_input("Monthly net profit target", value=stored["target"]))
    variacao = format_percent(st.text_input("Revenue variance", value=stored["variacao"]))

    st.markdown("---")
    st.subheader("Run")
    seed = st.number_input("Seed", min_value=0, value=cfg.SEED, step=1)
    pacing = st.number_input("Delay between months (s)", min_value=0.0, max_value=5.0,
                             value=float(cfg.PACING_S), step=0.1, format="%.1f")
    max_periods = st.number_input("Max months (0 = until target)", min_value=0, max_value=100000,
                                  value=int(cfg.MAX_PERIODS or 0), step=1)

    st.markdown("---")
    c1, c2 = st.columns(2)
    run_btn = c1.button("Start")
    c2.button("Reset")   # any rerun stops a running simulation

form = {
    "investimento": investimento,
    "custo": custo,
    "ganho": ganho,
    "target": target,
    "variacao": variacao,
}


def set_config():
    # Assign chosen params to the config module
    cfg.SEED = int(seed)
    cfg.PACING_S = float(pacing)
    cfg.MAX_PERIODS = int(max_periods) or None


def render(df: pd.DataFrame, chart_slot, extras_slot, table_slot):
    fig, ax = plt.subplots()
    plot_profits(df, ax=ax)
    chart_slot.pyplot(fig)
    plt.close(fig)

    fig, ax = plt.subplots(figsize=(6.4, 2.4))
    plot_extras(df, ax=ax)
    extras_slot.pyplot(fig)
    plt.close(fig)

    table_slot.dataframe(analytic_table(df), use_container_width=True)


# =========================
# Run
# =========================
if run_btn:
    set_config()
    save_form(form)

    try:
        params = SimulationParameters(
            initial_capital=parse_money(investimento),
            unit_cost=parse_money(custo),
            unit_revenue=parse_money(ganho),
            target_net_profit=parse_money(target),
            yield_variance=parse_percent(variacao),
        )
    except ValueError as e:
        st.error(str(e))
        st.stop()

    state, rng = initialize_run(params, seed=cfg.SEED)
    outcomes = iter_outcomes(params, rng, max_periods=cfg.MAX_PERIODS, state=state)
    try:
        first = next(outcomes, None)
    except InsufficientCapital as e:
        st.warning(f"Initial investment too low. Minimum investment: {money(e.min_viable_capital)}")
        st.stop()
    except SchemeError as e:
        st.error(str(e))
        st.stop()

    progress = st.empty()
    c1, c2 = st.columns([3, 2])
    with c1:
        chart_slot = st.empty()
        extras_slot = st.empty()
    with c2:
        st.subheader("Log")
        log_slot = st.empty()
    st.subheader("Analytic table")
    table_slot = st.empty()

    # Streamlit reruns the script on any widget event, which ends this loop; paced here instead of SimulationDriver
    records = []
    log_lines = []
    last = None
    outcome = first
    while outcome is not None:
        records.append(outcome.as_record())
        log_lines.insert(0, logger.outcome(outcome))
        last = outcome

        df = pd.DataFrame.from_records(records, columns=COLUMNS)
        progress.metric("Month", outcome.period_index, delta=money(outcome.net_profit))
        render(df, chart_slot, extras_slot, table_slot)
        log_slot.text("\n".join(log_lines[:200]))

        if outcome.terminated:
            break
        time.sleep(cfg.PACING_S)
        outcome = next(outcomes, None)

    if last is not None and last.terminated:
        st.success(logger.target_reached(last))
    elif last is not None:
        st.info(f"Stopped after {last.period_index} months without reaching the target.")

    if records:
        df = pd.DataFrame.from_records(records, columns=COLUMNS)
        st.download_button(
            "Download CSV",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name="simulation_periods.csv",
            mime="text/csv",
        )

else:
    try:
        min_capital = minimum_capital(parse_money(custo), parse_money(ganho))
        if parse_money(investimento) < min_capital:
            st.warning(f"Minimum investment for these units: {money(min_capital)}")
        else:
            st.caption(f"Minimum investment: {money(min_capital)}")
    except (InvalidScheme, ValueError):
        st.warning("Unit revenue must be greater than unit cost.")
    st.info("Set parameters in the sidebar and click Start.")
