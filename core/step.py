from __future__ import annotations
import math
from dataclasses import replace
from typing import Tuple

import numpy as np

import config.config as cfg
from core.params import SimulationParameters, SimulationState, PeriodOutcome


def extra_units_for(units_held: int) -> int:
    """One extra per EXTRAS_DIVISOR units held, at least 1, at most MAX_EXTRAS."""
    return int(np.clip(units_held // cfg.EXTRAS_DIVISOR, 1, cfg.MAX_EXTRAS))


def effective_revenue(params: SimulationParameters, rng) -> float:
    v = params.yield_variance
    if v <= 0:
        # no draw consumed
        return float(params.unit_revenue)
    f = rng.random() * 2 * v - v
    return params.unit_revenue * (1 + f)


def step(
    state: SimulationState,
    params: SimulationParameters,
    rng: np.random.Generator,
) -> Tuple[SimulationState, PeriodOutcome]:
    """
    Advance one period.

    Extras are credited to capital for the next period and are not deducted
    from this period's profit: reinvestment is modelled as promised capital.
    """
    period = state.period_index + 1
    revenue = effective_revenue(params, rng)

    units = math.floor(state.capital / params.unit_cost)
    gross = units * revenue
    net = units * (revenue - params.unit_cost)
    cumulative = state.cumulative_net_profit + net

    extras = extra_units_for(units)
    terminated = net >= params.target_net_profit

    new_state = replace(
        state,
        period_index=period,
        capital=state.capital + params.unit_cost * extras,
        cumulative_net_profit=cumulative,
        terminated=terminated,
    )
    outcome = PeriodOutcome(
        period_index=period,
        units_held=units,
        extra_units=extras,
        capital_at_start=state.capital,
        gross_profit=gross,
        net_profit=net,
        cumulative_net_profit=cumulative,
        unit_cost=params.unit_cost,
        unit_revenue=revenue,
        terminated=terminated,
    )
    return new_state, outcome
