from typing import Iterator, Tuple, List, Dict, Optional
import numpy as np
import pandas as pd

import config.config as cfg
from core.params import SimulationParameters, SimulationState, PeriodOutcome
from core.step import step
from core.validate import validate
from services.initialize import initialize_run

COLUMNS = [
    "period_index",
    "units_held",
    "extra_units",
    "capital_at_start",
    "unit_revenue",
    "gross_profit",
    "increment",
    "net_profit",
    "cumulative_net_profit",
    "terminated",
]


def iter_outcomes(
    params: SimulationParameters,
    rng: np.random.Generator,
    max_periods: int | None = None,
    state: SimulationState | None = None,
) -> Iterator[PeriodOutcome]:
    """
    Validate once, then yield one outcome per period until the target is met
    (or max_periods periods have run). Raises SchemeError before the first step.
    """
    validate(params)
    state = SimulationState.initial(params) if state is None else state
    while not state.terminated:
        if max_periods is not None and state.period_index >= max_periods:
            return
        state, outcome = step(state, params, rng)
        yield outcome


def simulate(
    params: SimulationParameters,
    seed: int | None = None,
    max_periods: int | None = None,
) -> Tuple[pd.DataFrame, Optional[PeriodOutcome]]:
    """Run to completion without pacing and collect every period into a DataFrame."""
    max_periods = cfg.MAX_PERIODS if max_periods is None else max_periods
    state, rng = initialize_run(params, seed=seed)

    records: List[Dict] = []
    last: Optional[PeriodOutcome] = None
    for outcome in iter_outcomes(params, rng, max_periods=max_periods, state=state):
        records.append(outcome.as_record())
        last = outcome

    df_periods = pd.DataFrame.from_records(records, columns=COLUMNS)
    return df_periods, last
