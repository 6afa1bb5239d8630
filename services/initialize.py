from __future__ import annotations
from typing import Tuple
import numpy as np

import config.config as cfg
from core.params import SimulationParameters, SimulationState


def initialize_run(
    params: SimulationParameters,
    seed: int | None = None,
) -> Tuple[SimulationState, np.random.Generator]:
    """
    Build the starting state and the RNG for one run.

    Returns:
        state: SimulationState at period 0
        rng: generator used for the yield variance draws
    """
    seed = cfg.SEED if seed is None else seed
    rng = np.random.default_rng(seed)
    return SimulationState.initial(params), rng
