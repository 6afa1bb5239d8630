import math
import logging

import config.config as cfg
from core.params import SimulationParameters

log = logging.getLogger("simulator")


class SchemeError(Exception):
    """Starting configuration that can never be simulated as given."""


class InvalidScheme(SchemeError):
    def __init__(self, unit_cost: float, unit_revenue: float):
        self.unit_cost = unit_cost
        self.unit_revenue = unit_revenue
        super().__init__(
            f"Unit revenue ({unit_revenue:.2f}) must be greater than unit cost ({unit_cost:.2f})."
        )


class InsufficientCapital(SchemeError):
    def __init__(self, min_viable_capital: float):
        self.min_viable_capital = min_viable_capital
        super().__init__(
            f"Initial capital below the minimum viable capital of {min_viable_capital:.2f}."
        )


def minimum_capital(unit_cost: float, unit_revenue: float) -> float:
    """
    Smallest starting capital that clears the fixed monthly overhead plus a
    safety margin of SAFETY_FACTOR units.

        min_units = ceil((OVERHEAD + SAFETY_FACTOR * unit_cost) / margin)
        min_capital = min_units * unit_cost
    """
    margin = unit_revenue - unit_cost
    if margin <= 0:
        raise InvalidScheme(unit_cost, unit_revenue)
    min_units = math.ceil((cfg.OVERHEAD + cfg.SAFETY_FACTOR * unit_cost) / margin)
    return min_units * unit_cost


def validate(params: SimulationParameters) -> float:
    """Return the minimum viable capital, or raise a SchemeError."""
    min_capital = minimum_capital(params.unit_cost, params.unit_revenue)
    if params.initial_capital < min_capital:
        raise InsufficientCapital(min_capital)
    log.debug("validated: capital=%.2f min=%.2f", params.initial_capital, min_capital)
    return min_capital
