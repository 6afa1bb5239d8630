from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from typing import Dict


class InvalidParameters(ValueError):
    """A field is outside the domain the engine accepts."""


@dataclass(frozen=True)
class SimulationParameters:
    initial_capital: float
    unit_cost: float
    unit_revenue: float
    target_net_profit: float
    yield_variance: float = 0.0     # max symmetric relative perturbation of revenue

    def __post_init__(self):
        for name in ("initial_capital", "unit_cost", "unit_revenue", "target_net_profit", "yield_variance"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameters(f"{name} must be a finite number, got {getattr(self, name)!r}")
        for name in ("initial_capital", "unit_cost", "target_net_profit"):
            if not getattr(self, name) > 0:
                raise InvalidParameters(f"{name} must be > 0, got {getattr(self, name)!r}")
        if not 0.0 <= self.yield_variance < 1.0:
            raise InvalidParameters(f"yield_variance must be in [0, 1), got {self.yield_variance!r}")

    @property
    def margin(self) -> float:
        return self.unit_revenue - self.unit_cost


@dataclass(frozen=True)
class SimulationState:
    period_index: int
    capital: float
    cumulative_net_profit: float
    terminated: bool = False

    @classmethod
    def initial(cls, params: SimulationParameters) -> "SimulationState":
        return cls(
            period_index=0,
            capital=float(params.initial_capital),
            cumulative_net_profit=0.0,
            terminated=False,
        )


@dataclass(frozen=True)
class PeriodOutcome:
    period_index: int
    units_held: int
    extra_units: int
    capital_at_start: float
    gross_profit: float
    net_profit: float
    cumulative_net_profit: float
    unit_cost: float
    unit_revenue: float     # effective revenue per unit drawn for this period
    terminated: bool = False

    @property
    def increment(self) -> float:
        """Capital credited for next period's extra units."""
        return self.unit_cost * self.extra_units

    def as_record(self) -> Dict:
        row = asdict(self)
        row["increment"] = self.increment
        return row
