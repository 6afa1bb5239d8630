import pytest

from core.params import SimulationParameters, SimulationState
from core.step import step, extra_units_for


class FixedRNG:
    """Returns the same draw every time and counts calls."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class NoDrawRNG:
    def random(self) -> float:
        raise AssertionError("no draw expected without variance")


def _params(capital=1000.0, cost=10.0, revenue=15.0, target=1_000_000.0, variance=0.0):
    return SimulationParameters(capital, cost, revenue, target, variance)


def test_deterministic_step_example():
    params = _params()
    state = SimulationState.initial(params)

    new_state, out = step(state, params, NoDrawRNG())

    assert out.period_index == 1
    assert out.units_held == 100
    assert out.extra_units == 10
    assert out.capital_at_start == 1000.0
    assert out.gross_profit == pytest.approx(1500.0)
    assert out.net_profit == pytest.approx(500.0)
    assert out.cumulative_net_profit == pytest.approx(500.0)
    assert not out.terminated

    assert new_state.period_index == 1
    assert new_state.capital == pytest.approx(1100.0)
    assert new_state.cumulative_net_profit == pytest.approx(500.0)
    assert not new_state.terminated


def test_state_is_replaced_not_mutated():
    params = _params()
    state = SimulationState.initial(params)
    new_state, _ = step(state, params, NoDrawRNG())
    assert new_state is not state
    assert state.period_index == 0
    assert state.capital == 1000.0


def test_extras_credit_capital_without_deduction():
    # net profit of 20 cannot pay for 30 * 10 of extras; capital still grows by 300
    params = _params(capital=3000.0, cost=10.0, revenue=10.1, target=1e9)
    state = SimulationState.initial(params)
    new_state, out = step(state, params, NoDrawRNG())
    assert out.units_held == 300
    assert out.extra_units == 30
    assert out.net_profit == pytest.approx(30.0)
    assert out.increment == pytest.approx(300.0)
    assert new_state.capital == pytest.approx(3300.0)


def test_units_are_floored():
    params = _params(capital=1009.99)
    _, out = step(SimulationState.initial(params), params, NoDrawRNG())
    assert out.units_held == 100


@pytest.mark.parametrize(
    "units, expected",
    [(0, 1), (1, 1), (9, 1), (19, 1), (20, 2), (155, 15), (300, 30), (309, 30), (10_000_000, 30)],
)
def test_extra_units_bounds(units, expected):
    assert extra_units_for(units) == expected


def test_variance_uses_one_draw_per_step():
    params = _params(variance=0.1)
    rng = FixedRNG(0.0)   # f = -variance
    _, out = step(SimulationState.initial(params), params, rng)
    assert rng.calls == 1
    assert out.unit_revenue == pytest.approx(13.5)
    assert out.gross_profit == pytest.approx(1350.0)
    assert out.net_profit == pytest.approx(350.0)


def test_variance_midpoint_draw_is_unperturbed():
    params = _params(variance=0.2)
    _, out = step(SimulationState.initial(params), params, FixedRNG(0.5))
    assert out.unit_revenue == pytest.approx(15.0)


def test_variance_can_push_net_negative():
    params = _params(cost=10.0, revenue=11.0, variance=0.5)
    _, out = step(SimulationState.initial(params), params, FixedRNG(0.0))
    assert out.net_profit < 0
    assert out.cumulative_net_profit < 0


def test_terminates_when_net_reaches_target():
    params = _params(target=500.0)
    new_state, out = step(SimulationState.initial(params), params, NoDrawRNG())
    assert out.terminated
    assert new_state.terminated


def test_step_is_idempotent():
    params = _params(variance=0.3)
    state = SimulationState(period_index=4, capital=2345.0, cumulative_net_profit=1200.0)
    a = step(state, params, FixedRNG(0.37))
    b = step(state, params, FixedRNG(0.37))
    assert a == b


def test_as_record_includes_increment():
    params = _params()
    _, out = step(SimulationState.initial(params), params, NoDrawRNG())
    row = out.as_record()
    assert row["increment"] == pytest.approx(100.0)
    assert row["units_held"] == 100
