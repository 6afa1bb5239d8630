from __future__ import annotations
import asyncio
from typing import Callable, Optional

import numpy as np

import config.config as cfg
from core.params import SimulationParameters, SimulationState, PeriodOutcome
from core.step import step
from core.validate import validate
from services import logger
from services.initialize import initialize_run

OutcomeCallback = Callable[[PeriodOutcome], None]


class RunHandle:
    """
    One paced run. Owns the single pending timer of the run; cancel() clears it
    and no further outcomes are delivered.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        params: SimulationParameters,
        state: SimulationState,
        rng: np.random.Generator,
        on_outcome: OutcomeCallback,
        pacing: float,
        max_periods: int | None,
    ):
        self._loop = loop
        self._params = params
        self._state = state
        self._rng = rng
        self._on_outcome = on_outcome
        self._pacing = pacing
        self._max_periods = max_periods
        self._timer: Optional[asyncio.TimerHandle] = None
        self._finished: asyncio.Future = loop.create_future()
        self.cancelled = False

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def periods(self) -> int:
        return self._state.period_index

    @property
    def done(self) -> bool:
        return self._finished.done()

    def _cycle(self) -> None:
        self._timer = None
        if self.done:
            return

        try:
            self._state, outcome = step(self._state, self._params, self._rng)
            self._on_outcome(outcome)
        except Exception as e:
            logger.error(f"Run failed in period {self._state.period_index}: {e}")
            if not self.done:
                self._finished.set_exception(e)
            return

        if self.done:
            # cancelled from inside the callback
            return
        if self._state.terminated:
            logger.target_reached(outcome)
            self._finished.set_result(self._state)
        elif self._max_periods is not None and self._state.period_index >= self._max_periods:
            logger.warning(f"Stopped after {self._max_periods} periods without reaching the target")
            self._finished.set_result(self._state)
        else:
            self._timer = self._loop.call_later(self._pacing, self._cycle)

    def cancel(self) -> None:
        if self.done:
            return
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.cancelled = True
        self._finished.set_result(None)
        logger.info(f"Run cancelled after {self.periods} periods")

    async def wait(self) -> Optional[SimulationState]:
        """Final state, or None if the run was cancelled. Re-raises a failing output callback."""
        return await self._finished


class SimulationDriver:
    """Starts paced runs on an asyncio loop; at most one run is live at a time."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        max_periods: int | None = None,
    ):
        self.loop = loop
        self.max_periods = cfg.MAX_PERIODS if max_periods is None else max_periods
        self.current: Optional[RunHandle] = None

    def run(
        self,
        params: SimulationParameters,
        on_outcome: OutcomeCallback,
        pacing: float | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> RunHandle:
        pacing = cfg.PACING_S if pacing is None else pacing

        if self.current is not None:
            self.current.cancel()
            self.current = None

        # raises before anything is scheduled
        min_capital = validate(params)

        state, seeded_rng = initialize_run(params, seed=seed)
        loop = self.loop or asyncio.get_running_loop()
        handle = RunHandle(
            loop=loop,
            params=params,
            state=state,
            rng=seeded_rng if rng is None else rng,
            on_outcome=on_outcome,
            pacing=pacing,
            max_periods=self.max_periods,
        )
        logger.info(f"Run started | capital {params.initial_capital:.2f} (min {min_capital:.2f}) | "
                    f"target {params.target_net_profit:.2f}")
        handle._cycle()
        if handle.done and handle._finished.exception() is not None:
            # first delivery failed; nothing is left scheduled
            raise handle._finished.exception()
        self.current = handle
        return handle

    def cancel(self) -> None:
        if self.current is not None:
            self.current.cancel()
            self.current = None
