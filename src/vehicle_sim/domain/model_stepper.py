# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Output-interval step scheduling for integrated models.

Determines how many integration steps of size dt are needed to advance
a model by one output interval odt. Output intervals shorter than the
integration step are not subdivided further: dt shrinks to odt instead
(interpolate a smooth state function if finer output is needed).

The last step taken toward odt may be up to 50% longer or shorter than
dt so no vanishingly small trailing step is ever issued. Choose dt to
divide odt evenly to avoid that.

No units are assumed; dt and odt only need to agree with each other and
with the driven model.
"""

import logging

from vehicle_sim.ports import Steppable

logger = logging.getLogger(__name__)

# Room for one more full step: the trailing step lands in (0, 1.5*dt].
ROOM_FACTOR = 1.5


class ModelStepper:
    """Drives Steppable models one output interval at a time.

    Holds only dt and odt, so one instance can drive any number of
    models sharing the same step sizes.
    """

    def __init__(self, dt: float = 1.0, odt: float = 1.0) -> None:
        self._dt = dt
        self._odt = odt
        self._enforce_dt_le_odt()

    @property
    def dt(self) -> float:
        """Integration step size; never larger than odt."""
        return self._dt

    @dt.setter
    def dt(self, value: float) -> None:
        self._dt = value
        self._enforce_dt_le_odt()

    @property
    def odt(self) -> float:
        """Output interval; setting it below dt shrinks dt."""
        return self._odt

    @odt.setter
    def odt(self, value: float) -> None:
        self._odt = value
        self._enforce_dt_le_odt()

    def _enforce_dt_le_odt(self) -> None:
        if self._odt < self._dt:
            logger.debug(
                "Output interval %g below integration step %g; using dt=%g",
                self._odt, self._dt, self._odt,
            )
            self._dt = self._odt

    def stepper(self, model: Steppable) -> int:
        """Advance ``model`` by odt in steps of dt.

        Returns:
            Number of step() calls issued to the model.
        """
        self._enforce_dt_le_odt()
        dt = self._dt
        odt = self._odt
        dt_room = ROOM_FACTOR * dt
        dt_so_far = 0.0
        calls = 0

        while True:
            t_to_go = odt - dt_so_far
            calls += 1
            if t_to_go > dt_room:
                model.step(dt)
                dt_so_far += dt
            else:
                model.step(t_to_go)
                return calls
