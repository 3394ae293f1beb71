# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fixed-step integrators for systems of first order ODEs.

Each integrator is built for a fixed state order and owns scratch
buffers of that length, allocated once and reused on every step. An
instance therefore belongs to one model and must not be stepped from
two threads at once.

The returned time is t0 + dt, computed directly. For long fixed-step
runs callers get the least truncation drift by deriving time as
epoch + i*dt instead of summing returned times.
"""

import numpy as np

from vehicle_sim.ports import DifferentialSystem


class RK4:
    """Classic 4th-order Runge-Kutta.

    k1 = f(t0, x0)
    k2 = f(t0 + dt/2, x0 + dt/2 k1)
    k3 = f(t0 + dt/2, x0 + dt/2 k2)
    k4 = f(t0 + dt, x0 + dt k3)
    x1 = x0 + dt/6 (k1 + 2 k2 + 2 k3 + k4)

    The weighted sum is accumulated stage by stage in one buffer, so only
    three state-length arrays are kept regardless of stage count.
    """

    def __init__(self, order: int) -> None:
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        self._order = order
        self._xd = np.zeros(order)   # stage derivative
        self._x = np.zeros(order)    # stage state
        self._xa = np.zeros(order)   # running dt*(k1 + 2k2 + 2k3)

    @property
    def order(self) -> int:
        return self._order

    def step(
        self,
        t0: float,
        dt: float,
        x0: np.ndarray,
        system: DifferentialSystem,
        out: np.ndarray | None = None,
    ) -> tuple[np.ndarray, float]:
        xd, x, xa = self._xd, self._x, self._xa
        half_dt = 0.5 * dt
        t_half = t0 + half_dt
        t1 = t0 + dt

        # first
        xd[:] = system.derivatives(t0, x0)
        np.multiply(xd, dt, out=xa)
        np.multiply(xa, 0.5, out=x)
        x += x0

        # second
        xd[:] = system.derivatives(t_half, x)
        xd *= dt
        np.multiply(xd, 0.5, out=x)
        x += x0
        xa += xd
        xa += xd

        # third
        xd[:] = system.derivatives(t_half, x)
        xd *= dt
        np.add(x0, xd, out=x)
        xa += xd
        xa += xd

        # fourth
        xd[:] = system.derivatives(t1, x)
        xd *= dt
        xa += xd
        xa /= 6.0

        if out is None:
            out = np.empty(self._order)
        np.add(x0, xa, out=out)
        return out, t1


class Euler:
    """Forward Euler: x1 = x0 + dt f(t0, x0). First order; for comparison."""

    def __init__(self, order: int) -> None:
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        self._order = order
        self._xd = np.zeros(order)

    @property
    def order(self) -> int:
        return self._order

    def step(
        self,
        t0: float,
        dt: float,
        x0: np.ndarray,
        system: DifferentialSystem,
        out: np.ndarray | None = None,
    ) -> tuple[np.ndarray, float]:
        xd = self._xd
        xd[:] = system.derivatives(t0, x0)
        xd *= dt
        if out is None:
            out = np.empty(self._order)
        np.add(x0, xd, out=out)
        return out, t0 + dt
