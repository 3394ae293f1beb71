# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for propagation.

Dynamics models implement DifferentialSystem and Steppable; integrators
implement Integrator. The contracts are structural, so any object with
the right members plugs in.
"""
from typing import Callable, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class DifferentialSystem(Protocol):
    """Port for a system of first order differential equations."""

    @property
    def order(self) -> int:
        """Number of first order equations (state vector length)."""
        ...

    def derivatives(self, t: float, x: np.ndarray) -> np.ndarray:
        """State derivative at time t for state x."""
        ...


@runtime_checkable
class Integrator(Protocol):
    """Port for a numeric integration method."""

    def step(
        self,
        t0: float,
        dt: float,
        x0: np.ndarray,
        system: DifferentialSystem,
        out: np.ndarray | None = None,
    ) -> tuple[np.ndarray, float]:
        """
        Advance x0 at t0 by dt.

        Args:
            t0: Epoch of x0.
            dt: Increment over which to propagate.
            x0: State at t0. Not modified unless passed as ``out``.
            system: Supplies the derivatives.
            out: Optional destination for the new state; may alias x0.

        Returns:
            (x1, t1) with t1 = t0 + dt.
        """
        ...


@runtime_checkable
class Steppable(Protocol):
    """Port for a model that advances its own state in time."""

    def step(self, delta: float | None = None) -> None:
        """Advance by ``delta``, or by the model's default increment when None."""
        ...


@runtime_checkable
class PropagatedModel(Steppable, Protocol):
    """Port for a Steppable model whose time and state can be sampled."""

    @property
    def time(self) -> float:
        """Current model time."""
        ...

    @property
    def state(self) -> np.ndarray:
        """Copy of the current state vector."""
        ...


@runtime_checkable
class RootFinder(Protocol):
    """Port for finding roots of f(x) = 0 in one variable."""

    def solve(self, guess: float) -> float:
        """Root near ``guess``; raises NonConvergenceError on failure."""
        ...


ScalarFunction = Callable[[float], float]
