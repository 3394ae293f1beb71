# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Newton-Raphson root finding for functions of one variable."""

import math

from vehicle_sim.ports import ScalarFunction

MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 0.01


class NonConvergenceError(RuntimeError):
    """Root finder failed to meet its tolerance."""


class NewtonRaphson:
    """x_{k+1} = x_k - f(x_k) / f'(x_k) until |x_{k+1} - x_k| <= tolerance.

    A tolerance <= 0 selects DEFAULT_TOLERANCE. Implements RootFinder.
    """

    def __init__(
        self,
        f: ScalarFunction,
        dfdx: ScalarFunction,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        self._f = f
        self._dfdx = dfdx
        self._tolerance = tolerance if tolerance > 0.0 else DEFAULT_TOLERANCE

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def solve(self, guess: float) -> float:
        """Root of f near ``guess``.

        Raises:
            NonConvergenceError: On a NaN correction, or when the tolerance
                is not met within MAX_ITERATIONS.
        """
        x = guess
        err = 1.1 * self._tolerance
        iterations = 0
        while err > self._tolerance and iterations < MAX_ITERATIONS:
            x0 = x
            try:
                correction = self._f(x0) / self._dfdx(x0)
            except ZeroDivisionError as exc:
                raise NonConvergenceError(
                    f"zero derivative at x={x0!r}"
                ) from exc
            if math.isnan(correction):
                raise NonConvergenceError("non-convergence due to NaN")
            iterations += 1
            x = x0 - correction
            err = abs(x - x0)

        if err > self._tolerance:
            raise NonConvergenceError(
                f"non-convergence after {MAX_ITERATIONS} iterations "
                f"(last step {err:g}, tolerance {self._tolerance:g})"
            )
        return x
