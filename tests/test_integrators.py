# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for fixed-step integrators (integrators.py)."""

import math

import numpy as np
import pytest

from vehicle_sim.domain.integrators import RK4, Euler
from vehicle_sim.ports import DifferentialSystem, Integrator


class Exponential:
    """dx/dt = x"""

    order = 1

    def derivatives(self, t, x):
        return np.array(x)


class Cubic:
    """dx/dt = 3t², exact solution t³."""

    order = 1

    def derivatives(self, t, x):
        return np.array([3.0 * t * t])


class Oscillator:
    """x'' = -x as a first order system."""

    order = 2

    def __init__(self):
        self.calls = []

    def derivatives(self, t, x):
        self.calls.append(t)
        return np.array([x[1], -x[0]])


def _integrate(integrator, system, x0, dt, steps, t0=0.0):
    x = np.array(x0, dtype=float)
    t = t0
    for _ in range(steps):
        x, t = integrator.step(t, dt, x, system)
    return x, t


class TestRK4Accuracy:

    def test_exponential_reaches_e(self):
        x, t = _integrate(RK4(1), Exponential(), [1.0], 0.1, 10)
        assert t == pytest.approx(1.0)
        assert abs(x[0] - math.e) / math.e < 1e-5

    def test_cubic_in_time_is_exact(self):
        x, t = _integrate(RK4(1), Cubic(), [0.0], 0.5, 4)
        assert x[0] == pytest.approx(8.0, rel=1e-14)

    def test_oscillator_one_period(self):
        steps = 200
        x, _ = _integrate(RK4(2), Oscillator(), [1.0, 0.0], 2.0 * math.pi / steps, steps)
        np.testing.assert_allclose(x, [1.0, 0.0], atol=1e-6)

    def test_fourth_order_convergence(self):
        """Halving dt cuts the error by about 16."""
        errors = []
        for steps in (10, 20):
            x, _ = _integrate(RK4(1), Exponential(), [1.0], 1.0 / steps, steps)
            errors.append(abs(x[0] - math.e))
        assert errors[0] / errors[1] == pytest.approx(16.0, rel=0.1)


class TestRK4Contract:

    def test_returned_time(self):
        _, t1 = RK4(1).step(2.5, 0.25, np.array([1.0]), Exponential())
        assert t1 == 2.75

    def test_stage_times(self):
        system = Oscillator()
        RK4(2).step(1.0, 0.5, np.array([1.0, 0.0]), system)
        assert system.calls == [1.0, 1.25, 1.25, 1.5]

    def test_input_not_modified(self):
        x0 = np.array([1.0, 0.5])
        RK4(2).step(0.0, 0.1, x0, Oscillator())
        np.testing.assert_array_equal(x0, [1.0, 0.5])

    def test_out_may_alias_input(self):
        rk4 = RK4(2)
        separate, _ = rk4.step(0.0, 0.1, np.array([1.0, 0.5]), Oscillator())
        x = np.array([1.0, 0.5])
        aliased, _ = rk4.step(0.0, 0.1, x, Oscillator(), out=x)
        assert aliased is x
        np.testing.assert_array_equal(aliased, separate)

    def test_new_array_without_out(self):
        x0 = np.array([1.0])
        x1, _ = RK4(1).step(0.0, 0.1, x0, Exponential())
        assert x1 is not x0

    def test_negative_step_runs_backward(self):
        rk4 = RK4(1)
        x1, t1 = rk4.step(0.0, 0.1, np.array([1.0]), Exponential())
        x0, t0 = rk4.step(t1, -0.1, x1, Exponential())
        assert t0 == pytest.approx(0.0)
        assert x0[0] == pytest.approx(1.0, rel=1e-7)

    def test_invalid_order(self):
        with pytest.raises(ValueError, match="order"):
            RK4(0)

    def test_order_property(self):
        assert RK4(6).order == 6


class TestEuler:

    def test_single_step(self):
        x1, t1 = Euler(1).step(0.0, 0.1, np.array([1.0]), Exponential())
        assert x1[0] == pytest.approx(1.1)
        assert t1 == pytest.approx(0.1)

    def test_first_order_accuracy(self):
        x, _ = _integrate(Euler(1), Exponential(), [1.0], 0.1, 10)
        assert x[0] == pytest.approx(1.1 ** 10)

    def test_less_accurate_than_rk4(self):
        steps = 100
        dt = 2.0 * math.pi / steps
        x_euler, _ = _integrate(Euler(2), Oscillator(), [1.0, 0.0], dt, steps)
        x_rk4, _ = _integrate(RK4(2), Oscillator(), [1.0, 0.0], dt, steps)
        assert np.linalg.norm(x_euler - [1.0, 0.0]) > 100 * np.linalg.norm(x_rk4 - [1.0, 0.0])

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            Euler(-1)


class TestProtocols:

    def test_integrators_satisfy_port(self):
        assert isinstance(RK4(1), Integrator)
        assert isinstance(Euler(1), Integrator)

    def test_systems_satisfy_port(self):
        assert isinstance(Exponential(), DifferentialSystem)
        assert isinstance(Oscillator(), DifferentialSystem)
