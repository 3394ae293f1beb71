# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for output-interval step scheduling (model_stepper.py)."""

import logging

import pytest

from vehicle_sim.domain.model_stepper import ROOM_FACTOR, ModelStepper
from vehicle_sim.ports import Steppable


class RecordingModel:
    """Steppable that records every increment it is given."""

    def __init__(self):
        self.deltas = []

    def step(self, delta=None):
        self.deltas.append(delta)


class TestExactCoverage:

    def test_uneven_division(self):
        stepper = ModelStepper(0.3, 1.0)
        model = RecordingModel()
        calls = stepper.stepper(model)
        assert calls == 3
        assert model.deltas[:-1] == [0.3, 0.3]
        assert model.deltas[-1] == pytest.approx(0.4)
        assert sum(model.deltas) == pytest.approx(1.0)

    def test_deltas_within_room(self):
        dt = 0.3
        model = RecordingModel()
        ModelStepper(dt, 1.0).stepper(model)
        for delta in model.deltas:
            assert 0.0 < delta <= ROOM_FACTOR * dt

    def test_even_division(self):
        model = RecordingModel()
        calls = ModelStepper(0.25, 1.0).stepper(model)
        assert calls == 4
        assert model.deltas == [0.25, 0.25, 0.25, 0.25]

    def test_short_trailing_step_merged(self):
        """1.05 with dt 0.5: the remaining 0.55 is one step, not 0.5 + 0.05."""
        model = RecordingModel()
        ModelStepper(0.5, 1.05).stepper(model)
        assert model.deltas[0] == 0.5
        assert model.deltas[1] == pytest.approx(0.55)
        assert len(model.deltas) == 2

    @pytest.mark.parametrize("dt,odt", [(0.1, 1.0), (0.7, 5.0), (3.0, 100.0), (0.013, 0.5)])
    def test_sum_equals_odt(self, dt, odt):
        model = RecordingModel()
        calls = ModelStepper(dt, odt).stepper(model)
        assert calls == len(model.deltas)
        assert sum(model.deltas) == pytest.approx(odt, rel=1e-12)
        assert all(d == dt for d in model.deltas[:-1])
        assert 0.0 < model.deltas[-1] <= ROOM_FACTOR * dt

    def test_repeated_intervals_are_identical(self):
        stepper = ModelStepper(0.3, 1.0)
        first = RecordingModel()
        second = RecordingModel()
        stepper.stepper(first)
        stepper.stepper(second)
        assert first.deltas == second.deltas


class TestAutoShrink:

    def test_constructor_shrinks_dt(self):
        stepper = ModelStepper(1.0, 0.2)
        assert stepper.dt == 0.2
        model = RecordingModel()
        assert stepper.stepper(model) == 1
        assert model.deltas == [0.2]

    def test_odt_setter_shrinks_dt(self):
        stepper = ModelStepper(1.0, 5.0)
        stepper.odt = 0.5
        assert stepper.dt == 0.5

    def test_odt_setter_keeps_smaller_dt(self):
        stepper = ModelStepper(0.1, 1.0)
        stepper.odt = 2.0
        assert stepper.dt == 0.1
        assert stepper.odt == 2.0

    def test_dt_setter_shrinks_immediately(self):
        stepper = ModelStepper(0.1, 1.0)
        stepper.dt = 2.0
        assert stepper.dt == 1.0
        assert stepper.dt <= stepper.odt
        model = RecordingModel()
        assert stepper.stepper(model) == 1
        assert model.deltas == [1.0]

    def test_dt_setter_keeps_smaller_value(self):
        stepper = ModelStepper(0.1, 1.0)
        stepper.dt = 0.25
        assert stepper.dt == 0.25

    def test_shrink_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="vehicle_sim.domain.model_stepper"):
            ModelStepper(1.0, 0.2)
        assert "using dt=0.2" in caplog.text


class TestDefaults:

    def test_unit_steps(self):
        stepper = ModelStepper()
        assert stepper.dt == 1.0
        assert stepper.odt == 1.0
        model = RecordingModel()
        assert stepper.stepper(model) == 1
        assert model.deltas == [1.0]

    def test_drives_any_steppable(self):
        stepper = ModelStepper(0.5, 1.0)
        models = [RecordingModel() for _ in range(3)]
        for model in models:
            assert isinstance(model, Steppable)
            stepper.stepper(model)
        assert all(m.deltas == [0.5, 0.5] for m in models)
