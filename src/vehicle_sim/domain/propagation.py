# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fixed-interval propagation runs.

Drives a model through a ModelStepper once per output interval and
records the state at every output time. PropagationConfig is the
caller-side contract for the scheduler: it rejects the non-positive
step sizes that ModelStepper itself never checks.
"""

import logging
from dataclasses import dataclass

from vehicle_sim.domain.model_stepper import ModelStepper
from vehicle_sim.ports import PropagatedModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropagationConfig:
    """Step sizes and output count for a propagation run."""
    dt: float = 1.0
    odt: float = 1.0
    num_outputs: int = 1
    degree: int | None = None

    def __post_init__(self) -> None:
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not self.odt > 0.0:
            raise ValueError(f"odt must be positive, got {self.odt}")
        if self.num_outputs < 0:
            raise ValueError(f"num_outputs must be >= 0, got {self.num_outputs}")
        if self.degree is not None and self.degree < 0:
            raise ValueError(f"degree must be >= 0, got {self.degree}")

    @property
    def duration(self) -> float:
        return self.odt * self.num_outputs


@dataclass(frozen=True)
class TrajectorySample:
    """Model time and state at one output time."""
    time: float
    state: tuple[float, ...]


@dataclass(frozen=True)
class PropagationResult:
    """Samples from the initial state through the last output."""
    samples: tuple[TrajectorySample, ...]
    config: PropagationConfig
    integration_steps: int


def _sample(model: PropagatedModel) -> TrajectorySample:
    return TrajectorySample(
        time=float(model.time),
        state=tuple(float(v) for v in model.state),
    )


def propagate(
    model: PropagatedModel,
    config: PropagationConfig,
    stepper: ModelStepper | None = None,
) -> PropagationResult:
    """Advance ``model`` config.num_outputs output intervals.

    Args:
        model: Any Steppable exposing ``time`` and ``state``.
        config: Step sizes and output count.
        stepper: Scheduler to reuse; one is built from config otherwise.
            A supplied stepper is reconfigured to config's odt, then dt.

    Returns:
        PropagationResult with num_outputs + 1 samples, the first being
        the initial state.
    """
    if stepper is None:
        stepper = ModelStepper(config.dt, config.odt)
    else:
        stepper.odt = config.odt
        stepper.dt = config.dt

    logger.debug(
        "Propagating %d outputs: dt=%g, odt=%g",
        config.num_outputs, stepper.dt, stepper.odt,
    )

    samples = [_sample(model)]
    integration_steps = 0
    for _ in range(config.num_outputs):
        integration_steps += stepper.stepper(model)
        samples.append(_sample(model))

    logger.debug(
        "Propagation finished at t=%g after %d integration steps",
        samples[-1].time, integration_steps,
    )
    return PropagationResult(
        samples=tuple(samples),
        config=config,
        integration_steps=integration_steps,
    )
