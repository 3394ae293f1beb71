# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Vehicle Sim

Truncated spherical harmonic gravity (potential and acceleration) over
unnormalized associated Legendre functions, a WGS 84 / EGM96 Earth
reference, fixed-step integrators and output-interval step scheduling
for propagating vehicles about a rotating central body.
"""

from vehicle_sim.domain.legendre import AssociatedLegendre, alf_sin_x
from vehicle_sim.domain.harmonic_coefficients import SphericalHarmonicCoefficients
from vehicle_sim.domain.spherical import (
    spherical_to_cartesian,
    cartesian_to_spherical,
)
from vehicle_sim.domain.gravity_field import (
    DegreeOutOfRangeError,
    GravityField,
    GravitationalAcceleration,
)
from vehicle_sim.domain.central_body import (
    EGM96_COEFFICIENTS,
    LengthTimeUnits,
    WGS84EGM96Reference,
)
from vehicle_sim.domain.integrators import RK4, Euler
from vehicle_sim.domain.model_stepper import ModelStepper
from vehicle_sim.domain.root_finding import NewtonRaphson, NonConvergenceError
from vehicle_sim.domain.rotating_body import RotatingBody, RotatingCentralBody
from vehicle_sim.domain.vehicle import PointMassVehicle, RigidBodyVehicle
from vehicle_sim.domain.propagation import (
    PropagationConfig,
    PropagationResult,
    TrajectorySample,
    propagate,
)

__all__ = [
    "AssociatedLegendre",
    "alf_sin_x",
    "SphericalHarmonicCoefficients",
    "spherical_to_cartesian",
    "cartesian_to_spherical",
    "DegreeOutOfRangeError",
    "GravityField",
    "GravitationalAcceleration",
    "EGM96_COEFFICIENTS",
    "LengthTimeUnits",
    "WGS84EGM96Reference",
    "RK4",
    "Euler",
    "ModelStepper",
    "NewtonRaphson",
    "NonConvergenceError",
    "RotatingBody",
    "RotatingCentralBody",
    "PointMassVehicle",
    "RigidBodyVehicle",
    "PropagationConfig",
    "PropagationResult",
    "TrajectorySample",
    "propagate",
]
