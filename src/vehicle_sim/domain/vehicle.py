# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Vehicles in a rotating body's gravity field.

PointMassVehicle state: [x, y, z, vx, vy, vz], inertial frame, origin at
the central body's center of mass. RigidBodyVehicle appends the attitude
quaternion and body rates: [..., q0, q1, q2, q3, wx, wy, wz]. Each
vehicle is its own DifferentialSystem and is Steppable so a ModelStepper
can drive it.
"""

import logging
import math
from typing import Callable

import numpy as np

from vehicle_sim.domain.attitude import (
    euler_equation,
    normalize_quaternion,
    quaternion_derivative,
    quaternion_to_matrix,
)
from vehicle_sim.domain.gravity_field import GravitationalAcceleration
from vehicle_sim.domain.integrators import RK4
from vehicle_sim.domain.rotating_body import RotatingCentralBody
from vehicle_sim.ports import Integrator

logger = logging.getLogger(__name__)

ORDER = 6
RIGID_BODY_ORDER = 13


def _check_degree(central_body: RotatingCentralBody, degree: int | None) -> None:
    if degree is not None and degree > central_body.degree_order:
        logger.warning(
            "Requested gravity degree %d exceeds model maximum %d; clamping",
            degree, central_body.degree_order,
        )


class PointMassVehicle:
    """Point mass accelerated only by central body gravity.

    Owns its integrator and gravity adapter (each with private scratch
    buffers), so one instance per thread.
    """

    def __init__(
        self,
        central_body: RotatingCentralBody,
        position: tuple[float, float, float] | np.ndarray,
        velocity: tuple[float, float, float] | np.ndarray,
        t: float = 0.0,
        degree: int | None = None,
        default_step: float = 1.0,
        integrator: Integrator | None = None,
    ) -> None:
        _check_degree(central_body, degree)
        self._central_body = central_body
        self._accel = GravitationalAcceleration(central_body.field)
        self._degree = degree
        self._delta = default_step
        self._integrator = integrator if integrator is not None else RK4(ORDER)
        self._t = t
        self._x = np.zeros(ORDER)
        self._x[:3] = position
        self._x[3:] = velocity
        self._xdot = np.zeros(ORDER)

    @classmethod
    def circular(
        cls,
        central_body: RotatingCentralBody,
        radius: float,
        inclination_rad: float = 0.0,
        **kwargs,
    ) -> "PointMassVehicle":
        """Vehicle on the +x axis with two-body circular speed.

        The velocity is tilted from +y toward +z by the inclination.
        """
        v = math.sqrt(central_body.gm / radius)
        return cls(
            central_body,
            (radius, 0.0, 0.0),
            (0.0, v * math.cos(inclination_rad), v * math.sin(inclination_rad)),
            **kwargs,
        )

    @property
    def order(self) -> int:
        return ORDER

    @property
    def time(self) -> float:
        return self._t

    @property
    def state(self) -> np.ndarray:
        return self._x.copy()

    @property
    def position(self) -> np.ndarray:
        return self._x[:3].copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._x[3:].copy()

    def set_state(self, t: float, x: np.ndarray) -> None:
        """Copy ``x`` in as the state at time ``t``."""
        self._t = t
        self._x[:] = x

    def derivatives(self, t: float, x: np.ndarray) -> np.ndarray:
        b2i = self._central_body.body.body_to_inertial(t)
        pos_body = b2i.T @ x[:3]
        accel_body = self._accel.cartesian(pos_body, self._degree)
        xdot = self._xdot
        xdot[:3] = x[3:]
        xdot[3:] = b2i @ accel_body
        return xdot

    def step(self, delta: float | None = None) -> None:
        """Integrate by ``delta`` (default: the most recent increment)."""
        if delta is None:
            delta = self._delta
        self._delta = delta
        self._x, self._t = self._integrator.step(
            self._t, delta, self._x, self, out=self._x,
        )

    def specific_energy(self) -> float:
        """v²/2 - gm/r (two-body energy, for drift checks)."""
        r = float(np.linalg.norm(self._x[:3]))
        v = float(np.linalg.norm(self._x[3:]))
        return 0.5 * v * v - self._central_body.gm / r


BodyTorque = Callable[[float, np.ndarray], np.ndarray]


class RigidBodyVehicle:
    """Six degree-of-freedom vehicle: point-mass translation plus attitude.

    Translation uses the same rotating-body gravity as PointMassVehicle.
    Rotation integrates the attitude quaternion and Euler's equations for
    principal moments ``inertia`` (kg m², body axes). ``torque`` maps
    (t, state) to a body-frame torque; None means torque-free.

    The quaternion is renormalized after every step.
    """

    def __init__(
        self,
        central_body: RotatingCentralBody,
        position: tuple[float, float, float] | np.ndarray,
        velocity: tuple[float, float, float] | np.ndarray,
        inertia: tuple[float, float, float] | np.ndarray,
        attitude: tuple[float, float, float, float] | np.ndarray = (1.0, 0.0, 0.0, 0.0),
        body_rate: tuple[float, float, float] | np.ndarray = (0.0, 0.0, 0.0),
        torque: BodyTorque | None = None,
        t: float = 0.0,
        degree: int | None = None,
        default_step: float = 0.1,
        integrator: Integrator | None = None,
    ) -> None:
        inertia = np.array(inertia, dtype=float)
        if inertia.shape != (3,):
            raise ValueError(f"inertia must have 3 principal moments, got shape {inertia.shape}")
        if np.any(inertia <= 0.0):
            raise ValueError(f"principal moments must be positive, got {inertia.tolist()}")
        _check_degree(central_body, degree)
        self._central_body = central_body
        self._accel = GravitationalAcceleration(central_body.field)
        self._degree = degree
        self._inertia = inertia
        self._torque = torque
        self._delta = default_step
        self._integrator = (
            integrator if integrator is not None else RK4(RIGID_BODY_ORDER)
        )
        self._t = t
        self._x = np.zeros(RIGID_BODY_ORDER)
        self._x[:3] = position
        self._x[3:6] = velocity
        self._x[6:10] = attitude
        self._x[10:] = body_rate
        normalize_quaternion(self._x[6:10])
        self._xdot = np.zeros(RIGID_BODY_ORDER)

    @property
    def order(self) -> int:
        return RIGID_BODY_ORDER

    @property
    def time(self) -> float:
        return self._t

    @property
    def state(self) -> np.ndarray:
        return self._x.copy()

    @property
    def position(self) -> np.ndarray:
        return self._x[:3].copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._x[3:6].copy()

    @property
    def attitude(self) -> np.ndarray:
        """Unit quaternion [q0, q1, q2, q3], body to inertial."""
        return self._x[6:10].copy()

    @property
    def body_rate(self) -> np.ndarray:
        """Angular velocity in body axes, rad/s."""
        return self._x[10:].copy()

    @property
    def inertia(self) -> np.ndarray:
        return self._inertia.copy()

    def set_state(self, t: float, x: np.ndarray) -> None:
        """Copy ``x`` in as the state at time ``t`` (quaternion renormalized)."""
        self._t = t
        self._x[:] = x
        normalize_quaternion(self._x[6:10])

    def derivatives(self, t: float, x: np.ndarray) -> np.ndarray:
        b2i = self._central_body.body.body_to_inertial(t)
        pos_body = b2i.T @ x[:3]
        accel_body = self._accel.cartesian(pos_body, self._degree)
        omega = x[10:]
        if self._torque is None:
            torque = np.zeros(3)
        else:
            torque = np.asarray(self._torque(t, x), dtype=float)
        xdot = self._xdot
        xdot[:3] = x[3:6]
        xdot[3:6] = b2i @ accel_body
        xdot[6:10] = quaternion_derivative(x[6:10], omega)
        xdot[10:] = euler_equation(omega, self._inertia, torque)
        return xdot

    def step(self, delta: float | None = None) -> None:
        """Integrate by ``delta`` (default: the most recent increment)."""
        if delta is None:
            delta = self._delta
        self._delta = delta
        self._x, self._t = self._integrator.step(
            self._t, delta, self._x, self, out=self._x,
        )
        normalize_quaternion(self._x[6:10])

    def body_to_inertial(self) -> np.ndarray:
        """Rotation matrix taking body-axis vectors to the inertial frame."""
        return quaternion_to_matrix(self._x[6:10])

    def specific_energy(self) -> float:
        """v²/2 - gm/r of the center of mass."""
        r = float(np.linalg.norm(self._x[:3]))
        v = float(np.linalg.norm(self._x[3:6]))
        return 0.5 * v * v - self._central_body.gm / r

    def rotational_energy(self) -> float:
        """½ ωᵀ J ω."""
        omega = self._x[10:]
        return 0.5 * float(np.dot(omega, self._inertia * omega))

    def angular_momentum(self) -> np.ndarray:
        """Inertial-frame angular momentum R(q) J ω."""
        return self.body_to_inertial() @ (self._inertia * self._x[10:])
