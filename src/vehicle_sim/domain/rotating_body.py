# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Central body spinning at a constant rate about a fixed axis.

Gravity is always evaluated from body-fixed inputs, so the field itself
needs no notion of time. Time enters only through the attitude:
rotation angle = alpha0 + omega * t, wrapped to [0, 2pi).
"""

import math

import numpy as np

from vehicle_sim.domain.gravity_field import GravitationalAcceleration, GravityField

TWO_PI = 2.0 * math.pi


class RotatingBody:
    """Constant-rate spin about a unit axis. Implements Steppable.

    step() with no argument repeats the most recent increment.
    """

    def __init__(
        self,
        angular_velocity: float = 0.0,
        alpha0: float = 0.0,
        spin_axis: tuple[float, float, float] = (0.0, 0.0, 1.0),
        t: float = 0.0,
        default_step: float = 0.0,
    ) -> None:
        axis = np.asarray(spin_axis, dtype=np.float64)
        norm = float(np.linalg.norm(axis))
        if norm == 0.0:
            raise ValueError("spin axis must be non-zero")
        self._axis = axis / norm
        self._omega = angular_velocity
        self._alpha0 = alpha0
        self._t = t
        self._delta = default_step

    @property
    def angular_velocity(self) -> float:
        return self._omega

    @angular_velocity.setter
    def angular_velocity(self, value: float) -> None:
        self._omega = value

    @property
    def spin_axis(self) -> np.ndarray:
        return self._axis.copy()

    @property
    def time(self) -> float:
        return self._t

    @time.setter
    def time(self, value: float) -> None:
        self._t = value

    def rotation_angle(self, t: float | None = None) -> float:
        """Body rotation angle at ``t`` (defaults to the current time)."""
        if t is None:
            t = self._t
        return (self._alpha0 + self._omega * t) % TWO_PI

    def body_to_inertial(self, t: float | None = None) -> np.ndarray:
        """3x3 rotation taking body-fixed vectors to inertial at ``t``.

        Rodrigues' formula about the spin axis.
        """
        angle = self.rotation_angle(t)
        c = math.cos(angle)
        s = math.sin(angle)
        kx, ky, kz = self._axis
        k_cross = np.array([
            [0.0, -kz, ky],
            [kz, 0.0, -kx],
            [-ky, kx, 0.0],
        ])
        return c * np.eye(3) + s * k_cross + (1.0 - c) * np.outer(self._axis, self._axis)

    def inertial_to_body(self, t: float | None = None) -> np.ndarray:
        return self.body_to_inertial(t).T

    def step(self, delta: float | None = None) -> None:
        if delta is None:
            delta = self._delta
        self._delta = delta
        self._t += delta


class RotatingCentralBody:
    """Rotating body with a gravity field. Implements Steppable.

    Potential and acceleration take body-fixed positions; use
    inertial_acceleration() to work in the inertial frame.
    """

    def __init__(self, body: RotatingBody, field: GravityField) -> None:
        self._body = body
        self._field = field
        self._accel = GravitationalAcceleration(field)

    @property
    def body(self) -> RotatingBody:
        return self._body

    @property
    def field(self) -> GravityField:
        return self._field

    @property
    def gm(self) -> float:
        return self._field.gm

    @property
    def re(self) -> float:
        return self._field.re

    @property
    def degree_order(self) -> int:
        return self._field.degree_order

    def potential(
        self, r: float, lat: float, lon: float, degree: int | None = None,
    ) -> float:
        return self._field.potential(r, lat, lon, degree)

    def acceleration(
        self,
        position: tuple[float, float, float] | np.ndarray,
        degree: int | None = None,
    ) -> np.ndarray:
        """Body-fixed acceleration at body-fixed ``position``."""
        return self._accel.cartesian(position, degree)

    def inertial_acceleration(
        self,
        t: float,
        position: tuple[float, float, float] | np.ndarray,
        degree: int | None = None,
    ) -> np.ndarray:
        """Inertial acceleration at inertial ``position`` and time ``t``."""
        b2i = self._body.body_to_inertial(t)
        pos_body = b2i.T @ np.asarray(position, dtype=np.float64)
        return b2i @ self._accel.cartesian(pos_body, degree)

    def step(self, delta: float | None = None) -> None:
        self._body.step(delta)
