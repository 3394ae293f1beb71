# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for central body reference constants.

A central body is modeled as an oblate spheroid (e.g. the WGS 84
ellipsoid) for shape, and a spherical harmonic expansion (e.g. EGM96)
for gravity. Values are in the implementation's distance unit (DU) and
time unit (TU).
"""
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class CentralBodyReference(Protocol):
    """Port for ellipsoid and geopotential defining parameters."""

    @property
    def meters_per_du(self) -> float:
        """Meters per internal distance unit."""
        ...

    @property
    def seconds_per_tu(self) -> float:
        """Seconds per internal time unit."""
        ...

    @property
    def gravitational_parameter(self) -> float:
        """GM, DU³/TU²."""
        ...

    @property
    def gravitational_reference_radius(self) -> float:
        """Radius the harmonic coefficients are defined against, DU."""
        ...

    @property
    def j2(self) -> float:
        """Negative of the unnormalized degree 2, order 0 coefficient."""
        ...

    @property
    def ellipsoid_semi_major(self) -> float:
        """Reference ellipsoid semi-major axis, DU."""
        ...

    @property
    def ellipsoid_flattening(self) -> float:
        """Reference ellipsoid flattening."""
        ...

    @property
    def angular_velocity(self) -> float:
        """Rotation rate, rad/TU."""
        ...

    @property
    def max_degree(self) -> int:
        ...

    @property
    def max_order(self) -> int:
        ...

    def unnormalized_cos_coeff(self, degree: int, order: int) -> np.ndarray:
        """(degree+1)x(order+1) C_lm matrix, zero past available data."""
        ...

    def unnormalized_sin_coeff(self, degree: int, order: int) -> np.ndarray:
        """(degree+1)x(order+1) S_lm matrix, zero past available data."""
        ...
