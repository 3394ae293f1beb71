# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Earth reference: WGS 84 ellipsoid with the EGM96 geopotential to 4x4.

WGS 84 defining parameters give the ellipsoid shape and rotation rate;
EGM96 gives GM, the gravity reference radius and the unnormalized
coefficients. Values are available in meters/seconds or in Earth
radii/minutes (ER = WGS 84 semi-major axis).
"""
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from vehicle_sim.domain.gravity_field import GravityField
from vehicle_sim.domain.harmonic_coefficients import SphericalHarmonicCoefficients


class LengthTimeUnits(Enum):
    """Distance/time unit pair for central body constants."""
    METERS_SECONDS = "m_s"
    EARTH_RADII_MINUTES = "er_min"


# --- EGM96 unnormalized coefficients to degree/order 4 ---
# Format: _EGM96_CS[(l, m)] = (C_lm, S_lm); C_l0 = -J_l.
_EGM96_CS: dict[tuple[int, int], tuple[float, float]] = {
    (2, 0): (-1.08262668355e-3, 0.0),        # -J2
    (2, 1): (-2.41400000000e-10, 1.54310000000e-9),
    (2, 2): (1.57446037456e-6, -9.03803806639e-7),
    (3, 0): (2.53265648533e-6, 0.0),         # -J3
    (3, 1): (2.19263852917e-6, 2.68424890397e-7),
    (3, 2): (3.08989206881e-7, -2.11437612437e-7),
    (3, 3): (1.00548778064e-7, 1.97222559006e-7),
    (4, 0): (1.61962159137e-6, 0.0),         # -J4
    (4, 1): (-5.08799360404e-7, -4.49144872839e-7),
    (4, 2): (7.84175859844e-8, 1.48177868296e-7),
    (4, 3): (5.92099402629e-8, -1.20077667634e-8),
    (4, 4): (-3.98407411766e-9, 6.52571425370e-9),
}

_DEGREE_ORDER = 4

# Meters and seconds
GM_M3_S2 = 3986004.415e8          # EGM96 gravitational parameter
GRAVITY_RADIUS_M = 6378136.3      # EGM96 reference radius
ER_M = 6378137.0                  # WGS 84 semi-major axis
FLATTENING = 1.0 / 298.257223563  # WGS 84 flattening
OMEGA_RAD_S = 7.292115e-5         # WGS 84 rotation rate

# Earth radii and minutes
GM_ER3_MIN2 = (GM_M3_S2 / (ER_M * ER_M * ER_M)) * 60.0 * 60.0
GRAVITY_RADIUS_ER = GRAVITY_RADIUS_M / ER_M
OMEGA_RAD_MIN = OMEGA_RAD_S * 60.0

EGM96_COEFFICIENTS = SphericalHarmonicCoefficients.from_mapping(
    _EGM96_CS, degree_order=_DEGREE_ORDER,
)


@dataclass(frozen=True)
class WGS84EGM96Reference:
    """WGS 84 / EGM96 Earth constants. Implements CentralBodyReference."""

    units: LengthTimeUnits = LengthTimeUnits.METERS_SECONDS

    def with_units(self, units: LengthTimeUnits) -> "WGS84EGM96Reference":
        """Same reference expressed in ``units``."""
        return replace(self, units=units)

    @property
    def _metric(self) -> bool:
        return self.units is LengthTimeUnits.METERS_SECONDS

    @property
    def meters_per_du(self) -> float:
        return 1.0 if self._metric else ER_M

    @property
    def seconds_per_tu(self) -> float:
        return 1.0 if self._metric else 60.0

    @property
    def gravitational_parameter(self) -> float:
        return GM_M3_S2 if self._metric else GM_ER3_MIN2

    @property
    def gravitational_reference_radius(self) -> float:
        """EGM96 scaling radius; not the ellipsoid semi-major axis."""
        return GRAVITY_RADIUS_M if self._metric else GRAVITY_RADIUS_ER

    @property
    def j2(self) -> float:
        return -EGM96_COEFFICIENTS.c(2, 0)

    @property
    def ellipsoid_semi_major(self) -> float:
        """Used for geodetic conversions and to define ER."""
        return ER_M if self._metric else 1.0

    @property
    def ellipsoid_flattening(self) -> float:
        return FLATTENING

    @property
    def angular_velocity(self) -> float:
        return OMEGA_RAD_S if self._metric else OMEGA_RAD_MIN

    @property
    def max_degree(self) -> int:
        return _DEGREE_ORDER

    @property
    def max_order(self) -> int:
        return _DEGREE_ORDER

    def unnormalized_cos_coeff(self, degree: int, order: int) -> np.ndarray:
        """
        Matrix of unnormalized cosine coefficients.

        The returned matrix is always (degree+1)x(order+1); entries past the
        available 4x4 data are zero.
        """
        return EGM96_COEFFICIENTS.cos_matrix(degree, order)

    def unnormalized_sin_coeff(self, degree: int, order: int) -> np.ndarray:
        """Sine counterpart of unnormalized_cos_coeff()."""
        return EGM96_COEFFICIENTS.sin_matrix(degree, order)

    def gravity_field(
        self,
        degree: int | None = None,
        strict_degree: bool = False,
    ) -> GravityField:
        """GravityField in this reference's units, truncated to ``degree``.

        Degrees above the available data are zero-filled, which leaves
        the field unchanged.
        """
        n = self.max_degree if degree is None else degree
        coefficients = SphericalHarmonicCoefficients.from_dense(
            self.unnormalized_cos_coeff(n, n),
            self.unnormalized_sin_coeff(n, n),
        )
        return GravityField(
            gm=self.gravitational_parameter,
            re=self.gravitational_reference_radius,
            coefficients=coefficients,
            strict_degree=strict_degree,
        )
