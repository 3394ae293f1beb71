# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Truncated spherical harmonic gravity: potential and acceleration.

Unnormalized zonal, sectorial and tesseral coefficients. Total field
(point mass + harmonics), not perturbation-only:

    U = gm/r * [1 + Σ_{l=2}^{deg} (re/r)^l Σ_{m=0}^{l}
                P_lm(sin φ) (C_lm cos mλ + S_lm sin mλ)]

Acceleration is ∇U, formed from ∂U/∂r, ∂U/∂φ, ∂U/∂λ and mapped to
body-fixed Cartesian axes in closed form. The x-axis passes through
φ = λ = 0 and the z-axis through φ = 90°.

The chain rule divides by cos φ and by x² + y², so positions exactly on
the polar axis are outside the domain; Python float division raises
ZeroDivisionError there. r <= 0 is likewise the caller's problem.

Reference: Vallado, "Fundamentals of Astrodynamics and Applications",
           Sec. 8.6.1.
"""

import math
from dataclasses import dataclass

import numpy as np

from vehicle_sim.domain.harmonic_coefficients import (
    SphericalHarmonicCoefficients,
    triangular_index,
)
from vehicle_sim.domain.legendre import AssociatedLegendre


class DegreeOutOfRangeError(ValueError):
    """Requested degree exceeds the model maximum under the strict policy."""


@dataclass(frozen=True)
class GravityField:
    """Immutable gravity model: gm, reference radius and C/S table.

    Safe to share across models and threads. Evaluations take an
    optional Legendre workspace; without one a fresh workspace is
    allocated per call, so nothing here is ever mutated.

    Degree requests above ``degree_order`` are clamped to it unless
    ``strict_degree`` is set, in which case DegreeOutOfRangeError is
    raised. Negative requests evaluate as degree 0 (point mass).
    """

    gm: float
    re: float
    coefficients: SphericalHarmonicCoefficients
    strict_degree: bool = False

    @property
    def degree_order(self) -> int:
        return self.coefficients.degree_order

    def acceleration(self) -> "GravitationalAcceleration":
        """New acceleration adapter with its own Legendre workspace."""
        return GravitationalAcceleration(self)

    def _resolve_degree(self, degree: int | None) -> int:
        n = self.coefficients.degree_order
        if degree is None:
            return n
        if degree > n:
            if self.strict_degree:
                raise DegreeOutOfRangeError(
                    f"degree {degree} exceeds model maximum {n}"
                )
            return n
        return max(degree, 0)

    def _workspace(self, legendre: AssociatedLegendre | None) -> AssociatedLegendre:
        if legendre is None:
            return AssociatedLegendre(self.coefficients.degree_order)
        return legendre

    def potential(
        self,
        r: float,
        lat: float,
        lon: float,
        degree: int | None = None,
        legendre: AssociatedLegendre | None = None,
    ) -> float:
        """Gravitational potential at (r, lat, lon).

        Args:
            r: Distance from the centroid (model length units).
            lat: Latitude, -pi/2 <= lat <= pi/2 (rad).
            lon: Longitude, -pi <= lon <= pi (rad).
            degree: Degree/order to evaluate; defaults to the model maximum.
            legendre: Optional caller-owned workspace.

        Returns:
            Potential in length²/time² (positive convention, U = gm/r at
            degree 0).
        """
        deg = self._resolve_degree(degree)
        alf = self._workspace(legendre)
        alf.set(lat)

        c_lm = self.coefficients.c_lm
        s_lm = self.coefficients.s_lm
        re_over_r = self.re / r
        re_over_r_l = re_over_r

        pot = 0.0
        for l in range(2, deg + 1):
            pot_l = 0.0
            for m in range(l + 1):
                m_lon = m * lon
                idx = triangular_index(l, m)
                pot_l += alf.get(l, m) * (c_lm[idx] * math.cos(m_lon)
                                          + s_lm[idx] * math.sin(m_lon))
            re_over_r_l *= re_over_r  # (re/r)^l incrementally
            pot += pot_l * re_over_r_l

        return (self.gm / r) * (1.0 + pot)

    def reference_potential(self, lat: float, lon: float) -> float:
        """Potential on the reference sphere r = re at full degree."""
        return self.potential(self.re, lat, lon)

    def potential_partials(
        self,
        r: float,
        sin_lat: float,
        cos_lat: float,
        lon: float,
        degree: int | None = None,
        legendre: AssociatedLegendre | None = None,
    ) -> tuple[float, float, float]:
        """(∂U/∂r, ∂U/∂φ, ∂U/∂λ) at the given point."""
        deg = self._resolve_degree(degree)
        alf = self._workspace(legendre)
        alf.set_sin_cos(sin_lat, cos_lat)

        c_lm = self.coefficients.c_lm
        s_lm = self.coefficients.s_lm
        re_over_r = self.re / r
        gm_over_r = self.gm / r
        re_over_r_l = re_over_r

        dudr = 0.0
        dudlat = 0.0
        dudlon = 0.0
        if deg >= 2:
            tan_lat = sin_lat / cos_lat
            for l in range(2, deg + 1):
                dudr_l = 0.0
                dudlat_l = 0.0
                dudlon_l = 0.0
                for m in range(l + 1):
                    m_lon = m * lon
                    cos_m = math.cos(m_lon)
                    sin_m = math.sin(m_lon)
                    idx = triangular_index(l, m)
                    c = c_lm[idx]
                    s = s_lm[idx]
                    p_lm = alf.get(l, m)
                    cs_term = c * cos_m + s * sin_m
                    dudr_l += p_lm * cs_term
                    dudlat_l += (alf.get(l, m + 1) - m * tan_lat * p_lm) * cs_term
                    dudlon_l += m * p_lm * (s * cos_m - c * sin_m)
                re_over_r_l *= re_over_r
                dudr += dudr_l * re_over_r_l * (l + 1)
                dudlat += dudlat_l * re_over_r_l
                dudlon += dudlon_l * re_over_r_l

        dudr = (-gm_over_r / r) * (1.0 + dudr)
        return dudr, dudlat * gm_over_r, dudlon * gm_over_r

    def cartesian_acceleration(
        self,
        r: float,
        sin_lat: float,
        cos_lat: float,
        lon: float,
        ri: float,
        rj: float,
        rk: float,
        degree: int | None = None,
        legendre: AssociatedLegendre | None = None,
    ) -> np.ndarray:
        """Body-fixed acceleration from consistent spherical + Cartesian inputs.

        (ri, rj, rk) must be the Cartesian form of (r, φ, λ); both are
        supplied so neither call path repeats the conversion.
        """
        dudr, dudlat, dudlon = self.potential_partials(
            r, sin_lat, cos_lat, lon, degree, legendre,
        )

        r2 = r * r
        dudr_over_r = dudr / r
        ri2rj2 = ri * ri + rj * rj
        rirj = math.sqrt(ri2rj2)
        dlat_term = dudr_over_r - rk * dudlat / (r2 * rirj)
        dlon_term = dudlon / ri2rj2

        return np.array([
            dlat_term * ri - dlon_term * rj,
            dlat_term * rj + dlon_term * ri,
            dudr_over_r * rk + dudlat * rirj / r2,
        ])


class GravitationalAcceleration:
    """Acceleration adapter over a shared GravityField.

    Owns a private Legendre workspace, so one adapter per model/thread.
    Every call returns a new 3-vector; nothing is cached between
    positions.
    """

    def __init__(self, field: GravityField) -> None:
        self._field = field
        self._legendre = AssociatedLegendre(field.degree_order)

    @property
    def field(self) -> GravityField:
        return self._field

    @property
    def degree_order(self) -> int:
        return self._field.degree_order

    def spherical(
        self,
        r: float,
        lat: float,
        lon: float,
        degree: int | None = None,
    ) -> np.ndarray:
        """Acceleration at spherical (r, lat, lon); output is Cartesian."""
        slat = math.sin(lat)
        clat = math.cos(lat)
        return self._field.cartesian_acceleration(
            r, slat, clat, lon,
            r * clat * math.cos(lon), r * clat * math.sin(lon), r * slat,
            degree, self._legendre,
        )

    def cartesian(
        self,
        position: tuple[float, float, float] | np.ndarray,
        degree: int | None = None,
    ) -> np.ndarray:
        """Acceleration at body-fixed Cartesian ``position``."""
        rx, ry, rz = (float(v) for v in position)
        rp2 = rx * rx + ry * ry
        r = math.sqrt(rp2 + rz * rz)
        return self._field.cartesian_acceleration(
            r, rz / r, math.sqrt(rp2) / r, math.atan2(ry, rx),
            rx, ry, rz,
            degree, self._legendre,
        )
