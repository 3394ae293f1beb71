# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Unnormalized associated Legendre functions of sin(latitude).

P_lm(sin φ) where φ is the latitude (elevation above the x-y plane).
Equivalent to P_lm(cos θ) with θ the colatitude.

Reference: Vallado, "Fundamentals of Astrodynamics and Applications",
           Sec. 8.6 (unnormalized recursion).
"""

import math

import numpy as np


class AssociatedLegendre:
    """Recursive evaluator for P_lm(sin φ), 0 <= m <= l <= N.

    The table is a private workspace sized once at construction and
    overwritten by every set() call. One instance per model/thread.
    get(l, l + 1) is 0, which the latitude partial relies on.
    """

    def __init__(self, degree_order: int) -> None:
        self._n = degree_order if degree_order > 1 else 1
        self._alf = np.zeros((self._n + 1, self._n + 1))

    @property
    def max_degree(self) -> int:
        return self._n

    @property
    def max_order(self) -> int:
        return self._n

    def set(self, lat: float) -> None:
        """Regenerate the table for latitude ``lat`` (rad)."""
        self.set_sin_cos(math.sin(lat), math.cos(lat))

    def set_sin_cos(self, sin_lat: float, cos_lat: float) -> None:
        """Regenerate the table from precomputed sin/cos of latitude."""
        alf = self._alf
        n = self._n

        alf[0, 0] = 1.0
        alf[1, 0] = sin_lat
        alf[1, 1] = cos_lat

        for l in range(2, n + 1):
            two_l_m1 = 2.0 * l - 1.0
            # Zonal
            alf[l, 0] = (two_l_m1 * sin_lat * alf[l - 1, 0]
                         - (l - 1.0) * alf[l - 2, 0]) / l
            # Tesseral; P_{l-2,m} vanishes for m > l-2
            for m in range(1, l):
                lower = alf[l - 2, m] if m <= l - 2 else 0.0
                alf[l, m] = lower + two_l_m1 * cos_lat * alf[l - 1, m - 1]
            # Sectorial
            alf[l, l] = two_l_m1 * cos_lat * alf[l - 1, l - 1]

    def get(self, degree: int, order: int) -> float:
        """P_lm from the last set() call; 0 for m < 0, m > l or l > N."""
        if order < 0 or order > degree or degree > self._n:
            return 0.0
        return float(self._alf[degree, order])


def alf_sin_x(x: float, degree: int, order: int) -> float:
    """Closed-form P_lm(sin x) for l <= 4, 0 otherwise.

    Independent of the recursion, for verification.
    """
    sx = math.sin(x)
    cx = math.cos(x)

    if degree == 0:
        return 1.0 if order == 0 else 0.0
    if degree == 1:
        return {0: sx, 1: cx}.get(order, 0.0)
    if degree == 2:
        return {
            0: 0.5 * (3.0 * sx * sx - 1.0),
            1: 3.0 * sx * cx,
            2: 3.0 * cx * cx,
        }.get(order, 0.0)
    if degree == 3:
        return {
            0: 0.5 * sx * (5.0 * sx * sx - 3.0),
            1: 0.5 * cx * (15.0 * sx * sx - 3.0),
            2: 15.0 * cx * cx * sx,
            3: 15.0 * cx * cx * cx,
        }.get(order, 0.0)
    if degree == 4:
        return {
            0: (35.0 * sx ** 4 - 30.0 * sx * sx + 3.0) / 8.0,
            1: 2.5 * cx * sx * (7.0 * sx * sx - 3.0),
            2: 7.5 * cx * cx * (7.0 * sx * sx - 1.0),
            3: 105.0 * cx ** 3 * sx,
            4: 105.0 * cx ** 4,
        }.get(order, 0.0)
    return 0.0
