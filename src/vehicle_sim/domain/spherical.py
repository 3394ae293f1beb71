# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Spherical <-> Cartesian position conversions.

Latitude is measured from the x-y plane (elevation), longitude from the
+x axis toward +y. Same body-fixed frame on both sides.
"""

import math

import numpy as np


def spherical_to_cartesian(r: float, lat: float, lon: float) -> np.ndarray:
    """(r, lat, lon) -> [x, y, z]."""
    clat = math.cos(lat)
    return np.array([
        r * clat * math.cos(lon),
        r * clat * math.sin(lon),
        r * math.sin(lat),
    ])


def cartesian_to_spherical(
    position: tuple[float, float, float] | np.ndarray,
) -> tuple[float, float, float]:
    """[x, y, z] -> (r, lat, lon).

    lat = asin(z/r), lon = atan2(y, x). Undefined for r = 0.
    """
    x, y, z = (float(v) for v in position)
    r = math.sqrt(x * x + y * y + z * z)
    return r, math.asin(z / r), math.atan2(y, x)
