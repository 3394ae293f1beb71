# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Unnormalized spherical harmonic coefficient tables.

Triangular storage indexed (l, m), 0 <= m <= l <= N, 0-based.
Degree 0 and 1 terms are always zero: the point-mass term is carried
by gm/r, and the dipole vanishes with the origin at the center of mass.
"""

from dataclasses import dataclass
from typing import Mapping, Sequence

import numpy as np


def triangular_index(l: int, m: int) -> int:
    """Triangular index: maps (l, m) to flat array position."""
    return l * (l + 1) // 2 + m


@dataclass(frozen=True)
class SphericalHarmonicCoefficients:
    """Immutable C_lm / S_lm table in flat triangular layout.

    Length of ``c_lm`` and ``s_lm`` is (N+1)(N+2)/2.
    """

    degree_order: int
    c_lm: tuple[float, ...]
    s_lm: tuple[float, ...]

    def __post_init__(self) -> None:
        if self.degree_order < 0:
            raise ValueError(f"degree_order must be >= 0, got {self.degree_order}")
        size = (self.degree_order + 1) * (self.degree_order + 2) // 2
        if len(self.c_lm) != size or len(self.s_lm) != size:
            raise ValueError(
                f"degree_order {self.degree_order} needs {size} coefficients, "
                f"got {len(self.c_lm)} cosine and {len(self.s_lm)} sine"
            )
        for l in range(min(self.degree_order, 1) + 1):
            for m in range(l + 1):
                idx = triangular_index(l, m)
                if self.c_lm[idx] != 0.0 or self.s_lm[idx] != 0.0:
                    raise ValueError(
                        f"degree {l} coefficients must be zero, got "
                        f"C={self.c_lm[idx]}, S={self.s_lm[idx]} at ({l}, {m})"
                    )
        for l in range(self.degree_order + 1):
            if self.s_lm[triangular_index(l, 0)] != 0.0:
                raise ValueError(f"S({l}, 0) is undefined and must be zero")

    @classmethod
    def from_dense(
        cls,
        c: Sequence[Sequence[float]] | np.ndarray,
        s: Sequence[Sequence[float]] | np.ndarray,
    ) -> "SphericalHarmonicCoefficients":
        """Build from square (N+1)x(N+1) matrices; the lower triangle is used."""
        c_arr = np.asarray(c, dtype=np.float64)
        s_arr = np.asarray(s, dtype=np.float64)
        if c_arr.ndim != 2 or c_arr.shape[0] != c_arr.shape[1]:
            raise ValueError(f"cosine table must be square, got shape {c_arr.shape}")
        if s_arr.shape != c_arr.shape:
            raise ValueError(
                f"sine table shape {s_arr.shape} differs from cosine {c_arr.shape}"
            )
        n = c_arr.shape[0] - 1
        c_flat = [float(c_arr[l, m]) for l in range(n + 1) for m in range(l + 1)]
        s_flat = [float(s_arr[l, m]) for l in range(n + 1) for m in range(l + 1)]
        return cls(degree_order=n, c_lm=tuple(c_flat), s_lm=tuple(s_flat))

    @classmethod
    def from_mapping(
        cls,
        coefficients: Mapping[tuple[int, int], tuple[float, float]],
        degree_order: int | None = None,
    ) -> "SphericalHarmonicCoefficients":
        """Build from ``{(l, m): (C_lm, S_lm)}``; missing terms are zero.

        ``degree_order`` defaults to the highest degree present.
        """
        if degree_order is None:
            degree_order = max((l for l, _ in coefficients), default=0)
        size = (degree_order + 1) * (degree_order + 2) // 2
        c_flat = [0.0] * size
        s_flat = [0.0] * size
        for (l, m), (c, s) in coefficients.items():
            if m < 0 or m > l:
                raise ValueError(f"order must satisfy 0 <= m <= l, got ({l}, {m})")
            if l > degree_order:
                continue
            idx = triangular_index(l, m)
            c_flat[idx] = float(c)
            s_flat[idx] = float(s)
        return cls(degree_order=degree_order, c_lm=tuple(c_flat), s_lm=tuple(s_flat))

    def c(self, degree: int, order: int) -> float:
        """C_lm, or 0 outside the table."""
        if order < 0 or order > degree or degree > self.degree_order:
            return 0.0
        return self.c_lm[triangular_index(degree, order)]

    def s(self, degree: int, order: int) -> float:
        """S_lm, or 0 outside the table."""
        if order < 0 or order > degree or degree > self.degree_order:
            return 0.0
        return self.s_lm[triangular_index(degree, order)]

    def cos_matrix(self, degree: int, order: int) -> np.ndarray:
        """Dense (degree+1)x(order+1) cosine matrix, zero-filled past N."""
        return self._dense(self.c, degree, order)

    def sin_matrix(self, degree: int, order: int) -> np.ndarray:
        """Dense (degree+1)x(order+1) sine matrix, zero-filled past N."""
        return self._dense(self.s, degree, order)

    @staticmethod
    def _dense(getter, degree: int, order: int) -> np.ndarray:
        out = np.zeros((degree + 1, order + 1))
        for l in range(degree + 1):
            for m in range(min(l, order) + 1):
                out[l, m] = getter(l, m)
        return out
