# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for unnormalized associated Legendre functions (legendre.py)."""

import math

import pytest

from vehicle_sim.domain.legendre import AssociatedLegendre, alf_sin_x


LATITUDES = [-1.2, -0.7, -0.1, 0.0, 0.3, 0.8734, 1.5]


class TestRecursionAgainstClosedForm:

    @pytest.mark.parametrize("lat", LATITUDES)
    def test_all_terms_to_degree_4(self, lat):
        alf = AssociatedLegendre(4)
        alf.set(lat)
        for l in range(5):
            for m in range(l + 1):
                expected = alf_sin_x(lat, l, m)
                assert alf.get(l, m) == pytest.approx(expected, rel=1e-12, abs=1e-12), (
                    f"P({l},{m}) at lat={lat}"
                )

    def test_set_sin_cos_matches_set(self):
        lat = 0.61
        a = AssociatedLegendre(4)
        b = AssociatedLegendre(4)
        a.set(lat)
        b.set_sin_cos(math.sin(lat), math.cos(lat))
        for l in range(5):
            for m in range(l + 1):
                assert a.get(l, m) == b.get(l, m)

    def test_equator_zonal_values(self):
        """P_l0(0): 1, 0, -1/2, 0, 3/8."""
        alf = AssociatedLegendre(4)
        alf.set(0.0)
        assert alf.get(0, 0) == 1.0
        assert alf.get(1, 0) == 0.0
        assert alf.get(2, 0) == pytest.approx(-0.5)
        assert alf.get(3, 0) == pytest.approx(0.0, abs=1e-15)
        assert alf.get(4, 0) == pytest.approx(0.375)

    def test_pole_sectorials_vanish(self):
        alf = AssociatedLegendre(6)
        alf.set(math.pi / 2)
        for l in range(1, 7):
            assert alf.get(l, l) == pytest.approx(0.0, abs=1e-12)
            assert alf.get(l, 0) == pytest.approx(1.0)

    def test_higher_degree_sectorial(self):
        """P_ll = (2l-1)!! cos^l."""
        lat = 0.4
        alf = AssociatedLegendre(8)
        alf.set(lat)
        double_factorial = 1.0
        for l in range(1, 9):
            double_factorial *= 2 * l - 1
            assert alf.get(l, l) == pytest.approx(
                double_factorial * math.cos(lat) ** l, rel=1e-12,
            )


class TestTableBounds:

    def test_order_above_degree_is_zero(self):
        alf = AssociatedLegendre(4)
        alf.set(0.3)
        for l in range(5):
            assert alf.get(l, l + 1) == 0.0

    def test_negative_order_is_zero(self):
        alf = AssociatedLegendre(4)
        alf.set(0.3)
        assert alf.get(2, -1) == 0.0

    def test_degree_beyond_table_is_zero(self):
        alf = AssociatedLegendre(3)
        alf.set(0.3)
        assert alf.get(4, 0) == 0.0

    def test_minimum_table_size(self):
        """Degree 0 still holds P_10/P_11, which set() always writes."""
        alf = AssociatedLegendre(0)
        assert alf.max_degree == 1
        assert alf.max_order == 1
        alf.set(0.2)
        assert alf.get(1, 1) == pytest.approx(math.cos(0.2))

    def test_set_overwrites_previous_latitude(self):
        alf = AssociatedLegendre(4)
        alf.set(1.0)
        alf.set(-0.25)
        assert alf.get(3, 2) == pytest.approx(alf_sin_x(-0.25, 3, 2))


class TestClosedForm:

    def test_out_of_range_degree_is_zero(self):
        assert alf_sin_x(0.3, 5, 0) == 0.0

    def test_order_above_degree_is_zero(self):
        assert alf_sin_x(0.3, 2, 3) == 0.0
        assert alf_sin_x(0.3, 0, 1) == 0.0
