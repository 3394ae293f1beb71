# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for CSV trajectory export (csv_exporter.py)."""

import csv

import pytest

from vehicle_sim.adapters.csv_exporter import CsvTrajectoryExporter
from vehicle_sim.domain.propagation import (
    PropagationConfig,
    PropagationResult,
    TrajectorySample,
)
from vehicle_sim.ports.export import TrajectoryExporter


def _result(samples):
    return PropagationResult(
        samples=tuple(samples),
        config=PropagationConfig(dt=10.0, odt=60.0, num_outputs=max(len(samples) - 1, 0)),
        integration_steps=6 * max(len(samples) - 1, 0),
    )


@pytest.fixture
def result():
    return _result([
        TrajectorySample(0.0, (6878137.0, 0.0, 0.0, 0.0, 7612.6, 0.0)),
        TrajectorySample(60.0, (6865000.5, 456000.25, 12.0, -505.0, 7595.5, 1.5)),
    ])


class TestCsvTrajectoryExporter:

    def test_protocol_compliance(self):
        assert isinstance(CsvTrajectoryExporter(), TrajectoryExporter)

    def test_returns_sample_count(self, tmp_path, result):
        path = str(tmp_path / "track.csv")
        assert CsvTrajectoryExporter().export(result, path) == 2

    def test_header_and_rows(self, tmp_path, result):
        path = tmp_path / "track.csv"
        CsvTrajectoryExporter().export(result, str(path))
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert rows[0] == ['t', 'x', 'y', 'z', 'vx', 'vy', 'vz']
        assert len(rows) == 3
        assert float(rows[2][0]) == 60.0
        assert float(rows[2][1]) == 6865000.5
        assert float(rows[2][5]) == 7595.5

    def test_values_round_trip(self, tmp_path, result):
        path = tmp_path / "track.csv"
        CsvTrajectoryExporter().export(result, str(path))
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))[1:]
        for row, sample in zip(rows, result.samples):
            assert tuple(float(v) for v in row[1:]) == pytest.approx(sample.state, rel=1e-14)

    def test_generic_state_header(self, tmp_path):
        path = tmp_path / "clock.csv"
        CsvTrajectoryExporter().export(_result([TrajectorySample(0.0, (1.0, 2.0))]), str(path))
        with open(path, newline='', encoding='utf-8') as f:
            header = next(csv.reader(f))
        assert header == ['t', 'x0', 'x1']

    def test_rigid_body_state_header(self, tmp_path):
        path = tmp_path / "attitude.csv"
        state = (7.0e6, 0.0, 0.0, 0.0, 7.5e3, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.1)
        CsvTrajectoryExporter().export(_result([TrajectorySample(0.0, state)]), str(path))
        with open(path, newline='', encoding='utf-8') as f:
            header = next(csv.reader(f))
        assert header == [
            't', 'x', 'y', 'z', 'vx', 'vy', 'vz',
            'q0', 'q1', 'q2', 'q3', 'wx', 'wy', 'wz',
        ]

    def test_empty_result_writes_header(self, tmp_path, caplog):
        path = tmp_path / "empty.csv"
        count = CsvTrajectoryExporter().export(_result([]), str(path))
        assert count == 0
        assert path.read_text(encoding='utf-8').strip() == 't,x,y,z,vx,vy,vz'
        assert "no samples" in caplog.text
