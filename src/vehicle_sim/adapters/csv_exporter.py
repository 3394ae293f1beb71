# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Writes one row per output time. External dependencies (csv, file I/O)
are confined to this adapter.
"""
import csv
import logging

from vehicle_sim.ports.export import TrajectoryExporter
from vehicle_sim.domain.propagation import PropagationResult

logger = logging.getLogger(__name__)

_STATE_LABELS = ['x', 'y', 'z', 'vx', 'vy', 'vz']
_ATTITUDE_LABELS = ['q0', 'q1', 'q2', 'q3', 'wx', 'wy', 'wz']


def _header(state_length: int) -> list[str]:
    if state_length == len(_STATE_LABELS):
        return ['t'] + _STATE_LABELS
    if state_length == len(_STATE_LABELS) + len(_ATTITUDE_LABELS):
        return ['t'] + _STATE_LABELS + _ATTITUDE_LABELS
    return ['t'] + [f'x{i}' for i in range(state_length)]


class CsvTrajectoryExporter(TrajectoryExporter):
    """Exports propagation samples as t plus one column per state element."""

    def export(self, result: PropagationResult, path: str) -> int:
        if not result.samples:
            logger.warning("Propagation result has no samples; writing header only")
        state_length = len(result.samples[0].state) if result.samples else 6

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_header(state_length))
            for sample in result.samples:
                writer.writerow(
                    [f'{sample.time:.9g}'] + [f'{v:.15e}' for v in sample.state]
                )

        return len(result.samples)
