# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for trajectory export.

Adapters implement this to write propagation results in various formats.
"""
from typing import Protocol, runtime_checkable

from vehicle_sim.domain.propagation import PropagationResult


@runtime_checkable
class TrajectoryExporter(Protocol):
    """Port for exporting propagated trajectories to file."""

    def export(self, result: PropagationResult, path: str) -> int:
        """
        Export every sample of a propagation run.

        Args:
            result: Propagation run to write.
            path: Output file path.

        Returns:
            Number of samples exported.
        """
        ...
