# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for trajectory export.

External dependencies (csv, file I/O) are confined to this layer.
"""
from vehicle_sim.adapters.csv_exporter import CsvTrajectoryExporter

__all__ = ["CsvTrajectoryExporter"]
