# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for gravity evaluation and vehicle propagation.

Usage:
    # Potential and acceleration at a point (WGS 84 / EGM96, 4x4)
    vehicle-sim gravity --lat 50 --lon -100 --radius 9567205.5
    vehicle-sim gravity --lat 50 --lon -100 --radius 1.5 --units er_min --degree 2

    # Circular-orbit vehicle about the rotating Earth
    vehicle-sim propagate --altitude-km 500 --dt 10 --odt 60 --num-outputs 90
    vehicle-sim propagate --inclination-deg 51.6 --export-csv track.csv
"""
import argparse
import logging
import math
import sys

from vehicle_sim.adapters.csv_exporter import CsvTrajectoryExporter
from vehicle_sim.domain.central_body import LengthTimeUnits, WGS84EGM96Reference
from vehicle_sim.domain.propagation import PropagationConfig, propagate
from vehicle_sim.domain.rotating_body import RotatingBody, RotatingCentralBody
from vehicle_sim.domain.vehicle import PointMassVehicle

logger = logging.getLogger(__name__)


def run_gravity(
    lat_deg: float,
    lon_deg: float,
    radius: float,
    degree: int | None = None,
    units: LengthTimeUnits = LengthTimeUnits.METERS_SECONDS,
) -> tuple[float, list[float]]:
    """
    Potential and body-fixed acceleration at one point.

    Returns:
        (potential, [ax, ay, az]) in the units of ``units``.
    """
    if radius <= 0.0:
        raise ValueError(f"radius must be positive, got {radius}")
    reference = WGS84EGM96Reference(units)
    field = reference.gravity_field()
    lat = math.radians(lat_deg)
    lon = math.radians(lon_deg)
    potential = field.potential(radius, lat, lon, degree)
    accel = field.acceleration().spherical(radius, lat, lon, degree)
    return potential, [float(a) for a in accel]


def build_vehicle(
    altitude_km: float,
    inclination_deg: float = 0.0,
    degree: int | None = None,
) -> PointMassVehicle:
    """Circular-orbit vehicle about the rotating WGS 84 / EGM96 Earth (m, s)."""
    reference = WGS84EGM96Reference()
    radius = reference.ellipsoid_semi_major + altitude_km * 1000.0
    if radius <= 0.0:
        raise ValueError(f"altitude {altitude_km} km is below the Earth's center")
    logger.debug("Circular orbit at r=%g m, inclination %g deg", radius, inclination_deg)
    earth = RotatingCentralBody(
        RotatingBody(angular_velocity=reference.angular_velocity),
        reference.gravity_field(),
    )
    return PointMassVehicle.circular(
        earth, radius, math.radians(inclination_deg), degree=degree,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main():
    parser = argparse.ArgumentParser(
        description="Spherical harmonic gravity and vehicle propagation"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log scheduler and propagation details"
    )
    subparsers = parser.add_subparsers(dest='command')

    gravity = subparsers.add_parser(
        'gravity', help="Evaluate potential and acceleration at a point"
    )
    gravity.add_argument('--lat', type=float, required=True, help="Latitude (deg)")
    gravity.add_argument('--lon', type=float, required=True, help="Longitude (deg)")
    gravity.add_argument(
        '--radius', type=float, required=True,
        help="Distance from the Earth's center (m, or ER with --units er_min)"
    )
    gravity.add_argument(
        '--degree', type=int, default=None,
        help="Gravity degree/order (default: model maximum, 4)"
    )
    gravity.add_argument(
        '--units', choices=[u.value for u in LengthTimeUnits],
        default=LengthTimeUnits.METERS_SECONDS.value,
        help="m_s (meters, seconds) or er_min (Earth radii, minutes)"
    )

    prop = subparsers.add_parser(
        'propagate', help="Propagate a circular-orbit vehicle"
    )
    prop.add_argument(
        '--altitude-km', type=float, default=500.0,
        help="Altitude above the equatorial radius (default: 500)"
    )
    prop.add_argument(
        '--inclination-deg', type=float, default=0.0,
        help="Orbit inclination (default: 0)"
    )
    prop.add_argument(
        '--dt', type=float, default=10.0,
        help="Integration step, s (default: 10)"
    )
    prop.add_argument(
        '--odt', type=float, default=60.0,
        help="Output interval, s (default: 60)"
    )
    prop.add_argument(
        '--num-outputs', type=int, default=10,
        help="Number of output intervals (default: 10)"
    )
    prop.add_argument(
        '--degree', type=int, default=None,
        help="Gravity degree/order (default: model maximum, 4)"
    )
    prop.add_argument(
        '--export-csv',
        help="Write the trajectory to a CSV file"
    )
    args = parser.parse_args()

    if args.command is None:
        parser.error("a command is required: gravity or propagate")

    _configure_logging(args.verbose)

    try:
        if args.command == 'gravity':
            potential, accel = run_gravity(
                lat_deg=args.lat,
                lon_deg=args.lon,
                radius=args.radius,
                degree=args.degree,
                units=LengthTimeUnits(args.units),
            )
            print(f"potential: {potential:.12e}")
            print(
                f"acceleration: {accel[0]:.12e} {accel[1]:.12e} {accel[2]:.12e}"
            )
            return

        config = PropagationConfig(
            dt=args.dt,
            odt=args.odt,
            num_outputs=args.num_outputs,
            degree=args.degree,
        )
        vehicle = build_vehicle(
            altitude_km=args.altitude_km,
            inclination_deg=args.inclination_deg,
            degree=config.degree,
        )
        energy0 = vehicle.specific_energy()
        result = propagate(vehicle, config)
        final = result.samples[-1]
        print(
            f"Propagated {config.num_outputs} outputs to t={final.time:g} s "
            f"in {result.integration_steps} integration steps"
        )
        print(
            f"Final position (m): {final.state[0]:.3f} {final.state[1]:.3f} "
            f"{final.state[2]:.3f}"
        )
        print(f"Energy drift (m^2/s^2): {vehicle.specific_energy() - energy0:.6e}")

        if args.export_csv:
            n = CsvTrajectoryExporter().export(result, args.export_csv)
            print(f"Exported {n} samples to {args.export_csv}")

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
