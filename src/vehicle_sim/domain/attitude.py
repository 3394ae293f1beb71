# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Quaternion kinematics and Euler's rotational equations.

Quaternions are scalar first, [q0, q1, q2, q3]. The attitude quaternion
q rotates body-frame vectors into the inertial frame (equivalently, it
is the inertial-to-body frame transformation), so that

    q_dot = 1/2 q ⊗ (0, ω)

with ω the body angular rate expressed in body axes.

Inertia is restricted to principal axes (diagonal J); building inertia
tensors is left to the caller.
"""

import math

import numpy as np


def quaternion_multiply(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Hamilton product p ⊗ q."""
    p0, p1, p2, p3 = p
    q0, q1, q2, q3 = q
    return np.array([
        p0 * q0 - p1 * q1 - p2 * q2 - p3 * q3,
        p0 * q1 + p1 * q0 + p2 * q3 - p3 * q2,
        p0 * q2 - p1 * q3 + p2 * q0 + p3 * q1,
        p0 * q3 + p1 * q2 - p2 * q1 + p3 * q0,
    ])


def quaternion_derivative(q: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """1/2 q ⊗ (0, ω) for body rate ``omega``."""
    q0, q1, q2, q3 = q
    wx, wy, wz = omega
    return 0.5 * np.array([
        -q1 * wx - q2 * wy - q3 * wz,
        q0 * wx + q2 * wz - q3 * wy,
        q0 * wy - q1 * wz + q3 * wx,
        q0 * wz + q1 * wy - q2 * wx,
    ])


def normalize_quaternion(q: np.ndarray) -> np.ndarray:
    """Scale ``q`` to unit length in place and return it."""
    norm = math.sqrt(float(np.dot(q, q)))
    if norm == 0.0:
        raise ValueError("quaternion must be non-zero")
    q /= norm
    return q


def quaternion_to_matrix(q: np.ndarray) -> np.ndarray:
    """Body-to-inertial rotation matrix for unit quaternion ``q``."""
    q0, q1, q2, q3 = q
    return np.array([
        [1.0 - 2.0 * (q2 * q2 + q3 * q3), 2.0 * (q1 * q2 - q0 * q3), 2.0 * (q1 * q3 + q0 * q2)],
        [2.0 * (q1 * q2 + q0 * q3), 1.0 - 2.0 * (q1 * q1 + q3 * q3), 2.0 * (q2 * q3 - q0 * q1)],
        [2.0 * (q1 * q3 - q0 * q2), 2.0 * (q2 * q3 + q0 * q1), 1.0 - 2.0 * (q1 * q1 + q2 * q2)],
    ])


def euler_equation(
    omega: np.ndarray,
    inertia: np.ndarray,
    torque: np.ndarray,
) -> np.ndarray:
    """Body angular acceleration for principal moments ``inertia``.

    J ω_dot = τ - ω × (J ω)
    """
    return (torque - np.cross(omega, inertia * omega)) / inertia
