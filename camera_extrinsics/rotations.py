"""
Rotation helpers for camera extrinsics.

Euler Angle Convention:
    - phi: rotation about X (roll)
    - theta: rotation about Y (pitch)
    - psi: rotation about Z (yaw)
    - Combined rotation: R = Rz(psi) @ Ry(theta) @ Rx(phi)
    - Angles are in radians

All rotations use the right-hand rule.
"""

import numpy as np
from typing import Tuple
from scipy.spatial.transform import Rotation
import logging

logger = logging.getLogger(__name__)

c = np.cos
s = np.sin


class InvalidRotationError(ValueError):
    """Raised when a matrix is not a proper rotation (orthonormal, det = +1)."""


def rot_x(angle: float) -> np.ndarray:
    """
    Rotation matrix around the x-axis, angle in radians
    """
    return np.array([[1,        0,         0],
                     [0, c(angle), -s(angle)],
                     [0, s(angle),  c(angle)]], dtype=np.float64)


def rot_y(angle: float) -> np.ndarray:
    """
    Rotation matrix around the y-axis, angle in radians
    """
    return np.array([[ c(angle), 0, s(angle)],
                     [        0, 1,        0],
                     [-s(angle), 0, c(angle)]], dtype=np.float64)


def rot_z(angle: float) -> np.ndarray:
    """
    Rotation matrix around the z-axis, angle in radians
    """
    return np.array([[c(angle), -s(angle), 0],
                     [s(angle),  c(angle), 0],
                     [       0,         0, 1]], dtype=np.float64)


def euler_angles_to_matrix(phi: float, theta: float, psi: float) -> np.ndarray:
    """
    Compute rotation matrix from Euler angles (ZYX convention).

    Args:
        phi: Rotation about X in radians
        theta: Rotation about Y in radians
        psi: Rotation about Z in radians

    Returns:
        3x3 rotation matrix Rz(psi) @ Ry(theta) @ Rx(phi)
    """
    return rot_z(psi) @ rot_y(theta) @ rot_x(phi)


def matrix_to_euler_angles(R: np.ndarray) -> Tuple[float, float, float]:
    """
    Recover (phi, theta, psi) from a rotation matrix.

    Inverse of `euler_angles_to_matrix`. Near gimbal lock (theta = ±90°)
    only the sum or difference of phi and psi is observable; scipy picks
    one of the equivalent solutions and emits a warning.

    Args:
        R: 3x3 rotation matrix

    Returns:
        Tuple of (phi, theta, psi) in radians
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        raise ValueError(f"R must be (3,3), got {R.shape}")

    # Intrinsic Z-Y'-X'' gives R = Rz(psi) @ Ry(theta) @ Rx(phi)
    psi, theta, phi = Rotation.from_matrix(R).as_euler('ZYX')
    return float(phi), float(theta), float(psi)


def is_rotation_matrix(R: np.ndarray, tol: float = 1e-6) -> bool:
    """
    Validate that a matrix is a proper rotation matrix.

    A proper rotation matrix must:
        1. Be orthogonal: R @ R.T = I
        2. Have determinant = +1 (not a reflection)

    Args:
        R: 3x3 matrix to validate
        tol: Numerical tolerance

    Returns:
        True if R is a valid rotation matrix
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        return False

    if not np.allclose(R @ R.T, np.eye(3), atol=tol):
        return False

    return bool(np.isclose(np.linalg.det(R), 1.0, atol=tol))


def check_rotation_matrix(R: np.ndarray, tol: float = 1e-6) -> None:
    """Raise InvalidRotationError if R is not a proper rotation."""
    if not is_rotation_matrix(R, tol):
        logger.debug(f"Rejected non-rotation matrix:\n{np.asarray(R)}")
        raise InvalidRotationError(
            f"Matrix is not a proper rotation (tolerance {tol}): {np.asarray(R).tolist()}"
        )
