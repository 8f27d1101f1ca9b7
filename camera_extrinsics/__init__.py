"""
Camera Extrinsics Package

Models the extrinsic pose of a calibrated camera: the rigid transform mapping
a fixed world frame to the camera frame, following the OpenCV camera model.

Conventions:
    - World to camera: X_c = R @ X_w + t
    - Camera center (world frame): c = -R.T @ t
    - Euler angles: R = Rz(psi) @ Ry(theta) @ Rx(phi), radians by default

Translation accessors and mutators on CameraExtrinsics always refer to the
camera center, never to the stored camera-frame translation t.
"""

from .config import ExtrinsicsConfig
from .transforms import Transform3D
from .rotations import (
    InvalidRotationError,
    euler_angles_to_matrix,
    matrix_to_euler_angles,
    is_rotation_matrix,
    check_rotation_matrix,
    rot_x,
    rot_y,
    rot_z,
)
from .extrinsics import CameraExtrinsics

__version__ = "1.0.0"
__all__ = [
    "ExtrinsicsConfig",
    "Transform3D",
    "InvalidRotationError",
    "euler_angles_to_matrix",
    "matrix_to_euler_angles",
    "is_rotation_matrix",
    "check_rotation_matrix",
    "rot_x",
    "rot_y",
    "rot_z",
    "CameraExtrinsics",
]
