"""
Camera extrinsic parameters (OpenCV camera model).

The extrinsics are stored as a single world-to-camera rigid transform:
    X_c = R @ X_w + t

The stored translation t is expressed in camera coordinates and is NOT the
camera position. The camera center in world coordinates is derived from it
(Hartley & Zisserman, p. 156):

    [R  -R c]
    [0    1 ]      =>   t = -R c,   c = -R.T t

All translation inputs and outputs of CameraExtrinsics use the camera center c.
Rotation edits keep c fixed; translation edits keep R fixed.

The default camera frame is the same as the world frame.
"""

import numpy as np
from dataclasses import replace
from typing import Optional, Tuple
import logging

from .config import ExtrinsicsConfig
from .rotations import (
    check_rotation_matrix,
    euler_angles_to_matrix,
    matrix_to_euler_angles,
)
from .transforms import Transform3D, as_vector3

logger = logging.getLogger(__name__)


class CameraExtrinsics:
    """
    World-to-camera pose of a calibrated camera.

    Each instance owns its transform exclusively: transforms passed in or
    handed out are copies. Not thread-safe; concurrent mutation of one
    instance must be serialized by the caller.
    """

    def __init__(
        self,
        world_to_camera: Optional[Transform3D] = None,
        config: Optional[ExtrinsicsConfig] = None,
    ):
        """
        Initialize the extrinsics.

        Args:
            world_to_camera: World-to-camera transform, stored verbatim
                without validation. Identity if omitted.
            config: Extrinsics settings (defaults trust all inputs)
        """
        self.config = replace(config) if config is not None else ExtrinsicsConfig()
        self._world_to_camera = (
            Transform3D() if world_to_camera is None else world_to_camera.copy()
        )

    @classmethod
    def from_camera_center(
        cls,
        rotation: np.ndarray,
        center: np.ndarray,
        config: Optional[ExtrinsicsConfig] = None,
    ) -> "CameraExtrinsics":
        """
        Build extrinsics from an orientation and a camera position.

        Args:
            rotation: 3x3 world-to-camera rotation
            center: Camera center in world coordinates

        Returns:
            CameraExtrinsics with t = -R @ center
        """
        extrinsics = cls(config=config)
        extrinsics.set_rotation(rotation)
        extrinsics.set_translation(center)
        return extrinsics

    def set_world_to_camera(self, world_to_camera: Transform3D) -> None:
        self._world_to_camera = world_to_camera.copy()

    # Extract poses.
    def world_to_camera(self) -> Transform3D:
        return self._world_to_camera.copy()

    def camera_to_world(self) -> Transform3D:
        return self._world_to_camera.inverse()

    def _center(self) -> np.ndarray:
        R = self._world_to_camera.get_rotation()
        t = self._world_to_camera.get_translation()
        return -R.T @ t

    # Rotation. The camera center is held fixed in the world.
    def set_rotation(self, rotation: np.ndarray) -> None:
        """
        Replace the rotation while keeping the camera center in place.

        Args:
            rotation: New 3x3 world-to-camera rotation

        Raises:
            InvalidRotationError: If config.check_rotation is set and the
                matrix is not a proper rotation. State is left unchanged.
        """
        rotation = np.asarray(rotation, dtype=np.float64)
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must be (3,3), got {rotation.shape}")
        if self.config.check_rotation:
            check_rotation_matrix(rotation, self.config.rotation_tolerance)

        c = self._center()
        self._world_to_camera.set_rotation(rotation)
        self._world_to_camera.set_translation(-rotation @ c)

        logger.debug(f"Set rotation, camera center held at {c}")

    def set_rotation_euler(self, phi: float, theta: float, psi: float) -> None:
        self.set_rotation(self._euler_to_matrix(phi, theta, psi))

    def rotate(self, delta: np.ndarray) -> None:
        """Apply a world-frame incremental rotation: R <- delta @ R."""
        delta = np.asarray(delta, dtype=np.float64)
        if delta.shape != (3, 3):
            raise ValueError(f"delta must be (3,3), got {delta.shape}")
        self.set_rotation(delta @ self._world_to_camera.get_rotation())

    def rotate_euler(self, dphi: float, dtheta: float, dpsi: float) -> None:
        self.rotate(self._euler_to_matrix(dphi, dtheta, dpsi))

    def rotation(self) -> np.ndarray:
        return self._world_to_camera.get_rotation()

    def euler_angles(self) -> Tuple[float, float, float]:
        """(phi, theta, psi) of the current rotation, in the configured unit."""
        angles = matrix_to_euler_angles(self._world_to_camera.get_rotation())
        if self.config.angles_in_degrees:
            return tuple(float(a) for a in np.rad2deg(angles))
        return angles

    def _euler_to_matrix(self, phi: float, theta: float, psi: float) -> np.ndarray:
        if self.config.angles_in_degrees:
            phi, theta, psi = np.deg2rad([phi, theta, psi])
        return euler_angles_to_matrix(phi, theta, psi)

    # Translation. All inputs are coordinates of the camera in the world frame.
    def set_translation(self, translation: np.ndarray) -> None:
        translation = as_vector3(translation)
        R = self._world_to_camera.get_rotation()
        self._world_to_camera.set_translation(-R @ translation)

        logger.debug(f"Set camera center to {translation}")

    def set_translation_xyz(self, x: float, y: float, z: float) -> None:
        self.set_translation(np.array([x, y, z], dtype=np.float64))

    def translate(self, delta: np.ndarray) -> None:
        """Move the camera center by a world-frame displacement."""
        delta = as_vector3(delta, "delta")
        R = self._world_to_camera.get_rotation()
        c = self._center() + delta
        self._world_to_camera.set_translation(-R @ c)

        logger.debug(f"Translated camera center by {delta} to {c}")

    def translate_xyz(self, dx: float, dy: float, dz: float) -> None:
        self.translate(np.array([dx, dy, dz], dtype=np.float64))

    def translate_x(self, dx: float) -> None:
        self.translate(np.array([dx, 0.0, 0.0]))

    def translate_y(self, dy: float) -> None:
        self.translate(np.array([0.0, dy, 0.0]))

    def translate_z(self, dz: float) -> None:
        self.translate(np.array([0.0, 0.0, dz]))

    def translation(self) -> np.ndarray:
        """Camera center in world coordinates, -R.T @ t."""
        return self._center()

    def rt(self) -> np.ndarray:
        """The 3x4 extrinsics matrix [R | t] with the stored translation."""
        return self._world_to_camera.dehomogenize()

    # Point conversion.
    def world_to_camera_point(
        self, wx: float, wy: float, wz: float
    ) -> Tuple[float, float, float]:
        """Convert a world frame point into the camera frame."""
        cx, cy, cz = self._world_to_camera * np.array([wx, wy, wz], dtype=np.float64)
        return float(cx), float(cy), float(cz)

    def camera_to_world_point(
        self, cx: float, cy: float, cz: float
    ) -> Tuple[float, float, float]:
        """Convert a camera frame point into the world frame."""
        wx, wy, wz = self.camera_to_world() * np.array([cx, cy, cz], dtype=np.float64)
        return float(wx), float(wy), float(wz)

    def copy(self) -> "CameraExtrinsics":
        return CameraExtrinsics(self._world_to_camera, self.config)

    def __repr__(self) -> str:
        return (
            f"CameraExtrinsics(rotation={self.rotation().tolist()}, "
            f"center={self.translation().tolist()})"
        )
