"""
Rigid 3D transform used by the camera extrinsics.

Convention:
    A transform maps points from a source frame to a destination frame:
        P_dst = R @ P_src + t

    Composition follows matrix order: (A * B) applies B first, then A.
"""

import numpy as np
from typing import Optional


def _as_rotation(R) -> np.ndarray:
    R = np.array(R, dtype=np.float64)
    if R.shape != (3, 3):
        raise ValueError(f"rotation must be (3,3), got {R.shape}")
    return R


def as_vector3(v, name: str = "translation") -> np.ndarray:
    """Copy v into a float64 (3,) array, rejecting any other shape."""
    v = np.array(v, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"{name} must be (3,), got {v.shape}")
    return v


class Transform3D:
    """
    Rigid transform made of a rotation matrix and a translation vector.

    Rotation and translation are copied on the way in and on the way out,
    so a Transform3D never shares storage with its caller.
    """

    def __init__(
        self,
        rotation: Optional[np.ndarray] = None,
        translation: Optional[np.ndarray] = None,
    ):
        """
        Initialize the transform.

        Args:
            rotation: 3x3 rotation matrix (identity if omitted)
            translation: 3-element translation (zero if omitted)
        """
        self._R = np.eye(3) if rotation is None else _as_rotation(rotation)
        self._t = np.zeros(3) if translation is None else as_vector3(translation)

    @classmethod
    def from_matrix(cls, T: np.ndarray) -> "Transform3D":
        """Build from a 4x4 homogeneous or 3x4 [R | t] matrix."""
        T = np.asarray(T, dtype=np.float64)
        if T.shape not in ((4, 4), (3, 4)):
            raise ValueError(f"T must be (4,4) or (3,4), got {T.shape}")
        return cls(T[:3, :3], T[:3, 3])

    def get_rotation(self) -> np.ndarray:
        return self._R.copy()

    def set_rotation(self, rotation: np.ndarray) -> None:
        self._R = _as_rotation(rotation)

    def get_translation(self) -> np.ndarray:
        return self._t.copy()

    def set_translation(self, translation: np.ndarray) -> None:
        self._t = as_vector3(translation)

    def inverse(self) -> "Transform3D":
        """Inverse of a rigid transform: (R.T, -R.T @ t)."""
        R_inv = self._R.T
        return Transform3D(R_inv, -R_inv @ self._t)

    def apply(self, point: np.ndarray) -> np.ndarray:
        """P_dst = R @ P_src + t"""
        return self._R @ as_vector3(point, "point") + self._t

    def compose(self, other: "Transform3D") -> "Transform3D":
        """Composite transform: first `other`, then self."""
        return Transform3D(self._R @ other._R, self._R @ other._t + self._t)

    def __mul__(self, other):
        if isinstance(other, Transform3D):
            return self.compose(other)
        return self.apply(other)

    __matmul__ = __mul__

    def homogeneous(self) -> np.ndarray:
        """4x4 homogeneous matrix."""
        T = np.eye(4, dtype=np.float64)
        T[:3, :3] = self._R
        T[:3, 3] = self._t
        return T

    def dehomogenize(self) -> np.ndarray:
        """3x4 matrix [R | t]."""
        return np.hstack([self._R, self._t.reshape(3, 1)])

    def copy(self) -> "Transform3D":
        return Transform3D(self._R, self._t)

    def __repr__(self) -> str:
        return f"Transform3D(rotation={self._R.tolist()}, translation={self._t.tolist()})"
