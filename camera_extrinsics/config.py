"""
Configuration module for camera extrinsics.

Handles loading and saving of extrinsics settings from YAML files.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from numbers import Real
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


@dataclass
class ExtrinsicsConfig:
    """
    Settings that control how CameraExtrinsics treats its inputs.

    Attributes:
        check_rotation: Reject matrices that are not proper rotations in
            set_rotation and its overloads. Off by default: inputs are trusted.
        rotation_tolerance: Absolute tolerance for the orthonormality and
            determinant checks
        angles_in_degrees: Interpret Euler angles passed to set_rotation_euler,
            rotate_euler and returned by euler_angles as degrees
    """
    check_rotation: bool = False
    rotation_tolerance: float = 1e-6
    angles_in_degrees: bool = False

    def __post_init__(self):
        if self.rotation_tolerance < 0:
            raise ValueError(
                f"rotation_tolerance must be non-negative, got {self.rotation_tolerance}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtrinsicsConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        # Quoted YAML values like "false" must not turn into True
        for key in ('check_rotation', 'angles_in_degrees'):
            if key in data and not isinstance(data[key], bool):
                raise ValueError(f"{key} must be true or false, got {data[key]!r}")

        tolerance = data.get('rotation_tolerance', 1e-6)
        if isinstance(tolerance, bool) or not isinstance(tolerance, Real):
            raise ValueError(f"rotation_tolerance must be a number, got {tolerance!r}")

        return cls(
            check_rotation=data.get('check_rotation', False),
            rotation_tolerance=float(tolerance),
            angles_in_degrees=data.get('angles_in_degrees', False),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "ExtrinsicsConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExtrinsicsConfig with loaded parameters

        Example YAML structure:
            check_rotation: true
            rotation_tolerance: 1.0e-6
            angles_in_degrees: false
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {config_path}, got {type(data).__name__}")

        logger.info(f"Loading configuration from {config_path}")
        return cls.from_dict(data)

    def to_yaml(self, config_path: str) -> None:
        """Save configuration to a YAML file."""
        with open(config_path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {config_path}")
