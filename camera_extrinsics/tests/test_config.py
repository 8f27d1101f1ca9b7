"""
Tests for extrinsics configuration loading.
"""

import pytest

from camera_extrinsics.config import ExtrinsicsConfig


class TestExtrinsicsConfig:
    """Tests for ExtrinsicsConfig."""

    def test_defaults(self):
        """Defaults should trust inputs and use radians."""
        config = ExtrinsicsConfig()

        assert config.check_rotation is False
        assert config.rotation_tolerance == pytest.approx(1e-6)
        assert config.angles_in_degrees is False

    def test_from_yaml(self, tmp_path):
        """Values in the YAML file should override defaults."""
        path = tmp_path / "extrinsics.yaml"
        path.write_text(
            "check_rotation: true\n"
            "rotation_tolerance: 1.0e-4\n"
        )

        config = ExtrinsicsConfig.from_yaml(str(path))

        assert config.check_rotation is True
        assert config.rotation_tolerance == pytest.approx(1e-4)
        assert config.angles_in_degrees is False

    def test_empty_yaml(self, tmp_path):
        """An empty file should give the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ExtrinsicsConfig.from_yaml(str(path)) == ExtrinsicsConfig()

    def test_yaml_round_trip(self, tmp_path):
        """Saving and loading should preserve all fields."""
        path = tmp_path / "saved.yaml"
        config = ExtrinsicsConfig(
            check_rotation=True,
            rotation_tolerance=1e-3,
            angles_in_degrees=True,
        )

        config.to_yaml(str(path))

        assert ExtrinsicsConfig.from_yaml(str(path)) == config

    def test_missing_file(self, tmp_path):
        """A missing file should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ExtrinsicsConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_unknown_key(self):
        """Unknown keys should be rejected."""
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            ExtrinsicsConfig.from_dict({'check_rotations': True})

    def test_non_mapping_yaml(self, tmp_path):
        """A YAML list is not a valid configuration."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError):
            ExtrinsicsConfig.from_yaml(str(path))

    @pytest.mark.parametrize("key", ["check_rotation", "angles_in_degrees"])
    @pytest.mark.parametrize("value", ["false", "no", 1, None])
    def test_non_bool_flag_rejected(self, key, value):
        """Flags must be real booleans, not strings or numbers."""
        with pytest.raises(ValueError, match=key):
            ExtrinsicsConfig.from_dict({key: value})

    def test_quoted_flag_in_yaml_rejected(self, tmp_path):
        """A quoted "false" in YAML must not enable the rotation check."""
        path = tmp_path / "quoted.yaml"
        path.write_text('check_rotation: "false"\n')

        with pytest.raises(ValueError, match="check_rotation"):
            ExtrinsicsConfig.from_yaml(str(path))

    @pytest.mark.parametrize("value", ["1e-6", True, None, [1e-6]])
    def test_non_numeric_tolerance_rejected(self, value):
        """rotation_tolerance must be a real number."""
        with pytest.raises(ValueError, match="rotation_tolerance"):
            ExtrinsicsConfig.from_dict({'rotation_tolerance': value})

    def test_integer_tolerance_accepted(self):
        """Integers are valid tolerances and are stored as float."""
        config = ExtrinsicsConfig.from_dict({'rotation_tolerance': 0})

        assert config.rotation_tolerance == 0.0
        assert isinstance(config.rotation_tolerance, float)

    def test_negative_tolerance(self):
        """Negative tolerance should be rejected."""
        with pytest.raises(ValueError):
            ExtrinsicsConfig(rotation_tolerance=-1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
