"""Tests for vehicle preset loading."""
import json

import pytest

from skidmark.data_models import ConfigurationError, VehicleConfig
from skidmark.presets_loader import list_presets, load_preset, vehicle_config_from_dict


def write_preset(directory, file_name, data):
    path = directory / file_name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


class TestShippedPresets:
    """Tests for the presets bundled with the package."""

    def test_list(self):
        """Test the bundled presets are discovered."""
        names = [fn for fn, _ in list_presets()]

        assert "default.json" in names
        assert "drift.json" in names

    def test_default_matches_builtin(self):
        """Test the default preset equals the built-in tuning."""
        config, display = load_preset("default")

        assert display == "Default"
        assert config == VehicleConfig()

    def test_drift_tunes_trail(self):
        """Test the drift preset raises the mark threshold and insets the corner."""
        config, _ = load_preset("drift.json")

        assert config.trail_speed_threshold == 0.5
        assert config.trail_corner_inset == 3.0


class TestLoadPreset:
    """Tests for load_preset against a temporary directory."""

    def test_missing(self, tmp_path):
        """Test a missing preset returns None."""
        assert load_preset("nope", str(tmp_path)) is None

    def test_invalid_json(self, tmp_path):
        """Test an unreadable preset returns None."""
        write_preset(tmp_path, "broken.json", "{not json")

        assert load_preset("broken", str(tmp_path)) is None

    def test_display_name_falls_back_to_file(self, tmp_path):
        """Test the file stem is used when no name is given."""
        write_preset(tmp_path, "quick.json", {"vehicle": {"agility": 0.1}})
        config, display = load_preset("quick", str(tmp_path))

        assert display == "quick"
        assert config.agility == 0.1
        assert config.friction == VehicleConfig().friction

    def test_out_of_range_raises(self, tmp_path):
        """Test a preset with friction >= 1 is a configuration error."""
        write_preset(tmp_path, "ice.json", {"vehicle": {"friction": 1.0}})

        with pytest.raises(ConfigurationError):
            load_preset("ice", str(tmp_path))

    def test_non_finite_values_raise(self, tmp_path):
        """Test NaN and "inf" values in a preset are configuration errors."""
        write_preset(tmp_path, "nan.json", '{"vehicle": {"width": NaN}}')
        write_preset(tmp_path, "inf.json", {"vehicle": {"acceleration": "inf"}})

        with pytest.raises(ConfigurationError):
            load_preset("nan", str(tmp_path))
        with pytest.raises(ConfigurationError):
            load_preset("inf", str(tmp_path))

    def test_non_object_is_unreadable(self, tmp_path):
        """Test valid JSON that is not an object returns None."""
        write_preset(tmp_path, "arr.json", [1, 2])
        write_preset(tmp_path, "bad_vehicle.json", {"name": "Bad", "vehicle": [0.1]})

        assert load_preset("arr", str(tmp_path)) is None
        assert load_preset("bad_vehicle", str(tmp_path)) is None
        assert list_presets(str(tmp_path)) == [("arr.json", "arr"), ("bad_vehicle.json", "Bad")]

    def test_list_skips_non_json(self, tmp_path):
        """Test only .json files are listed."""
        write_preset(tmp_path, "a.json", {"name": "Alpha"})
        (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")

        assert list_presets(str(tmp_path)) == [("a.json", "Alpha")]

    def test_list_missing_dir(self, tmp_path):
        """Test a missing directory lists nothing."""
        assert list_presets(str(tmp_path / "absent")) == []


class TestVehicleConfigFromDict:
    """Tests for vehicle_config_from_dict."""

    def test_ignores_unknown_and_non_numeric(self):
        """Test unknown keys and bad values fall back to defaults."""
        config = vehicle_config_from_dict({"colour": "red", "agility": "fast", "width": "30"})

        assert config.agility == VehicleConfig().agility
        assert config.width == 30.0

    def test_empty(self):
        """Test an empty mapping gives the defaults."""
        assert vehicle_config_from_dict({}) == VehicleConfig()
        assert vehicle_config_from_dict(None) == VehicleConfig()
