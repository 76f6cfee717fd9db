"""
test_config_manager.py
----------------------
Tests for config loading, defaults merging and file indexing.
"""

import json

import pytest

from spacequest.core.services import config_manager
from spacequest.core.services.config_manager import _merge_dicts, load_config


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "controls.json"
    path.write_text(json.dumps({
        "_notes": "ignored",
        "joystick": {"maximum_radius": 80.0, "_notes": "also ignored"},
    }))
    return str(path)


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "menu.yaml"
    path.write_text(
        "main_menu:\n"
        "  horizontal_padding: 32\n"
        "  wobble:\n"
        "    duration: 4.0\n"
    )
    return str(path)


DEFAULTS = {
    "joystick": {"maximum_radius": 60.0, "margin": 40},
    "main_menu": {
        "horizontal_padding": 20.0,
        "wobble": {"angle_degrees": 5.0, "duration": 2.0},
    },
}


# ===========================================================
# Loading
# ===========================================================

class TestLoadConfig:

    def test_json_merges_over_defaults(self, json_file):
        data = load_config(json_file, DEFAULTS)

        assert data["joystick"] == {"maximum_radius": 80.0, "margin": 40}
        assert "_notes" not in data

    def test_yaml_merges_nested(self, yaml_file):
        data = load_config(yaml_file, DEFAULTS)

        menu = data["main_menu"]
        assert menu["horizontal_padding"] == 32
        assert menu["wobble"] == {"angle_degrees": 5.0, "duration": 4.0}

    def test_python_config(self, tmp_path):
        path = tmp_path / "tuning.py"
        path.write_text("DEFAULT_CONFIG = {'joystick': {'margin': 12}}\n")

        data = load_config(str(path), DEFAULTS)
        assert data["joystick"]["margin"] == 12

    def test_missing_file_returns_defaults(self):
        data = load_config("no_such_config.json", DEFAULTS)
        assert data == DEFAULTS

    def test_defaults_are_not_mutated(self, json_file):
        load_config(json_file, DEFAULTS)
        assert DEFAULTS["joystick"]["maximum_radius"] == 60.0

    def test_result_does_not_alias_defaults(self):
        data = load_config("no_such_config.json", DEFAULTS)
        data["joystick"]["margin"] = 0
        assert DEFAULTS["joystick"]["margin"] == 40

    def test_malformed_json_falls_back(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert load_config(str(path), {"a": 1}) == {"a": 1}

    def test_malformed_yaml_falls_back(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n")
        assert load_config(str(path), {"a": 1}) == {"a": 1}

    def test_undecodable_bytes_fall_back(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        assert load_config(str(path), {"a": 1}) == {"a": 1}

    def test_undecodable_yaml_falls_back(self, tmp_path):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"a: \xff\xfe\n")
        assert load_config(str(path), {"a": 1}) == {"a": 1}

    @pytest.mark.parametrize("body", [
        "DEFAULT_CONFIG = {'a': undefined_name}\n",
        "raise RuntimeError('boom')\n",
        "DEFAULT_CONFIG = 1 / 0\n",
    ])
    def test_failing_python_config_falls_back(self, tmp_path, body):
        path = tmp_path / "tuning.py"
        path.write_text(body)
        assert load_config(str(path), {"a": 1}) == {"a": 1}

    def test_undecodable_bytes_strict_raises(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff"}')
        with pytest.raises(FileNotFoundError):
            load_config(str(path), strict=True)

    def test_strict_raises_on_missing(self):
        with pytest.raises(FileNotFoundError):
            load_config("no_such_config.json", strict=True)

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path), {"a": 1}) == {"a": 1}


# ===========================================================
# Bundled Files
# ===========================================================

class TestBundledConfigs:

    def test_index_finds_bundled_files(self):
        files = config_manager.get_indexed_files()
        assert "controls.json" in files
        assert "main_menu.yaml" in files

    def test_lookup_without_extension(self):
        data = load_config("main_menu", strict=True)
        assert "main_menu" in data

    def test_bundled_controls(self):
        joystick = load_config("controls.json", strict=True)["joystick"]
        assert joystick["maximum_radius"] > 0
        assert joystick["update_interval"] == pytest.approx(1 / 40)

    def test_rebuild_index(self, tmp_path, monkeypatch):
        (tmp_path / "extra.json").write_text("{}")
        monkeypatch.setattr(config_manager, "SEARCH_DIRS", [str(tmp_path)])

        config_manager.rebuild_file_index()

        assert list(config_manager.get_indexed_files()) == ["extra.json"]


class TestMergeDicts:

    def test_override_replaces_non_dict(self):
        assert _merge_dicts({"a": {"b": 1}}, {"a": 5}) == {"a": 5}

    def test_new_keys_are_added(self):
        assert _merge_dicts({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
