"""Tests for settings and profile handling.

Uses isolated directories via tmp_path and EMP_COMP_CONFIG_PATH
to avoid touching real configuration.
"""

import json

import pytest
import yaml

from empcomp.sdk.config import (
    ProfileValidationError,
    SettingsError,
    get_config_dir,
    get_log_path,
    get_prompt_defaults,
    load_profile,
    load_settings,
    save_profile,
    set_setting,
)
from empcomp.sdk.schemas import ProfileSchema, RosterEntry


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config and data directories."""
    config_dir = tmp_path / "config"
    data_home = tmp_path / "data"

    config_dir.mkdir()
    data_home.mkdir()

    monkeypatch.setenv("EMP_COMP_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))

    return {
        "config_dir": config_dir,
        "data_home": data_home,
    }


class TestSettings:
    def test_config_dir_from_env(self, isolated_env):
        assert get_config_dir() == isolated_env["config_dir"]

    def test_missing_settings_is_empty(self, isolated_env):
        assert load_settings() == {}

    def test_set_setting_persists(self, isolated_env):
        set_setting("default_type", "PTE")

        saved = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert saved == {"default_type": "PTE"}

    def test_prompt_defaults(self, isolated_env):
        assert get_prompt_defaults() == {"type": "FTE", "hours": 38.0}

        set_setting("default_hours", 20)
        assert get_prompt_defaults()["hours"] == 20.0

    def test_malformed_settings_raise_settings_error(self, isolated_env):
        (isolated_env["config_dir"] / "settings.json").write_text("{not json")

        with pytest.raises(SettingsError, match="settings.json"):
            load_settings()

    def test_non_object_settings_rejected(self, isolated_env):
        (isolated_env["config_dir"] / "settings.json").write_text("[1, 2]")

        with pytest.raises(SettingsError):
            load_settings()

    def test_non_numeric_default_hours(self, isolated_env):
        set_setting("default_hours", "lots")

        with pytest.raises(SettingsError, match="default_hours"):
            get_prompt_defaults()


class TestLogPath:
    def test_default_in_data_dir(self, isolated_env):
        assert get_log_path() == isolated_env["data_home"] / "emp-comp" / "logs.txt"

    def test_custom_from_settings(self, isolated_env, tmp_path):
        custom = tmp_path / "elsewhere" / "calc.log"
        set_setting("log_file", str(custom))
        assert get_log_path() == custom


class TestProfile:
    def test_missing_profile_is_empty_roster(self, isolated_env):
        assert load_profile().employees == {}

    def test_load_roster(self, isolated_env):
        profile = {
            "employees": {
                "ada": {"name": "Ada Lovelace", "type": "FTE", "hours": 42},
                "bob": {"type": "Contractor"},
            }
        }
        (isolated_env["config_dir"] / "profile.yaml").write_text(yaml.dump(profile))

        loaded = load_profile()
        assert loaded.employees["ada"].hours == 42
        assert loaded.employees["bob"].name == "Unknown"
        assert loaded.employees["bob"].hours == 38.0

    def test_unknown_key_rejected(self, isolated_env):
        profile = {"employees": {"ada": {"name": "Ada", "hourz": 40}}}
        (isolated_env["config_dir"] / "profile.yaml").write_text(yaml.dump(profile))

        with pytest.raises(ProfileValidationError, match="profile.yaml"):
            load_profile()

    def test_save_then_load(self, isolated_env):
        profile = ProfileSchema(employees={"ada": RosterEntry(name="Ada", type="PTE", hours=12.5)})
        path = save_profile(profile)

        assert path == isolated_env["config_dir"] / "profile.yaml"
        assert load_profile() == profile
