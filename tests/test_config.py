import json
import os

import pytest

from term_tags import config
from term_tags.config import (
    ConfigOptions,
    Option,
    config_options,
    init_config,
    is_writable,
    load_config,
    load_xdg_config,
    store_config,
)
from term_tags.exceptions import TermTagsUserWarning
from term_tags.modes import Depth, Direction

from . import reset_modes


@pytest.fixture(autouse=True)
def reset_options():
    config_options.reset()
    yield
    config_options.reset()


def write_config(path, config):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config))
    return str(path)


class TestConfigOptions:
    def test_attribute_access(self):
        assert config_options.color_depth == 8
        assert config_options._color_depth == 8
        assert config_options.log_level == "WARNING"

        config_options.color_depth = 24
        assert config_options["color depth"].value == 24
        assert config_options._color_depth == 8

    def test_unknown(self):
        with pytest.raises(AttributeError, match="'no such'"):
            config_options.no_such

    def test_reset(self):
        options = ConfigOptions(x=Option(1, lambda x: True, ""))
        options.x = 2
        options.reset()
        assert options.x == 1

    @pytest.mark.parametrize(
        "name,valid,invalid",
        [
            ("color depth", [4, 8, 24], [0, 16, "8", True, None]),
            ("direction", ["fg", "bg"], ["", "FG", 0, None, ["fg"]]),
            ("log level", ["DEBUG", "ERROR"], ["debug", "VERBOSE", 10, None]),
        ],
    )
    def test_validation(self, name, valid, invalid):
        option = config_options[name]
        for value in valid:
            assert option.is_valid(value)
        for value in invalid:
            assert not option.is_valid(value)


class TestIsWritable:
    def test_existing_file(self, tmp_path):
        path = tmp_path / "file"
        path.touch()
        assert is_writable(path)

    def test_creatable(self, tmp_path):
        assert is_writable(tmp_path / "a" / "b" / "file")

    def test_directory(self, tmp_path):
        assert not is_writable(tmp_path)

    def test_parent_is_file(self, tmp_path):
        parent = tmp_path / "file"
        parent.touch()
        assert not is_writable(parent / "child")


class TestLoadConfig:
    def test_valid(self, tmp_path):
        path = write_config(
            tmp_path / "config.json",
            {"color depth": 24, "direction": "bg", "log level": "DEBUG"},
        )
        assert load_config(path)
        assert config_options.color_depth == 24
        assert config_options.direction == "bg"
        assert config_options.log_level == "DEBUG"

    def test_invalid_value_keeps_former(self, tmp_path):
        config_options.color_depth = 4
        path = write_config(tmp_path / "config.json", {"color depth": 16})
        with pytest.warns(TermTagsUserWarning, match="'color depth'"):
            assert load_config(path)
        assert config_options.color_depth == 4

    def test_unknown_option(self, tmp_path):
        path = write_config(tmp_path / "config.json", {"colour": 24})
        with pytest.warns(TermTagsUserWarning, match="Unknown option 'colour'"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.warns(TermTagsUserWarning, match="Failed to load"):
            assert not load_config(str(tmp_path / "missing.json"))

    def test_malformed(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{")
        with pytest.warns(TermTagsUserWarning, match="JSONDecodeError"):
            assert not load_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = write_config(tmp_path / "config.json", [24])
        with pytest.warns(TermTagsUserWarning, match="JSON object"):
            assert not load_config(path)


class TestXDGConfig:
    def test_precedence(self, tmp_path, monkeypatch):
        system = tmp_path / "etc"
        home = tmp_path / "home"
        write_config(
            system / "term_tags" / "config.json",
            {"color depth": 4, "direction": "bg"},
        )
        write_config(home / "term_tags" / "config.json", {"color depth": 24})
        monkeypatch.setenv("XDG_CONFIG_DIRS", str(system))
        monkeypatch.setenv("XDG_CONFIG_HOME", str(home))

        load_xdg_config()
        assert config_options.color_depth == 24
        assert config_options.direction == "bg"

    def test_relative_dirs_ignored(self, tmp_path, monkeypatch):
        write_config(tmp_path / "term_tags" / "config.json", {"color depth": 4})
        monkeypatch.chdir(tmp_path.parent)
        monkeypatch.setenv("XDG_CONFIG_DIRS", tmp_path.name)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "none"))

        load_xdg_config()
        assert config_options.color_depth == 8

    def test_config_file_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.xdg_config_file() == os.path.join(
            str(tmp_path), "term_tags", "config.json"
        )


class TestStoreConfig:
    def test_only_modified(self, tmp_path):
        config_options.direction = "bg"
        path = tmp_path / "dir" / "config.json"
        assert store_config(str(path))
        assert json.loads(path.read_text()) == {"direction": "bg"}

    @reset_modes()
    def test_mode_state_not_stored(self, tmp_path):
        from term_tags import set_depth
        from term_tags.tags import replace_tags

        set_depth(4)
        replace_tags("[24-bit][bg]")
        path = tmp_path / "config.json"
        assert store_config(str(path))
        assert json.loads(path.read_text()) == {}

    def test_round_trip(self, tmp_path):
        config_options.color_depth = 4
        config_options.log_level = "ERROR"
        path = str(tmp_path / "config.json")
        store_config(path)

        config_options.reset()
        load_config(path)
        assert config_options.color_depth == 4
        assert config_options.log_level == "ERROR"

    def test_parent_is_file(self, tmp_path):
        parent = tmp_path / "file"
        parent.touch()
        with pytest.warns(TermTagsUserWarning, match="Failed to write"):
            assert not store_config(str(parent / "config.json"))


class TestInitConfig:
    @reset_modes()
    def test_applies_modes(self, tmp_path):
        from term_tags import get_depth, get_direction

        path = write_config(
            tmp_path / "config.json", {"color depth": 4, "direction": "bg"}
        )
        init_config(path)
        assert get_depth() is Depth.FOUR
        assert get_direction() is Direction.BACKGROUND

    @reset_modes()
    def test_xdg(self, tmp_path, monkeypatch):
        from term_tags import get_depth

        write_config(tmp_path / "term_tags" / "config.json", {"color depth": 24})
        monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "none"))
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        init_config()
        assert get_depth() is Depth.TWENTY_FOUR

    @reset_modes()
    def test_init_logging(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(
            config.logging, "init_log", lambda *args: calls.append(args)
        )
        path = write_config(
            tmp_path / "config.json",
            {"log file": str(tmp_path / "log"), "log level": "INFO"},
        )
        init_config(path, init_logging=True)
        assert calls == [(str(tmp_path / "log"), 20)]
