# -*- coding: utf-8 -*-
"""
tests.test_configurations
~~~~~~~~~~~~~~~~~~~~~~~~~


"""

import logging
from textwrap import dedent

import pytest

import propconv
from propconv import (
    Color,
    ConfigurationError,
    Configurations,
    ConfigurationUnavailableError,
    ConverterContext,
    Settings,
)


@pytest.fixture
def conf_dir(tmp_path):
    tmp_path.joinpath("settings.conf").write_text(
        dedent(
            """\
            log_level = "debug"
            timeout = "30"
            """
        ),
        encoding="utf-8",
    )
    tmp_path.joinpath("converters.default.conf").write_text(
        dedent(
            """\
            [color]
            default = "#FFF"

            [period]
            disabled = true
            """
        ),
        encoding="utf-8",
    )
    return tmp_path


class TestConfigurations:
    def test_load(self, conf_dir):
        configs = Configurations.load("settings.conf", conf_dir)
        assert configs["log_level"] == "debug"
        assert configs.get_int("timeout") == 30
        assert configs.key == "settings"
        assert configs.name == "settings.conf"
        assert configs.dir == conf_dir

    def test_load_default_file(self, conf_dir):
        configs = Configurations.load("converters.conf", conf_dir)
        assert conf_dir.joinpath("converters.conf").is_file()
        assert configs.sections == ["color", "period"]
        assert configs.get_section("color")["default"] == "#FFF"
        assert not configs.get_section("period").enabled

    def test_load_missing(self, tmp_path):
        with pytest.raises(ConfigurationUnavailableError):
            Configurations.load("missing.conf", tmp_path)
        with pytest.raises(ConfigurationUnavailableError):
            Configurations.load("missing.conf", tmp_path.joinpath("missing"))

        configs = Configurations.load("missing.conf", tmp_path, require=False, enabled="no")
        assert len(configs.sections) == 0
        assert not configs.enabled

    def test_load_invalid(self, tmp_path):
        tmp_path.joinpath("invalid.conf").write_text("[color\n", encoding="utf-8")
        with pytest.raises(ConfigurationUnavailableError):
            Configurations.load("invalid.conf", tmp_path)

    def test_sections(self, tmp_path):
        configs = Configurations("converters.conf", tmp_path)
        configs["color"] = {"default": "red"}
        configs.update({"color": {"default": "blue", "name": "Colors"}}, replace=False)
        assert isinstance(configs["color"], Configurations)
        assert configs["color"]["default"] == "red"
        assert configs["color"]["name"] == "Colors"
        assert configs.has_section("color")
        assert not configs.has_section("enum")

        enum = configs.get_section("enum", defaults={"default": "READY"})
        assert enum["default"] == "READY"
        assert not configs.has_section("enum")

        configs.get_section("enum", ensure_exists=True)
        assert configs.has_section("enum")
        with pytest.raises(ConfigurationUnavailableError):
            configs.get_section("period")

    def test_invalid_section(self, tmp_path):
        configs = Configurations("converters.conf", tmp_path)
        with pytest.raises(ConfigurationError):
            configs._create_section("color", ["red"])

    def test_typed_getters(self):
        configs = Configurations("test.conf", defaults={"flag": "yes", "count": "3", "ratio": "0.5"})
        assert configs.get_bool("flag") is True
        assert configs.get_int("count") == 3
        assert configs.get_float("ratio") == 0.5
        assert configs.get_bool("missing", default=False) is False
        assert configs.get(["flag", "count", "missing"]) == {"flag": "yes", "count": "3"}

    def test_enabled(self):
        configs = Configurations("test.conf")
        assert configs.enabled
        configs.enabled = False
        assert not configs.enabled

    def test_copy(self):
        configs = Configurations("test.conf", defaults={"color": {"default": "red"}})
        copy = configs.copy()
        copy["color"]["default"] = "blue"
        assert configs["color"]["default"] == "red"


class TestSettings:
    def test_settings(self, conf_dir):
        settings = Settings(conf_dir=conf_dir)
        assert settings["name"] == "propconv"
        assert settings.log_level == "debug"
        assert settings.timeout == "30"
        assert logging.getLogger().level == logging.DEBUG
        with pytest.raises(AttributeError):
            settings.unknown

    def test_settings_missing(self, tmp_path):
        settings = Settings("app", conf_dir=tmp_path, log_level="warning")
        assert settings["name"] == "app"
        assert logging.getLogger().level == logging.WARNING

    def test_logging_conf(self, tmp_path):
        tmp_path.joinpath("logging.default.conf").write_text(
            dedent(
                """\
                [loggers]
                keys = root

                [handlers]
                keys = console

                [formatters]
                keys = console

                [logger_root]
                level = ERROR
                handlers = console

                [handler_console]
                class = StreamHandler
                formatter = console
                args = (sys.stdout,)

                [formatter_console]
                format = %%(name)s - %%(message)s
                """
            ),
            encoding="utf-8",
        )
        Settings(conf_dir=tmp_path)
        assert tmp_path.joinpath("logging.conf").is_file()
        assert logging.getLogger().level == logging.ERROR

    def test_load(self, conf_dir):
        context = propconv.load(conf_dir)
        assert isinstance(context, ConverterContext)
        assert list(context.keys()) == ["color", "enum", "char"]
        assert context.convert(Color, None) == Color.WHITE
