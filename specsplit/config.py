"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import configparser
import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .i18n import SPECSPLIT_NAME, translate

if TYPE_CHECKING:
    from typing import Final

    from typing_extensions import TypedDict

    class ConfigValueType(TypedDict):
        data_type: str
        default: str


VERSION: "Final" = "0.4.0"

DEFAULT_CONFIG_ENCODING: "Final" = "utf-8"
DEFAULT_SOURCE_ENCODING: "Final" = "utf-8"

INT: "Final" = "int"
STR: "Final" = "str"


DECORATION: "Final" = "::"


class PathConfig(Path, ABC):

    value: Path

    @classmethod
    @abstractmethod
    def get_value(cls) -> Path:
        pass

    def __new__(cls) -> Path:  # type: ignore[misc]
        return cls.get_value()


class FixedPathSingleton(PathConfig):

    @classmethod
    @abstractmethod
    def init_value(cls) -> Path:
        pass

    @classmethod
    def get_value(cls) -> Path:
        if getattr(cls, "value", None) is None:
            cls.value = cls.init_value()
        return cls.value


def pre_arg_parser(key: str, fallback: str) -> str:
    if key in sys.argv[:-1]:
        return sys.argv[
            sys.argv.index(key) + 1
        ]
    found = [
        arg.split("=", maxsplit=1)[1]
        for arg in sys.argv
        if (
            "=" in arg
            and arg.startswith(key)
        )
    ]
    if found:
        return found[0]
    return fallback


class ConfigRoot(FixedPathSingleton):
    @classmethod
    def init_value(cls) -> Path:
        return Path(
            os.environ.get(
                "XDG_CONFIG_HOME",
            )
            or Path.home() / ".config/",
        )


class ConfigPath(PathConfig):
    @classmethod
    def get_value(cls) -> Path:
        config_overridden = pre_arg_parser("--specsplit-config", "")
        if config_overridden:
            return Path(config_overridden)
        return ConfigRoot() / f"{SPECSPLIT_NAME}.conf"


class SplitModeValues:
    NAME: "Final" = "name"
    LABEL: "Final" = "label"


class ColorFlagValues:
    AUTO: "Final" = "auto"
    ALWAYS: "Final" = "always"
    NEVER: "Final" = "never"


ConfigSchemaT = dict[str, dict[str, "ConfigValueType"]]


class ConfigSchema(ConfigSchemaT):

    config_schema: ConfigSchemaT | None = None

    def __new__(cls) -> "ConfigSchemaT":  # type: ignore[misc]
        if not cls.config_schema:
            cls.config_schema = {
                "split": {
                    "Chunks": {
                        "data_type": INT,
                        "default": "1",
                    },
                    "PrintChunk": {
                        "data_type": INT,
                        "default": "0",
                    },
                    "Mode": {
                        "data_type": STR,
                        "default": SplitModeValues.NAME,
                    },
                    "FilePattern": {
                        "data_type": STR,
                        "default": "*_test.go",
                    },
                    "LogLevel": {
                        "data_type": STR,
                        "default": "error",
                    },
                },
                "ui": {
                    "Color": {
                        "data_type": STR,
                        "default": ColorFlagValues.AUTO,
                    },
                },
            }
        return cls.config_schema


def get_key_type(section_name: str, key_name: str) -> str | None:
    config_value: ConfigValueType | None = ConfigSchema().get(section_name, {}).get(key_name, None)
    if not config_value:
        return None
    return config_value.get("data_type")


class SpecSplitConfigItem:

    def __init__(self, section: configparser.SectionProxy, key: str) -> None:
        self.section = section
        self.key = key
        self.value = self.section.get(key)
        self._type_error_template = translate(
            "{key} is not '{typeof}'",
        )

    def get_int(self) -> int:
        if get_key_type(self.section.name, self.key) != INT:
            not_int_error = self._type_error_template.format(key=self.key, typeof=INT)
            raise TypeError(not_int_error)
        return int(self.value)

    def get_str(self) -> str:
        if get_key_type(self.section.name, self.key) != STR:
            not_str_error = self._type_error_template.format(key=self.key, typeof=STR)
            raise TypeError(not_str_error)
        return str(self.value)

    def __str__(self) -> str:
        return self.get_str()


class SpecSplitConfigSection:

    section: configparser.SectionProxy

    def __init__(self, section: configparser.SectionProxy) -> None:
        self.section = section

    def __getattr__(self, attr: str) -> SpecSplitConfigItem:
        return SpecSplitConfigItem(self.section, attr)

    def __repr__(self) -> str:
        return str(self.section)


class SpecSplitConfig:
    """
    Read-only view of the user config file.

    Missing file, sections or keys fall back to schema defaults,
    the file itself is never written.
    """

    _config: configparser.ConfigParser | None = None

    @classmethod
    def get_config(cls) -> configparser.ConfigParser:
        if cls._config is None:
            config = configparser.ConfigParser(interpolation=None)
            config.read_dict({
                section_name: {
                    option_name: option_schema["default"]
                    for option_name, option_schema in section.items()
                }
                for section_name, section in ConfigSchema().items()
            })
            config_path = ConfigPath()
            if config_path.exists():
                try:
                    config.read(config_path, encoding=DEFAULT_CONFIG_ENCODING)
                except configparser.Error as exc:
                    raise ConfigurationError(
                        translate("can't parse config {}:\n{}").format(config_path, exc),
                    ) from exc
            cls.validate_config(config)
            cls._config = config
        return cls._config

    @classmethod
    def validate_config(cls, config: configparser.ConfigParser) -> None:
        for section_name, section in ConfigSchema().items():
            for option_name, option_schema in section.items():
                value = config[section_name][option_name]
                if option_schema["data_type"] == INT:
                    try:
                        int(value)
                    except ValueError as exc:
                        raise ConfigurationError(
                            translate('[{}]{}="{}" is not a number').format(
                                section_name, option_name, value,
                            ),
                        ) from exc
        mode = config["split"]["Mode"]
        if mode not in {SplitModeValues.NAME, SplitModeValues.LABEL}:
            raise ConfigurationError(
                translate('[{}]{}="{}" must be one of: {}').format(
                    "split", "Mode", mode,
                    ", ".join((SplitModeValues.NAME, SplitModeValues.LABEL)),
                ),
            )

    @classmethod
    def reset(cls) -> None:
        cls._config = None

    def __getattr__(self, attr: str) -> SpecSplitConfigSection:
        return SpecSplitConfigSection(self.get_config()[attr])
