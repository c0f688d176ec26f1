"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

from logging import Logger
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .i18n import translate
from .specprint import Colors, ColorsHighlight, color_line, print_stderr

if TYPE_CHECKING:
    from typing import Any, Final


# logrus-compatible level names, most severe first:
LOG_LEVELS: "Final[dict[str, int]]" = {
    "panic": 0,
    "fatal": 1,
    "error": 2,
    "warning": 3,
    "warn": 3,
    "info": 4,
    "debug": 5,
    "trace": 6,
}
DEFAULT_LOG_LEVEL: "Final" = "error"

# cyan is purposely skipped as it's used for the level prefix itself,
# highlight-red is used by print_error:
DEBUG_COLORS: "Final[list[int]]" = [
    Colors.red,
    Colors.green,
    Colors.yellow,
    Colors.blue,
    Colors.purple,
    Colors.white,
    ColorsHighlight.green,
    ColorsHighlight.blue,
    ColorsHighlight.purple,
    ColorsHighlight.cyan,
    ColorsHighlight.white,
]


def parse_log_level(name: str) -> int:
    try:
        return LOG_LEVELS[name.strip().lower()]
    except KeyError as exc:
        not_a_level = translate("not a valid log level: {!r}").format(name)
        raise ConfigurationError(not_a_level) from exc


class LogLevel:

    value: int = LOG_LEVELS[DEFAULT_LOG_LEVEL]

    @classmethod
    def set_value(cls, value: int) -> None:
        cls.value = value

    @classmethod
    def set_name(cls, name: str) -> None:
        cls.set_value(parse_log_level(name))

    @classmethod
    def get_value(cls) -> int:
        return cls.value

    @classmethod
    def enabled(cls, level: int) -> bool:
        return level <= cls.value


class DebugColorCounter:

    _current_color_idx = 0

    @classmethod
    def get_next(cls) -> int:
        color = DEBUG_COLORS[cls._current_color_idx]
        cls._current_color_idx += 1
        if cls._current_color_idx >= len(DEBUG_COLORS):
            cls._current_color_idx = 0
        return color


class SpecSplitLogger(Logger):  # we inherit `Logger` class only for pylint warnings to catch up on it
    def __init__(  # pylint: disable=super-init-not-called
            self,
            module_name: str,
            color: int,
    ) -> None:
        self.module_name = module_name
        self.color = color

    def _log_at(  # pylint: disable=too-many-arguments
            self,
            level_name: str,
            msg: "Any",
            args: "tuple[Any, ...]",
            kwargs: "dict[str, Any]",
            indent: int = 0,
    ) -> None:
        if not LogLevel.enabled(LOG_LEVELS[level_name]):
            return
        str_message = msg.format(*args, **kwargs) if isinstance(msg, str) else str(msg)
        print_stderr(" ".join((
            color_line(f"{level_name}:", Colors.cyan),
            f"{color_line(self.module_name, self.color)}: {' ' * indent}{str_message}",
        )))

    def error(self, msg: "Any", *args: "Any", indent: int = 0, **kwargs: "Any") -> None:
        self._log_at("error", msg, args, kwargs, indent=indent)

    def warning(self, msg: "Any", *args: "Any", indent: int = 0, **kwargs: "Any") -> None:
        self._log_at("warning", msg, args, kwargs, indent=indent)

    def info(self, msg: "Any", *args: "Any", indent: int = 0, **kwargs: "Any") -> None:
        self._log_at("info", msg, args, kwargs, indent=indent)

    def debug(self, msg: "Any", *args: "Any", indent: int = 0, **kwargs: "Any") -> None:
        self._log_at("debug", msg, args, kwargs, indent=indent)

    def trace(self, msg: "Any", *args: "Any", indent: int = 0, **kwargs: "Any") -> None:
        self._log_at("trace", msg, args, kwargs, indent=indent)


def create_logger(module_name: str) -> SpecSplitLogger:
    return SpecSplitLogger(module_name=module_name, color=DebugColorCounter.get_next())
