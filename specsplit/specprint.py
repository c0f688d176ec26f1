"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import sys
from typing import TYPE_CHECKING

from .config import DECORATION, ColorFlagValues
from .i18n import translate

if TYPE_CHECKING:
    from typing import Any, Final, TextIO


ESCAPE: "Final" = "\033"
BOLD_START: "Final" = f"{ESCAPE}[0;1m"
BOLD_RESET: "Final" = f"{ESCAPE}[0m"
COLOR_RESET: "Final" = f"{ESCAPE}[0;0m"


class ColorMode:

    value: str = ColorFlagValues.AUTO

    @classmethod
    def set_value(cls, value: str) -> None:
        cls.value = value

    @classmethod
    def get_value(cls) -> str:
        return cls.value


def color_enabled() -> bool:
    color = ColorMode.get_value()
    if color == ColorFlagValues.NEVER:
        return False
    if color == ColorFlagValues.ALWAYS:
        return True
    try:
        if (sys.stderr.isatty() and sys.stdout.isatty()):
            return True
    except Exception:
        return False
    return False


def _print(
        destination: "TextIO",
        message: "Any" = "",
        end: str = "\n",
        *,
        flush: bool = False,
) -> None:
    if not isinstance(message, str):
        message = str(message)
    destination.write(f"{message}{end}")
    if flush:
        destination.flush()


def print_stdout(
        message: "Any" = "",
        end: str = "\n",
        *,
        flush: bool = False,
) -> None:
    _print(sys.stdout, message=message, end=end, flush=flush)


def print_stderr(
        message: "Any" = "",
        end: str = "\n",
        *,
        flush: bool = False,
) -> None:
    _print(sys.stderr, message=message, end=end, flush=flush)


class Colors:
    black = 0
    red = 1
    green = 2
    yellow = 3
    blue = 4
    purple = 5
    cyan = 6
    white = 7


class ColorsHighlight:
    black = 8
    red = 9
    green = 10
    yellow = 11
    blue = 12
    purple = 13
    cyan = 14
    white = 15


def color_start(
        color_number: int,
) -> str:
    result = ""
    if color_number >= ColorsHighlight.black:
        result += BOLD_START
        color_number -= ColorsHighlight.black
    result += f"{ESCAPE}[03{color_number}m"
    return result


def color_line(line: str, color_number: int) -> str:
    if not color_enabled():
        return line
    return f"{color_start(color_number)}{line}{COLOR_RESET}"


def bold_line(line: str) -> str:
    if not color_enabled():
        return line
    return f"{BOLD_START}{line}{BOLD_RESET}"


def print_error(
        message: str = "",
        *,
        flush: bool = False,
) -> None:
    print_stderr(
        " ".join([
            color_line(" ".join((DECORATION, translate("error:"))), ColorsHighlight.red),
            message,
        ]),
        flush=flush,
    )
