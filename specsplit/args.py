"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import sys
from argparse import ArgumentError, ArgumentParser, Namespace
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from .config import ColorFlagValues, SpecSplitConfig, SplitModeValues
from .i18n import SPECSPLIT_NAME, translate
from .logging_extras import LOG_LEVELS

if TYPE_CHECKING:
    from typing import Any, NoReturn

PossibleArgValuesTypes = list[str] | str | bool | int | None


class Arg(NamedTuple):
    short: str | None
    long: str | None
    default: PossibleArgValuesTypes
    doc: str | None
    choices: list[str] | None = None


ArgSchema = list[Arg]


def get_bool_opts() -> ArgSchema:
    return [
        Arg(
            None, "print-debug", default=False,
            doc=translate("print all spec prefixes in non-filter format, use for debugging"),
        ),
        Arg(
            "V", "version", default=False,
            doc=translate("print version and exit"),
        ),
    ]


def get_int_opts() -> ArgSchema:
    return [
        Arg(
            None, "chunks", SpecSplitConfig().split.Chunks.get_int(),
            translate("number of chunks to create filters for"),
        ),
        Arg(
            None, "print-chunk", SpecSplitConfig().split.PrintChunk.get_int(),
            translate("chunk to print a filter for, starting from 0"),
        ),
    ]


def get_str_opts() -> ArgSchema:
    return [
        Arg(
            None, "mode", SpecSplitConfig().split.Mode.get_str(),
            translate(
                "'name' to focus on top level describe names with a regexp,"
                " 'label' to filter by describe labels",
            ),
            choices=[SplitModeValues.NAME, SplitModeValues.LABEL],
        ),
        Arg(
            None, "pattern", SpecSplitConfig().split.FilePattern.get_str(),
            translate("glob pattern of test source files inside of the test directory"),
        ),
        Arg(
            None, "log-level", SpecSplitConfig().split.LogLevel.get_str(),
            translate("configure the logging level, one of: {}").format(
                ", ".join(LOG_LEVELS),
            ),
        ),
        Arg(
            None, "color", SpecSplitConfig().ui.Color.get_str(),
            translate("colorize the output on stderr"),
            choices=[ColorFlagValues.AUTO, ColorFlagValues.ALWAYS, ColorFlagValues.NEVER],
        ),
        Arg(
            None, "specsplit-config", None,
            translate("path to custom specsplit config"),
        ),
    ]


class SpecSplitArgs(Namespace):
    test_dir: str | None
    chunks: int
    print_chunk: int
    print_debug: bool
    mode: str
    pattern: str
    log_level: str
    color: str
    specsplit_config: str | None
    version: bool

    @property
    def test_dir_path(self) -> Path | None:
        return Path(self.test_dir) if self.test_dir else None

    @classmethod
    def from_namespace(cls, namespace: Namespace) -> "SpecSplitArgs":
        result = cls()
        for key, value in namespace.__dict__.items():
            setattr(result, key, value)
        return result


class SpecSplitArgumentParser(ArgumentParser):

    def error(self, message: str) -> "NoReturn":
        exc = sys.exc_info()[1]
        if exc:
            raise exc
        # unrecognized arguments are reported without an active exception:
        raise ArgumentError(None, message)

    def add_letter_andor_opt(
            self,
            *,
            letter: str | None = None,
            opt: str | None = None,
            **kwargs: "Any",
    ) -> None:
        names = []
        if letter:
            names.append("-" + letter)
        if opt:
            names.append("--" + opt)
        self.add_argument(*names, **kwargs)


class CachedArgs:
    args: SpecSplitArgs | None = None


def get_parser(app: str) -> SpecSplitArgumentParser:
    parser = SpecSplitArgumentParser(
        prog=app,
        description=translate(
            "Split ginkgo specs into balanced chunks and print a focus filter for one of them.",
        ),
    )
    parser.add_argument(
        "test_dir", nargs="?", default=None,
        help=translate("directory with test source files"),
    )
    for action_type, opt_list, arg_type in (
            ("store_true", get_bool_opts(), None),
            ("store", get_int_opts(), int),
            ("store", get_str_opts(), None),
    ):
        for arg in opt_list:
            kwargs: "dict[str, Any]" = {
                "action": action_type,
                "default": arg.default,
                "help": arg.doc,
            }
            if arg_type:
                kwargs["type"] = arg_type
            if arg.choices:
                kwargs["choices"] = arg.choices
            parser.add_letter_andor_opt(letter=arg.short, opt=arg.long, **kwargs)
    return parser


def _parse_args(args: list[str] | None = None) -> SpecSplitArgs:
    if args is None:
        args = sys.argv[1:]
    app_name = Path(sys.argv[0]).name if sys.argv else SPECSPLIT_NAME
    parser = get_parser(app=app_name)
    return SpecSplitArgs.from_namespace(parser.parse_args(args))


def parse_args(args: list[str] | None = None) -> SpecSplitArgs:
    if CachedArgs.args:
        return CachedArgs.args
    parsed_args = _parse_args(args=args)
    CachedArgs.args = parsed_args
    return parsed_args

