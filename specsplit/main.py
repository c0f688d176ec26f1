"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import signal
import sys
from argparse import ArgumentError
from typing import TYPE_CHECKING

from .args import parse_args
from .config import VERSION, SpecSplitConfig
from .core import SplitOptions, run
from .exceptions import (
    ChunkingError,
    ConfigurationError,
    ExtractionError,
    InternalInvariantError,
    SysExit,
)
from .i18n import SPECSPLIT_NAME, translate
from .logging_extras import LogLevel, create_logger
from .specprint import ColorMode, bold_line, print_error, print_stdout

if TYPE_CHECKING:
    from typing import Final

    from .args import SpecSplitArgs


class ExitCodes:
    CONFIGURATION_ERROR: "Final" = 1
    EXTRACTION_ERROR: "Final" = 2
    INTERNAL_ERROR: "Final" = 3
    USAGE_ERROR: "Final" = 22


logger = create_logger("main")


def options_from_args(args: "SpecSplitArgs") -> SplitOptions:
    return SplitOptions(
        num_chunks=args.chunks,
        print_chunk=args.print_chunk,
        print_debug=args.print_debug,
        mode=args.mode,
        file_pattern=args.pattern,
    )


def cli_split() -> None:
    args = parse_args()
    ColorMode.set_value(args.color)
    if args.version:
        print_stdout(f"{bold_line(SPECSPLIT_NAME)} v{VERSION}")
        return

    try:
        LogLevel.set_name(args.log_level)
        options = options_from_args(args)
        # bad chunk numbers should fail before even looking for the test dir:
        options.validate()
        test_dir = args.test_dir_path
        if test_dir is None:
            raise ConfigurationError(translate("test directory required as the argument"))
        logger.debug("Running with {}", options)
        output = run(options, test_dir)
    except (ConfigurationError, ChunkingError) as exc:
        print_error(str(exc))
        raise SysExit(ExitCodes.CONFIGURATION_ERROR) from exc
    except ExtractionError as exc:
        print_error(str(exc))
        raise SysExit(ExitCodes.EXTRACTION_ERROR) from exc
    except InternalInvariantError as exc:
        print_error(str(exc))
        raise SysExit(ExitCodes.INTERNAL_ERROR) from exc

    print_stdout(output)


def main(*, embed: bool = False) -> None:
    if not embed:
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    try:
        try:
            SpecSplitConfig.get_config()
            parse_args()
        except ArgumentError as exc:
            print_error(str(exc))
            raise SysExit(ExitCodes.USAGE_ERROR) from exc
        except ConfigurationError as exc:
            print_error(str(exc))
            raise SysExit(ExitCodes.CONFIGURATION_ERROR) from exc
        cli_split()
    except BrokenPipeError:
        sys.exit(0)
    except SysExit as exc:
        sys.exit(exc.code)
    sys.exit(0)


if __name__ == "__main__":
    main()
