"""
Licensed under GPLv3, see https://www.gnu.org/licenses/

Best-effort scanning of Ginkgo test sources.

Only single-line declarations with string literals are recognized:
names built by concatenation, split over several lines or computed at
runtime are not, and such files are reported as having no declarations.
"""

import re
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DEFAULT_SOURCE_ENCODING, SplitModeValues
from .exceptions import ConfigurationError, ExtractionError, MalformedFileError
from .i18n import translate
from .logging_extras import create_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Final


TOP_DESCRIBE_RE: "Final" = re.compile(r'var _ = Describe\("([^"]+)", func\(.*')
DESCRIBE_CALL_RE: "Final" = re.compile(r"\bDescribe\((.*)")
LABEL_CALL_RE: "Final" = re.compile(r"\bLabel\(([^()]*)\)")
STRING_LITERAL_RE: "Final" = re.compile(r'"([^"]*)"')


logger = create_logger("extractor")


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding=DEFAULT_SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise ExtractionError(path=path, error=exc) from exc


def extract_describes(path: Path, text: str) -> list[str]:
    describes = []
    for match in TOP_DESCRIBE_RE.finditer(text):
        logger.trace("{}: matched {!r}", path, match.group(0))
        describes.append(match.group(1).strip())
    if not describes:
        raise MalformedFileError(path=path, pattern=translate("top level describes"))
    return describes


def extract_labels(path: Path, text: str) -> list[str]:
    labels = []
    for describe_match in DESCRIBE_CALL_RE.finditer(text):
        for label_match in LABEL_CALL_RE.finditer(describe_match.group(1)):
            logger.trace("{}: matched {!r}", path, label_match.group(0))
            labels.extend(
                label.strip()
                for label in STRING_LITERAL_RE.findall(label_match.group(1))
                if label.strip()
            )
    if not labels:
        raise MalformedFileError(path=path, pattern=translate("labeled describes"))
    return labels


EXTRACTORS: "Final[dict[str, Callable[[Path, str], list[str]]]]" = {
    SplitModeValues.NAME: extract_describes,
    SplitModeValues.LABEL: extract_labels,
}


def find_spec_files(directory: Path, pattern: str) -> list[Path]:
    return sorted(directory.glob(pattern))


def extract_from_files(paths: "Iterable[Path]", mode: str) -> set[str]:
    try:
        extract = EXTRACTORS[mode]
    except KeyError as exc:
        unknown_mode = translate("unknown mode: {!r}").format(mode)
        raise ConfigurationError(unknown_mode) from exc
    specs: set[str] = set()
    for path in paths:
        text = read_source(path)
        try:
            found = extract(path, text)
        except MalformedFileError as exc:
            logger.warning("{}", exc)
            continue
        logger.debug("{}: found {}", path, found)
        specs.update(found)
    return specs


def find_specs(directory: Path, pattern: str, mode: str) -> set[str]:
    logger.info("Finding {} for ginkgo tests in path: {}", mode, directory)
    if not directory.is_dir():
        raise ExtractionError(
            path=directory,
            error=NotADirectoryError(translate("not a directory")),
        )
    return extract_from_files(find_spec_files(directory, pattern), mode)
