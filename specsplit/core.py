"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .chunks import get_chunk
from .config import SplitModeValues
from .exceptions import ConfigurationError
from .extractor import find_specs
from .filters import create_filter
from .i18n import translate
from .logging_extras import create_logger
from .trie import find_minimal_word_prefixes

if TYPE_CHECKING:
    from collections.abc import Iterable


logger = create_logger("core")


@dataclass(frozen=True)
class SplitOptions:
    num_chunks: int = 1
    print_chunk: int = 0
    print_debug: bool = False
    mode: str = SplitModeValues.NAME
    file_pattern: str = "*_test.go"

    def validate(self) -> None:
        if self.num_chunks < 1:
            raise ConfigurationError(
                translate("the number of chunks must be positive, got {}").format(
                    self.num_chunks,
                ),
            )
        if self.print_chunk < 0:
            raise ConfigurationError(
                translate("the chunk to print must not be negative, got {}").format(
                    self.print_chunk,
                ),
            )
        if self.print_chunk >= self.num_chunks:
            raise ConfigurationError(
                translate(
                    "the chunk to print ({}) must be a smaller number"
                    " than the number of chunks ({})",
                ).format(self.print_chunk, self.num_chunks),
            )
        if self.mode not in {SplitModeValues.NAME, SplitModeValues.LABEL}:
            raise ConfigurationError(
                translate("unknown mode: {!r}").format(self.mode),
            )
        if not self.file_pattern:
            raise ConfigurationError(translate("file pattern must not be empty"))


def get_path_relative_to_cwd(path: Path) -> Path:
    return Path(os.path.relpath(os.path.abspath(path)))


def prepare_items(specs: "Iterable[str]", mode: str) -> list[str]:
    if mode == SplitModeValues.NAME:
        return sorted(find_minimal_word_prefixes(specs))
    return sorted(set(specs))


def split_specs(specs: "Iterable[str]", options: SplitOptions) -> str:
    items = prepare_items(specs, options.mode)
    logger.debug("{} items after preparing {} specs", len(items), options.mode)
    if options.print_debug:
        return "\n".join(items)
    chunk = get_chunk(items, options.num_chunks, options.print_chunk)
    logger.info(
        "chunk {} of {}: {} of {} items",
        options.print_chunk, options.num_chunks, len(chunk), len(items),
    )
    return create_filter(chunk, options.mode)


def run(options: SplitOptions, directory: Path) -> str:
    options.validate()
    specs = find_specs(get_path_relative_to_cwd(directory), options.file_pattern, options.mode)
    return split_specs(specs, options)
