"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SpecSplitError(Exception):
    pass


class ConfigurationError(SpecSplitError):
    """Invalid chunk count, chunk index, mode or log level."""


@dataclass
class ExtractionError(SpecSplitError):
    path: "Path"
    error: OSError | UnicodeDecodeError

    def __post_init__(self) -> None:
        Exception.__init__(self, f"{self.path}: {self.error}")


@dataclass
class MalformedFileError(SpecSplitError):
    path: "Path"
    pattern: str

    def __post_init__(self) -> None:
        Exception.__init__(self, f"{self.path}: found no {self.pattern}, skipping")


class ChunkingError(SpecSplitError, ValueError):
    """Chunk count doesn't fit the number of items."""


class InternalInvariantError(SpecSplitError):
    pass


class SysExit(Exception):  # noqa: N818
    code: int

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Exit code: {code}")
