"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

from typing import TYPE_CHECKING

from .config import SplitModeValues
from .exceptions import ConfigurationError
from .i18n import translate

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Final


REGEXP_SEPARATOR: "Final" = "|"
# a prefix must be followed by another word of the full spec text:
REGEXP_TRAILING_GUARD: "Final" = " .*"
LABEL_SEPARATOR: "Final" = " || "


def create_chunk_regexp(chunk: "Sequence[str]") -> str:
    """Regexp for `ginkgo -focus <re>`."""
    if len(chunk) == 1:
        return f"{chunk[0]}{REGEXP_TRAILING_GUARD}"
    return f"({REGEXP_SEPARATOR.join(chunk)}){REGEXP_TRAILING_GUARD}"


def create_chunk_label_filter(chunk: "Sequence[str]") -> str:
    """Expression for `ginkgo -label-filter <expr>`."""
    return LABEL_SEPARATOR.join(chunk)


FILTER_CREATORS: "Final[dict[str, Callable[[Sequence[str]], str]]]" = {
    SplitModeValues.NAME: create_chunk_regexp,
    SplitModeValues.LABEL: create_chunk_label_filter,
}


def create_filter(chunk: "Sequence[str]", mode: str) -> str:
    try:
        creator = FILTER_CREATORS[mode]
    except KeyError as exc:
        unknown_mode = translate("unknown mode: {!r}").format(mode)
        raise ConfigurationError(unknown_mode) from exc
    return creator(chunk)
