"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import math
from typing import TYPE_CHECKING

from .exceptions import ChunkingError, InternalInvariantError
from .i18n import translate

if TYPE_CHECKING:
    from collections.abc import Iterable


def create_chunks(items: "Iterable[str]", num_chunks: int) -> list[list[str]]:
    """
    Split sorted items into `num_chunks` contiguous chunks of
    ceil(len / num_chunks) items, the last ones may be shorter.
    Deterministic on inputs.
    """
    specs = sorted(items)
    num_specs = len(specs)
    if num_chunks < 1:
        not_positive = translate("number of chunks must be positive, got {}").format(num_chunks)
        raise ChunkingError(not_positive)
    if num_specs < num_chunks:
        too_many_chunks = translate(
            "have more desired chunks ({}) than specs ({})",
        ).format(num_chunks, num_specs)
        raise ChunkingError(too_many_chunks)

    interval = math.ceil(num_specs / num_chunks)
    chunks = []
    current_idx = 0
    for _chunk_idx in range(num_chunks):
        next_idx = min(current_idx + interval, num_specs)
        chunks.append(specs[current_idx:next_idx])
        current_idx = next_idx
    return chunks


def get_chunk(items: "Iterable[str]", num_chunks: int, print_chunk: int) -> list[str]:
    chunk = create_chunks(items, num_chunks)[print_chunk]
    if not chunk:
        # the caller could ignore a plain error and silently skip the specs:
        empty_chunk = translate("bug: chunk {} has no elements").format(print_chunk)
        raise InternalInvariantError(empty_chunk)
    return chunk
