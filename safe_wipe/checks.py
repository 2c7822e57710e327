"""
Deterministic safety checks run before a wipe.

Both checks fail fast: containment raises before the directory is ever
listed, and the emptiness check performs exactly one listing of the
target's immediate entries.
"""

from __future__ import annotations

import logging
import os
from typing import AbstractSet, Awaitable, Callable, List, Optional

from .config import Messages, PathLike
from .errors import ContainedError
from .fs import list_entries

LOG = logging.getLogger(__name__)

Lister = Callable[[str], Awaitable[List[str]]]


def is_contained(directory: PathLike, parent: PathLike) -> bool:
    """
    Return True when ``directory`` is an ancestor of, or identical to, ``parent``.

    Both paths are made absolute and normalized first, so relative
    segments and trailing separators cannot hide the relation. The test
    is a textual prefix match on the normalized strings.
    """

    resolved_directory = os.path.abspath(os.fspath(directory))
    resolved_parent = os.path.abspath(os.fspath(parent))
    return resolved_parent.startswith(resolved_directory)


def check_containment(
    directory: PathLike,
    parent: Optional[PathLike],
    messages: Messages,
) -> None:
    if not parent:
        return

    if is_contained(directory, parent):
        LOG.debug("Refusing to wipe %s: it contains protected %s", directory, parent)
        raise ContainedError(messages.contained)


async def is_effectively_empty(
    directory: PathLike,
    ignore: AbstractSet[str],
    *,
    lister: Lister = list_entries,
) -> bool:
    """
    Return True when ``directory`` is missing or holds only ignored entries.

    Listing failures other than a missing directory propagate.
    """

    try:
        entries = await lister(os.fspath(directory))
    except FileNotFoundError:
        LOG.debug("%s does not exist; treating as empty", directory)
        return True

    remaining = [name for name in entries if name not in ignore]
    LOG.debug(
        "%s has %d entries, %d not ignored",
        directory,
        len(entries),
        len(remaining),
    )
    return not remaining
