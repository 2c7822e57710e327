"""
Filesystem collaborators for safe-wipe.

These are thin asynchronous wrappers around the standard library. The
orchestrator only depends on their contracts, so tests and embedders
can substitute their own implementations.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from typing import List

LOG = logging.getLogger(__name__)


async def list_entries(path: str) -> List[str]:
    """
    Return the names of the immediate entries of ``path``.

    Raises FileNotFoundError when the path does not exist and any other
    OSError unchanged.
    """

    return await asyncio.to_thread(os.listdir, path)


async def remove_tree(path: str) -> None:
    """
    Recursively remove ``path``. A path that does not exist is not an error.
    """

    try:
        await asyncio.to_thread(shutil.rmtree, path)
    except FileNotFoundError:
        LOG.debug("Nothing to remove at %s", path)
