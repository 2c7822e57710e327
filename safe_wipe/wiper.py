"""
High-level orchestration for safe-wipe.

The orchestrator is responsible for:
  - running the containment check when a parent is configured,
  - checking whether the target is effectively empty,
  - asking for confirmation when it is not, and
  - only then handing the directory to the recursive delete.

The steps form an ordered list evaluated one after the other; the first
failure wins and later steps never run. Concurrent wipes of the same
directory are not coordinated, so the check-then-delete sequence is not
atomic.
"""

from __future__ import annotations

import logging
import os
from typing import Awaitable, Callable, List, Optional, Tuple

from .checks import Lister, check_containment, is_effectively_empty
from .config import Overrides, PathLike, WipeConfig, resolve_config
from .confirm import GateState, ReaderFactory, StreamLineReader, run_confirmation_gate
from .errors import WipeAborted
from .fs import list_entries, remove_tree

LOG = logging.getLogger(__name__)

Remover = Callable[[str], Awaitable[None]]
Step = Tuple[str, Callable[[], Awaitable[None]]]


async def run_wipe(
    directory: PathLike,
    config: WipeConfig,
    *,
    remover: Remover = remove_tree,
    lister: Lister = list_entries,
    reader_factory: ReaderFactory = StreamLineReader,
) -> None:
    """
    Wipe ``directory`` if every safety check passes.

    Raises ContainedError or WipeAborted when a check refuses, and lets
    collaborator failures (OSError) propagate. Unless ``config.silent``
    is set, the failure message is echoed to ``config.error_stream``
    before the exception is re-raised.
    """

    path = os.fspath(directory)

    async def containment() -> None:
        check_containment(path, config.parent, config.messages)

    async def emptiness_and_confirmation() -> None:
        if await is_effectively_empty(path, config.ignore, lister=lister):
            return
        state = await run_confirmation_gate(config, reader_factory)
        if state is GateState.REJECT:
            raise WipeAborted(config.messages.abort)

    async def delete() -> None:
        LOG.info("Wiping %s", path)
        await remover(path)

    steps: List[Step] = []
    if config.parent:
        steps.append(("containment", containment))
    steps.append(("emptiness", emptiness_and_confirmation))
    steps.append(("delete", delete))

    try:
        for name, step in steps:
            LOG.debug("Running step %s for %s", name, path)
            await step()
    except Exception as exc:
        if not config.silent:
            _echo_failure(config, exc)
        raise


def _echo_failure(config: WipeConfig, exc: Exception) -> None:
    if config.error_stream is None:
        return
    message = getattr(exc, "message", None) or str(exc)
    config.error_stream.write(message + "\n")
    config.error_stream.flush()


class SafeWipe:
    """
    A wipe function bound to a once-resolved configuration.

    Every call shares the same defaults, messages and streams. Per-call
    overrides are merged on top of the bound configuration for that
    call only.
    """

    def __init__(
        self,
        config: Optional[Overrides] = None,
        *,
        base: Optional[WipeConfig] = None,
        remover: Remover = remove_tree,
        lister: Lister = list_entries,
        reader_factory: ReaderFactory = StreamLineReader,
    ) -> None:
        self.config = resolve_config(config, base=base)
        self._remover = remover
        self._lister = lister
        self._reader_factory = reader_factory

    async def wipe(self, directory: PathLike, overrides: Optional[Overrides] = None) -> None:
        config = self.config
        if overrides is not None:
            config = resolve_config(overrides, base=config)
        await run_wipe(
            directory,
            config,
            remover=self._remover,
            lister=self._lister,
            reader_factory=self._reader_factory,
        )

    async def __call__(self, directory: PathLike, overrides: Optional[Overrides] = None) -> None:
        await self.wipe(directory, overrides)

    def __repr__(self) -> str:
        return f"SafeWipe({self.config!r})"
