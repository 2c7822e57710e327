"""
Public call surface for safe-wipe.

This is the outermost layer of the library and the only place that
reaches for the process's standard streams; everything below receives
them through WipeConfig.
"""

from __future__ import annotations

import sys
from typing import Awaitable, Mapping, Optional, Union, overload

from .config import Overrides, PathLike, WipeConfig
from .wiper import SafeWipe


def process_defaults() -> WipeConfig:
    """
    Return the built-in defaults bound to the current process streams.
    """

    return WipeConfig(
        input_stream=sys.stdin,
        output_stream=sys.stdout,
        error_stream=sys.stderr,
    )


@overload
def wipe(target: Union[Mapping, WipeConfig]) -> SafeWipe: ...


@overload
def wipe(target: PathLike, config: Optional[Overrides] = None) -> Awaitable[None]: ...


def wipe(target, config=None):
    """
    Guarded recursive wipe of a directory.

    ``await wipe(directory, config)`` runs the checks and deletes the
    directory. Passing a configuration as the only argument instead
    returns a SafeWipe bound to it, to be awaited as
    ``await instance(directory)`` as many times as needed.
    """

    if isinstance(target, (Mapping, WipeConfig)):
        return SafeWipe(target, base=process_defaults())

    return _wipe_once(target, config)


async def _wipe_once(directory: PathLike, config: Optional[Overrides]) -> None:
    await SafeWipe(config, base=process_defaults()).wipe(directory)
