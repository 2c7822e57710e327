"""
safe-wipe: recursively delete a directory only when it is safe to do so.
"""

from .api import process_defaults, wipe
from .config import Messages, WipeConfig, resolve_config
from .confirm import GateState, LineReader, StreamLineReader, is_affirmative
from .errors import (
    ConfigurationError,
    ContainedError,
    ErrorCode,
    SafeWipeError,
    WipeAborted,
    WipeRejected,
)
from .wiper import SafeWipe, run_wipe

__all__ = [
    "ConfigurationError",
    "ContainedError",
    "ErrorCode",
    "GateState",
    "LineReader",
    "Messages",
    "SafeWipe",
    "SafeWipeError",
    "StreamLineReader",
    "WipeAborted",
    "WipeConfig",
    "WipeRejected",
    "is_affirmative",
    "process_defaults",
    "resolve_config",
    "run_wipe",
    "wipe",
]
