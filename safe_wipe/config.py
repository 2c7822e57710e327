"""
Configuration model for safe-wipe.

A WipeConfig is resolved once per call (or once per bound SafeWipe
instance) and passed down into the checks so behavior can be adjusted
without relying on global state. Process streams are deliberately not
referenced here; the public surface in ``api`` injects them.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional, TextIO, Union

LOG = logging.getLogger(__name__)

DEFAULT_IGNORE: FrozenSet[str] = frozenset({".DS_Store", "Thumbs.db"})

DEFAULT_CONTAINED_MESSAGE = (
    "Source folder seems to be contained by destination folder.\n"
    "Let's not wipe everything out."
)
DEFAULT_CONFIRM_MESSAGE = (
    "[?] Destination folder will be wiped out. "
    "Are you sure you want to proceed? [y/N] "
)
DEFAULT_ABORT_MESSAGE = "Destination folder not empty, aborting"

# Caller-facing override keys mapped onto WipeConfig field names.
_OVERRIDE_KEYS = {
    "input": "input_stream",
    "output": "output_stream",
    "error": "error_stream",
    "ignore": "ignore",
    "parent": "parent",
    "interactive": "interactive",
    "force": "force",
    "silent": "silent",
    "messages": "messages",
}

PathLike = Union[str, "os.PathLike[str]"]
Overrides = Union[Mapping[str, Any], "WipeConfig"]


@dataclass(frozen=True)
class Messages:
    """
    User-facing texts used by the safety checks.
    """

    contained: str = DEFAULT_CONTAINED_MESSAGE
    confirm: str = DEFAULT_CONFIRM_MESSAGE
    abort: str = DEFAULT_ABORT_MESSAGE


@dataclass(frozen=True)
class WipeConfig:
    """
    Fully resolved configuration for a guarded wipe.

    input_stream/output_stream are only used when a confirmation prompt
    is shown; error_stream receives failure messages unless ``silent``
    is set or it is None.
    """

    input_stream: Optional[TextIO] = None
    output_stream: Optional[TextIO] = None
    error_stream: Optional[TextIO] = None
    ignore: FrozenSet[str] = DEFAULT_IGNORE
    parent: Optional[PathLike] = None
    interactive: bool = True
    force: bool = False
    silent: bool = False
    messages: Messages = field(default_factory=Messages)


def resolve_config(
    overrides: Optional[Overrides] = None,
    *,
    base: Optional[WipeConfig] = None,
) -> WipeConfig:
    """
    Overlay caller overrides onto ``base`` field by field.

    ``overrides`` is either a partial mapping using the documented keys
    (input, output, error, ignore, parent, interactive, force, silent,
    messages) or an already resolved WipeConfig. A partial ``messages``
    mapping only replaces the keys it names. Unknown keys are logged
    and ignored; this function never raises.
    """

    if base is None:
        base = WipeConfig()

    if overrides is None:
        return base

    if isinstance(overrides, WipeConfig):
        return overrides

    if not isinstance(overrides, Mapping):
        LOG.warning("Ignoring configuration of unexpected type %s", type(overrides).__name__)
        return base

    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        name = _OVERRIDE_KEYS.get(key)
        if name is None:
            LOG.warning("Ignoring unknown configuration key %r", key)
            continue

        if name == "ignore":
            value = _as_ignore_set(base.ignore, value)
        elif name == "messages":
            value = _merge_messages(base.messages, value)
        elif name in ("interactive", "force", "silent"):
            value = bool(value)
        changes[name] = value

    return dataclasses.replace(base, **changes)


def _as_ignore_set(base: FrozenSet[str], value: Optional[Iterable[str]]) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    if not isinstance(value, Iterable):
        LOG.warning("Ignoring ignore list of unexpected type %s", type(value).__name__)
        return base
    return frozenset(value)


def _merge_messages(base: Messages, value: Any) -> Messages:
    if value is None:
        return base
    if isinstance(value, Messages):
        return value
    if not isinstance(value, Mapping):
        LOG.warning("Ignoring messages of unexpected type %s", type(value).__name__)
        return base

    known = {f.name for f in dataclasses.fields(Messages)}
    changes = {}
    for key, text in value.items():
        if key not in known:
            LOG.warning("Ignoring unknown message key %r", key)
            continue
        if text is None:
            continue
        changes[key] = str(text)

    return dataclasses.replace(base, **changes)
