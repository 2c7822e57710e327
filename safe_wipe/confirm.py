"""
Confirmation gate for wiping a non-empty directory.

The gate is only consulted once the emptiness check has found entries
worth protecting. It either allows the wipe outright (force mode),
refuses it without asking (non-interactive mode), or asks the operator
a single yes/no question.
"""

from __future__ import annotations

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, TextIO

from .config import WipeConfig
from .errors import ConfigurationError

LOG = logging.getLogger(__name__)

_AFFIRMATIVE = re.compile(r"y(es)?", re.IGNORECASE)


class GateState(Enum):
    # AWAITING_CHECK is the entry state; ALLOW and REJECT are terminal.
    AWAITING_CHECK = "awaiting_check"
    PROMPTING = "prompting"
    ALLOW = "allow"
    REJECT = "reject"


class LineReader(ABC):
    """
    Abstract "ask one question, read one line" interface.
    """

    @abstractmethod
    async def question(self, text: str) -> str:
        """
        Show ``text`` to the operator and return their answer without the
        trailing line terminator.
        """

    @abstractmethod
    def close(self) -> None:
        """
        Release the reader. The underlying streams stay open.
        """


class StreamLineReader(LineReader):
    """
    LineReader bound to a pair of text streams.

    The blocking ``readline`` runs in a worker thread so the event loop
    is free while the operator thinks. End of input yields an empty
    answer.
    """

    def __init__(self, input_stream: Optional[TextIO], output_stream: Optional[TextIO]) -> None:
        if input_stream is None or output_stream is None:
            raise ConfigurationError(
                "interactive confirmation requires both an input and an output stream"
            )
        self._input = input_stream
        self._output = output_stream
        self._closed = False

    async def question(self, text: str) -> str:
        if self._closed:
            raise ConfigurationError("line reader is already closed")

        self._output.write(text)
        self._output.flush()
        line = await asyncio.to_thread(self._input.readline)
        return line.rstrip("\r\n")

    def close(self) -> None:
        self._closed = True


ReaderFactory = Callable[[Optional[TextIO], Optional[TextIO]], LineReader]


def is_affirmative(answer: str) -> bool:
    """
    Return True for answers starting with "y" or "yes", in any case.
    """

    return _AFFIRMATIVE.match(answer) is not None


async def run_confirmation_gate(
    config: WipeConfig,
    reader_factory: ReaderFactory = StreamLineReader,
) -> GateState:
    """
    Decide whether a non-empty directory may be wiped.

    Returns GateState.ALLOW or GateState.REJECT. There is no re-prompt:
    any non-affirmative answer is final.
    """

    state = GateState.AWAITING_CHECK

    if config.force:
        state = GateState.ALLOW
        LOG.debug("Force mode set; skipping confirmation")
        return state

    if not config.interactive:
        state = GateState.REJECT
        LOG.debug("Non-interactive mode; refusing to wipe a non-empty directory")
        return state

    LOG.debug("Gate state: %s -> %s", state.value, GateState.PROMPTING.value)
    state = GateState.PROMPTING

    reader = reader_factory(config.input_stream, config.output_stream)
    try:
        answer = await reader.question(config.messages.confirm)
    finally:
        reader.close()

    state = GateState.ALLOW if is_affirmative(answer) else GateState.REJECT
    LOG.debug("Operator answered %r; gate state: %s", answer, state.value)
    return state
