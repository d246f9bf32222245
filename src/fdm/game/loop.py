"""Synchronous read-eval-print loop for the text adventure."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fdm.game.commands import parse_command
from fdm.game.world import State, describe, process

logger = logging.getLogger(__name__)

UNRECOGNIZED = "Unrecognized command"
GOODBYE = "Goodbye!"


def run_loop(
    state: State,
    *,
    read: Callable[[], str | None],
    write: Callable[[str], None],
) -> State:
    """Play until the player quits or input runs out.

    *read* returns the next line, or ``None`` at end of input. Unparseable
    lines are reported and the loop continues.

    Returns:
        The last state reached before the loop ended.
    """
    write(describe(state))
    while True:
        line = read()
        if line is None:
            logger.debug("Input exhausted; ending game")
            write(GOODBYE)
            return state

        command = parse_command(line)
        if command is None:
            logger.debug("Unrecognized command: %r", line)
            write(UNRECOGNIZED)
            continue

        output, next_state = process(state, command)
        write(output)
        if next_state is None:
            write(GOODBYE)
            return state
        state = next_state
