"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of whichever ProgramState is connected to the
current context, so library modules (slicer, aggregator, walker) can log
without having a state passed down to them. With no state connected,
LOG() stays silent, which keeps library use quiet by default.

Usage:
    from gdslice.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Scanning project...", level=1)
    LOG("player.gd: 3 slices", level=2)
    LOG("marker 'intro' at line 4", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# ProgramState (or anything with a verbosity attribute) for this context
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:"
    "<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: Object with a `verbosity` attribute (normally ProgramState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows it.

    Args:
        message: Log message to display
        level: Minimum verbosity required (1=normal, 2=verbose, 3=debug)
        **kwargs: Passed through to loguru (e.g., formatting arguments)

    The call site, not this wrapper, is reported as the origin of the
    record.
    """
    state = _program_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
