"""
Logging via Loguru, gated by the verbosity of the running ProgramState.

LOG() looks up the ProgramState connected to the current context, so the
compiler, include resolver and generator can log without being handed the
state. Used as a library (no state connected) nothing is logged.

Messages about one component carry its path in the "component" column:

    12:04:31 │ DEBUG │ components/Button.html    │ component_compile @ 131  ║ Compiling

Usage:
    from nausicaa.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Generated 3 components", level=1)
    LOG("Compiling", level=2, component="components/Button.html")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# ProgramState of the running pipeline
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<magenta>{extra[component]: <24}</magenta> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.configure(extra={"component": "-"})
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when none is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state else 0


def LOG(message: str, level: int = 1, component: Optional[str] = None, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        component: Path of the component the message is about
        **kwargs: Additional loguru metadata

    Example:
        LOG("Generated 3 components", level=1)
        LOG("Skipping (already generated)", level=3, component="Icon.html")
    """
    if verbosity_get() < level:
        return

    bound = logger.bind(component=component) if component else logger
    # depth=1 reports the caller, not LOG itself
    bound.opt(depth=1).debug(message, **kwargs)
