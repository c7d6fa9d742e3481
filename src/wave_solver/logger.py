"""
Logging for the wave solver.

Records are silent until the host application calls ``configure_logging()``,
so importing the solver never changes the caller's loguru sinks.
"""

import sys
from typing import Any

from loguru import logger

PACKAGE = "src.wave_solver"

COLOUR_PER_COMPONENT = {
    "wave_solver": "cyan",
}

LEVEL_PER_COMPONENT = {
    "wave_solver": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def format_record(record):
    comp = record["extra"].get("component", "")
    maze = record["extra"].get("id", "")
    colour = COLOUR_PER_COMPONENT.get(comp, "white")

    # Colour tags must be part of the returned template for loguru to render them
    tag = f"{comp:<12} | {maze:<8}" if maze else f"{comp:<12}"
    return "{time:HH:mm:ss.SSS} | " f"<{colour}>{tag}</> | " "<level>{message}</level>\n"


def configure_logging(sink: Any = sys.stderr, colorize: bool = True) -> int:
    """Enable solver logging and route it to ``sink``.

    Existing sinks are left in place. Returns the loguru handler id so the
    caller can ``logger.remove()`` it again.
    """
    logger.enable(PACKAGE)
    return logger.add(
        sink, format=format_record, filter=component_filter, colorize=colorize
    )


def set_component_level(component: str, level: str) -> None:
    """Change the minimum level shown for one component."""
    logger.level(level)  # raises ValueError for unknown level names
    LEVEL_PER_COMPONENT[component] = level


logger.disable(PACKAGE)
