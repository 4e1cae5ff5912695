"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_composition(page) -> None:
    """
    Log which sections survived the presence gate.

    Args:
        page: ResumePage from SectionComposer.compose()
    """
    _log_info(f"Composed page for {page.header.full_name}: {len(page.sections)} sections")
    for section in page.sections:
        _log_debug(f"  {section.key}: {len(section.blocks)} entries")
    stats = ", ".join(f"{stat.key}={stat.value}" for stat in page.quick_stats)
    _log_debug(f"  quick stats: {stats}")
