"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_fetch_start(source_name: str) -> None:
    """Log start of the profile fetch."""
    _log_info(f"Fetching newest profile from {source_name}")


def log_fetch_result(state, elapsed_time: float) -> None:
    """
    Log the state the loader settled in.

    Args:
        state: LoadState reached after the fetch
        elapsed_time: Time taken by the fetch
    """
    profile = getattr(state, "profile", None)
    if profile is not None:
        _log_success(f"Loaded profile '{profile.full_name}' ({elapsed_time:.2f}s)")
        _log_debug(f"  id: {profile.id}")
        _log_debug(f"  created: {profile.created_at}")
    else:
        _log_warning(f"Profile not loaded: {state.reason} ({elapsed_time:.2f}s)")
