"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import configure_run_logging

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, layout: str, theme: str) -> Path:
    """
    Setup logger for rendering context.

    Routes loguru to the run directory and records layout and theme in the run header.

    Args:
        log_dir: Directory for this rendering session
        layout: Layout being rendered
        theme: Initial theme

    Returns:
        Path to log file
    """
    return configure_run_logging(log_dir, "render", {"Layout": layout, "Theme": theme})


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(source_description: str, layout: str, log_dir: Path) -> None:
    """Log start of a render run with context."""
    _log_info(f"Starting render with layout '{layout}'")
    _log_info(f"Log directory: {log_dir}")
    _log_debug(f"  Source: {source_description}")


def log_render_result(result, elapsed_time: float, verbose: bool = False) -> None:
    """
    Log render result.

    Args:
        result: RenderResult from render_resume()
        elapsed_time: Time taken by the run
        verbose: Also dump the rendered HTML at debug level
    """
    if result.success:
        _log_success(f"Render succeeded ({elapsed_time:.2f}s)")
    elif result.error:
        _log_error(f"Render failed ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
    else:
        _log_warning(f"Rendered error page: {result.state.reason} ({elapsed_time:.2f}s)")

    if result.output_path:
        _log_info(f"  Output: {result.output_path}")

    # Use opt(raw=True) to keep the HTML free of timestamp/level prefixes
    if verbose and result.html:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nRENDERED HTML:\n{'=' * 80}\n{result.html}\n")
