"""
Run logging for VITAE.

Every render run gets its own log directory. The file sink keeps DEBUG and above
for later inspection; the console shows INFO and above. The first lines of each
file describe the run (package version, interpreter, run settings) so a log can be
matched to the page it produced.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import platform
import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from vitae import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def configure_run_logging(
    log_dir: Path, log_name: str, run_details: Optional[Dict[str, str]] = None
) -> Path:
    """
    Replace all loguru sinks with a run log file plus console output.

    Args:
        log_dir: Directory for this run (created if missing)
        log_name: Log file stem (e.g., "render" -> render.log)
        run_details: Settings recorded in the run header (e.g., {"Layout": "classic"})

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{log_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    write_run_header(run_details or {})
    return log_file


def write_run_header(run_details: Dict[str, str]) -> None:
    """Record the package version, interpreter and run settings at DEBUG level."""
    header = {"vitae": __version__, "Python": platform.python_version(), **run_details}
    for key, value in header.items():
        logger.debug(f"{key}: {value}")
