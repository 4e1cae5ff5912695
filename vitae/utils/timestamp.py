"""Timestamp utilities for log directories and output paths."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Local date for dated result directories (e.g., "2025-11-14")."""
    return datetime.now().strftime("%Y-%m-%d")
