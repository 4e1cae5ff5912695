"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger setup
- Site configuration loading
- Timestamps
"""

from vitae.utils.config import load_site_config
from vitae.utils.timestamp import now, today

__all__ = ["load_site_config", "now", "today"]
