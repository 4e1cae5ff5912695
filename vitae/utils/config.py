"""
Site Configuration Loading

Loads the site configuration (locale, currency, labels, section titles, messages)
from YAML. The packaged default lives at vitae/config/site.yaml and can be replaced
with SITE_CONFIG_PATH or overridden key-by-key.

Examples:
    >>> config = load_site_config()
    >>> config["locale"]
    'es_CO'

    >>> config = load_site_config(overrides={"labels": {"ongoing": "Present"}})
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_SITE_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "site.yaml"
SITE_CONFIG_PATH = Path(os.getenv("SITE_CONFIG_PATH", str(DEFAULT_SITE_CONFIG_PATH)))


def load_site_config(config_path: Path = None, overrides: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load site config YAML and merge optional overrides on top.

    Args:
        config_path: Optional path to config file (defaults to SITE_CONFIG_PATH env variable)
        overrides: Nested mapping merged over the loaded config (later wins)

    Returns:
        Plain dict with all interpolations resolved

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    if config_path is None:
        config_path = SITE_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Site config not found: {config_path}")

    config = OmegaConf.load(config_path)
    if overrides:
        config = OmegaConf.merge(config, OmegaConf.create(overrides))

    return OmegaConf.to_container(config, resolve=True)
