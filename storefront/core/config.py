"""
Configuration management for the storefront core.

Loads settings from a YAML config file and provides typed access.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()


def _project_root() -> Path:
    """Return project root (parent of storefront package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"


@dataclass
class StorefrontConfig:
    """Configuration for product discovery and pricing."""

    # Search
    suggestion_limit: int = 5           # Max titles offered in the suggestion dropdown

    # Pricing display
    currency: str = "$"

    # Catalog
    catalog_path: str = "data/catalog.json"
    skip_invalid_rows: bool = False     # Drop malformed rows instead of failing the load

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "StorefrontConfig":
        """Load configuration from YAML file."""
        if config_path is None:
            env_path = os.getenv("STOREFRONT_CONFIG")
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        search_config = data.get('search', {})
        pricing_config = data.get('pricing', {})
        catalog_config = data.get('catalog', {})

        return cls(
            suggestion_limit=int(search_config.get('suggestion_limit', 5)),
            currency=pricing_config.get('currency', '$'),
            catalog_path=catalog_config.get('path', 'data/catalog.json'),
            skip_invalid_rows=bool(catalog_config.get('skip_invalid_rows', False)),
        )


# Global config instance
_config: Optional[StorefrontConfig] = None


def get_config() -> StorefrontConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = StorefrontConfig.from_yaml()
    return _config


def set_config(config: Optional[StorefrontConfig]) -> None:
    """Set the global configuration instance (None forces a reload on next access)."""
    global _config
    _config = config
