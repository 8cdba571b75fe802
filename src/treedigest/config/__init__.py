"""Configuration models and loaders for treedigest."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import DigestMode, DigestSettings, RuntimeConfig, TreeDigestConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DigestMode",
    "DigestSettings",
    "RuntimeConfig",
    "TreeDigestConfig",
    "dump_example_config",
    "load_config",
]
