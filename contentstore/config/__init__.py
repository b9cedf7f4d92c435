"""Configuration management for the content store."""

from .loader import Config, load_config, load_shortcuts, save_config, save_shortcuts
from .models import AdminConfig, BlogConfig, ConfigModel, PostgresConfig, ShortcutConfig

__all__ = [
    "AdminConfig",
    "BlogConfig",
    "Config",
    "ConfigModel",
    "PostgresConfig",
    "ShortcutConfig",
    "load_config",
    "load_shortcuts",
    "save_config",
    "save_shortcuts",
]
