"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import ValidationError

from .models import ConfigModel, PostgresConfig, ShortcutConfig

logger = logging.getLogger(__name__)

CONFIG_ENV = "CONTENTSTORE_CONFIG"


def default_config_path() -> Path:
    """Config path from the environment, else the per-user default."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "contentstore" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None
        self._shortcuts: Optional[Tuple[ShortcutConfig, ...]] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    @property
    def shortcuts_path(self) -> Path:
        """Shortcuts file living next to the config file."""
        return self.config_path.parent / "shortcuts.yaml"

    @property
    def shortcuts(self) -> Tuple[ShortcutConfig, ...]:
        """Static search shortcuts, loaded once."""
        if self._shortcuts is None:
            if self.shortcuts_path.exists():
                self._shortcuts = tuple(load_shortcuts(self.shortcuts_path))
            else:
                self._shortcuts = ()
        return self._shortcuts

    def get_db_config(self) -> PostgresConfig:
        """Get database configuration with the password resolved."""
        postgres = self.config.postgres

        # Handle password from environment if specified
        if postgres.password_env:
            password = os.environ.get(postgres.password_env)
            if password:
                return postgres.model_copy(update={"password": password})

        return postgres

    def get_admin_password(self) -> Optional[str]:
        """Resolve the administrator password, or None if none is configured."""
        admin = self.config.admin
        if admin.password_env:
            password = os.environ.get(admin.password_env)
            if password:
                return password
        return admin.password or None


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def load_shortcuts(shortcuts_path: Path) -> List[ShortcutConfig]:
    """Load shortcuts from YAML file."""
    if not shortcuts_path.exists():
        raise FileNotFoundError(f"Shortcuts file not found: {shortcuts_path}")

    try:
        with open(shortcuts_path) as f:
            shortcuts_data = yaml.safe_load(f)

        if shortcuts_data is None or "shortcuts" not in shortcuts_data:
            return []

        shortcuts = []
        for shortcut_data in shortcuts_data["shortcuts"]:
            try:
                shortcuts.append(ShortcutConfig(**shortcut_data))
            except ValidationError as e:
                logger.warning(
                    "Skipping invalid shortcut %s: %s", shortcut_data.get("name", "unknown"), e
                )

        return shortcuts
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in shortcuts file: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def save_shortcuts(shortcuts: List[ShortcutConfig], shortcuts_path: Path) -> None:
    """Save shortcuts to YAML file."""
    shortcuts_path.parent.mkdir(parents=True, exist_ok=True)

    shortcuts_data = {"shortcuts": [s.model_dump() for s in shortcuts]}

    with open(shortcuts_path, "w") as f:
        yaml.dump(shortcuts_data, f, default_flow_style=False, sort_keys=False)
