import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class Config:
    """Manage aliasmenu configuration and themes"""

    THEMES = {
        "default": {
            "border_color": "cyan",
            "header_color": "cyan",
            "cursor_color": "yellow",
        },
        "ocean": {
            "border_color": "blue",
            "header_color": "bright_blue",
            "cursor_color": "cyan",
        },
        "forest": {
            "border_color": "green",
            "header_color": "bright_green",
            "cursor_color": "yellow",
        },
        "monochrome": {
            "border_color": "white",
            "header_color": "bright_white",
            "cursor_color": "white",
        },
    }

    DEFAULT_CONFIG = {
        "theme": "default",
        "header": "",
    }

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / ".aliasmenu"
        self.config_path = self.config_dir / "config.json"
        self.config = self.load()

    def load(self) -> Dict[str, Any]:
        """Load configuration from file"""
        config = self.DEFAULT_CONFIG.copy()
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    user_config = json.load(f)
            except (OSError, ValueError) as e:
                logger.debug("Ignoring unreadable config %s: %s", self.config_path, e)
                return config

            if not isinstance(user_config, dict):
                logger.debug("Ignoring config %s, not a JSON object", self.config_path)
                return config

            for key, value in user_config.items():
                default = self.DEFAULT_CONFIG.get(key)
                # Values must keep the type of their default
                if default is not None and not isinstance(value, type(default)):
                    logger.debug("Ignoring config value %s=%r, expected %s", key, value, type(default).__name__)
                    continue
                config[key] = value
        return config

    def save(self) -> None:
        """Save configuration to file"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value"""
        self.config[key] = value
        self.save()

    def get_theme(self) -> Dict[str, str]:
        """Get current theme colors"""
        theme_name = self.config.get("theme", "default")
        return self.THEMES.get(theme_name, self.THEMES["default"])
