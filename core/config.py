# core/config.py

"""Configuration management."""
import json
from pathlib import Path
from typing import Optional

from core.data_structures import PermissionMatch

class Config:
    """Application configuration manager."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = config_file or Path.home() / '.finder_shell_config.json'
        self.default_config = {
            'language': None,
            'show_hidden': False,
            'permission_match': PermissionMatch.EXACT.value,
            'output_mode': 'w',
            'show_progress': True,
            'verbose': False,
        }
        self.config = self.load_config()

    def load_config(self) -> dict:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    # Merge with defaults
                    config = self.default_config.copy()
                    config.update(loaded)
                    return config
            except (OSError, ValueError):
                pass
        return self.default_config.copy()

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value):
        """Set configuration value."""
        self.config[key] = value

    def get_permission_match(self) -> PermissionMatch:
        """Configured permission comparison, falling back to exact."""
        value = str(self.config.get('permission_match', '')).replace('-', '_')
        try:
            return PermissionMatch(value)
        except ValueError:
            return PermissionMatch.EXACT

    def get_output_mode(self) -> str:
        """'a' appends to the -o file, anything else overwrites it."""
        return 'a' if self.config.get('output_mode') == 'a' else 'w'
