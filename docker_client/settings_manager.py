"""
Settings Manager for docker-socket-client
Connection settings stored in a JSON file, overridable from the environment
"""

import json
import os
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

APP_DIR = 'docker-socket-client'

DEFAULT_SETTINGS: Dict[str, Any] = {
    'docker_host': '',
    'api_version': '',
    'timeout': 60,
    'host_header': '127.0.0.1',
    'buffer_size': 1024,
    'max_header_bytes': 65536,
    'log_level': 'INFO',
}

# Environment variable -> (setting key, converter)
ENV_OVERRIDES = {
    'DOCKER_HOST': ('docker_host', str),
    'DOCKER_API_VERSION': ('api_version', str),
    'DOCKER_CLIENT_TIMEOUT': ('timeout', float),
}


class SettingsManager:
    """Manager for client settings"""

    @staticmethod
    def get_user_settings_path() -> str:
        """Get path to user settings file"""
        if os.name == 'nt':  # Windows
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # macOS, Linux
            base_dir = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return os.path.join(base_dir, APP_DIR, 'settings.json')

    def __init__(self, settings_file: Optional[str] = None, use_environment: bool = True):
        """
        Initialize settings manager

        Args:
            settings_file: Settings file path (default: per-user config dir)
            use_environment: Apply DOCKER_* environment overrides
        """
        self.settings_file = settings_file or self.get_user_settings_path()
        self.use_environment = use_environment
        self.settings: Dict[str, Any] = {}

        self.load()

    def load(self):
        """Load settings from user file, defaults for anything missing"""
        self.settings = DEFAULT_SETTINGS.copy()

        if os.path.exists(self.settings_file):
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                self.settings.update(loaded_settings)
                logger.debug(f"Settings loaded from {self.settings_file}")
            except (OSError, ValueError) as e:
                logger.error(f"Error loading settings from {self.settings_file}: {e}")

        if self.use_environment:
            self._apply_environment()

    def _apply_environment(self):
        for env_name, (key, convert) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if not value:
                continue
            try:
                self.settings[key] = convert(value)
            except ValueError:
                logger.warning(f"Ignoring invalid {env_name}={value!r}")

    def save(self) -> bool:
        """Save settings to file"""
        try:
            os.makedirs(os.path.dirname(self.settings_file) or '.', exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4, ensure_ascii=False)

            logger.info(f"Settings saved to {self.settings_file}")
            return True

        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value
        """
        return self.settings.get(key, default)

    def set(self, key: str, value: Any, save: bool = True):
        """
        Set setting value

        Args:
            key: Setting key
            value: Setting value
            save: Save to file immediately
        """
        self.settings[key] = value

        if save:
            self.save()

    def update(self, settings_dict: Dict[str, Any], save: bool = True):
        """Update multiple settings"""
        self.settings.update(settings_dict)

        if save:
            self.save()

    def reset_to_defaults(self, save: bool = True):
        """Reset all settings to built-in defaults"""
        self.settings = DEFAULT_SETTINGS.copy()

        if save:
            self.save()
            logger.info("Settings reset to defaults")

    def get_all(self) -> Dict[str, Any]:
        """Get all settings"""
        return self.settings.copy()

    def transport_options(self) -> Dict[str, Any]:
        """Keyword arguments for a Transport"""
        return {
            'timeout': float(self.get('timeout')),
            'host_header': self.get('host_header'),
            'buffer_size': int(self.get('buffer_size')),
            'max_header_bytes': int(self.get('max_header_bytes')),
        }
