"""
Configuration Service - Watch face settings
Loads YAML config with environment variable overrides
"""
import os
import yaml
from typing import Any, Dict, Optional
from pathlib import Path


PACKAGED_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'default.yaml'


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dicts"""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _as_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


class ConfigService:
    """
    Centralized configuration management with environment overrides.

    Priority order:
    1. Environment variables (highest)
    2. YAML config file
    3. Default values (lowest)
    """

    _instance: Optional['ConfigService'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        """Singleton pattern for global config access"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize only once"""
        if not self._config:
            self.reload()

    def reload(self) -> None:
        """Load config from file and environment"""
        self._config = _deep_merge(self._get_defaults(), self._load_yaml_config())
        self._apply_env_overrides()

    def _config_paths(self):
        paths = []
        if env_path := os.environ.get('WEARFACE_CONFIG'):
            paths.append(Path(env_path))
        paths.extend([
            Path("/data/config.yaml"),  # Device path
            Path("config/default.yaml"),  # Development path
            PACKAGED_CONFIG,
        ])
        return paths

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load configuration from the first readable YAML file"""
        for config_path in self._config_paths():
            if config_path.exists():
                try:
                    with open(config_path, 'r') as f:
                        loaded = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    print(f"Warning: Failed to load {config_path}: {e}")
                    continue
                if not isinstance(loaded, dict):
                    print(f"Warning: Ignoring {config_path}: top level is not a mapping")
                    continue
                return loaded

        return {}

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides"""
        # Timezone
        if env_tz := os.environ.get('TIMEZONE'):
            self._config['timezone'] = env_tz

        # Display
        for env_name, key in (('DISPLAY_WIDTH', 'width'), ('DISPLAY_HEIGHT', 'height')):
            if env_value := os.environ.get(env_name):
                try:
                    self._config['display'][key] = int(env_value)
                except ValueError:
                    print(f"Warning: Ignoring {env_name}={env_value!r}: not an integer")

        if env_shape := os.environ.get('DISPLAY_SHAPE'):
            self._config['display']['shape'] = env_shape.lower()

        if env_fullscreen := os.environ.get('DISPLAY_FULLSCREEN'):
            self._config['display']['fullscreen'] = _as_bool(env_fullscreen)

        # Face
        if env_seconds := os.environ.get('FACE_SHOW_SECONDS'):
            self._config['face']['show_seconds'] = _as_bool(env_seconds)

        if env_timeout := os.environ.get('FACE_AMBIENT_TIMEOUT'):
            try:
                self._config['face']['ambient_timeout'] = int(env_timeout)
            except ValueError:
                print(f"Warning: Ignoring FACE_AMBIENT_TIMEOUT={env_timeout!r}: not an integer")

        # Logging
        if env_level := os.environ.get('LOG_LEVEL'):
            self._config['logging']['level'] = env_level.upper()

    def _get_defaults(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            'app': {
                'version': '1.0.0',
            },
            'timezone': '',
            'display': {
                'width': 320,
                'height': 320,
                'shape': 'round',
                'fullscreen': False,
            },
            'face': {
                'interactive_update_rate_ms': 1000,
                'time_tick_seconds': 60,
                'show_seconds': False,
                'low_bit_ambient': False,
                'ambient_timeout': 0,
                'font_file': '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
            },
            'weather': {
                'seed': None,
            },
            'logging': {
                'level': 'INFO',
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation
        Example: config.get('face.show_seconds')
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value


# Global instance
config = ConfigService()
