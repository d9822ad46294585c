"""
load the config from config.yaml and environment variables
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any

from .options import RequestOptions


class Config:
    """Configuration loader that reads from config.yaml and environment variables."""

    def __init__(self, config_path: str = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to a YAML file. If None, config.yaml in the
                        current directory is used when it exists.
        """
        self.explicit = config_path is not None
        if config_path is None:
            config_path = Path.cwd() / "config.yaml"

        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and override with environment variables."""
        if not self.explicit and not self.config_path.exists():
            config = {}
        else:
            try:
                with open(self.config_path, 'r') as f:
                    config = yaml.safe_load(f) or {}
            except FileNotFoundError:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in configuration file: {e}")

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'GIST_AUTH_TOKEN': ('gist', 'auth_token'),
            'GIST_USER_AGENT': ('gist', 'user_agent'),
            'GIST_USE_CACHE': ('gist', 'use_cache'),
            'GIST_DEBUG': ('gist', 'debug'),
            'GIST_ADD_HIDDEN_FIELD': ('gist', 'add_hidden_field'),
            'GIST_API_HOST': ('transport', 'host'),
            'GIST_TIMEOUT': ('transport', 'timeout'),
            'LOG_LEVEL': ('logging', 'level'),
            'LOG_JSON': ('logging', 'json'),
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                current = config
                for key in config_path[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                final_key = config_path[-1]
                # tokens stay strings even when they look numeric
                if env_var in ('GIST_AUTH_TOKEN', 'GIST_USER_AGENT'):
                    current[final_key] = env_value
                else:
                    current[final_key] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str):
        """Read 'true'/'false' as bools and numbers as int or float; anything else stays a string."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'
        for number in (int, float):
            try:
                return number(value)
            except ValueError:
                continue
        return value

    def get(self, *keys, default=None):
        """Get configuration value by nested keys, e.g. get('gist', 'debug')."""
        section = self._config
        for key in keys:
            if not isinstance(section, dict) or key not in section:
                return default
            section = section[key]
        return section

    @property
    def gist(self) -> Dict[str, Any]:
        """Get snippet request options."""
        return self.get('gist', default={})

    @property
    def transport(self) -> Dict[str, Any]:
        """Get GitHub transport configuration."""
        return self.get('transport', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get('logging', default={})

    def request_options(self) -> RequestOptions:
        return RequestOptions.from_mapping(self.gist)
