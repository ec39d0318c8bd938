# src/artisanlingo/config.py
import configparser
import os
from pathlib import Path
from typing import Any


class Config:
    """Configuration manager for ArtisanLingo"""

    def __init__(self, config_path=None):
        self.config = configparser.ConfigParser()
        self.config_path = Path(
            config_path
            or os.environ.get("ARTISANLINGO_CONFIG", "")
            or Path(__file__).parent.parent / "config.ini"
        )

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('oracle')
        self.config.set('oracle', 'base_url', 'http://localhost:8000')
        self.config.set('oracle', 'api_key', '')
        self.config.set('oracle', 'timeout_seconds', '30')
        self.config.set('oracle', 'max_retries', '0')
        self.config.set('oracle', 'retry_backoff_seconds', '0.5')

        self.config.add_section('backend')
        self.config.set('backend', 'type', 'local')

        self.config.add_section('llm')
        self.config.set('llm', 'api_url', 'https://api.openai.com/v1')
        self.config.set('llm', 'api_type', 'openai')
        self.config.set('llm', 'model', 'gpt-4o-mini')
        self.config.set('llm', 'api_key', '')
        self.config.set('llm', 'timeout', '60')
        self.config.set('llm', 'max_tokens', '2048')

        self.config.add_section('performance')
        self.config.set('performance', 'min_request_interval_seconds', '0.0')

        self.config.add_section('storage')
        self.config.set('storage', 'service_name', 'ArtisanLingo')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'INFO')
        self.config.set('logging', 'enable_performance_logging', 'false')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
            # Type conversion based on defaults
            if section == 'oracle':
                if key.endswith('_seconds'):
                    return float(value)
                elif key == 'max_retries':
                    return int(value)
            elif section == 'performance':
                if key.endswith('_seconds'):
                    return float(value)
            elif section == 'logging':
                if key == 'enable_performance_logging':
                    return value.lower() == 'true'

            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

# Global config instance
config = Config()
