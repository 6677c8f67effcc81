"""Configuration loader with YAML parsing and environment variable substitution"""

import os
import re
import yaml
from typing import Any, Dict, Optional
from pathlib import Path
from dotenv import load_dotenv

from ..models.config import ClientConfig, RetryConfig, LoggingConfig

DEFAULT_CONFIG_PATH = "config/config.yaml"


class ConfigLoader:
    """Load and parse configuration from YAML files with environment variable support"""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        """
        Initialize configuration loader

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        # Load environment variables from .env file if it exists
        load_dotenv()

    def _substitute_env_vars(self, value: Any) -> Any:
        """
        Recursively substitute environment variables in configuration values

        Supports ${VAR_NAME} syntax for environment variable substitution

        Args:
            value: Configuration value (can be string, dict, list, etc.)

        Returns:
            Value with environment variables substituted
        """
        if isinstance(value, str):
            pattern = r'\$\{([^}]+)\}'

            def replace_env_var(match):
                var_name = match.group(1)
                env_value = os.getenv(var_name)
                if env_value is None:
                    raise ValueError(f"Environment variable '{var_name}' is not set")
                return env_value

            return re.sub(pattern, replace_env_var, value)

        elif isinstance(value, dict):
            return {k: self._substitute_env_vars(v) for k, v in value.items()}

        elif isinstance(value, list):
            return [self._substitute_env_vars(item) for item in value]

        else:
            return value

    def load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Returns:
            Raw configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If YAML parsing fails or the file is empty
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                config_data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse YAML configuration: {e}") from e

        if not config_data:
            raise ValueError("Configuration file is empty")
        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a mapping")

        return config_data

    def _parse_retry_config(self, data: Dict[str, Any]) -> RetryConfig:
        """Parse retry configuration section"""
        retry_data = dict(data.get('retry') or {})

        if os.getenv('SESSION_API_MAX_RETRIES'):
            retry_data['max_retries'] = int(os.getenv('SESSION_API_MAX_RETRIES'))

        return RetryConfig(**retry_data)

    def _parse_logging_config(self, data: Dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration section"""
        logging_data = dict(data.get('logging') or {})

        if os.getenv('SESSION_API_LOG_LEVEL'):
            logging_data['level'] = os.getenv('SESSION_API_LOG_LEVEL')

        return LoggingConfig(**logging_data)

    def build(self, data: Dict[str, Any]) -> ClientConfig:
        """
        Build a validated ClientConfig from raw data and the environment

        Args:
            data: Raw configuration dictionary (may be empty)

        Returns:
            Validated ClientConfig
        """
        data = self._substitute_env_vars(data)
        client_data: Dict[str, Any] = {
            key: data[key] for key in ('base_url', 'timeout', 'headers') if key in data
        }

        # Override with environment variables if present
        if os.getenv('SESSION_API_BASE_URL'):
            client_data['base_url'] = os.getenv('SESSION_API_BASE_URL')
        if os.getenv('SESSION_API_TIMEOUT'):
            client_data['timeout'] = float(os.getenv('SESSION_API_TIMEOUT'))

        return ClientConfig(
            retry=self._parse_retry_config(data),
            logging=self._parse_logging_config(data),
            **client_data
        )

    def load(self) -> ClientConfig:
        """
        Load and parse complete client configuration

        Returns:
            Validated ClientConfig object

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        return self.build(self.load_yaml())


def load_config(config_path: Optional[str] = None) -> ClientConfig:
    """
    Convenience function to load configuration

    Without an explicit path the SESSION_API_CONFIG_PATH variable is used,
    then config/config.yaml. Only when neither was named and that default
    file is absent does the configuration come from defaults and
    environment overrides alone.

    Args:
        config_path: Path to configuration file

    Returns:
        Loaded and validated ClientConfig
    """
    if config_path is None:
        config_path = os.getenv('SESSION_API_CONFIG_PATH')
    if config_path is not None:
        return ConfigLoader(config_path).load()

    loader = ConfigLoader(DEFAULT_CONFIG_PATH)
    if not loader.config_path.exists():
        return loader.build({})
    return loader.load()
