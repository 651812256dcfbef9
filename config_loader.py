"""Configuration loader with YAML support and environment variable substitution."""

import copy
import os
import re
from typing import Any, Dict

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    'export': {
        'input_directory': '.',
        'file_prefix': 'contentful-export',
        'output_directory': './markdown-output',
        'locale': 'en-US',
        'page_content_type': 'page',
        'file_extension': '.mdx',
        'report_path': None,
    },
    'logging': {
        'level': None,
        'file': None,
    },
}


class ConfigLoader:
    """Handles loading and validation of configuration files."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Return a fresh copy of the default configuration."""
        return copy.deepcopy(DEFAULT_CONFIG)

    @classmethod
    def load(cls, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file with environment variable substitution.

        Values from the file are layered over the defaults.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        # An empty file means "use defaults"
        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a dictionary")

        config_data = cls._substitute_env_vars_recursive(config_data)

        return cls._merge(cls.defaults(), config_data)

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Validate configuration for required fields and correct values.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If validation fails
        """
        file_prefix = get_nested(config, 'export.file_prefix')
        if not isinstance(file_prefix, str) or not file_prefix:
            raise ValueError("export.file_prefix must be a non-empty string")

        locale = get_nested(config, 'export.locale')
        if not isinstance(locale, str) or not locale:
            raise ValueError("export.locale must be a non-empty string")

        page_content_type = get_nested(config, 'export.page_content_type')
        if not isinstance(page_content_type, str) or not page_content_type:
            raise ValueError("export.page_content_type must be a non-empty string")

        file_extension = get_nested(config, 'export.file_extension')
        if not isinstance(file_extension, str) or not file_extension.startswith('.'):
            raise ValueError("export.file_extension must be a string starting with '.'")

        output_dir = get_nested(config, 'export.output_directory')
        if not output_dir:
            raise ValueError("Missing required configuration: export.output_directory")
        if os.path.exists(output_dir) and not os.path.isdir(output_dir):
            raise ValueError(f"export.output_directory '{output_dir}' is not a directory")

        level = get_nested(config, 'logging.level')
        if level is not None and str(level).upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("logging.level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")

    @classmethod
    def merge_with_args(cls, config: Dict[str, Any], args) -> Dict[str, Any]:
        """
        Merge configuration file with CLI arguments.
        CLI arguments take precedence over config file values.

        Args:
            config: Base configuration dictionary
            args: CLI arguments with attributes matching config keys

        Returns:
            Merged configuration dictionary
        """
        merged = copy.deepcopy(config)
        merged.setdefault('export', {})
        merged.setdefault('logging', {})

        if getattr(args, 'input_dir', None):
            merged['export']['input_directory'] = args.input_dir

        if getattr(args, 'output_dir', None):
            merged['export']['output_directory'] = args.output_dir

        if getattr(args, 'locale', None):
            merged['export']['locale'] = args.locale

        if getattr(args, 'report', None):
            merged['export']['report_path'] = args.report

        if getattr(args, 'log_file', None):
            merged['logging']['file'] = args.log_file

        return merged

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge ``override`` into ``base``."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = cls._merge(base[key], value)
            else:
                base[key] = value
        return base

    @classmethod
    def _substitute_env_vars_recursive(cls, data: Any) -> Any:
        """Recursively substitute environment variables in data structure."""
        if isinstance(data, dict):
            return {key: cls._substitute_env_vars_recursive(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars_recursive(item) for item in data]
        elif isinstance(data, str):
            return cls._substitute_env_vars(data)
        else:
            return data

    @classmethod
    def _substitute_env_vars(cls, value: str) -> str:
        """Substitute environment variables in a string value."""
        def replace_match(match):
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            return env_value if env_value is not None else match.group(0)

        return cls.ENV_VAR_PATTERN.sub(replace_match, value)


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Safely retrieve nested configuration values using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "export.output_directory")
        default: Default value if path doesn't exist

    Returns:
        Value at the nested path or default
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = ['ConfigLoader', 'DEFAULT_CONFIG', 'get_nested']
