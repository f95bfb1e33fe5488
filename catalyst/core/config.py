"""
Configuration management utilities for the Catalyst package.

This module provides functions for loading and accessing configuration settings.

Configuration Hierarchy:
1. Default configuration (catalyst/core/default_config.json) - Base settings for all installations
2. User configuration (~/.catalyst/config.json) - User-specific overrides that persist across runs
3. Environment overrides - GOOGLE_CLOUD_PROJECT and CATALYST_PROXY_URL
4. Runtime overrides - Temporary changes made during program execution via set_config_value()

Credentials are never part of the configuration. API keys and bearer tokens are
resolved by catalyst.core.credentials and only live in the running process.
"""

import os
import json
from typing import Dict, Any

# Default configuration paths
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.json")
USER_CONFIG_PATH = os.path.expanduser("~/.catalyst/config.json")

# Environment variable -> dotted config key
ENV_OVERRIDES = {
    "GOOGLE_CLOUD_PROJECT": "image_generation.project_id",
    "CATALYST_PROXY_URL": "image_generation.proxy_url",
}

# Configuration singleton
_config_cache = {}

def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Get the configuration dictionary, loading it if necessary.

    Args:
        reload (bool): Force reload the configuration even if cached

    Returns:
        Dict[str, Any]: The configuration dictionary
    """
    global _config_cache

    if not _config_cache or reload:
        _config_cache = load_config()

    return _config_cache

def load_config() -> Dict[str, Any]:
    """
    Load configuration from default and user-specific files.

    The configuration is loaded in a hierarchical manner:
    1. Load the default configuration from DEFAULT_CONFIG_PATH
    2. If a user configuration exists at USER_CONFIG_PATH, deep merge it
       into the defaults, allowing partial overrides
    3. Apply any environment overrides listed in ENV_OVERRIDES

    Returns:
        Dict[str, Any]: The merged configuration dictionary
    """
    config = {}

    if os.path.exists(DEFAULT_CONFIG_PATH):
        with open(DEFAULT_CONFIG_PATH, 'r') as f:
            config.update(json.load(f))

    if os.path.exists(USER_CONFIG_PATH):
        with open(USER_CONFIG_PATH, 'r') as f:
            deep_merge(config, json.load(f))

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            _set_nested(config, key, value)

    return config

def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """
    Recursively merge override dictionary into base dictionary.

    If a key exists in both dictionaries and both values are dictionaries,
    those dictionaries are merged recursively. Otherwise the value from the
    override dictionary takes precedence.

    Args:
        base (Dict[str, Any]): Base dictionary to be updated
        override (Dict[str, Any]): Dictionary with values to override
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value

def save_user_config(config: Dict[str, Any]) -> None:
    """
    Save user configuration to ~/.catalyst/config.json.

    Args:
        config (Dict[str, Any]): Configuration dictionary to save
    """
    os.makedirs(os.path.dirname(USER_CONFIG_PATH), exist_ok=True)

    with open(USER_CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)

    global _config_cache
    _config_cache = load_config()

def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a specific configuration value by key.

    Dot notation reaches into nested sections, so 'retry.max_retries'
    reads config['retry']['max_retries']. A missing key at any level,
    or an explicit null, yields the default.

    Examples:
        >>> get_config_value('proxy.port', 3001)
        3001

        >>> get_config_value('nonexistent.key', 'default-value')
        'default-value'

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        default (Any): Default value if key is not found

    Returns:
        Any: The configuration value or default
    """
    current = get_config()

    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return default

    return default if current is None else current

def set_config_value(key: str, value: Any, save: bool = False) -> None:
    """
    Set a specific configuration value by key.

    Intermediate sections are created as needed. With save=True the
    change is written to the user configuration file; otherwise it only
    lasts for the current process.

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        value (Any): The value to set
        save (bool): Whether to save the updated configuration to disk
    """
    config = get_config()
    _set_nested(config, key, value)

    global _config_cache
    _config_cache = config

    if save:
        save_user_config(config)

def _set_nested(config: Dict[str, Any], key: str, value: Any) -> None:
    parts = key.split('.')
    current = config
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value
