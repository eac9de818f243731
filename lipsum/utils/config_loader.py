"""
Configuration loading for lipsum.

Settings live in YAML files under the project's ``configs/`` directory. An
environment specific file (``lipsum_<environment>.yaml``) wins over the shared
``lipsum.yaml``; whatever is found is merged over the built-in defaults.
"""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "development"

DEFAULT_CONFIG = {
    "default_start": ["Lorem", "ipsum"],
    "corpora": ["lorem_ipsum", "liber_primus"],
    "seed": None,
    "logging": {
        "level": "INFO",
        "log_file": None,
        "console_json": False,
    },
}


def get_config_dir():
    """Returns the configs directory, honouring LIPSUM_CONFIG_DIR."""
    override = os.environ.get("LIPSUM_CONFIG_DIR")
    if override:
        return override
    project_root = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", ".."))
    return os.path.join(project_root, "configs")


def merge_config(base, override):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base (dict): Default values
        override (dict): Values that take precedence

    Returns:
        dict: A new merged dictionary; neither input is modified
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(config_path):
    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Expected a mapping at the top of {config_path}")
    return config


def load_config(environment=None, config_dir=None):
    """
    Load the lipsum configuration.

    Args:
        environment (str, optional): Environment name. Defaults to the
                                     LIPSUM_ENV variable, then "development".
        config_dir (str, optional): Directory holding the YAML files

    Returns:
        dict: Configuration merged over `DEFAULT_CONFIG`
    """
    environment = environment or os.environ.get("LIPSUM_ENV", DEFAULT_ENVIRONMENT)
    config_dir = config_dir or get_config_dir()

    # Environment specific configuration first, then the shared default
    config_paths = [
        os.path.join(config_dir, f"lipsum_{environment}.yaml"),
        os.path.join(config_dir, "lipsum.yaml"),
    ]

    for config_path in config_paths:
        if not os.path.exists(config_path):
            continue
        try:
            config = _read_yaml(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Error loading config from {config_path}: {e}")
            continue
        logger.info(f"Loaded config from {config_path}", extra={
            "metrics": {"environment": environment}
        })
        return merge_config(DEFAULT_CONFIG, config)

    logger.info("No lipsum configuration found, using defaults", extra={
        "metrics": {"environment": environment, "config_dir": config_dir}
    })
    return copy.deepcopy(DEFAULT_CONFIG)
