"""
Configuration utilities for loading digestkit config files and turning them into settings.
"""
import configparser
import logging
from pathlib import Path
from typing import Dict, Any, Union

from models.digest_settings import DigestSettings
from utils.config.config_normalizer import ConfigNormalizer
from utils.config.config_validator import ConfigValidator, encoding_selector_from_text
from utils.encoding_selector import parse_encoding

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = './config/digestkit_config.ini'

Config = Union[configparser.ConfigParser, Dict[str, Dict[str, Any]]]


def load_configuration(path: str, normalize: bool = True) -> Config:
    """
    Load the configuration file with optional normalization.

    A missing file is not an error: configparser skips it and the built-in
    defaults apply.

    Args:
        path (str): Path to the configuration file.
        normalize (bool): Whether to apply normalization and environment overrides.

    Returns:
        Union[configparser.ConfigParser, Dict]: Loaded parser or normalized dict.
    """
    parser = configparser.ConfigParser()
    read_files = parser.read(path, encoding='utf-8')
    if not read_files:
        logger.info(f"No configuration file at {path}; using defaults")

    if normalize:
        normalized_config = ConfigNormalizer().normalize_and_override(parser)
        logger.debug(f"Configuration loaded and normalized from: {path}")
        return normalized_config
    return parser


def write_temp_config(config_dict: dict, tmp_path: str) -> Path:
    """
    Write a config.ini file from a dictionary of config sections.

    Args:
        config_dict (dict): Dictionary of config sections and values.
        tmp_path (str): Directory to write into.

    Returns:
        Path: Path to the written config file.
    """
    config = configparser.ConfigParser()
    for section, values in config_dict.items():
        config[section] = values

    config_path = Path(tmp_path) / "test_digestkit_config.ini"
    with open(config_path, "w") as f:
        config.write(f)

    return config_path


def get_config_section(config: Config, section_name: str) -> Dict[str, Any]:
    """
    Get a configuration section with case-insensitive lookup.

    Args:
        config: Configuration object (ConfigParser or normalized dict)
        section_name: Configuration section name

    Returns:
        Dict[str, Any]: A copy of the section data

    Raises:
        ValueError: If the section is not found
        TypeError: If config is not a supported type
    """
    if config is None:
        raise ValueError("Configuration object cannot be None")
    if not isinstance(section_name, str) or not section_name.strip():
        raise ValueError("Section name must be a non-empty string")

    if isinstance(config, configparser.ConfigParser):
        config = ConfigNormalizer().normalize_config(config)
    elif not isinstance(config, dict):
        raise TypeError(
            f"Unsupported configuration type: {type(config)}. "
            f"Expected ConfigParser or Dict[str, Dict[str, Any]]"
        )

    canonical_name = ConfigNormalizer().canonical_section(section_name.strip())
    if canonical_name not in config:
        raise ValueError(
            f"Configuration section '{section_name}' not found. "
            f"Available sections: {sorted(config.keys())}"
        )
    return dict(config[canonical_name])


def get_config_value(
    config: Config,
    section: str,
    key: str,
    fallback: Any = None,
    value_type: type = str
) -> Any:
    """
    Get a configuration value with case-insensitive lookup and type conversion.

    Args:
        config: Configuration object (ConfigParser or normalized dict)
        section: Configuration section name
        key: Configuration key name
        fallback: Default value if not found
        value_type: Type to convert the value to (str, int, float, bool)

    Returns:
        Configuration value converted to specified type or fallback

    Raises:
        ValueError: If the value cannot be converted and there is no fallback
    """
    if config is None:
        return fallback
    if not isinstance(key, str) or not key.strip():
        raise ValueError("Key name must be a non-empty string")

    try:
        value = get_config_section(config, section).get(key.strip().lower())
    except ValueError:
        return fallback

    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    try:
        if value_type == bool and isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on', 'enabled')
        return value_type(value)
    except (ValueError, TypeError) as e:
        if fallback is not None:
            logger.warning(
                f"Failed to convert config value [{section}].{key}='{value}' to {value_type.__name__}: {e}. "
                f"Using fallback: {fallback}"
            )
            return fallback
        raise ValueError(
            f"Failed to convert config value [{section}].{key}='{value}' to {value_type.__name__}: {e}"
        )


def load_settings(config: Config) -> DigestSettings:
    """
    Build DigestSettings from a loaded configuration.

    Args:
        config: Configuration object (ConfigParser or normalized dict)

    Returns:
        DigestSettings: Validated settings.

    Raises:
        ValueError: If the [digest] section holds invalid values.
    """
    if isinstance(config, configparser.ConfigParser):
        config = ConfigNormalizer().normalize_config(config)

    result = ConfigValidator().validate_digest_config(config)
    for warning in result.warnings:
        logger.warning(warning)
    if not result.is_valid:
        raise ValueError("Invalid configuration:\n" + "\n".join(str(error) for error in result.errors))

    settings = DigestSettings()
    encoding = get_config_value(config, 'digest', 'default_encoding')
    if encoding is not None:
        settings.default_encoding = parse_encoding(encoding_selector_from_text(encoding))
    settings.lock_timeout = get_config_value(config, 'digest', 'lock_timeout', value_type=float)
    return settings
