import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from autotranslate.exceptions import TranslationError
from autotranslate.logger import get_logger
from autotranslate.placeholders.delimiters import (
    DEFAULT_END_DELIMITER,
    DEFAULT_START_DELIMITER,
    DelimiterConfig,
)

logger = get_logger(__name__)

# Get base directory (project root)
BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Default configuration template
DEFAULT_CONFIG = {
    "translation": {
        "start_delimiter": DEFAULT_START_DELIMITER,
        "end_delimiter": DEFAULT_END_DELIMITER,
        "ignore_prefix": "",
    },
    "log_mode": "off"
}


def _merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill keys missing from a loaded config with default values."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in config.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def ensure_config_directory(config_dir: Path = CONFIG_DIR):
    """Ensure the config directory exists."""
    config_dir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Config directory ensured: {config_dir}")


def create_default_config(config_file: Optional[Path] = None):
    """Create the default config.json file."""
    save_config(DEFAULT_CONFIG, config_file)
    logger.info(f"Created default config file: {config_file or CONFIG_FILE}")


def load_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the configuration from a JSON file.

    A missing file, unreadable file or corrupt JSON yields the default
    configuration. Keys missing from the file are filled from the defaults.
    """
    config_file = Path(config_file) if config_file else CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse config file {config_file}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)
    except OSError as e:
        logger.error(f"Failed to read config file {config_file}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        logger.error(f"Config file {config_file} does not contain a JSON object")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.debug(f"Configuration loaded from {config_file}")
    return _merge_defaults(config)


def save_config(config: Dict[str, Any], config_file: Optional[Path] = None):
    """Save the configuration to a JSON file."""
    config_file = Path(config_file) if config_file else CONFIG_FILE
    try:
        ensure_config_directory(config_file.parent)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
        logger.info(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save config to {config_file}: {e}")
        raise


def _translation_section(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if config is None:
        config = load_config()
    section = config.get('translation', {})
    return section if isinstance(section, dict) else {}


def get_delimiters(config: Optional[Dict[str, Any]] = None) -> DelimiterConfig:
    """
    Build the delimiter pair from configuration.

    Delimiters are only overridden when a value is set, so empty strings
    fall back to "{" and "}".
    """
    section = _translation_section(config)
    return DelimiterConfig().with_start(section.get('start_delimiter')).with_end(section.get('end_delimiter'))


def get_ignore_prefix(config: Optional[Dict[str, Any]] = None) -> str:
    """Get the key prefix marking entries that must not be translated."""
    ignore_prefix = _translation_section(config).get('ignore_prefix') or ''
    return ignore_prefix.strip() if isinstance(ignore_prefix, str) else ''


def validate_translation_config(config: Optional[Dict[str, Any]] = None) -> None:
    """
    Validate the translation section of the configuration.

    The placeholder engine accepts any delimiters; this is where a host
    rejects values that would make every string match or none at all.

    Raises:
        TranslationError: If a delimiter or the ignore prefix is invalid, with code and details.
    """
    section = _translation_section(config)

    for field_name in ('start_delimiter', 'end_delimiter'):
        value = section.get(field_name)
        if value is None or value == '':
            # Not set: the default delimiter is used
            continue
        if not isinstance(value, str):
            raise TranslationError(
                f"{field_name} must be a string",
                code="delimiter_config_invalid",
                details={"field": field_name, "value": value}
            )
        if not value.strip():
            raise TranslationError(
                f"{field_name} must not be blank",
                code="delimiter_config_invalid",
                details={"field": field_name, "value": value}
            )

    ignore_prefix = section.get('ignore_prefix')
    if ignore_prefix is not None and not isinstance(ignore_prefix, str):
        raise TranslationError(
            "ignore_prefix must be a string",
            code="ignore_prefix_invalid",
            details={"field": "ignore_prefix", "value": ignore_prefix}
        )
