"""Configuration for the solfège transcoder.

Handles loading YAML config and merging with command-line overrides.
Command-line arguments have higher priority than config file values.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from .symbols import (
    CMD_TO_NOTES,
    CMD_TO_SYLLABLES,
    MAX_NOTES_BYTES,
    MAX_SYLLABLES_BYTES,
)


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.yaml'

OVERFLOW_POLICIES = ('error', 'truncate')


@dataclass
class LimitsConfig:
    """Input and output size limits (bytes)."""
    max_input_bytes: int = MAX_NOTES_BYTES
    max_output_bytes: int = MAX_SYLLABLES_BYTES  # syllable output
    max_notes_bytes: int = MAX_NOTES_BYTES       # note output

    def __post_init__(self):
        for name, value in asdict(self).items():
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"Invalid {name}: {value}. Must be a positive integer.")


@dataclass
class ModeConfig:
    """Numeric mode codes selecting the translation direction."""
    to_syllables: int = CMD_TO_SYLLABLES
    to_notes: int = CMD_TO_NOTES

    def __post_init__(self):
        for name, value in asdict(self).items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Invalid {name}: {value!r}. Must be an integer.")
        if self.to_syllables == self.to_notes:
            raise ValueError(f"Mode codes must differ, both are {self.to_notes}.")
        if self.to_syllables < 0 or self.to_notes < 0:
            raise ValueError("Mode codes must be non-negative.")


@dataclass
class OutputConfig:
    """Output rendering configuration."""
    prefix: str = " "
    overflow_policy: str = "error"

    def __post_init__(self):
        if not isinstance(self.prefix, str):
            raise ValueError(f"Invalid prefix: {self.prefix!r}. Must be a string.")
        if self.overflow_policy not in OVERFLOW_POLICIES:
            raise ValueError(
                f"Invalid overflow_policy: {self.overflow_policy}. "
                f"Must be one of {', '.join(OVERFLOW_POLICIES)}."
            )


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class TranscoderConfig:
    """Complete transcoder configuration."""
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    modes: ModeConfig = field(default_factory=ModeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is not None and not isinstance(config_dict, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    return config_dict or {}


def merge_configs(base_config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override config into base config."""
    merged = base_config.copy()

    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        elif value is not None:  # Only override if value is not None
            merged[key] = value

    return merged


def dict_to_config(config_dict: Dict[str, Any]) -> TranscoderConfig:
    """Convert dictionary to TranscoderConfig dataclass."""
    return TranscoderConfig(
        limits=LimitsConfig(**config_dict.get('limits', {})),
        modes=ModeConfig(**config_dict.get('modes', {})),
        output=OutputConfig(**config_dict.get('output', {})),
        logging=LoggingConfig(**config_dict.get('logging', {}))
    )


def config_to_dict(config: TranscoderConfig) -> Dict[str, Any]:
    """Convert TranscoderConfig to a plain dictionary."""
    return asdict(config)


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> TranscoderConfig:
    """Build configuration from YAML file and overrides.

    Priority: overrides > YAML config > defaults. Without an explicit path the
    packaged config.yaml is used when present.
    """
    if config_path is not None:
        yaml_config = load_yaml_config(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        yaml_config = load_yaml_config(str(DEFAULT_CONFIG_PATH))
    else:
        yaml_config = {}

    merged_config = merge_configs(yaml_config, overrides or {})
    return dict_to_config(merged_config)
