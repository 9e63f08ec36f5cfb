"""
Formatter configuration.

Policy knobs for hashing and file naming. Defaults reproduce the loader's
expected output; a YAML file can override them for other deployments.
Config objects are passed explicitly, never stored globally.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatterConfig:
    """Hashing and naming policy for generated bundles."""

    hash_algorithm: str = "sha256"
    hash_length: int = 8
    file_name_prefix: str = "ionic."
    file_name_suffix: str = ".js"
    loader_function: str = "Ionic.loadComponents"

    def __post_init__(self) -> None:
        if self.hash_algorithm not in hashlib.algorithms_available:
            raise ConfigError(f"Unknown hash algorithm {self.hash_algorithm!r}")
        digest_hex_len = hashlib.new(self.hash_algorithm).digest_size * 2
        if not isinstance(self.hash_length, int) or not 1 <= self.hash_length <= digest_hex_len:
            raise ConfigError(
                f"hash_length must be between 1 and {digest_hex_len} for {self.hash_algorithm}, "
                f"got {self.hash_length!r}"
            )


DEFAULT_CONFIG = FormatterConfig()


def load_config(path: Optional[Union[str, Path]] = None) -> FormatterConfig:
    """
    Load a FormatterConfig from a YAML file.

    Args:
        path: YAML file with any FormatterConfig field names as keys.
            None returns the defaults.

    Returns:
        FormatterConfig with file values over defaults.

    Raises:
        ConfigError: If the file is not a mapping or holds invalid values.
    """
    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(FormatterConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))

    config = FormatterConfig(**{k: v for k, v in raw.items() if k in known})
    logger.debug("Loaded formatter config from %s: %s", path, config)
    return config
