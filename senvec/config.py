"""
Configuration for senvec.

Holds LSH parameters, cipher key size, codec policy and log level. Values can
be kept in a YAML file (``.senvec.yml``) and loaded with ``load_or_default``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .crypto.cipher import DEFAULT_KEY_BITS, SUPPORTED_KEY_BITS
from .errors import InvalidHashWidthError, InvalidKeySizeError, InvalidSeedError
from .vectors import check_int64, check_positive_int

CONFIG_FILENAME = ".senvec.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SenvecConfig:
    """
    Runtime configuration.

    The hash width and seed together fix the hyperplane set, so hashes are
    only comparable between runs that share both.
    """

    # Number of hyperplanes, i.e. length of each hash code
    hash_bits: int = 32

    # Seed for hyperplane generation
    seed: int = 42

    # AES key size for generated keys
    key_bits: int = DEFAULT_KEY_BITS

    # Accept NaN/Inf when decoding stored vectors
    allow_non_finite: bool = False

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration parameters."""
        if not check_positive_int(self.hash_bits):
            raise InvalidHashWidthError(self.hash_bits)

        if not check_int64(self.seed):
            raise InvalidSeedError(self.seed)

        if not isinstance(self.allow_non_finite, bool):
            raise ValueError(f"allow_non_finite must be true or false, got {self.allow_non_finite!r}")

        if self.key_bits not in SUPPORTED_KEY_BITS:
            raise InvalidKeySizeError(self.key_bits)

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "hash_bits": self.hash_bits,
            "seed": self.seed,
            "key_bits": self.key_bits,
            "allow_non_finite": self.allow_non_finite,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SenvecConfig":
        """Create from dictionary representation."""
        return cls(
            hash_bits=data.get("hash_bits", 32),
            seed=data.get("seed", 42),
            key_bits=data.get("key_bits", DEFAULT_KEY_BITS),
            allow_non_finite=data.get("allow_non_finite", False),
            log_level=data.get("log_level", "INFO"),
        )

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "SenvecConfig":
        """Load configuration from YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        # Look for config in current directory, then home directory
        current_dir_config = Path(CONFIG_FILENAME)
        if current_dir_config.exists():
            return current_dir_config

        return Path.home() / CONFIG_FILENAME

    @classmethod
    def load_or_default(
        cls, config_path: Optional[Union[str, Path]] = None
    ) -> "SenvecConfig":
        """
        Load configuration from file or return default if not found.

        Args:
            config_path: Optional path to configuration file

        Returns:
            SenvecConfig instance
        """
        if config_path:
            config_path = Path(config_path)
            if config_path.exists():
                return cls.load_from_file(config_path)
            return cls()

        default_path = cls.get_default_config_path()
        if default_path.exists():
            return cls.load_from_file(default_path)

        return cls()
