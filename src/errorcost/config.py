"""errorcost Configuration.

Benchmark settings resolved from defaults, a YAML file and environment
variables, plus a process-wide configuration:

- configure() - Set global configuration
- get_config() - Get current configuration
- load_config() - Load configuration from file
"""
from __future__ import annotations

import logging
import os
import threading
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from errorcost.benchmark.harness import BenchmarkConfig
from errorcost.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "ERRORCOST_"


@dataclass
class ErrorCostConfig:
    """Benchmark settings.

    Attributes:
        warmup_iters: Untimed warmup samples per case.
        timed_iters: Timed samples per case.
        inner_iters: Calls per sample.
    """
    warmup_iters: int = 10
    timed_iters: int = 30
    inner_iters: int = 1000

    def to_benchmark_config(self) -> BenchmarkConfig:
        """Build the harness configuration for these settings."""
        return BenchmarkConfig(
            warmup_iters=self.warmup_iters,
            timed_iters=self.timed_iters,
            inner_iters=self.inner_iters,
        )


_FIELD_NAMES = tuple(f.name for f in fields(ErrorCostConfig))


def _coerce_int(key: str, value: Any) -> int:
    # bool is an int subclass; "true" is not an iteration count.
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be an integer", key=key, value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"{key} must be an integer", key=key, value=value
            ) from exc
    raise ConfigurationError(f"{key} must be an integer", key=key, value=value)


class ConfigLoader:
    """Load benchmark settings from YAML files and environment variables.

    Priority (highest first):
    1. Environment variables
    2. YAML file
    3. Defaults

    Environment Variable Format:
        ERRORCOST_WARMUP_ITERS=10
        ERRORCOST_TIMED_ITERS=30
        ERRORCOST_INNER_ITERS=1000
    """

    def load(
        self,
        yaml_path: Path | None = None,
        env_prefix: str = DEFAULT_ENV_PREFIX,
    ) -> ErrorCostConfig:
        """Load settings from all sources.

        Args:
            yaml_path: Path to YAML config file (optional, skipped if missing).
            env_prefix: Environment variable prefix.

        Returns:
            Validated ErrorCostConfig.

        Raises:
            ConfigurationError: If any source holds an invalid setting.
        """
        yaml_dict: dict[str, Any] = {}
        if yaml_path is not None and Path(yaml_path).exists():
            yaml_dict = self.load_yaml(Path(yaml_path))
        elif yaml_path is not None:
            logger.debug("Config file %s not found, using defaults", yaml_path)

        env_dict = self.load_env(env_prefix)

        return self.compile(self.merge(yaml_dict, env_dict))

    def load_yaml(self, path: Path) -> dict[str, Any]:
        """Load and parse YAML file.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML as dict (empty for an empty file).

        Raises:
            FileNotFoundError: If file doesn't exist.
            ConfigurationError: If the document is not a mapping.
            yaml.YAMLError: If YAML is invalid.
        """
        with open(path, "r") as f:
            content = yaml.safe_load(f)

        if content is None:
            return {}

        if not isinstance(content, dict):
            raise ConfigurationError(f"Invalid config file format: {path}")

        logger.debug("Loaded config from %s", path)
        return content

    def load_env(self, prefix: str) -> dict[str, Any]:
        """Load settings from environment variables.

        Args:
            prefix: Environment variable prefix.

        Returns:
            Dict of settings found in the environment.
        """
        result: dict[str, Any] = {}

        for name in _FIELD_NAMES:
            value = os.environ.get(f"{prefix}{name.upper()}")
            if value is not None:
                result[name] = value

        return result

    def merge(self, *sources: dict[str, Any]) -> dict[str, Any]:
        """Merge sources; later sources override earlier ones."""
        result: dict[str, Any] = {}
        for source in sources:
            result.update(source)
        return result

    def compile(self, raw: dict[str, Any]) -> ErrorCostConfig:
        """Validate raw settings and build the config.

        Args:
            raw: Raw settings dict.

        Returns:
            Validated ErrorCostConfig.

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        unknown = sorted(set(raw) - set(_FIELD_NAMES))
        if unknown:
            raise ConfigurationError(
                f"Unknown config keys: {unknown}", key=unknown[0], value=raw[unknown[0]]
            )

        config = ErrorCostConfig(**{key: _coerce_int(key, value) for key, value in raw.items()})
        config.to_benchmark_config().validate()
        return config


# Module-level global state
_config = ErrorCostConfig()
_config_lock = threading.Lock()


def configure(
    warmup_iters: Optional[int] = None,
    timed_iters: Optional[int] = None,
    inner_iters: Optional[int] = None,
    reset: bool = False,
) -> None:
    """Configure global benchmark settings.

    Args:
        warmup_iters: Untimed warmup samples per case.
        timed_iters: Timed samples per case.
        inner_iters: Calls per sample.
        reset: If True, reset all settings to defaults first.

    Raises:
        ConfigurationError: If the resulting settings are invalid. The
            current configuration is left unchanged.

    Example:
        >>> import errorcost
        >>>
        >>> errorcost.configure(timed_iters=100)
        >>> errorcost.configure(reset=True)
    """
    global _config

    overrides = {
        "warmup_iters": warmup_iters,
        "timed_iters": timed_iters,
        "inner_iters": inner_iters,
    }

    with _config_lock:
        raw = {} if reset else asdict(_config)
        raw.update({key: value for key, value in overrides.items() if value is not None})
        _config = ConfigLoader().compile(raw)


def get_config() -> ErrorCostConfig:
    """Get current configuration.

    Returns:
        Copy of the current configuration.
    """
    with _config_lock:
        return ErrorCostConfig(**asdict(_config))


def load_config(path: str | Path, env_prefix: str = DEFAULT_ENV_PREFIX) -> ErrorCostConfig:
    """Load configuration from a YAML file and make it global.

    Environment variables still override values from the file.

    Args:
        path: Path to YAML configuration file.
        env_prefix: Environment variable prefix.

    Returns:
        The loaded configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If config file is invalid.

    YAML format::

        warmup_iters: 10
        timed_iters: 30
        inner_iters: 1000
    """
    global _config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    config = ConfigLoader().load(path, env_prefix=env_prefix)

    with _config_lock:
        _config = config

    return ErrorCostConfig(**asdict(config))
