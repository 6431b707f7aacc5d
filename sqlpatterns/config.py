"""
Config system - Layered typed configuration for the translator tools.

Translation itself is configuration-free; these settings supply defaults
for the command-line interface.
"""

from typing import Any, Dict, Optional, get_type_hints
from dataclasses import dataclass, fields, asdict
from pathlib import Path
import os
import json

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class TranslatorConfig:
    """Defaults for translation commands."""
    escape: Optional[str] = None
    case_sensitive: bool = True
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources with precedence:
    overrides > Environment variables > config files > defaults
    """

    def __init__(self, env_prefix: str = "SQLPAT_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "SQLPAT_",
        overrides: Optional[Dict[str, Any]] = None,
    ) -> TranslatorConfig:
        """
        Load configuration from multiple sources with proper merge strategy.

        Merge order (later overrides earlier):
        1. Config files, in the order given (JSON or YAML)
        2. Environment variables (SQLPAT_* prefix)
        3. Manual overrides

        Args:
            paths: Config file paths
            env_prefix: Prefix for environment variables
            overrides: Manual overrides (highest precedence)

        Returns:
            Validated TranslatorConfig
        """
        loader = cls(env_prefix=env_prefix)

        for path in paths or []:
            loader._load_file(Path(path))

        loader._load_from_env()

        if overrides:
            loader.config_data.update(
                {key: value for key, value in overrides.items() if value is not None}
            )

        return loader.build()

    def _load_file(self, path: Path):
        """Load config from a JSON or YAML file."""
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        if path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
        elif path.suffix in (".yaml", ".yml"):
            import yaml
            with open(path) as f:
                data = yaml.safe_load(f)
        else:
            raise ConfigError(f"Unsupported config file type: {path.suffix}")

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        self.config_data.update(data)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                name = key[len(self.env_prefix):].lower()
                self.config_data[name] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False
        return value

    def build(self) -> TranslatorConfig:
        """Validate collected values and instantiate TranslatorConfig."""
        known = {f.name for f in fields(TranslatorConfig)}
        unknown = set(self.config_data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        hints = get_type_hints(TranslatorConfig)
        for key, value in self.config_data.items():
            if not self._check_type(value, hints[key]):
                raise ConfigError(
                    f"Invalid type for '{key}': expected {hints[key]}, got {type(value).__name__}"
                )

        escape = self.config_data.get("escape")
        if escape is not None and len(escape) != 1:
            raise ConfigError(f"Config 'escape' must be a single character, got {escape!r}")

        log_level = self.config_data.get("log_level")
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Config 'log_level' must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return TranslatorConfig(**self.config_data)

    def _check_type(self, value: Any, expected_type: Any) -> bool:
        """Basic type checking."""
        if expected_type is bool:
            return isinstance(value, bool)
        if expected_type is str:
            return isinstance(value, str)
        # Optional[str]
        return value is None or isinstance(value, str)
