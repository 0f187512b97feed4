"""
Configuration management for credaudit.

Handles loading config from ~/.credaudit/config.yaml and providing
default values for all settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from credaudit.core.errors import ConfigError
from credaudit.core.risk import RiskLevel


# Default paths
DEFAULT_BASE_DIR = Path.home() / ".credaudit"
DEFAULT_CONFIG_FILE = DEFAULT_BASE_DIR / "config.yaml"
DEFAULT_REPORT_DIR = DEFAULT_BASE_DIR / "reports"
DEFAULT_LOG_DIR = DEFAULT_BASE_DIR / "logs"


def _section(data: dict, name: str) -> dict:
    """Return a config section, empty if blank. Raises ConfigError if not a mapping."""
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Invalid {name} settings: expected a mapping, got {type(section).__name__}"
        )
    return section


@dataclass
class AuditConfig:
    """Audit execution settings."""

    max_workers: int = 1
    min_risk: RiskLevel = RiskLevel.INFO  # lowest level shown in reports


@dataclass
class OutputConfig:
    """Terminal output settings."""

    color: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[Path] = None


@dataclass
class Config:
    """Main configuration container."""

    config_file: Path = DEFAULT_CONFIG_FILE

    # Credential inventory (None = built-in demo set)
    credentials_file: Optional[Path] = None
    report_dir: Path = DEFAULT_REPORT_DIR

    audit: AuditConfig = field(default_factory=AuditConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to config file. If None, uses default location.
                         Can also be set via CREDAUDIT_CONFIG env var.

        Returns:
            Config instance with values from file merged with defaults.

        Raises:
            ConfigError: If the file is not valid YAML or has bad values.
        """
        if config_path is None:
            config_path = Path(
                os.environ.get("CREDAUDIT_CONFIG", str(DEFAULT_CONFIG_FILE))
            )
        config_path = Path(config_path).expanduser()

        config = cls()
        config.config_file = config_path

        # If config file doesn't exist, return defaults
        if not config_path.exists():
            return config

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config YAML: {e}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Config file is not valid UTF-8: {config_path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")

        if data.get("credentials_file"):
            config.credentials_file = Path(data["credentials_file"]).expanduser()

        if data.get("report_dir"):
            config.report_dir = Path(data["report_dir"]).expanduser()

        # Audit settings
        if "audit" in data:
            audit_data = _section(data, "audit")
            try:
                config.audit = AuditConfig(
                    max_workers=int(audit_data.get("max_workers", 1)),
                    min_risk=RiskLevel.parse(audit_data.get("min_risk", "info")),
                )
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid audit settings: {e}")

        # Output settings
        if "output" in data:
            output_data = _section(data, "output")
            color = output_data.get("color", True)
            if not isinstance(color, bool):
                raise ConfigError(
                    f"Invalid output settings: color must be true or false, got {color!r}"
                )
            config.output = OutputConfig(color=color)

        # Logging settings
        if "logging" in data:
            log_data = _section(data, "logging")
            log_file = log_data.get("file")
            config.logging = LoggingConfig(
                level=str(log_data.get("level", "WARNING")).upper(),
                file=Path(log_file).expanduser() if log_file else None,
            )

        return config

    def save_default_config(self):
        """Save a default config file if one doesn't exist."""
        if self.config_file.exists():
            return

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        default_config = f"""\
# credaudit Configuration

# =============================================================================
# Inputs and Outputs
# =============================================================================

# Credential inventory (YAML). Leave empty to use the built-in demo set.
credentials_file:

# Where exported audit reports are written by default
report_dir: {self.report_dir}

# =============================================================================
# Audit Settings
# =============================================================================

audit:
  max_workers: 1           # Parallel audit workers
  min_risk: info           # Hide findings below: critical, high, medium, low, info

output:
  color: true              # Severity-colored terminal output

# =============================================================================
# Logging
# =============================================================================

logging:
  level: WARNING           # DEBUG, INFO, WARNING, ERROR
  file: {DEFAULT_LOG_DIR / 'credaudit.log'}
"""

        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(default_config)


# Singleton instance
_config: Optional[Config] = None


def get_config(reload: bool = False, config_path: Optional[Path] = None) -> Config:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload from file.
        config_path: Explicit config file (implies reload).

    Returns:
        Config instance.
    """
    global _config

    if _config is None or reload or config_path is not None:
        _config = Config.load(config_path)

    return _config
