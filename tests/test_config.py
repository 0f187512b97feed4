from pathlib import Path

import pytest

from credaudit.core.config import Config, get_config
from credaudit.core.errors import ConfigError
from credaudit.core.risk import RiskLevel


def test_missing_file_returns_defaults(tmp_path):
    config = Config.load(tmp_path / "absent.yaml")

    assert config.credentials_file is None
    assert config.audit.max_workers == 1
    assert config.audit.min_risk is RiskLevel.INFO
    assert config.output.color is True
    assert config.logging.level == "WARNING"


def test_load_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "credentials_file: ~/inventory.yaml\n"
        f"report_dir: {tmp_path / 'reports'}\n"
        "audit:\n"
        "  max_workers: 4\n"
        "  min_risk: High\n"
        "output:\n"
        "  color: false\n"
        "logging:\n"
        "  level: debug\n"
        f"  file: {tmp_path / 'audit.log'}\n"
    )

    config = Config.load(path)

    assert config.credentials_file == Path("~/inventory.yaml").expanduser()
    assert config.report_dir == tmp_path / "reports"
    assert config.audit.max_workers == 4
    assert config.audit.min_risk is RiskLevel.HIGH
    assert config.output.color is False
    assert config.logging.level == "DEBUG"
    assert config.logging.file == tmp_path / "audit.log"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("audit: [broken\n")

    with pytest.raises(ConfigError, match="Invalid config YAML"):
        Config.load(path)


def test_invalid_min_risk(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("audit:\n  min_risk: severe\n")

    with pytest.raises(ConfigError, match="Invalid audit settings"):
        Config.load(path)


def test_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError):
        Config.load(path)


def test_env_var(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("audit:\n  max_workers: 3\n")
    monkeypatch.setenv("CREDAUDIT_CONFIG", str(path))

    config = get_config(reload=True)

    assert config.config_file == path
    assert config.audit.max_workers == 3


def test_save_default_config_round_trip(tmp_path):
    config = Config.load(tmp_path / "fresh" / "config.yaml")
    config.save_default_config()

    assert config.config_file.exists()
    loaded = Config.load(config.config_file)
    assert loaded.credentials_file is None
    assert loaded.audit.min_risk is RiskLevel.INFO
    assert loaded.output.color is True


def test_save_default_config_keeps_existing(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output:\n  color: false\n")

    Config.load(path).save_default_config()

    assert path.read_text() == "output:\n  color: false\n"


@pytest.mark.parametrize("section", ["audit", "output", "logging"])
def test_section_must_be_mapping(tmp_path, section):
    path = tmp_path / "config.yaml"
    path.write_text(f"{section}: [1, 2]\n")

    with pytest.raises(ConfigError, match=f"Invalid {section} settings"):
        Config.load(path)


def test_empty_section_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("audit:\noutput:\n")

    config = Config.load(path)

    assert config.audit.max_workers == 1
    assert config.output.color is True


@pytest.mark.parametrize("value", ['"false"', "'no'", "0"])
def test_color_must_be_boolean(tmp_path, value):
    path = tmp_path / "config.yaml"
    path.write_text(f"output:\n  color: {value}\n")

    with pytest.raises(ConfigError, match="color must be true or false"):
        Config.load(path)


def test_invalid_utf8(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_bytes(b"audit:\n  min_risk: \xff\xfe\n")

    with pytest.raises(ConfigError, match="not valid UTF-8"):
        Config.load(path)
