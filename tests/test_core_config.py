"""Tests for config loading and TB_PATHS path resolution."""

from tailorbook.core.config import (
    DATABASE_ENV_VAR,
    TB_PATHS,
    _PACKAGE_DIR,
    get_config,
    get_config_value,
)


def test_get_config_returns_dict():
    config = get_config(reload=True)
    assert isinstance(config, dict)
    assert "destinations" in config
    assert "api" in config


def test_get_config_caching():
    c1 = get_config()
    c2 = get_config()
    assert c1 is c2


def test_get_config_reload_returns_fresh():
    get_config()
    c2 = get_config(reload=True)
    c3 = get_config()
    assert c3 is c2


def test_get_config_value_nested():
    assert get_config_value("catalog", "clothing_type_limit") == 6
    assert get_config_value("api", "cors_origin") == "*"


def test_get_config_value_missing_returns_default():
    result = get_config_value("nonexistent", "deep", "path", default="fallback")
    assert result == "fallback"


def test_database_path_resolves_under_package_dir(monkeypatch):
    monkeypatch.delenv(DATABASE_ENV_VAR, raising=False)
    path = TB_PATHS.database
    assert path.is_absolute()
    assert str(path).startswith(str(_PACKAGE_DIR))
    assert path.name == "tailorbook.db"


def test_database_path_env_override(monkeypatch, tmp_path):
    target = tmp_path / "shop.db"
    monkeypatch.setenv(DATABASE_ENV_VAR, str(target))
    assert TB_PATHS.database == target


def test_logging_section_present():
    assert get_config_value("logging", "level") == "INFO"
    assert "%(name)s" in get_config_value("logging", "format")
