"""Tests for YAML configuration loading and the configuration context."""

from pathlib import Path

import pytest

from src.bookservice.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    PaginationConfig,
)
from src.bookservice.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookservice.runtime.context import get_config, merge_configs, with_context


class TestSubstituteEnvVars:
    def test_required_variable(self, monkeypatch):
        monkeypatch.setenv("BOOKS_TEST_VALUE", "hello")
        assert substitute_env_vars("x: ${BOOKS_TEST_VALUE}") == "x: hello"

    def test_default_used_when_missing(self, monkeypatch):
        monkeypatch.delenv("BOOKS_TEST_MISSING", raising=False)
        assert substitute_env_vars("${BOOKS_TEST_MISSING:-fallback}") == "fallback"

    def test_missing_required_variable_raises(self, monkeypatch):
        monkeypatch.delenv("BOOKS_TEST_MISSING", raising=False)
        with pytest.raises(ValueError, match="BOOKS_TEST_MISSING"):
            substitute_env_vars("${BOOKS_TEST_MISSING}")

    def test_custom_error_message(self, monkeypatch):
        monkeypatch.delenv("BOOKS_TEST_MISSING", raising=False)
        with pytest.raises(ValueError, match="set the signing key"):
            substitute_env_vars("${BOOKS_TEST_MISSING:?set the signing key}")


class TestLoadTemplatedYaml:
    def test_loads_nested_values(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("BOOKS_TEST_DB", "sqlite:///./test.db")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  database:\n"
            "    url: ${BOOKS_TEST_DB}\n"
            "  pagination:\n"
            "    default_limit: ${BOOKS_TEST_LIMIT:-7}\n"
            "  authorization:\n"
            "    admin_claim_type: role\n"
            "    admin_claim_value: librarian\n"
        )

        config = load_templated_yaml(config_file)

        assert config.database.url == "sqlite:///./test.db"
        assert config.pagination.default_limit == 7
        assert config.authorization.admin_claim_type == "role"
        assert config.authorization.admin_claim_value == "librarian"
        assert config.jwt.allowed_algorithms == ["HS256"]

    def test_environment_prefixed_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "test")
        monkeypatch.setenv("BOOKS_TEST_SECRET", "base-secret")
        monkeypatch.setenv("TEST_BOOKS_TEST_SECRET", "test-secret")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  jwt:\n    secret: ${BOOKS_TEST_SECRET}\n")

        assert load_templated_yaml(config_file).jwt.secret == "test-secret"

    def test_invalid_values_raise(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  pagination:\n    default_limit: 0\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_non_mapping_raises(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_templated_yaml(config_file)


class TestContext:
    def test_with_context_overrides_and_restores(self):
        before = get_config().pagination.default_limit
        override = ConfigData(pagination=PaginationConfig(default_limit=42))

        with with_context(override):
            assert get_config().pagination.default_limit == 42

        assert get_config().pagination.default_limit == before

    def test_merge_keeps_unset_fields(self):
        base = ConfigData(database=DatabaseConfig(url="sqlite:///./base.db", echo=True))
        override = ConfigData(database=DatabaseConfig(url="sqlite://"))

        merged = merge_configs(base, override)

        assert merged.database.url == "sqlite://"
        assert merged.database.echo is True

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError):
            with with_context({"pagination": {"default_limit": 3}}):  # type: ignore[arg-type]
                pass

    def test_in_memory_database_detection(self):
        assert DatabaseConfig(url="sqlite://").is_memory
        assert DatabaseConfig(url="sqlite:///:memory:").is_memory
        assert not DatabaseConfig(url="sqlite:///./books.db").is_memory
        assert not DatabaseConfig(url="postgresql://u@h/db").is_sqlite
