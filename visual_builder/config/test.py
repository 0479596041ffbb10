"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_drop_threshold,
    get_environment,
    get_environment_info,
    get_history_limit,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("BUILDER_HISTORY_LIMIT", raising=False)
        assert get_environment(EnvVar.BUILDER_HISTORY_LIMIT) == 50

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("BUILDER_GRID_SIZE", "32")
        assert get_environment(EnvVar.BUILDER_GRID_SIZE, override=4) == 4

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("BUILDER_GRID_SIZE", "12")
        result = get_environment(EnvVar.BUILDER_GRID_SIZE)
        assert result == 12
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean type conversion for true and false spellings."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("BUILDER_TYPESCRIPT", value)
            assert get_environment(EnvVar.BUILDER_TYPESCRIPT) is True
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("BUILDER_TYPESCRIPT", value)
            assert get_environment(EnvVar.BUILDER_TYPESCRIPT) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean spelling falls back to default."""
        monkeypatch.setenv("BUILDER_SNAP_TO_GRID", "maybe")
        assert get_environment(EnvVar.BUILDER_SNAP_TO_GRID) is True

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("BUILDER_DROP_THRESHOLD", "far")
        assert get_environment(EnvVar.BUILDER_DROP_THRESHOLD) == 50

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("BUILDER_FRAMEWORK", "vue")
        assert get_environment(EnvVar.BUILDER_FRAMEWORK) == "vue"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.BUILDER_HISTORY_LIMIT)
        assert isinstance(info, EnvConfig)
        assert info.name == "BUILDER_HISTORY_LIMIT"
        assert info.default == 50
        assert info.var_type is int
        assert info.category == "editor"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated for every variable."""
        for var in EnvVar:
            assert get_environment_info(var).description

    @pytest.mark.unit
    def test_variable_types_are_converted(self):
        """Every variable declares a type the converter handles."""
        for var in EnvVar:
            assert get_environment_info(var).var_type in (str, int, bool)


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_all_variables(self):
        """No category returns every variable."""
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter narrows the result."""
        export_vars = list_environment_variables("export")
        assert EnvVar.BUILDER_FRAMEWORK in export_vars
        assert EnvVar.BUILDER_HISTORY_LIMIT not in export_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown category yields an empty list."""
        assert list_environment_variables("nope") == []


class TestConvenienceFunctions:
    """Tests for typed convenience accessors."""

    @pytest.mark.unit
    def test_history_limit_floor(self, monkeypatch):
        """History limit never drops below one."""
        monkeypatch.setenv("BUILDER_HISTORY_LIMIT", "0")
        assert get_history_limit() == 1
        assert get_history_limit(override=7) == 7

    @pytest.mark.unit
    def test_drop_threshold_default(self, monkeypatch):
        """Drop threshold defaults to 50px."""
        monkeypatch.delenv("BUILDER_DROP_THRESHOLD", raising=False)
        assert get_drop_threshold() == 50

    @pytest.mark.unit
    def test_log_level_upper_cased(self, monkeypatch):
        """Log level is normalised to upper case."""
        monkeypatch.setenv("BUILDER_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
