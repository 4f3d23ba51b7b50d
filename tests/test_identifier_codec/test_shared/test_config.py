"""Comprehensive tests for configuration system."""

import json
import pytest
from dataclasses import FrozenInstanceError

from identifier_codec.shared.config import (
    CacheConfig,
    GlobalConfig,
    IdentifierConfig,
    ConfigError,
    ConfigValidationError
)


class TestCacheConfig:
    """Test suite for CacheConfig."""

    def test_default_configuration(self):
        """Test default cache configuration values."""
        config = CacheConfig()

        assert config.enable_caching is True
        assert config.max_entries is None

    def test_cache_config_validation_failures(self):
        """Test cache configuration validation failures."""
        with pytest.raises(ValueError, match="max_entries must be > 0 or None"):
            CacheConfig(max_entries=0)

        with pytest.raises(ValueError, match="max_entries must be > 0 or None"):
            CacheConfig(max_entries=-5)


class TestGlobalConfig:
    """Test suite for GlobalConfig."""

    def test_default_configuration(self):
        """Test default global configuration values."""
        config = GlobalConfig()

        assert config.logging_level == "INFO"
        assert config.enable_correlation_tracking is True

    def test_global_config_validation_failures(self):
        """Test global configuration validation failures."""
        with pytest.raises(ValueError, match="logging_level must be one of"):
            GlobalConfig(logging_level="VERBOSE")


class TestIdentifierConfig:
    """Test suite for IdentifierConfig."""

    def test_default_configuration(self):
        """Test default identifier configuration."""
        config = IdentifierConfig()

        assert isinstance(config.cache, CacheConfig)
        assert isinstance(config.global_, GlobalConfig)
        assert config.correlation_id is None
        assert config.version == "1.0.0"
        assert config.name is None

    def test_immutable(self):
        """Test that configuration is frozen."""
        config = IdentifierConfig()

        with pytest.raises(FrozenInstanceError):
            config.name = "changed"  # type: ignore[misc]

    def test_conflicting_cache_settings(self):
        """Test that a limit on a disabled cache is rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            IdentifierConfig(cache=CacheConfig(enable_caching=False, max_entries=10))

        assert exc_info.value.field_name == "cache.max_entries"
        assert exc_info.value.suggestions

    def test_effective_correlation_id(self):
        """Test correlation id resolution with tracking on and off."""
        tracked = IdentifierConfig(correlation_id="abc")
        untracked = IdentifierConfig(
            correlation_id="abc",
            global_=GlobalConfig(enable_correlation_tracking=False)
        )

        assert tracked.effective_correlation_id == "abc"
        assert untracked.effective_correlation_id is None

    def test_config_override(self):
        """Test configuration override functionality."""
        config = IdentifierConfig()

        new_config = config.override(
            cache__max_entries=64,
            global___logging_level="DEBUG",
            name="custom"
        )

        assert new_config.cache.max_entries == 64
        assert new_config.cache.enable_caching is True
        assert new_config.global_.logging_level == "DEBUG"
        assert new_config.name == "custom"

        # Original is unchanged
        assert config.cache.max_entries is None
        assert config.global_.logging_level == "INFO"

    def test_config_override_invalid(self):
        """Test that invalid overrides raise configuration errors."""
        config = IdentifierConfig()

        with pytest.raises(ConfigValidationError):
            config.override(cache__max_entries=0)

        with pytest.raises(ConfigValidationError):
            config.override(cache__no_such_field=1)

        with pytest.raises(ConfigValidationError):
            config.override(global___logging_level="LOUD")

    def test_config_serialization(self):
        """Test configuration serialization to dict and JSON."""
        config = IdentifierConfig.bounded_cache(32)

        config_dict = config.to_dict()

        assert config_dict["cache"] == {"enable_caching": True, "max_entries": 32}
        assert config_dict["global_"]["logging_level"] == "INFO"
        assert config_dict["name"] == "bounded_cache"

        parsed = json.loads(config.to_json())
        assert parsed == config_dict

    def test_config_deserialization(self):
        """Test configuration round trip through JSON."""
        config = IdentifierConfig(
            cache=CacheConfig(max_entries=8),
            global_=GlobalConfig(logging_level="WARNING"),
            correlation_id="req-1"
        )

        restored = IdentifierConfig.from_json(config.to_json())

        assert restored == config

    def test_from_dict_unknown_fields(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields"):
            IdentifierConfig.from_dict({"caches": {}})

        with pytest.raises(ConfigValidationError, match="Unknown CacheConfig fields") as exc_info:
            IdentifierConfig.from_dict({"cache": {"size": 3}})

        assert exc_info.value.field_name == "size"

    def test_from_dict_invalid_values(self):
        """Test that invalid component values are reported as configuration errors."""
        with pytest.raises(ConfigValidationError, match="max_entries"):
            IdentifierConfig.from_dict({"cache": {"max_entries": 0}})

    def test_from_json_invalid(self):
        """Test malformed and non-object JSON."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            IdentifierConfig.from_json("{not json")

        with pytest.raises(ConfigValidationError, match="must be an object"):
            IdentifierConfig.from_json("[1, 2]")

    def test_preset_configurations(self):
        """Test preset factory methods."""
        default = IdentifierConfig.default()
        bounded = IdentifierConfig.bounded_cache(4)
        uncached = IdentifierConfig.uncached()

        assert default.name == "default"
        assert default.cache.max_entries is None

        assert bounded.cache.max_entries == 4
        assert bounded.cache.enable_caching is True

        assert uncached.cache.enable_caching is False
        assert uncached.cache.max_entries is None

    def test_error_hierarchy(self):
        """Test that validation errors are configuration errors."""
        assert issubclass(ConfigValidationError, ConfigError)

        error = ConfigValidationError("bad", field_name="cache.max_entries")
        assert str(error) == "bad"
        assert error.suggestions == []
