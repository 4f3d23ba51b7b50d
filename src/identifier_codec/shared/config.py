"""Configuration classes for identifier creation.

This module provides configuration objects for the transformer registry and
library-wide logging, enabling control over caching behaviour.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

COMPONENT_FIELDS = ["cache", "global_"]


@dataclass
class CacheConfig:
    """Configuration for the transformer cache."""

    enable_caching: bool = True
    max_entries: Optional[int] = None  # None for unbounded

    def __post_init__(self) -> None:
        """Validate cache configuration."""
        if self.max_entries is not None and self.max_entries <= 0:
            raise ValueError("max_entries must be > 0 or None")


@dataclass
class GlobalConfig:
    """Global configuration settings that apply across all components."""

    logging_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    enable_correlation_tracking: bool = True

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {VALID_LOGGING_LEVELS}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class IdentifierConfig:
    """Configuration for transformer caching and logging.

    Immutable; derive variations with ``override``.
    """

    cache: CacheConfig = field(default_factory=CacheConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    correlation_id: Optional[str] = None

    # Metadata
    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.cache.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if not self.cache.enable_caching and self.cache.max_entries is not None:
            raise ConfigValidationError(
                "max_entries has no effect when caching is disabled",
                field_name="cache.max_entries",
                suggestions=["Set cache.max_entries to None",
                             "Enable cache.enable_caching"]
            )

    @property
    def effective_correlation_id(self) -> Optional[str]:
        """Correlation ID to attach to log records, if tracking is enabled."""
        if not self.global_.enable_correlation_tracking:
            return None
        return self.correlation_id

    def override(self, **kwargs: Any) -> "IdentifierConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New IdentifierConfig instance with overrides applied

        Example:
            >>> config = IdentifierConfig()
            >>> new_config = config.override(
            ...     cache__max_entries=512,
            ...     global___logging_level="DEBUG"
            ... )
        """
        # Convert nested field notation (e.g., "cache__max_entries") to nested dict
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                # "global___x" splits as ("global", "_x")
                if component == "global" and field_name.startswith("_"):
                    component, field_name = "global_", field_name[1:]
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}

        try:
            for field_name in COMPONENT_FIELDS:
                current_config = getattr(self, field_name)
                if isinstance(nested_overrides.get(field_name), dict):
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
                elif field_name in nested_overrides:
                    new_fields[field_name] = nested_overrides[field_name]
                else:
                    new_fields[field_name] = current_config

            for key, value in nested_overrides.items():
                if key not in COMPONENT_FIELDS:
                    new_fields[key] = value

            return replace(self, **new_fields)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        def _dataclass_to_dict(obj: Any) -> Any:
            """Recursively convert dataclass to dict."""
            if hasattr(obj, "__dataclass_fields__"):
                result: Dict[str, Any] = {}
                for field_name in obj.__dataclass_fields__:
                    result[field_name] = _dataclass_to_dict(getattr(obj, field_name))
                return result
            if isinstance(obj, Enum):
                return obj.name
            if isinstance(obj, (list, tuple, set)):
                return [_dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _dataclass_to_dict(value) for key, value in obj.items()}
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IdentifierConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            IdentifierConfig instance created from dictionary
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0]
            )

        field_values: Dict[str, Any] = dict(data)
        if isinstance(data.get("cache"), dict):
            field_values["cache"] = _build_component(CacheConfig, data["cache"])
        if isinstance(data.get("global_"), dict):
            field_values["global_"] = _build_component(GlobalConfig, data["global_"])

        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "IdentifierConfig":
        """Create configuration from JSON string.

        Args:
            json_str: JSON string containing configuration data

        Returns:
            IdentifierConfig instance created from JSON
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "IdentifierConfig":
        """Create the default configuration with an unbounded cache."""
        return cls(name="default")

    @classmethod
    def bounded_cache(cls, max_entries: int) -> "IdentifierConfig":
        """Create a configuration whose cache evicts least recently used entries."""
        return cls(
            cache=CacheConfig(max_entries=max_entries),
            name="bounded_cache",
            description=f"Transformer cache limited to {max_entries} entries"
        )

    @classmethod
    def uncached(cls) -> "IdentifierConfig":
        """Create a configuration that constructs a new transformer on every request."""
        return cls(
            cache=CacheConfig(enable_caching=False),
            name="uncached",
            description="Transformers are constructed on every request"
        )


def _build_component(component_class: type, values: Dict[str, Any]) -> Any:
    """Build a component configuration, rejecting unknown fields."""
    unknown = set(values) - set(component_class.__dataclass_fields__)
    if unknown:
        raise ConfigValidationError(
            f"Unknown {component_class.__name__} fields: {sorted(unknown)}",
            field_name=sorted(unknown)[0]
        )
    try:
        return component_class(**values)
    except ValueError as e:
        raise ConfigValidationError(str(e)) from e
