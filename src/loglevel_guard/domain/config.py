"""Configuration for the log level guard rule. Immutable value objects created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from loglevel_guard.domain.constants import (
    DEFAULT_FORMAT_SUFFIX,
    DEFAULT_GUARD_TEMPLATE,
    DEFAULT_INTERFACE_PREFIX,
    DEFAULT_LOG_CALL_PREFIX,
)

KNOWN_KEYS = frozenset(
    {
        "log-call-prefix",
        "format-suffix",
        "interface-prefix",
        "guard-template",
        "exclude-paths",
    }
)


class ConfigurationError(ValueError):
    """Raised when a configuration value has the wrong type or shape."""


@dataclass(frozen=True)
class LoggingConvention:
    """Naming convention that identifies guarded logging calls.

    log_call_prefix: method names starting with it are logging calls ("Debug").
    format_suffix: stripped from the method name before building the guard ("Format").
    interface_prefix: resolved qualified names must start with it ("log4net.ILog.").
    guard_template: guard property name, "{level}" being the stripped method name. Other
        text, braces included, is kept literally.
    """

    log_call_prefix: str = DEFAULT_LOG_CALL_PREFIX
    format_suffix: str = DEFAULT_FORMAT_SUFFIX
    interface_prefix: str = DEFAULT_INTERFACE_PREFIX
    guard_template: str = DEFAULT_GUARD_TEMPLATE

    def __post_init__(self) -> None:
        if "{level}" not in self.guard_template:
            raise ConfigurationError(
                f"guard-template must contain '{{level}}', got {self.guard_template!r}"
            )

    def guard_property_for(self, method_name: str) -> str:
        """DebugFormat -> IsDebugEnabled, Debug -> IsDebugEnabled."""
        level = method_name
        if self.format_suffix:
            level = level.removesuffix(self.format_suffix)
        return self.guard_template.replace("{level}", level)


class ConfigurationLoader:
    """
    Immutable configuration for the analyzer.

    Created by Infrastructure from the [tool.loglevel-guard] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)
        self._convention = LoggingConvention(
            log_call_prefix=self._str_option("log-call-prefix", DEFAULT_LOG_CALL_PREFIX),
            format_suffix=self._str_option("format-suffix", DEFAULT_FORMAT_SUFFIX),
            interface_prefix=self._str_option("interface-prefix", DEFAULT_INTERFACE_PREFIX),
            guard_template=self._str_option("guard-template", DEFAULT_GUARD_TEMPLATE),
        )

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values. Unknown keys only warn."""
        for key in config:
            if key not in KNOWN_KEYS:
                logging.warning("Configuration Warning: unknown key '%s' in [tool.loglevel-guard].", key)
        for key in ("log-call-prefix", "format-suffix", "interface-prefix", "guard-template"):
            value = config.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"'{key}' must be a string, got {type(value).__name__}")
        if config.get("log-call-prefix") == "":
            raise ConfigurationError("'log-call-prefix' must not be empty")
        excludes = config.get("exclude-paths")
        if excludes is not None and not isinstance(excludes, list):
            raise ConfigurationError("'exclude-paths' must be a list of strings")

    def _str_option(self, key: str, default: str) -> str:
        value = self._config.get(key)
        return value if isinstance(value, str) else default

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def convention(self) -> LoggingConvention:
        """The naming convention used to match calls and build guard names."""
        return self._convention

    @property
    def log_call_prefix(self) -> str:
        return self._convention.log_call_prefix

    @property
    def format_suffix(self) -> str:
        return self._convention.format_suffix

    @property
    def interface_prefix(self) -> str:
        return self._convention.interface_prefix

    @property
    def guard_template(self) -> str:
        return self._convention.guard_template

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped by the standalone audit."""
        raw = self._config.get("exclude-paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    def with_overrides(self, **overrides: str | None) -> ConfigurationLoader:
        """Return a new loader with CLI/pylint option values layered over the file config."""
        merged = dict(self._config)
        for key, value in overrides.items():
            if value is not None:
                merged[key.replace("_", "-")] = value
        return ConfigurationLoader(merged)
