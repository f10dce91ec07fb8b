from __future__ import annotations


class ConfigError(ValueError):
    """Invalid setup-time configuration. Fatal to the component being built."""


class ColorSchemeError(ConfigError):
    """Unknown colour scheme id."""


class GaugeConfigError(ConfigError):
    """Degenerate gauge scale, band or period."""


class InvalidGaugeValue(ValueError):
    """A value handed to a gauge is not a finite number."""
