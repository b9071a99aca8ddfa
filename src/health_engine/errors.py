"""Errores del motor de métricas."""

from __future__ import annotations


class HealthEngineError(Exception):
    """Base class for engine errors."""


class ConfigError(HealthEngineError, ValueError):
    """Invalid engine configuration."""


class ActivityFactorError(HealthEngineError, ValueError):
    """Activity factor outside the supported levels."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Unsupported activity factor: {value!r}")
        self.value = value


class SourceFormatError(HealthEngineError, ValueError):
    """Input export file has an unexpected shape."""
