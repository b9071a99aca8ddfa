"""Clases base para fuentes de datos de salud."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from health_engine.model import Metric, Sample


@dataclass(frozen=True)
class SourcePaths:
    """Container for source directories."""

    root: Path


class DataSource(ABC):
    """Abstract health data source."""

    def __init__(self, paths: SourcePaths) -> None:
        """Create a data source.

        Args:
            paths: Source paths configuration.
        """
        self._paths = paths

    @abstractmethod
    def validate(self) -> None:
        """Validate that required folders/files exist.

        Raises:
            FileNotFoundError: If required files are missing.
        """

    @abstractmethod
    def load_samples(self, metric: Metric) -> tuple[Sample, ...]:
        """Return every raw sample of ``metric``, sorted by timestamp."""
