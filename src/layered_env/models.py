"""Data models for layered-env."""

from dataclasses import dataclass
from pathlib import Path

BASE_FILE_NAME = ".env"


@dataclass(frozen=True)
class NoFiles:
    """Load nothing from disk; only defaults and the process environment apply."""


@dataclass(frozen=True)
class SingleFile:
    """Load a single environment file.

    Attributes:
        path: File to read (JSON-style object or KEY=VALUE lines). A missing
            file contributes nothing.
    """

    path: Path

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class BaseWithOverride:
    """Load ``<root>/.env`` plus an optional environment-specific override.

    Immutable description of a base/override file pair. When ``environment``
    is set, ``<root>/.env.<environment>`` is read after the base file and wins
    on shared keys.

    Attributes:
        root: Directory holding the environment files
        environment: Override name such as "development" (optional - None
            loads only the base file)
    """

    root: Path
    environment: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))

    @property
    def base_path(self) -> Path:
        return self.root / BASE_FILE_NAME

    @property
    def override_path(self) -> Path | None:
        if self.environment is None:
            return None
        return self.root / f"{BASE_FILE_NAME}.{self.environment}"


ConfigurationSource = NoFiles | SingleFile | BaseWithOverride
