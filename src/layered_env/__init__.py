"""layered-env: Layered environment variables with typed access.

This library merges flat string settings from three layers:
- Built-in defaults (lowest priority)
- Environment files (``.env`` plus an optional ``.env.<environment>`` override,
  or a single file), as JSON-style objects or KEY=VALUE lines
- The process environment (highest priority)

Applications choose a ConfigurationSource to define their file policy. The
library provides the loading, merging and required-key validation.

Public API:
    live: Assemble EnvironmentVariables from all layers
    EnvironmentVariables (alias EnvVars): Container with typed accessors
    NoFiles, SingleFile, BaseWithOverride: ConfigurationSource variants
    SharedEnvironment: Lock-guarded, lazily built shared instance
    for_testing: Container to inject in place of the live one
    ConfigError and subclasses: Exception types

Example:
    ```python
    from pathlib import Path
    from layered_env import BaseWithOverride, live

    env = live(
        BaseWithOverride(Path("."), environment="development"),
        required_keys={"APP_SECRET", "DATABASE_URL"},
    )

    port = env.as_int("PORT")
    debug = env.as_bool("DEBUG")
    database_url = env.as_url("DATABASE_URL")
    ```
"""

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .exceptions import InitializationFailedError
from .exceptions import InvalidEnvironmentError
from .exceptions import MissingRequiredKeysError
from .live import live
from .loader import load_source
from .models import BaseWithOverride
from .models import ConfigurationSource
from .models import NoFiles
from .models import SingleFile
from .shared import SharedEnvironment
from .testing import for_testing
from .utils import merge_overwriting
from .variables import EnvironmentVariables
from .variables import EnvVars

__version__ = "0.1.0"

__all__ = [
    "live",
    "load_source",
    "EnvironmentVariables",
    "EnvVars",
    "ConfigurationSource",
    "NoFiles",
    "SingleFile",
    "BaseWithOverride",
    "SharedEnvironment",
    "for_testing",
    "merge_overwriting",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidEnvironmentError",
    "MissingRequiredKeysError",
    "InitializationFailedError",
]
