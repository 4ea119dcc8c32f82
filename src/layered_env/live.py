"""Assemble environment variables from defaults, files and the process environment."""

import logging
import os
import warnings
from collections.abc import Iterable
from collections.abc import Mapping
from pathlib import Path

from .exceptions import InitializationFailedError
from .loader import load_source
from .models import ConfigurationSource
from .models import SingleFile
from .parser import TreeDecoder
from .parser import decode_tree
from .utils import merge_overwriting
from .variables import EnvironmentVariables

logger = logging.getLogger(__name__)

# Built-in defaults, lowest precedence. Empty for now.
DEFAULTS: Mapping[str, str] = {}


def live(
    source: ConfigurationSource | None = None,
    required_keys: Iterable[str] = (),
    decoder: TreeDecoder = decode_tree,
    *,
    environ: Mapping[str, str] | None = None,
    log: logging.Logger | None = None,
    local_env_file: Path | str | None = None,
) -> EnvironmentVariables:
    """Create environment variables by merging every source.

    Merge order (later overrides earlier):
    1. Built-in defaults (lowest priority)
    2. Files described by ``source``
    3. Process environment (highest priority)

    Example:
        ```python
        from layered_env import BaseWithOverride, live

        # Loads .env, then .env.development, then os.environ
        env = live(
            BaseWithOverride(Path("."), environment="development"),
            required_keys={"DATABASE_URL"},
        )
        port = env.as_int("PORT") or 8080
        ```

    Args:
        source: Files to load (default: none)
        required_keys: Keys that must be present after merging
        decoder: Tree-format decoder used by the file parser
        environ: Process environment snapshot (default: ``os.environ``)
        log: Logger for degradation warnings and failures (default: module logger)
        local_env_file: Deprecated shorthand for ``SingleFile(local_env_file)``

    Returns:
        Merged EnvironmentVariables

    Raises:
        InitializationFailedError: If loading or required-key validation fails;
            the original exception is available as ``underlying``
        TypeError: If both ``source`` and ``local_env_file`` are given
    """
    log = log or logger

    if local_env_file is not None:
        if source is not None:
            raise TypeError("Pass either source or local_env_file, not both")
        warnings.warn(
            "local_env_file is deprecated, use source=SingleFile(path) instead",
            DeprecationWarning,
            stacklevel=2,
        )
        source = SingleFile(Path(local_env_file))

    try:
        merged = dict(DEFAULTS)
        merged = merge_overwriting(merged, load_source(source, decoder, log))
        merged = merge_overwriting(merged, os.environ if environ is None else environ)
        return EnvironmentVariables(merged, required_keys)
    except Exception as e:
        log.error(f"Failed to initialize environment variables: {e}")
        raise InitializationFailedError(e) from e
