"""Resolve a configuration source into a merged mapping."""

import logging

from .models import BaseWithOverride
from .models import ConfigurationSource
from .models import NoFiles
from .models import SingleFile
from .parser import TreeDecoder
from .parser import decode_tree
from .parser import read_env_file
from .utils import merge_overwriting

logger = logging.getLogger(__name__)


def load_source(
    source: ConfigurationSource | None,
    decoder: TreeDecoder = decode_tree,
    log: logging.Logger | None = None,
) -> dict[str, str]:
    """Load the file-derived variables described by a configuration source.

    Merge order for BaseWithOverride (later overrides earlier):
    1. Base file ``<root>/.env``
    2. Override file ``<root>/.env.<environment>`` (if an environment is set)

    Files are re-read on every call. Missing or malformed files contribute
    nothing (see read_env_file).

    Args:
        source: Which files to load; None behaves like NoFiles
        decoder: Tree-format decoder for the file parser
        log: Logger for file degradation warnings

    Returns:
        Merged variables from the source's files

    Raises:
        TypeError: If source is not a known configuration source
    """
    log = log or logger

    if source is None or isinstance(source, NoFiles):
        return {}

    if isinstance(source, SingleFile):
        return read_env_file(source.path, decoder, log)

    if isinstance(source, BaseWithOverride):
        merged = read_env_file(source.base_path, decoder, log)
        override_path = source.override_path
        if override_path is not None:
            merged = merge_overwriting(merged, read_env_file(override_path, decoder, log))
        return merged

    raise TypeError(f"Unsupported configuration source: {source!r}")
