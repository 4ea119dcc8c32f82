"""Parsers for environment files.

Two formats are accepted and detected by trial:

- A JSON-style object document mapping string keys to string values::

      {"API_KEY": "dev-api-key", "DEBUG": "true"}

- Line-oriented ``KEY=VALUE`` text with ``#`` comment lines::

      # database
      DATABASE_URL="postgresql://localhost/db"
      DEBUG=true

The tree format is tried first; when it does not yield a string mapping the
text is parsed line by line. Reading a file never raises: see read_env_file.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .exceptions import InvalidEnvironmentError
from .utils import unquote

logger = logging.getLogger(__name__)

TreeDecoder = Callable[[str], Any]


def decode_tree(text: str) -> Any:
    """Decode a JSON-style object document.

    Only documents that open with ``{`` are handed to ``json.loads``; any
    other text is left to the line-oriented parser.

    Raises:
        ValueError: If the text is not an object document
        json.JSONDecodeError: If the document is malformed
    """
    if not text.lstrip().startswith("{"):
        raise ValueError("Not an object document")
    return json.loads(text)


def parse_tree(text: str, decoder: TreeDecoder = decode_tree) -> dict[str, str]:
    """Parse a tree-format document into a flat string mapping.

    Args:
        text: Document text
        decoder: Callable turning text into a decoded document

    Returns:
        Top-level key/value pairs of the document

    Raises:
        InvalidEnvironmentError: If the document is not a mapping of strings to strings
    """
    data = decoder(text)
    if not isinstance(data, dict):
        raise InvalidEnvironmentError(f"Expected an object document, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidEnvironmentError(f"Non-string entry for key {key!r}")

    return dict(data)


def parse_lines(text: str) -> dict[str, str]:
    """Parse line-oriented ``KEY=VALUE`` text.

    Blank lines and lines starting with ``#`` are skipped. Keys and values are
    trimmed and lose one layer of matching quotes. The last occurrence of a
    duplicate key wins.

    Raises:
        InvalidEnvironmentError: On a line without ``=`` or with an empty key
    """
    result: dict[str, str] = {}

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        raw_key, separator, raw_value = line.partition("=")
        if not separator:
            raise InvalidEnvironmentError(f"Line {line_number}: missing '=' separator")

        key = unquote(raw_key)
        if not key:
            raise InvalidEnvironmentError(f"Line {line_number}: empty key")

        result[key] = unquote(raw_value)

    return result


def parse_text(text: str, decoder: TreeDecoder = decode_tree) -> dict[str, str]:
    """Parse environment file content, trying the tree format first.

    Raises:
        InvalidEnvironmentError: If the line-oriented fallback fails too
    """
    try:
        return parse_tree(text, decoder)
    except Exception as e:
        logger.debug(f"Tree format not applicable, parsing lines: {e}")

    return parse_lines(text)


def read_env_file(
    path: Path,
    decoder: TreeDecoder = decode_tree,
    log: logging.Logger | None = None,
) -> dict[str, str]:
    """Read and parse an environment file, failing open.

    A missing file is a normal condition (optional override files) and yields
    an empty mapping without a warning. Any other read, decode or parse error
    is logged as a warning and also yields an empty mapping.

    Args:
        path: File to read
        decoder: Tree-format decoder passed to parse_text
        log: Logger to report degradation on (default: module logger)

    Returns:
        Parsed mapping, or empty dict if the file is missing or unusable
    """
    log = log or logger
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug(f"Environment file {path} not found, skipping")
        return {}
    except (OSError, ValueError) as e:
        # ValueError covers undecodable bytes and paths the OS rejects
        log.warning(f"Could not read environment file {path}: {e}")
        return {}

    try:
        values = parse_text(text, decoder)
    except InvalidEnvironmentError as e:
        log.warning(f"Could not parse environment file {path}: {e.reason}")
        return {}

    log.debug(f"Loaded {len(values)} variables from {path}")
    return values
