"""Typed container for environment variables."""

import re
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any
from urllib.parse import SplitResult
from urllib.parse import urlsplit

import yaml

from .exceptions import ConfigValidationError
from .exceptions import MissingRequiredKeysError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Characters RFC 3986 allows in a URI reference, and a well-formed percent-escape
_URL_ALLOWED = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_URL_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

TRUE_VALUES = frozenset({"true", "yes", "1"})
FALSE_VALUES = frozenset({"false", "no", "0"})


class EnvironmentVariables:
    """Flat string key/value store with required keys and typed accessors.

    The required keys are checked once, at construction. ``set`` can later
    remove a required key without complaint; callers that need a stronger
    guarantee must check ``required_keys`` themselves.

    Args:
        dictionary: Initial variables (copied)
        required_keys: Keys that must be present in ``dictionary``

    Raises:
        MissingRequiredKeysError: If any required key is absent
    """

    def __init__(self, dictionary: Mapping[str, str], required_keys: Iterable[str] = ()):
        self._dictionary = dict(dictionary)
        self._required_keys = frozenset(required_keys)

        missing = self._required_keys.difference(self._dictionary)
        if missing:
            raise MissingRequiredKeysError(missing)

    @property
    def required_keys(self) -> frozenset[str]:
        return self._required_keys

    # ===== Raw Access =====

    def get(self, key: str) -> str | None:
        return self._dictionary.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Insert or replace a variable, or remove it when value is None."""
        if value is None:
            self._dictionary.pop(key, None)
        else:
            self._dictionary[key] = value

    def keys(self):
        return self._dictionary.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._dictionary

    def __iter__(self) -> Iterator[str]:
        return iter(self._dictionary)

    def __len__(self) -> int:
        return len(self._dictionary)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentVariables):
            return NotImplemented
        return self._dictionary == other._dictionary and self._required_keys == other._required_keys

    def __repr__(self) -> str:
        # Values may hold secrets; only show key names.
        return f"{type(self).__name__}(keys={sorted(self._dictionary)!r})"

    def copy(self) -> "EnvironmentVariables":
        """Return an independent copy with the same required keys.

        Required keys are not re-checked, so a container that had one removed
        through ``set`` can still be copied.
        """
        duplicate = object.__new__(type(self))
        duplicate._dictionary = dict(self._dictionary)
        duplicate._required_keys = self._required_keys
        return duplicate

    __copy__ = copy

    # ===== Typed Accessors =====

    def as_int(self, key: str) -> int | None:
        """Return the value as a base-10 integer.

        Only a plain literal with an optional sign is accepted: no surrounding
        whitespace, underscores or non-ASCII digits.

        Returns:
            The integer, or None if the key is missing or not an integer literal
        """
        value = self.get(key)
        if value is None or not _INT_PATTERN.fullmatch(value):
            return None
        return int(value)

    def as_bool(self, key: str) -> bool | None:
        """Return the value as a boolean.

        Case-insensitive: true/yes/1 are True, false/no/0 are False.

        Returns:
            The boolean, or None if the key is missing or not recognised
        """
        value = self.get(key)
        if value is None:
            return None

        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        return None

    def as_url(self, key: str) -> SplitResult | None:
        """Return the value parsed as a URL reference.

        Any scheme is accepted, as are relative references. Empty strings,
        characters outside the RFC 3986 set and malformed percent-escapes
        are rejected.

        Returns:
            The split URL, or None if the key is missing or the value is not a URL
        """
        value = self.get(key)
        if not value or not _URL_ALLOWED.fullmatch(value) or _URL_BAD_ESCAPE.search(value):
            return None

        try:
            url = urlsplit(value)
            url.port  # ValueError on a malformed port
        except ValueError:
            return None
        return url

    # ===== Serialization =====

    def to_dict(self) -> dict[str, str]:
        return dict(self._dictionary)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvironmentVariables":
        """Build a container from a decoded key/value document.

        Required keys are never restored, so decoding never fails on them.
        Entries whose value is None are skipped.

        Raises:
            ConfigValidationError: If data is not a mapping of strings to strings
        """
        if not isinstance(data, Mapping):
            raise ConfigValidationError(f"Expected a mapping, got {type(data).__name__}")

        dictionary = {}
        for key, value in data.items():
            if value is None:
                continue
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigValidationError(f"Expected string key and value for {key!r}")
            dictionary[key] = value

        return cls(dictionary)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self._dictionary, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> "EnvironmentVariables":
        """Decode a container written by to_yaml.

        Raises:
            ConfigValidationError: If the document is malformed or not a string mapping
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Failed to decode environment variables: {e}") from e

        return cls.from_dict({} if data is None else data)


EnvVars = EnvironmentVariables
