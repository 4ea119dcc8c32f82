"""Exceptions for layered-env."""

from collections.abc import Iterable


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error reading or parsing a configuration file."""

    pass


class ConfigValidationError(ConfigError):
    """Error validating configuration data."""

    pass


class InvalidEnvironmentError(ConfigFileError):
    """Malformed environment file content.

    Raised by the parsers and recovered inside the file reader, which degrades
    to an empty mapping instead.

    Args:
        reason: Human readable description, annotated with the line number
            for line-oriented input
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class MissingRequiredKeysError(ConfigValidationError):
    """One or more required keys are absent from the merged mapping.

    Args:
        keys: The missing keys
    """

    def __init__(self, keys: Iterable[str]):
        self.keys = sorted(keys)
        super().__init__(f"Missing required keys: {', '.join(self.keys)}")


class InitializationFailedError(ConfigError):
    """Assembling a live environment failed.

    The original exception is kept both as ``underlying`` and as ``__cause__``.
    """

    def __init__(self, underlying: BaseException):
        self.underlying = underlying
        super().__init__(f"Failed to initialize environment variables: {underlying}")
