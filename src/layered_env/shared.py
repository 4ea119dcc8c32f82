"""Process-wide shared environment instance."""

import logging
import threading
from collections.abc import Callable

from .variables import EnvironmentVariables

logger = logging.getLogger(__name__)


class SharedEnvironment:
    """Lazily built, lock-guarded EnvironmentVariables shared across threads.

    The holder only serialises building and swapping the cached instance.
    The instance itself is not synchronised: callers that mutate it from
    several threads need their own lock.

    Example:
        ```python
        from layered_env import BaseWithOverride, SharedEnvironment, live

        settings = SharedEnvironment(lambda: live(BaseWithOverride(Path("."), "production")))

        env = settings.get_or_init()  # built on first use
        env = settings.reload()  # files and process env re-read
        ```

    Args:
        factory: Builds a fresh instance, typically a call to live()
    """

    def __init__(self, factory: Callable[[], EnvironmentVariables]):
        self._factory = factory
        self._lock = threading.Lock()
        self._instance: EnvironmentVariables | None = None

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    def get_or_init(self) -> EnvironmentVariables:
        """Return the cached instance, building it on first call.

        Raises:
            Whatever the factory raises; nothing is cached in that case
        """
        with self._lock:
            if self._instance is None:
                self._instance = self._factory()
                logger.debug("Initialized shared environment")
            return self._instance

    def reload(self) -> EnvironmentVariables:
        """Rebuild the instance and replace the cached one.

        If the factory raises, the previously cached instance is kept.
        """
        with self._lock:
            instance = self._factory()
            self._instance = instance
            logger.info("Reloaded shared environment")
            return instance
