"""Helpers for substituting environment variables under test."""

from .variables import EnvironmentVariables


def for_testing(**values: str) -> EnvironmentVariables:
    """Build a container to inject in place of the live one.

    Without arguments this is the empty default with no required keys.

    Example:
        ```python
        service = BillingService(env=for_testing(STRIPE_SECRET_KEY="sk_test"))
        ```
    """
    return EnvironmentVariables(values)
