import os

from quota_builder.errors import ConfigurationError

API_BASE_ENV = "QUOTA_API_BASE"


def api_base_or_none() -> str | None:
    """Configured service base URL without a trailing slash, or None if unset."""
    base = os.environ.get(API_BASE_ENV, "").strip()
    if not base:
        return None
    return base.rstrip("/")


def get_api_base() -> str:
    base = api_base_or_none()
    if base is None:
        raise ConfigurationError(
            f"Missing {API_BASE_ENV}. Set it in the environment before starting the app."
        )
    return base
