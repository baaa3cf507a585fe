"""Error kinds raised (or reported) while requesting quotas."""

import json


class QuotaBuilderError(Exception):
    """Base class for every error this package raises."""


class ConfigurationError(QuotaBuilderError):
    """The service base URL is not configured."""


class TransportError(QuotaBuilderError):
    """The quota service could not be reached or replied with something unusable."""

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class EmptyResponseError(TransportError):
    pass


class NonJSONResponseError(TransportError):
    pass


class MalformedResponseError(TransportError):
    pass


class PartialResultError(QuotaBuilderError):
    """
    Some requested dimensions were not computed by the service.

    Non-fatal: the page renders the dimensions it got and shows this one
    separately. It is built from ``meta.errors`` and is never raised by the page.
    """

    def __init__(self, errors: dict):
        self.errors = dict(errors)
        super().__init__(
            "Some dimensions failed: " + ", ".join(str(k) for k in self.errors)
        )

    def details(self) -> str:
        return json.dumps(self.errors, indent=2, ensure_ascii=False, default=str)
