import json
import logging

import requests

from quota_builder.config import get_api_base
from quota_builder.errors import EmptyResponseError, NonJSONResponseError, TransportError

logger = logging.getLogger(__name__)

CALCULATE_PATH = "/v1/quotas/calculate"
BODY_PREVIEW_CHARS = 500


def post_json(path: str, payload, base_url: str | None = None, timeout: float | None = None):
    """
    POST ``payload`` as JSON to ``<base>/<path>`` and return the parsed reply.

    One attempt, no retries. The body is read as text first so an empty reply
    and an unparsable one give different errors. The parsed value is returned
    untyped; the caller decides how far to trust its shape.
    """
    base = (base_url or get_api_base()).rstrip("/")
    url = f"{base}{path}"
    logger.debug("POST %s", url)

    try:
        res = requests.post(
            url,
            data=json.dumps(payload),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.debug("POST %s failed: %s", url, exc)
        raise TransportError(f"API request failed: {exc}") from exc

    text = res.text or ""

    if not 200 <= res.status_code < 300:
        logger.debug("POST %s returned %s", url, res.status_code)
        raise TransportError(
            f"API {res.status_code}: {text[:BODY_PREVIEW_CHARS]}",
            status=res.status_code,
            body=text[:BODY_PREVIEW_CHARS],
        )

    if not text.strip():
        raise EmptyResponseError("API returned empty response body.", status=res.status_code)

    try:
        return json.loads(text)
    except ValueError as exc:
        raise NonJSONResponseError(
            f"API returned non-JSON: {text[:BODY_PREVIEW_CHARS]}",
            status=res.status_code,
            body=text[:BODY_PREVIEW_CHARS],
        ) from exc
