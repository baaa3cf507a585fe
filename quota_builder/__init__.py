"""Quota Builder: request, transport, response and export helpers for the quota page."""

import logging

from quota_builder.api import CALCULATE_PATH, post_json
from quota_builder.errors import (
    ConfigurationError,
    EmptyResponseError,
    MalformedResponseError,
    NonJSONResponseError,
    PartialResultError,
    QuotaBuilderError,
    TransportError,
)
from quota_builder.export import build_export, export_frame, flatten
from quota_builder.request import QuotaRequest, ReferenceParameters, build_request, repair_dimensions
from quota_builder.response import QuotaResponse, parse_quota_response
from quota_builder.session import QuotaSession

__all__ = [
    "CALCULATE_PATH",
    "ConfigurationError",
    "EmptyResponseError",
    "MalformedResponseError",
    "NonJSONResponseError",
    "PartialResultError",
    "QuotaBuilderError",
    "QuotaRequest",
    "QuotaResponse",
    "QuotaSession",
    "ReferenceParameters",
    "TransportError",
    "build_export",
    "build_request",
    "export_frame",
    "flatten",
    "parse_quota_response",
    "post_json",
    "repair_dimensions",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
