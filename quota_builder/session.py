import logging
from dataclasses import dataclass, field

from quota_builder.api import CALCULATE_PATH, post_json
from quota_builder.dimensions import DEFAULT_DIMENSIONS
from quota_builder.errors import QuotaBuilderError
from quota_builder.export import build_export
from quota_builder.request import ReferenceParameters, build_request, repair_dimensions, toggle_dimension
from quota_builder.response import QuotaResponse, parse_quota_response

logger = logging.getLogger(__name__)


@dataclass
class QuotaSession:
    """
    State owned by one browser session: the controls, the dimension
    selection and the latest reply (or error).

    Only one calculation runs at a time; ``loading`` is set for its duration
    and the page disables the Calculate button while it is set.
    """

    params: ReferenceParameters = field(default_factory=ReferenceParameters)
    dimensions: list = field(default_factory=lambda: list(DEFAULT_DIMENSIONS))
    response: QuotaResponse | None = None
    error: str | None = None
    loading: bool = False

    def toggle(self, key: str) -> None:
        self.dimensions = toggle_dimension(self.dimensions, key)

    def payload(self) -> dict:
        return build_request(self.params, self.dimensions).to_payload()

    def calculate(self, post=post_json) -> QuotaResponse | None:
        """
        Send the current request and keep the reply.

        The stored selection is repaired first, so a men/women filter shows up
        as a selected "sex" dimension on the next render. Errors are kept as
        text in ``error``; the previous reply is dropped either way.
        """
        if self.loading:
            logger.info("Calculation already in progress, ignoring request")
            return None

        self.error = None
        self.response = None
        self.loading = True
        try:
            self.dimensions = repair_dimensions(self.dimensions, self.params.sex_filter)
            request = build_request(self.params, self.dimensions)
            logger.info("Requesting quotas for dimensions %s", list(request.dimensions))
            raw = post(CALCULATE_PATH, request.to_payload())
            self.response = parse_quota_response(raw)
        except QuotaBuilderError as exc:
            self.error = str(exc)
        finally:
            self.loading = False
        return self.response

    def export(self):
        return build_export(self.response)
