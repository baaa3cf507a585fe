"""
Shape of the quota service reply and how the page consumes it.

``results`` keeps the key order of the JSON object as received, and each
dimension keeps its cells in the order sent. Rendering and export both rely
on that order; nothing here re-sorts.
"""

from dataclasses import dataclass, field

from quota_builder.errors import MalformedResponseError, PartialResultError


@dataclass(frozen=True)
class QuotaCell:
    id: str
    label: str
    pop: int
    share: float
    quota: int


@dataclass(frozen=True)
class DimensionResult:
    base: int
    cells: list = field(default_factory=list)
    notes: list = field(default_factory=list)

    @property
    def quota_total(self) -> int:
        return sum(c.quota for c in self.cells)

    @property
    def share_total(self) -> float:
        return sum(c.share for c in self.cells)


@dataclass(frozen=True)
class ResponseMeta:
    errors: dict = field(default_factory=dict)


@dataclass(frozen=True)
class QuotaResponse:
    population_total: int
    sample_n: int
    results: dict = field(default_factory=dict)
    meta: ResponseMeta | None = None

    def partial_failure(self) -> PartialResultError | None:
        """Dimensions the service reported as failed, or None when all succeeded."""
        if self.meta is None or not self.meta.errors:
            return None
        return PartialResultError(self.meta.errors)


def _parse_cell(raw: dict) -> QuotaCell:
    return QuotaCell(
        id=str(raw["id"]),
        label=str(raw["label"]),
        pop=raw["pop"],
        share=raw["share"],
        quota=raw["quota"],
    )


def _parse_dimension(raw: dict) -> DimensionResult:
    notes = raw.get("notes") or []
    if isinstance(notes, str):
        notes = [notes]
    return DimensionResult(
        base=raw["base"],
        cells=[_parse_cell(c) for c in raw["cells"]],
        notes=[str(n) for n in notes],
    )


def _parse_meta(raw) -> ResponseMeta | None:
    if not isinstance(raw, dict):
        return None
    errors = raw.get("errors")
    if not isinstance(errors, dict):
        return ResponseMeta()
    return ResponseMeta(errors=dict(errors))


def parse_quota_response(raw) -> QuotaResponse:
    """
    Turn the parsed JSON reply into a QuotaResponse.

    Only the presence of the fields the page reads is checked. ``notes``,
    ``meta`` and ``meta.errors`` may be missing or null. Shares, quotas and
    totals are taken as sent.
    """
    try:
        results = {
            str(key): _parse_dimension(value)
            for key, value in raw["results"].items()
        }
        return QuotaResponse(
            population_total=raw["population_total"],
            sample_n=raw["sample_n"],
            results=results,
            meta=_parse_meta(raw.get("meta")),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise MalformedResponseError(f"API returned an unexpected response shape: {exc!r}") from exc
