from dataclasses import dataclass, field

# Filters that restrict the population to one sex; "sex" must then be a dimension.
SINGLE_SEX_FILTERS = ("men", "women")


@dataclass
class ReferenceParameters:
    """Current values of the reference controls. Mutated on every control change."""

    year: int = 2025
    age_from: int = 18
    age_to: int = 64
    sample_n: int = 1000
    age_grouping_years: int = 10
    sex_filter: str = "total"


@dataclass(frozen=True)
class QuotaRequest:
    year: int
    age_from: int
    age_to: int
    sample_n: int
    age_grouping_years: int
    dimensions: tuple = field(default_factory=tuple)
    sex_filter: str = "total"

    def to_payload(self) -> dict:
        """Wire body for POST /v1/quotas/calculate."""
        return {
            "reference": {"year": self.year},
            "age_band": {"from": self.age_from, "to": self.age_to},
            "sample_n": self.sample_n,
            "age_grouping_years": self.age_grouping_years,
            "dimensions": list(self.dimensions),
            "sex_filter": self.sex_filter,
        }


def repair_dimensions(selection, sex_filter: str) -> list:
    """
    Return the selection with "sex" appended when the sex filter is men/women
    and "sex" is missing. Otherwise an equal copy. Idempotent.
    """
    repaired = list(selection)
    if sex_filter in SINGLE_SEX_FILTERS and "sex" not in repaired:
        repaired.append("sex")
    return repaired


def toggle_dimension(selection, key: str) -> list:
    if key in selection:
        return [d for d in selection if d != key]
    return list(selection) + [key]


def build_request(params: ReferenceParameters, selection) -> QuotaRequest:
    """
    Snapshot the parameters and selection into an immutable request.

    Values are copied as they are: an inverted age band or an empty
    selection is left for the service to accept or reject.
    """
    return QuotaRequest(
        year=params.year,
        age_from=params.age_from,
        age_to=params.age_to,
        sample_n=params.sample_n,
        age_grouping_years=params.age_grouping_years,
        dimensions=tuple(selection),
        sex_filter=params.sex_filter,
    )
