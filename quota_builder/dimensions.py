# Dimension catalog (key -> label), in the order the toggles are shown.
DIMENSIONS = [
    ("sex", "Sex"),
    ("age_group", "Age Group"),
    ("county", "County"),
    ("region", "Region"),
    ("tallinn_districts", "Tallinn Districts"),
    ("settlement_type", "Settlement Type"),
    ("education", "Education"),
    ("nationality", "Nationality"),
    ("birth_country", "Birth Country"),
    ("citizenship_country", "Citizenship Country"),
]

DIMENSION_LABELS = dict(DIMENSIONS)

DEFAULT_DIMENSIONS = ["sex", "age_group", "county", "region"]

SEX_FILTERS = [
    ("total", "Total"),
    ("men", "Men"),
    ("women", "Women"),
]

AGE_GROUPING_OPTIONS = [
    (1, "1 (every age)"),
    (5, "5"),
    (10, "10"),
    (15, "15"),
]


def pretty_dimension(key: str) -> str:
    """
    Human readable name for a dimension key.
    Unknown keys (the service may add new ones): "foo_bar" -> "Foo Bar".
    """
    if key in DIMENSION_LABELS:
        return DIMENSION_LABELS[key]
    return " ".join(word[:1].upper() + word[1:] for word in key.replace("_", " ").split(" "))
