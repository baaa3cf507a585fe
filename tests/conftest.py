from __future__ import annotations

import pytest


@pytest.fixture
def county_reply() -> dict:
    return {
        "population_total": 900000,
        "sample_n": 1000,
        "results": {
            "county": {
                "base": 900000,
                "cells": [
                    {"id": "c1", "label": "Harju", "pop": 600000, "share": 0.6667, "quota": 667},
                ],
            }
        },
    }


@pytest.fixture
def two_dimension_reply() -> dict:
    return {
        "population_total": 1000,
        "sample_n": 100,
        "results": {
            "sex": {
                "base": 1000,
                "cells": [
                    {"id": "m", "label": "Men", "pop": 480, "share": 0.48, "quota": 48},
                    {"id": "w", "label": "Women", "pop": 520, "share": 0.52, "quota": 52},
                ],
                "notes": ["Population register, 1 January"],
            },
            "region": {
                "base": 1000,
                "cells": [
                    {"id": "n", "label": "North", "pop": 333, "share": 0.33333, "quota": 33},
                    {"id": "s", "label": "South", "pop": 333, "share": 0.33333, "quota": 33},
                    {"id": "w", "label": "West", "pop": 334, "share": 0.33334, "quota": 34},
                ],
            },
        },
    }
