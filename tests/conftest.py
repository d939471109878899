from datetime import date

import polars as pl
import pytest


@pytest.fixture()
def people():
    return pl.DataFrame({"id": [1, 2], "name": ["a", "b"]})


@pytest.fixture()
def scores():
    return pl.DataFrame({"id": [3], "score": [9.5]})


@pytest.fixture()
def events():
    return pl.DataFrame(
        {
            "day": [date(2024, 1, 1), date(2024, 1, 2)],
            "active": [True, False],
            "tags": [["a"], ["b", "c"]],
        }
    )
