import polars as pl
import pytest

from stack_frames.column_types import ColumnType, column_kind, null_dtype, resolve_column_types


@pytest.mark.parametrize(
    "dtype, kind",
    [
        (pl.Int64(), ColumnType.INTEGER),
        (pl.Int32(), ColumnType.INTEGER),
        (pl.UInt8(), ColumnType.INTEGER),
        (pl.Float32(), ColumnType.FLOAT),
        (pl.Float64(), ColumnType.FLOAT),
        (pl.String(), ColumnType.STRING),
        (pl.Boolean(), ColumnType.BOOLEAN),
        (pl.Date(), ColumnType.OTHER),
        (pl.Categorical(), ColumnType.OTHER),
        (pl.List(pl.Int64), ColumnType.OTHER),
        (pl.Null(), ColumnType.OTHER),
    ],
)
def test_column_kind(dtype, kind):
    assert column_kind(dtype) is kind


def test_null_dtype_keeps_exact_primitive_dtype():
    assert null_dtype(pl.Int32()) == pl.Int32
    assert null_dtype(pl.Float32()) == pl.Float32
    assert null_dtype(pl.String()) == pl.String
    assert null_dtype(pl.Boolean()) == pl.Boolean


def test_null_dtype_falls_back_to_float_for_other_types():
    assert null_dtype(pl.Date()) == pl.Float64
    assert null_dtype(pl.List(pl.String)) == pl.Float64


def test_null_dtype_custom_fallback():
    assert null_dtype(pl.Date(), fallback_dtype=pl.String) == pl.String


def test_resolve_empty():
    assert resolve_column_types([]) == {}


def test_resolve_first_occurrence_wins():
    first = pl.DataFrame({"x": [1, 2]})
    second = pl.DataFrame({"x": ["a"], "y": [1.5]})
    third = pl.DataFrame({"y": [True], "z": ["q"]})

    types = resolve_column_types([first, second, third])

    assert list(types) == ["x", "y", "z"]
    assert types["x"] == pl.Int64
    assert types["y"] == pl.Float64
    assert types["z"] == pl.String


def test_resolve_does_not_touch_inputs(people, scores):
    resolve_column_types([people, scores])

    assert people.columns == ["id", "name"]
    assert scores.columns == ["id", "score"]
