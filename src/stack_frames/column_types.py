import logging
from enum import Enum
from typing import Sequence

import polars as pl

from stack_frames.config import FALLBACK_NULL_DTYPE

logger = logging.getLogger(__name__)


class ColumnType(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    OTHER = "other"


# ---------------------------------------------------------
# 1) Classification d'un dtype polars
# ---------------------------------------------------------
def column_kind(dtype: pl.DataType) -> ColumnType:
    """
    Ramène un dtype polars à l'une des familles primitives.
    Tous les entiers (signés ou non) -> INTEGER, Float32/Float64 -> FLOAT.
    Tout le reste (Date, Categorical, List, Struct, Null...) -> OTHER.
    """
    if dtype.is_integer():
        return ColumnType.INTEGER
    if dtype.is_float():
        return ColumnType.FLOAT
    if dtype == pl.String:
        return ColumnType.STRING
    if dtype == pl.Boolean:
        return ColumnType.BOOLEAN
    return ColumnType.OTHER


def null_dtype(dtype: pl.DataType, fallback_dtype: pl.DataType = FALLBACK_NULL_DTYPE) -> pl.DataType:
    """
    Dtype à utiliser pour une colonne entièrement nulle dont le type résolu est `dtype`.

    Les quatre familles primitives gardent leur dtype exact (Int32 reste Int32).
    Les autres tombent sur `fallback_dtype` (Float64 par défaut) : une colonne Date
    absente d'une table devient donc une colonne Float64 nulle. Ce comportement
    est conservé tel quel, il peut bloquer la concaténation avec les tables où
    la colonne existe.
    """
    kind = column_kind(dtype)
    if kind is ColumnType.OTHER:
        logger.debug("Type %s non primitif, colonne nulle en %s", dtype, fallback_dtype)
        return fallback_dtype
    return dtype


# ---------------------------------------------------------
# 2) Résolution des types par première apparition
# ---------------------------------------------------------
def resolve_column_types(frames: Sequence[pl.DataFrame]) -> dict[str, pl.DataType]:
    """Associe à chaque nom de colonne le dtype de sa première apparition."""
    col_types: dict[str, pl.DataType] = {}
    for df in frames:
        for name, dtype in df.schema.items():
            # la première table qui définit la colonne fixe son type
            if name not in col_types:
                col_types[name] = dtype
    return col_types
