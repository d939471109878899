import logging
from typing import Optional, Sequence

import polars as pl

from stack_frames.column_types import null_dtype, resolve_column_types
from stack_frames.config import FALLBACK_NULL_DTYPE
from stack_frames.errors import NotAListError, NotATableError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# 1) Validation de l'entrée
# ---------------------------------------------------------
def validate_frames(frames) -> list[pl.DataFrame]:
    """
    Vérifie que `frames` est une liste (ou un tuple) de pl.DataFrame.
    None est accepté et traité comme une liste vide.
    Un LazyFrame n'est pas une table : il doit être collecté avant.
    """
    if frames is None:
        return []
    if not isinstance(frames, (list, tuple)):
        raise NotAListError()

    for i, df in enumerate(frames):
        if not isinstance(df, pl.DataFrame):
            raise NotATableError(index=i)

    return list(frames)


# ---------------------------------------------------------
# 2) Union ordonnée des noms de colonnes
# ---------------------------------------------------------
def column_union(frames: Sequence[pl.DataFrame]) -> list[str]:
    """Noms de toutes les colonnes, dans l'ordre de première apparition."""
    seen = set()
    names = []
    for df in frames:
        for col in df.columns:
            if col not in seen:
                seen.add(col)
                names.append(col)
    return names


# ---------------------------------------------------------
# 3) Mise au schéma commun
# ---------------------------------------------------------
def null_column(
    name: str,
    dtype: pl.DataType,
    n: int,
    fallback_dtype: pl.DataType = FALLBACK_NULL_DTYPE,
) -> pl.Series:
    dtype = null_dtype(dtype, fallback_dtype)
    if n == 0:
        return pl.Series(name, [], dtype=dtype)
    return pl.Series(name, [None] * n, dtype=dtype)


def conform_frame(
    df: pl.DataFrame,
    names: Sequence[str],
    types: dict[str, pl.DataType],
    fallback_dtype: pl.DataType = FALLBACK_NULL_DTYPE,
) -> pl.DataFrame:
    """
    Ajoute à `df` les colonnes de `names` qui lui manquent (nulles, typées
    d'après `types`) puis réordonne selon `names`.
    Les colonnes existantes ne sont pas modifiées.
    """
    n = df.height
    missing = [
        null_column(col, types[col], n, fallback_dtype)
        for col in names
        if col not in df.schema
    ]
    if missing:
        df = df.with_columns(missing)
    return df.select(names)


def stack_list(
    frames: Optional[Sequence[pl.DataFrame]],
    fallback_dtype: pl.DataType = FALLBACK_NULL_DTYPE,
) -> list[pl.DataFrame]:
    """
    Aligne une liste de DataFrames sur un schéma commun avant concaténation.

    - union des colonnes dans l'ordre de première apparition
    - type de chaque colonne fixé par la première table qui la contient
    - colonnes absentes remplies de null du type résolu

    Retourne une liste de même longueur et de même ordre que l'entrée.
    Lève NotAListError / NotATableError si l'entrée n'est pas une liste de
    pl.DataFrame, avant toute transformation.
    """
    frames = validate_frames(frames)

    names = column_union(frames)
    types = resolve_column_types(frames)
    logger.debug("%d tables, %d colonnes au total", len(frames), len(names))

    aligned = []
    for i, df in enumerate(frames):
        logger.debug("Table %d : %d colonnes ajoutées", i, len(names) - df.width)
        aligned.append(conform_frame(df, names, types, fallback_dtype))
    return aligned
