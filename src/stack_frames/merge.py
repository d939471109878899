from typing import Optional, Sequence

import polars as pl

from stack_frames.config import CONCAT_STRATEGY, FALLBACK_NULL_DTYPE
from stack_frames.stack import stack_list


def merge_dataframes(
    df_list: Optional[Sequence[pl.DataFrame]],
    how: str = CONCAT_STRATEGY,
    fallback_dtype: pl.DataType = FALLBACK_NULL_DTYPE,
) -> pl.DataFrame:
    """Aligne les schémas avec stack_list puis concatène verticalement."""
    aligned = stack_list(df_list, fallback_dtype=fallback_dtype)
    if not aligned:
        raise ValueError("No dataframes to merge")

    return pl.concat(aligned, how=how)
