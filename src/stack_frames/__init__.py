from stack_frames.column_types import ColumnType, column_kind, null_dtype, resolve_column_types
from stack_frames.errors import InvalidInputError, NotAListError, NotATableError
from stack_frames.merge import merge_dataframes
from stack_frames.stack import column_union, conform_frame, null_column, stack_list, validate_frames

__all__ = [
    "ColumnType",
    "InvalidInputError",
    "NotAListError",
    "NotATableError",
    "column_kind",
    "column_union",
    "conform_frame",
    "merge_dataframes",
    "null_column",
    "null_dtype",
    "resolve_column_types",
    "stack_list",
    "validate_frames",
]
