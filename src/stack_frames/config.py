import polars as pl

# Messages remontés à l'appelant quand l'entrée ne respecte pas le contrat
NOT_A_LIST_MESSAGE = "Input should be a plain list of dataframe items to be stacked"
NOT_A_TABLE_MESSAGE = "All list elements must be data frames"

# Type des colonnes nulles synthétisées quand le type résolu n'est pas
# un type primitif (Date, Categorical, List, Struct...)
FALLBACK_NULL_DTYPE = pl.Float64

# Stratégie passée à pl.concat par merge_dataframes
CONCAT_STRATEGY = "vertical_relaxed"
