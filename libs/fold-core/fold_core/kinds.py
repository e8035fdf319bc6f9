from enum import StrEnum

# ---------------------------------------------------------------------------- #
#                                Combiner Kinds                                #
# ---------------------------------------------------------------------------- #


class CombinerKind(StrEnum):
    SUM = "sum"
    PRODUCT = "product"
    CONCAT = "concat"
    JOIN = "join"
    MAX = "max"
    MIN = "min"
