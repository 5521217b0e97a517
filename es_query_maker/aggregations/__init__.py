from .bucket import BucketAggregation, FilterAgg, NestedAgg, TermsAgg
from .custom import CustomAgg
from .metrics import (
    Avg,
    BaseAgg,
    Cardinality,
    Max,
    Min,
    Percentiles,
    Stats,
    StringStats,
    Sum,
    TopHits,
    ValueCount,
    WeightedAvg,
)

__all__ = [
    "BucketAggregation",
    "FilterAgg",
    "NestedAgg",
    "TermsAgg",
    "CustomAgg",
    "Avg",
    "BaseAgg",
    "Cardinality",
    "Max",
    "Min",
    "Percentiles",
    "Stats",
    "StringStats",
    "Sum",
    "TopHits",
    "ValueCount",
    "WeightedAvg",
]
