from .enums import (
    HighlightBoundaryScanner,
    HighlightEncoder,
    HighlightFragmenter,
    HighlightOrder,
    HighlightTagsSchema,
    HighlightType,
    MatchOperator,
    MultiMatchType,
    Order,
    RangeRelation,
    ZeroTerms,
)
from .options import Sort, SortItem, SourceFilter
from .params import Params, Parametrized, UInt, UInt8, UInt16

__all__ = [
    "HighlightBoundaryScanner",
    "HighlightEncoder",
    "HighlightFragmenter",
    "HighlightOrder",
    "HighlightTagsSchema",
    "HighlightType",
    "MatchOperator",
    "MultiMatchType",
    "Order",
    "RangeRelation",
    "ZeroTerms",
    "Sort",
    "SortItem",
    "SourceFilter",
    "Params",
    "Parametrized",
    "UInt",
    "UInt8",
    "UInt16",
]
