from es_query_maker.base import Aggregation, Mappable
from es_query_maker.exceptions import InvalidRequestError, QueryBuildError
from es_query_maker.validators.schema_validator import (
    validate_custom_mapping,
    validate_search_body,
)

from es_query_maker.models import (
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

from es_query_maker.queries import (
    Bool,
    Boosting,
    ConstantScore,
    CustomQuery,
    DisMax,
    Exists,
    Fuzzy,
    Highlight,
    IDs,
    Match,
    MatchAll,
    MatchBoolPrefix,
    MatchNone,
    MatchPhrase,
    MatchPhrasePrefix,
    MultiMatch,
    Prefix,
    Range,
    Regexp,
    Term,
    Terms,
    TermsSet,
    Wildcard,
)
from es_query_maker.aggregations import (
    Avg,
    Cardinality,
    CustomAgg,
    FilterAgg,
    Max,
    Min,
    NestedAgg,
    Percentiles,
    Stats,
    StringStats,
    Sum,
    TermsAgg,
    TopHits,
    ValueCount,
    WeightedAvg,
)

from es_query_maker.search_request import SearchRequest, aggregate, query, search
from es_query_maker.count_request import CountRequest, count
from es_query_maker.delete_request import DeleteRequest, delete

__all__ = [
    # Contracts
    "Mappable",
    "Aggregation",

    # Errors and validation
    "QueryBuildError",
    "InvalidRequestError",
    "validate_search_body",
    "validate_custom_mapping",

    # Enumerations
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

    # Queries
    "Bool",
    "Boosting",
    "ConstantScore",
    "CustomQuery",
    "DisMax",
    "Exists",
    "Fuzzy",
    "Highlight",
    "IDs",
    "Match",
    "MatchAll",
    "MatchBoolPrefix",
    "MatchNone",
    "MatchPhrase",
    "MatchPhrasePrefix",
    "MultiMatch",
    "Prefix",
    "Range",
    "Regexp",
    "Term",
    "Terms",
    "TermsSet",
    "Wildcard",

    # Aggregations
    "Avg",
    "Cardinality",
    "CustomAgg",
    "FilterAgg",
    "Max",
    "Min",
    "NestedAgg",
    "Percentiles",
    "Stats",
    "StringStats",
    "Sum",
    "TermsAgg",
    "TopHits",
    "ValueCount",
    "WeightedAvg",

    # Requests
    "SearchRequest",
    "CountRequest",
    "DeleteRequest",
    "search",
    "query",
    "aggregate",
    "count",
    "delete",
]
