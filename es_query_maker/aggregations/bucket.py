"""
Bucket aggregations
===================

Aggregations that group documents into buckets and may carry nested
sub-aggregations, rendered under "aggs" keyed by name.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from es_query_maker.base import Aggregation, Mappable, aggregations_map
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.models.enums import Order
from es_query_maker.models.params import Params, Parametrized, UInt
from es_query_maker.utils import validate_field_name


class BucketAggregation(Parametrized, Aggregation):
    def __init__(self, name: str):
        self._name = validate_field_name(name, what="aggregation")
        self._aggs: List[Aggregation] = []

    @property
    def name(self) -> str:
        return self._name

    def aggs(self, *aggs: Aggregation) -> "BucketAggregation":
        for agg in aggs:
            if not isinstance(agg, Aggregation):
                raise QueryBuildError(
                    f"Sub-aggregations must be aggregations, got {type(agg).__name__}"
                )
        self._aggs.extend(aggs)
        return self

    def _with_sub_aggs(self, body: Dict[str, Any]) -> Dict[str, Any]:
        if self._aggs:
            body["aggs"] = aggregations_map(self._aggs)
        return body


class TermsAggParams(Params):
    field: str
    size: Optional[UInt] = None
    shard_size: Optional[UInt] = None
    order: Optional[Dict[str, Order]] = None


class TermsAgg(BucketAggregation):
    """
    Buckets per unique field value.

    ``include`` with a single value is sent as a regular expression string,
    with several values as an exact-value array.
    """

    def __init__(self, name: str, field: str):
        super().__init__(name)
        self._params = TermsAggParams(field=validate_field_name(field))
        self._include: List[str] = []

    def size(self, size: int) -> "TermsAgg":
        return self._set(size=size)

    def shard_size(self, size: int) -> "TermsAgg":
        return self._set(shard_size=size)

    def order(self, order: Dict[str, Order]) -> "TermsAgg":
        return self._set(order=order)

    def include(self, *include: str) -> "TermsAgg":
        self._include = list(include)
        return self

    def map(self) -> Dict[str, Any]:
        inner = self._params.render()
        if len(self._include) == 1:
            inner["include"] = self._include[0]
        elif self._include:
            inner["include"] = list(self._include)
        return self._with_sub_aggs({"terms": inner})


class FilterAgg(BucketAggregation):
    """Single bucket of the documents matching ``filter``."""

    def __init__(self, name: str, filter: Mappable):
        super().__init__(name)
        if not isinstance(filter, Mappable):
            raise QueryBuildError("FilterAgg requires a query as its filter")
        self._filter = filter

    def filter(self, filter: Mappable) -> "FilterAgg":
        if not isinstance(filter, Mappable):
            raise QueryBuildError("FilterAgg requires a query as its filter")
        self._filter = filter
        return self

    def map(self) -> Dict[str, Any]:
        return self._with_sub_aggs({"filter": self._filter.map()})


class NestedAggParams(Params):
    path: str


class NestedAgg(BucketAggregation):
    def __init__(self, name: str, path: str):
        super().__init__(name)
        self._params = NestedAggParams(path=validate_field_name(path, what="path"))

    def path(self, path: str) -> "NestedAgg":
        return self._set(path=validate_field_name(path, what="path"))

    def map(self) -> Dict[str, Any]:
        return self._with_sub_aggs({"nested": self._params.render()})
