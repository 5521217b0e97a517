"""
Metric aggregations
===================

avg, max, min, sum, value_count, cardinality, weighted_avg, percentiles,
stats, string_stats and top_hits.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from es_query_maker.base import Aggregation
from es_query_maker.models.enums import Order
from es_query_maker.models.options import Sort, SourceFilter
from es_query_maker.models.params import Params, Parametrized, UInt, UInt8, UInt16
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.utils import validate_field_name, validate_field_names


class _NamedAggregation(Parametrized, Aggregation):
    def __init__(self, name: str):
        self._name = validate_field_name(name, what="aggregation")

    @property
    def name(self) -> str:
        return self._name


class BaseAggParams(Params):
    field: Optional[str] = None
    missing: Any = None
    script: Optional[Union[str, Dict[str, Any]]] = None


class BaseAgg(_NamedAggregation):
    """
    Single-value metric aggregation over one field:

      Avg("avg_price", "price").missing(0)
        -> {"avg": {"field": "price", "missing": 0}}
    """

    api_name: str = ""
    params_class = BaseAggParams

    def __init__(self, name: str, field: str):
        super().__init__(name)
        self._params = self.params_class(field=validate_field_name(field))

    def missing(self, val: Any) -> "BaseAgg":
        return self._set(missing=val)

    def script(self, script: Union[str, Dict[str, Any]]) -> "BaseAgg":
        return self._set(script=script)

    def map(self) -> Dict[str, Any]:
        return {self.api_name: self._params.render()}


class Avg(BaseAgg):
    api_name = "avg"


class Max(BaseAgg):
    api_name = "max"


class Min(BaseAgg):
    api_name = "min"


class Sum(BaseAgg):
    api_name = "sum"


class ValueCount(BaseAgg):
    api_name = "value_count"


class Stats(BaseAgg):
    api_name = "stats"


class CardinalityParams(BaseAggParams):
    precision_threshold: Optional[UInt] = None


class Cardinality(BaseAgg):
    api_name = "cardinality"
    params_class = CardinalityParams

    def precision_threshold(self, val: int) -> "Cardinality":
        return self._set(precision_threshold=val)


class StringStatsParams(BaseAggParams):
    show_distribution: Optional[bool] = None


class StringStats(BaseAgg):
    api_name = "string_stats"
    params_class = StringStatsParams

    def show_distribution(self, b: bool) -> "StringStats":
        return self._set(show_distribution=b)


class WeightedAvgSource(Params):
    field: str
    missing: Any = None


class WeightedAvgParams(Params):
    value: Optional[WeightedAvgSource] = None
    weight: Optional[WeightedAvgSource] = None


class WeightedAvg(_NamedAggregation):
    """
    Average where each value is weighted by another field:

      WeightedAvg("grade").value("grade", 1).weight("weight")
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._params = WeightedAvgParams()

    def value(self, field: str, missing: Any = None) -> "WeightedAvg":
        return self._set(
            value={"field": validate_field_name(field), "missing": missing}
        )

    def weight(self, field: str, missing: Any = None) -> "WeightedAvg":
        return self._set(
            weight={"field": validate_field_name(field), "missing": missing}
        )

    def map(self) -> Dict[str, Any]:
        return {"weighted_avg": self._params.render()}


class TDigest(Params):
    compression: UInt16


class HDR(Params):
    number_of_significant_value_digits: UInt8


class PercentilesParams(BaseAggParams):
    percents: Optional[List[float]] = None
    keyed: Optional[bool] = None
    tdigest: Optional[TDigest] = None
    hdr: Optional[HDR] = None


class Percentiles(BaseAgg):
    api_name = "percentiles"
    params_class = PercentilesParams

    def percents(self, *percents: float) -> "Percentiles":
        return self._set(percents=list(percents))

    def keyed(self, b: bool) -> "Percentiles":
        return self._set(keyed=b)

    def compression(self, val: int) -> "Percentiles":
        return self._set(tdigest={"compression": val})

    def num_histogram_digits(self, val: int) -> "Percentiles":
        return self._set(hdr={"number_of_significant_value_digits": val})


class TopHitsParams(Params):
    from_: Optional[UInt] = Field(default=None, alias="from")
    size: Optional[UInt] = None


class TopHits(_NamedAggregation):
    """Most relevant documents per bucket."""

    def __init__(self, name: str):
        super().__init__(name)
        self._params = TopHitsParams()
        self._sort = Sort()
        self._source = SourceFilter()

    def from_(self, offset: int) -> "TopHits":
        return self._set(from_=offset)

    def size(self, size: int) -> "TopHits":
        return self._set(size=size)

    def sort(self, field: str, order: Order = Order.ASC) -> "TopHits":
        try:
            self._sort.add(field, order)
        except ValueError as e:
            raise QueryBuildError(f"Invalid sort for TopHits: {e}") from e
        return self

    def source_includes(self, *fields: str) -> "TopHits":
        self._source.includes.extend(validate_field_names(fields))
        return self

    def map(self) -> Dict[str, Any]:
        data = self._params.render()
        if self._sort:
            data["sort"] = self._sort.map()
        source = self._source.map()
        if source:
            data["_source"] = source
        return {"top_hits": data}
