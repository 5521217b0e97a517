"""
Compound queries
================

Queries wrapping other queries. Bool clauses and dis_max "queries" are
always rendered as arrays, even when they hold a single child query.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from es_query_maker.base import Mappable, maps
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.models.params import Params, Parametrized


def _check_children(owner: str, queries) -> List[Mappable]:
    children = list(queries)
    for q in children:
        if not isinstance(q, Mappable):
            raise QueryBuildError(
                f"{owner} only accepts queries, got {type(q).__name__}"
            )
    return children


class BoolParams(Params):
    minimum_should_match: Optional[Union[int, str]] = None
    boost: Optional[float] = None


class Bool(Parametrized, Mappable):
    """
    Boolean combination of queries. Each clause setter appends, so calling
    ``must`` twice accumulates both sets of queries:

      Bool().must(Term("a", 1)).must(Term("b", 2))
        -> {"bool": {"must": [{"term": ...}, {"term": ...}]}}
    """

    def __init__(self):
        self._params = BoolParams()
        self._must: List[Mappable] = []
        self._filter: List[Mappable] = []
        self._must_not: List[Mappable] = []
        self._should: List[Mappable] = []

    def must(self, *queries: Mappable) -> "Bool":
        self._must.extend(_check_children("Bool.must", queries))
        return self

    def filter(self, *queries: Mappable) -> "Bool":
        self._filter.extend(_check_children("Bool.filter", queries))
        return self

    def must_not(self, *queries: Mappable) -> "Bool":
        self._must_not.extend(_check_children("Bool.must_not", queries))
        return self

    def should(self, *queries: Mappable) -> "Bool":
        self._should.extend(_check_children("Bool.should", queries))
        return self

    def minimum_should_match(self, n: Union[int, str]) -> "Bool":
        return self._set(minimum_should_match=n)

    def boost(self, b: float) -> "Bool":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self._must:
            data["must"] = maps(self._must)
        if self._filter:
            data["filter"] = maps(self._filter)
        if self._must_not:
            data["must_not"] = maps(self._must_not)
        if self._should:
            data["should"] = maps(self._should)
        data.update(self._params.render())
        return {"bool": data}


class BoostingParams(Params):
    negative_boost: Optional[float] = None


class Boosting(Parametrized, Mappable):
    """
    Demotes documents matching ``negative`` without excluding them.
    "positive" and "negative" each take exactly one query object.
    """

    def __init__(self):
        self._params = BoostingParams()
        self._positive: Optional[Mappable] = None
        self._negative: Optional[Mappable] = None

    def positive(self, q: Mappable) -> "Boosting":
        self._positive = _check_children("Boosting.positive", [q])[0]
        return self

    def negative(self, q: Mappable) -> "Boosting":
        self._negative = _check_children("Boosting.negative", [q])[0]
        return self

    def negative_boost(self, b: float) -> "Boosting":
        return self._set(negative_boost=b)

    def map(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self._positive is not None:
            data["positive"] = self._positive.map()
        if self._negative is not None:
            data["negative"] = self._negative.map()
        data.update(self._params.render())
        return {"boosting": data}


class ConstantScoreParams(Params):
    boost: Optional[float] = None


class ConstantScore(Parametrized, Mappable):
    def __init__(self, filter: Mappable):
        self._params = ConstantScoreParams()
        self._filter = _check_children("ConstantScore", [filter])[0]

    def boost(self, b: float) -> "ConstantScore":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"filter": self._filter.map()}
        data.update(self._params.render())
        return {"constant_score": data}


class DisMaxParams(Params):
    tie_breaker: Optional[float] = None
    boost: Optional[float] = None


class DisMax(Parametrized, Mappable):
    def __init__(self, *queries: Mappable):
        self._params = DisMaxParams()
        self._queries: List[Mappable] = _check_children("DisMax", queries)

    def tie_breaker(self, b: float) -> "DisMax":
        return self._set(tie_breaker=b)

    def boost(self, b: float) -> "DisMax":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"queries": maps(self._queries)}
        data.update(self._params.render())
        return {"dis_max": data}
