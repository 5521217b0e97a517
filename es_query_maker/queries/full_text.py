"""
Full-text queries
=================

match, match_bool_prefix, match_phrase, match_phrase_prefix, multi_match,
match_all and match_none.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from es_query_maker.base import Mappable
from es_query_maker.models.enums import MatchOperator, MultiMatchType, ZeroTerms
from es_query_maker.models.params import Params, Parametrized, UInt16
from es_query_maker.utils import flatten_values, validate_field_name, validate_field_names


class MatchParams(Params):
    query: Any = None
    analyzer: Optional[str] = None
    auto_generate_synonyms_phrase_query: Optional[bool] = None
    fuzziness: Optional[Union[int, str]] = None
    max_expansions: Optional[UInt16] = None
    prefix_length: Optional[UInt16] = None
    transpositions: Optional[bool] = None
    fuzzy_rewrite: Optional[str] = None
    lenient: Optional[bool] = None
    operator: Optional[MatchOperator] = None
    minimum_should_match: Optional[Union[int, str]] = None
    slop: Optional[UInt16] = None
    zero_terms_query: Optional[ZeroTerms] = None


class MatchQuery(Parametrized, Mappable):
    """
    Base for the single-field full-text queries. Subclasses only differ in
    the DSL key they render under.

    Always renders the expanded form:
      {"match": {"title": {"query": "go"}}}
    """

    query_type: str = "match"

    def __init__(self, field: str, query: Any = None):
        self.field = validate_field_name(field)
        self._params = MatchParams()
        if query is not None:
            self._set(query=query)

    def query(self, data: Any) -> "MatchQuery":
        return self._set(query=data)

    def analyzer(self, analyzer: str) -> "MatchQuery":
        return self._set(analyzer=analyzer)

    def auto_generate_synonyms_phrase_query(self, b: bool) -> "MatchQuery":
        return self._set(auto_generate_synonyms_phrase_query=b)

    def fuzziness(self, fuzz: Union[int, str]) -> "MatchQuery":
        return self._set(fuzziness=fuzz)

    def max_expansions(self, n: int) -> "MatchQuery":
        return self._set(max_expansions=n)

    def prefix_length(self, n: int) -> "MatchQuery":
        return self._set(prefix_length=n)

    def transpositions(self, b: bool) -> "MatchQuery":
        return self._set(transpositions=b)

    def fuzzy_rewrite(self, s: str) -> "MatchQuery":
        return self._set(fuzzy_rewrite=s)

    def lenient(self, b: bool) -> "MatchQuery":
        return self._set(lenient=b)

    def operator(self, op: MatchOperator) -> "MatchQuery":
        return self._set(operator=op)

    def minimum_should_match(self, s: Union[int, str]) -> "MatchQuery":
        return self._set(minimum_should_match=s)

    def slop(self, n: int) -> "MatchQuery":
        return self._set(slop=n)

    def zero_terms_query(self, s: ZeroTerms) -> "MatchQuery":
        return self._set(zero_terms_query=s)

    def map(self) -> Dict[str, Any]:
        return {self.query_type: {self.field: self._params.render()}}


class Match(MatchQuery):
    query_type = "match"


class MatchBoolPrefix(MatchQuery):
    query_type = "match_bool_prefix"


class MatchPhrase(MatchQuery):
    query_type = "match_phrase"


class MatchPhrasePrefix(MatchQuery):
    query_type = "match_phrase_prefix"


class MultiMatchParams(Params):
    query: Any = None
    analyzer: Optional[str] = None
    auto_generate_synonyms_phrase_query: Optional[bool] = None
    boost: Optional[float] = None
    fuzziness: Optional[Union[int, str]] = None
    fuzzy_rewrite: Optional[str] = None
    fields: Optional[List[str]] = None
    lenient: Optional[bool] = None
    max_expansions: Optional[UInt16] = None
    minimum_should_match: Optional[Union[int, str]] = None
    operator: Optional[MatchOperator] = None
    prefix_length: Optional[UInt16] = None
    slop: Optional[UInt16] = None
    tie_breaker: Optional[float] = None
    transpositions: Optional[bool] = None
    type: Optional[MultiMatchType] = None
    zero_terms_query: Optional[ZeroTerms] = None


class MultiMatch(Parametrized, Mappable):
    def __init__(self, query: Any = None):
        self._params = MultiMatchParams()
        if query is not None:
            self._set(query=query)

    def query(self, data: Any) -> "MultiMatch":
        return self._set(query=data)

    def fields(self, *fields: str) -> "MultiMatch":
        """Field names may carry boosts or wildcards, e.g. "title^3", "*_name"."""
        return self._set(fields=validate_field_names(flatten_values(fields)))

    def analyzer(self, analyzer: str) -> "MultiMatch":
        return self._set(analyzer=analyzer)

    def auto_generate_synonyms_phrase_query(self, b: bool) -> "MultiMatch":
        return self._set(auto_generate_synonyms_phrase_query=b)

    def boost(self, b: float) -> "MultiMatch":
        return self._set(boost=b)

    def fuzziness(self, fuzz: Union[int, str]) -> "MultiMatch":
        return self._set(fuzziness=fuzz)

    def fuzzy_rewrite(self, s: str) -> "MultiMatch":
        return self._set(fuzzy_rewrite=s)

    def lenient(self, b: bool) -> "MultiMatch":
        return self._set(lenient=b)

    def max_expansions(self, n: int) -> "MultiMatch":
        return self._set(max_expansions=n)

    def minimum_should_match(self, s: Union[int, str]) -> "MultiMatch":
        return self._set(minimum_should_match=s)

    def operator(self, op: MatchOperator) -> "MultiMatch":
        return self._set(operator=op)

    def prefix_length(self, n: int) -> "MultiMatch":
        return self._set(prefix_length=n)

    def slop(self, n: int) -> "MultiMatch":
        return self._set(slop=n)

    def tie_breaker(self, t: float) -> "MultiMatch":
        return self._set(tie_breaker=t)

    def transpositions(self, b: bool) -> "MultiMatch":
        return self._set(transpositions=b)

    def type(self, t: MultiMatchType) -> "MultiMatch":
        return self._set(type=t)

    def zero_terms_query(self, s: ZeroTerms) -> "MultiMatch":
        return self._set(zero_terms_query=s)

    def map(self) -> Dict[str, Any]:
        return {"multi_match": self._params.render()}


class MatchAllParams(Params):
    boost: Optional[float] = None


class MatchAll(Parametrized, Mappable):
    """{"match_all": {}}, optionally boosted."""

    def __init__(self):
        self._params = MatchAllParams()

    def boost(self, b: float) -> "MatchAll":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        return {"match_all": self._params.render()}


class MatchNone(Mappable):
    def map(self) -> Dict[str, Any]:
        return {"match_none": {}}
