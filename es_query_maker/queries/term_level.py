"""
Term-level queries
==================

Exact-value queries against structured fields. All of them render the
expanded per-field object form, e.g.

  {"term": {"user": {"value": "kimchy"}}}

rather than the shorthand {"term": {"user": "kimchy"}}.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from es_query_maker.base import Mappable
from es_query_maker.models.enums import RangeRelation
from es_query_maker.models.params import Params, Parametrized, UInt16
from es_query_maker.utils import flatten_values, validate_field_name


class TermParams(Params):
    value: Any = None
    boost: Optional[float] = None


class Term(Parametrized, Mappable):
    def __init__(self, field: str, value: Any):
        self.field = validate_field_name(field)
        self._params = TermParams()
        self._set(value=value)

    def value(self, val: Any) -> "Term":
        return self._set(value=val)

    def boost(self, b: float) -> "Term":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        return {"term": {self.field: self._params.render()}}


class TermsParams(Params):
    values: List[Any] = []
    boost: Optional[float] = None


class Terms(Parametrized, Mappable):
    """
    Matches any of the given values. Unlike the other term-level queries the
    values list sits directly under the field name, next to "boost":

      {"terms": {"tags": ["a", "b"], "boost": 1.5}}
    """

    def __init__(self, field: str, *values: Any):
        self.field = validate_field_name(field)
        self._params = TermsParams()
        self._set(values=flatten_values(values))

    def values(self, *values: Any) -> "Terms":
        return self._set(values=flatten_values(values))

    def boost(self, b: float) -> "Terms":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        rendered = self._params.render()
        out: Dict[str, Any] = {self.field: rendered.pop("values")}
        out.update(rendered)
        return {"terms": out}


class TermsSetParams(Params):
    terms: List[str] = []
    minimum_should_match_field: Optional[str] = None
    minimum_should_match_script: Optional[str] = None


class TermsSet(Parametrized, Mappable):
    def __init__(self, field: str, *terms: str):
        self.field = validate_field_name(field)
        self._params = TermsSetParams()
        self._set(terms=flatten_values(terms))

    def value(self, *terms: str) -> "TermsSet":
        return self._set(terms=flatten_values(terms))

    def minimum_should_match_field(self, field: str) -> "TermsSet":
        return self._set(minimum_should_match_field=validate_field_name(field))

    def minimum_should_match_script(self, script: str) -> "TermsSet":
        return self._set(minimum_should_match_script=script)

    def map(self) -> Dict[str, Any]:
        return {"terms_set": {self.field: self._params.render()}}


class Exists(Mappable):
    def __init__(self, field: str):
        self.field = validate_field_name(field)

    def map(self) -> Dict[str, Any]:
        return {"exists": {"field": self.field}}


class IDs(Mappable):
    def __init__(self, *values: str):
        self._values: List[str] = [str(v) for v in flatten_values(values)]

    def map(self) -> Dict[str, Any]:
        return {"ids": {"values": list(self._values)}}


class PrefixParams(Params):
    value: Optional[str] = None
    rewrite: Optional[str] = None


class Prefix(Parametrized, Mappable):
    def __init__(self, field: str, value: str):
        self.field = validate_field_name(field)
        self._params = PrefixParams()
        self._set(value=value)

    def rewrite(self, s: str) -> "Prefix":
        return self._set(rewrite=s)

    def map(self) -> Dict[str, Any]:
        return {"prefix": {self.field: self._params.render()}}


class FuzzyParams(Params):
    value: Optional[str] = None
    fuzziness: Optional[Union[int, str]] = None
    max_expansions: Optional[UInt16] = None
    prefix_length: Optional[UInt16] = None
    transpositions: Optional[bool] = None
    rewrite: Optional[str] = None


class Fuzzy(Parametrized, Mappable):
    def __init__(self, field: str, value: str):
        self.field = validate_field_name(field)
        self._params = FuzzyParams()
        self._set(value=value)

    def value(self, val: str) -> "Fuzzy":
        return self._set(value=val)

    def fuzziness(self, fuzz: Union[int, str]) -> "Fuzzy":
        return self._set(fuzziness=fuzz)

    def max_expansions(self, n: int) -> "Fuzzy":
        return self._set(max_expansions=n)

    def prefix_length(self, n: int) -> "Fuzzy":
        return self._set(prefix_length=n)

    def transpositions(self, b: bool) -> "Fuzzy":
        return self._set(transpositions=b)

    def rewrite(self, s: str) -> "Fuzzy":
        return self._set(rewrite=s)

    def map(self) -> Dict[str, Any]:
        return {"fuzzy": {self.field: self._params.render()}}


class RangeParams(Params):
    gt: Any = None
    gte: Any = None
    lt: Any = None
    lte: Any = None
    format: Optional[str] = None
    relation: Optional[RangeRelation] = None
    time_zone: Optional[str] = None
    boost: Optional[float] = None


class Range(Parametrized, Mappable):
    """
    Range over numbers, dates or strings. Bounds may be anything JSON can
    carry; date and datetime bounds are rendered as ISO 8601 strings.
    """

    def __init__(self, field: str):
        self.field = validate_field_name(field)
        self._params = RangeParams()

    def gt(self, val: Any) -> "Range":
        return self._set(gt=val)

    def gte(self, val: Any) -> "Range":
        return self._set(gte=val)

    def lt(self, val: Any) -> "Range":
        return self._set(lt=val)

    def lte(self, val: Any) -> "Range":
        return self._set(lte=val)

    def format(self, f: str) -> "Range":
        return self._set(format=f)

    def relation(self, r: RangeRelation) -> "Range":
        return self._set(relation=r)

    def time_zone(self, zone: str) -> "Range":
        return self._set(time_zone=zone)

    def boost(self, b: float) -> "Range":
        return self._set(boost=b)

    def map(self) -> Dict[str, Any]:
        return {"range": {self.field: self._params.render()}}


class RegexpParams(Params):
    value: Optional[str] = None
    flags: Optional[str] = None
    max_determinized_states: Optional[UInt16] = None
    rewrite: Optional[str] = None


class Regexp(Parametrized, Mappable):
    def __init__(self, field: str, value: str):
        self.field = validate_field_name(field)
        self._params = RegexpParams()
        self._set(value=value)

    def value(self, v: str) -> "Regexp":
        return self._set(value=v)

    def flags(self, f: str) -> "Regexp":
        return self._set(flags=f)

    def max_determinized_states(self, m: int) -> "Regexp":
        return self._set(max_determinized_states=m)

    def rewrite(self, r: str) -> "Regexp":
        return self._set(rewrite=r)

    def map(self) -> Dict[str, Any]:
        return {"regexp": {self.field: self._params.render()}}


class WildcardParams(Params):
    value: Optional[str] = None
    boost: Optional[float] = None
    rewrite: Optional[str] = None


class Wildcard(Parametrized, Mappable):
    def __init__(self, field: str, value: str):
        self.field = validate_field_name(field)
        self._params = WildcardParams()
        self._set(value=value)

    def value(self, v: str) -> "Wildcard":
        return self._set(value=v)

    def boost(self, b: float) -> "Wildcard":
        return self._set(boost=b)

    def rewrite(self, r: str) -> "Wildcard":
        return self._set(rewrite=r)

    def map(self) -> Dict[str, Any]:
        return {"wildcard": {self.field: self._params.render()}}
