from __future__ import annotations

from typing import Any, Dict, List, Optional

from es_query_maker.base import Mappable
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.models.enums import (
    HighlightBoundaryScanner,
    HighlightEncoder,
    HighlightFragmenter,
    HighlightOrder,
    HighlightTagsSchema,
    HighlightType,
)
from es_query_maker.models.params import Params, Parametrized, UInt16
from es_query_maker.utils import flatten_values, validate_field_name, validate_field_names


class HighlightParams(Params):
    pre_tags: Optional[List[str]] = None
    post_tags: Optional[List[str]] = None
    type: Optional[HighlightType] = None
    boundary_chars: Optional[str] = None
    boundary_max_scan: Optional[UInt16] = None
    boundary_scanner: Optional[HighlightBoundaryScanner] = None
    boundary_scanner_locale: Optional[str] = None
    encoder: Optional[HighlightEncoder] = None
    force_source: Optional[bool] = None
    fragmenter: Optional[HighlightFragmenter] = None
    fragment_offset: Optional[UInt16] = None
    fragment_size: Optional[UInt16] = None
    matched_fields: Optional[List[str]] = None
    no_match_size: Optional[UInt16] = None
    number_of_fragments: Optional[UInt16] = None
    order: Optional[HighlightOrder] = None
    phrase_limit: Optional[UInt16] = None
    require_field_match: Optional[bool] = None
    tags_schema: Optional[HighlightTagsSchema] = None


class Highlight(Parametrized, Mappable):
    """
    Search result highlighting. The same builder is used both for the
    top-level "highlight" section and for per-field overrides:

      Highlight().pre_tags("<em>").field("title", Highlight().fragment_size(50))
    """

    def __init__(self):
        self._params = HighlightParams()
        self._fields: Dict[str, Highlight] = {}
        self._highlight_query: Optional[Mappable] = None

    def pre_tags(self, *tags: str) -> "Highlight":
        return self._set(pre_tags=list(tags))

    def post_tags(self, *tags: str) -> "Highlight":
        return self._set(post_tags=list(tags))

    def field(self, name: str, highlight: Optional["Highlight"] = None) -> "Highlight":
        if highlight is not None and not isinstance(highlight, Highlight):
            raise QueryBuildError("Per-field highlight settings must be a Highlight")
        self._fields[validate_field_name(name)] = highlight or Highlight()
        return self

    def type(self, t: HighlightType) -> "Highlight":
        return self._set(type=t)

    def boundary_chars(self, s: str) -> "Highlight":
        return self._set(boundary_chars=s)

    def boundary_max_scan(self, n: int) -> "Highlight":
        return self._set(boundary_max_scan=n)

    def boundary_scanner(self, scanner: HighlightBoundaryScanner) -> "Highlight":
        return self._set(boundary_scanner=scanner)

    def boundary_scanner_locale(self, locale: str) -> "Highlight":
        return self._set(boundary_scanner_locale=locale)

    def encoder(self, e: HighlightEncoder) -> "Highlight":
        return self._set(encoder=e)

    def force_source(self, b: bool) -> "Highlight":
        return self._set(force_source=b)

    def fragmenter(self, f: HighlightFragmenter) -> "Highlight":
        return self._set(fragmenter=f)

    def fragment_offset(self, n: int) -> "Highlight":
        return self._set(fragment_offset=n)

    def fragment_size(self, n: int) -> "Highlight":
        return self._set(fragment_size=n)

    def highlight_query(self, q: Mappable) -> "Highlight":
        if not isinstance(q, Mappable):
            raise QueryBuildError("highlight_query must be a query")
        self._highlight_query = q
        return self

    def matched_fields(self, *fields: str) -> "Highlight":
        return self._set(matched_fields=validate_field_names(flatten_values(fields)))

    def no_match_size(self, n: int) -> "Highlight":
        return self._set(no_match_size=n)

    def number_of_fragments(self, n: int) -> "Highlight":
        return self._set(number_of_fragments=n)

    def order(self, o: HighlightOrder) -> "Highlight":
        return self._set(order=o)

    def phrase_limit(self, n: int) -> "Highlight":
        return self._set(phrase_limit=n)

    def require_field_match(self, b: bool) -> "Highlight":
        return self._set(require_field_match=b)

    def tags_schema(self, s: HighlightTagsSchema) -> "Highlight":
        return self._set(tags_schema=s)

    def map(self) -> Dict[str, Any]:
        out = self._params.render()
        if self._fields:
            out["fields"] = {name: h.map() for name, h in self._fields.items()}
        if self._highlight_query is not None:
            out["highlight_query"] = self._highlight_query.map()
        return out
