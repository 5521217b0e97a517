"""
Search requests
===============

Assembles a full _search body (query, aggregations, paging, sorting,
source filtering, highlighting) and hands it to the official client.
Responses are returned exactly as the client produced them.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable, Dict, List, Optional, Union

from elasticsearch import Elasticsearch
from pydantic import Field

from es_query_maker.base import Aggregation, Mappable, aggregations_map
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.models.enums import Order
from es_query_maker.models.options import Sort, SourceFilter
from es_query_maker.models.params import Params, Parametrized, UInt
from es_query_maker.utils import format_timeout, validate_field_names

logger = logging.getLogger(__name__)


class SearchParams(Params):
    size: Optional[UInt] = None
    from_: Optional[UInt] = Field(default=None, alias="from")
    explain: Optional[bool] = None
    timeout: Optional[str] = None
    search_after: Optional[List[Any]] = None


class SearchRequest(Parametrized, Mappable):
    def __init__(self):
        self._params = SearchParams()
        self._query: Optional[Mappable] = None
        self._aggs: List[Aggregation] = []
        self._post_filter: Optional[Mappable] = None
        self._sort = Sort()
        self._source = SourceFilter()
        self._highlight: Optional[Mappable] = None

    def query(self, q: Mappable) -> "SearchRequest":
        if not isinstance(q, Mappable):
            raise QueryBuildError(f"query must be a query, got {type(q).__name__}")
        self._query = q
        return self

    def aggs(self, *aggs: Aggregation) -> "SearchRequest":
        for agg in aggs:
            if not isinstance(agg, Aggregation):
                raise QueryBuildError(
                    f"aggs only accepts aggregations, got {type(agg).__name__}"
                )
        self._aggs.extend(aggs)
        return self

    def post_filter(self, filter: Mappable) -> "SearchRequest":
        if not isinstance(filter, Mappable):
            raise QueryBuildError("post_filter must be a query")
        self._post_filter = filter
        return self

    def from_(self, offset: int) -> "SearchRequest":
        return self._set(from_=offset)

    def size(self, size: int) -> "SearchRequest":
        return self._set(size=size)

    def sort(self, field: str, order: Order = Order.ASC) -> "SearchRequest":
        try:
            self._sort.add(field, order)
        except ValueError as e:
            raise QueryBuildError(f"Invalid sort: {e}") from e
        return self

    def search_after(self, *values: Any) -> "SearchRequest":
        return self._set(search_after=list(values))

    def explain(self, b: bool) -> "SearchRequest":
        return self._set(explain=b)

    def timeout(self, timeout: Union[int, float, timedelta]) -> "SearchRequest":
        return self._set(timeout=format_timeout(timeout))

    def source_includes(self, *fields: str) -> "SearchRequest":
        self._source.includes.extend(validate_field_names(fields))
        return self

    def source_excludes(self, *fields: str) -> "SearchRequest":
        self._source.excludes.extend(validate_field_names(fields))
        return self

    def highlight(self, h: Mappable) -> "SearchRequest":
        if not isinstance(h, Mappable):
            raise QueryBuildError("highlight must be a Highlight")
        self._highlight = h
        return self

    def map(self) -> Dict[str, Any]:
        params = self._params.render()
        out: Dict[str, Any] = {}

        if self._query is not None:
            out["query"] = self._query.map()
        if self._aggs:
            out["aggs"] = aggregations_map(self._aggs)
        if self._post_filter is not None:
            out["post_filter"] = self._post_filter.map()
        if "size" in params:
            out["size"] = params["size"]
        if self._sort:
            out["sort"] = self._sort.map()
        if "from" in params:
            out["from"] = params["from"]
        if "explain" in params:
            out["explain"] = params["explain"]
        if "timeout" in params:
            out["timeout"] = params["timeout"]
        if self._highlight is not None:
            out["highlight"] = self._highlight.map()
        if "search_after" in params:
            out["search_after"] = params["search_after"]

        source = self._source.map()
        if source:
            out["_source"] = source

        return out

    def run(self, client: Elasticsearch, **options: Any) -> Any:
        """
        Executes the search with the given client.

        Args:
            client: An ``elasticsearch.Elasticsearch`` (or async) client.
            **options: Passed to ``client.search`` untouched (index, routing...).

        Returns:
            Whatever ``client.search`` returns.
        """
        return self.run_search(client.search, **options)

    def run_search(self, search: Callable[..., Any], **options: Any) -> Any:
        """Same as ``run`` but with any callable exposing the search API."""
        body = self.map()
        logger.debug("Running search request: %s", body)
        return search(body=body, **options)


def search() -> SearchRequest:
    return SearchRequest()


def query(q: Mappable) -> SearchRequest:
    """Shortcut for ``search().query(q)``."""
    return SearchRequest().query(q)


def aggregate(*aggs: Aggregation) -> SearchRequest:
    """Shortcut for ``search().aggs(*aggs)``."""
    return SearchRequest().aggs(*aggs)
