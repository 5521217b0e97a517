from __future__ import annotations

import logging
from typing import Any, Dict

from elasticsearch import Elasticsearch

from es_query_maker.base import Mappable
from es_query_maker.exceptions import InvalidRequestError

logger = logging.getLogger(__name__)


class CountRequest(Mappable):
    """Counts the documents matching a query via the _count API."""

    def __init__(self, query: Mappable):
        if not isinstance(query, Mappable):
            raise InvalidRequestError("Count requires a query")
        self._query = query

    def map(self) -> Dict[str, Any]:
        return {"query": self._query.map()}

    def run(self, client: Elasticsearch, **options: Any) -> Any:
        body = self.map()
        logger.debug("Running count request: %s", body)
        return client.count(body=body, **options)


def count(q: Mappable) -> CountRequest:
    return CountRequest(q)
