from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from elasticsearch import Elasticsearch

from es_query_maker.base import Mappable
from es_query_maker.exceptions import InvalidRequestError
from es_query_maker.utils import validate_field_names

logger = logging.getLogger(__name__)


class DeleteRequest(Mappable):
    """
    Delete-by-query request. Both the target indices and the query must be
    set before running:

      delete().index("logs-2020").query(Range("ts").lt("2021-01-01")).run(es)
    """

    def __init__(self):
        self._index: List[str] = []
        self._query: Optional[Mappable] = None

    def index(self, *index: str) -> "DeleteRequest":
        self._index.extend(validate_field_names(index, what="index"))
        return self

    def query(self, q: Mappable) -> "DeleteRequest":
        if not isinstance(q, Mappable):
            raise InvalidRequestError("Delete requires a query")
        self._query = q
        return self

    def map(self) -> Dict[str, Any]:
        if self._query is None:
            raise InvalidRequestError("Delete request has no query")
        return {"query": self._query.map()}

    def run(self, client: Elasticsearch, **options: Any) -> Any:
        if not self._index:
            raise InvalidRequestError("Delete request has no target index")
        body = self.map()
        logger.debug("Running delete-by-query on %s: %s", self._index, body)
        return client.delete_by_query(index=list(self._index), body=body, **options)


def delete() -> DeleteRequest:
    return DeleteRequest()
