from unittest.mock import MagicMock

import pytest
from elasticsearch import Elasticsearch


@pytest.fixture
def es_client():
    """A client double: records calls and returns a sentinel response."""
    client = MagicMock(spec=Elasticsearch)
    client.search.return_value = {"hits": {"total": {"value": 0}, "hits": []}}
    client.count.return_value = {"count": 42}
    client.delete_by_query.return_value = {"deleted": 3}
    return client
