from __future__ import annotations

from typing import Any, Dict

from es_query_maker.base import Mappable
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.validators.schema_validator import validate_custom_mapping


class CustomQuery(Mappable):
    """
    Escape hatch for query types without a dedicated builder. The mapping is
    returned as-is from ``map()``:

      CustomQuery({"geo_distance": {"distance": "12km", "pin.location": [-70, 40]}})
    """

    def __init__(self, mapping: Dict[str, Any]):
        if not validate_custom_mapping(mapping):
            raise QueryBuildError("CustomQuery requires a mapping with string keys")
        self._mapping = mapping

    def map(self) -> Dict[str, Any]:
        return self._mapping
