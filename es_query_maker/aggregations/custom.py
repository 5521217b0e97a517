from __future__ import annotations

from typing import Any, Dict

from es_query_maker.base import Aggregation
from es_query_maker.exceptions import QueryBuildError
from es_query_maker.utils import validate_field_name
from es_query_maker.validators.schema_validator import validate_custom_mapping


class CustomAgg(Aggregation):
    """Escape hatch: a named aggregation whose body is passed through as-is."""

    def __init__(self, name: str, mapping: Dict[str, Any]):
        if not validate_custom_mapping(mapping):
            raise QueryBuildError("CustomAgg requires a mapping with string keys")
        self._name = validate_field_name(name, what="aggregation")
        self._mapping = mapping

    @property
    def name(self) -> str:
        return self._name

    def map(self) -> Dict[str, Any]:
        return self._mapping
