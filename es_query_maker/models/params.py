"""
Option containers for builders
==============================

Every builder keeps its optional settings in a pydantic model whose fields
are named after the Elasticsearch keys. Unset options stay ``None`` and are
dropped on render, so the output only ever contains what the caller set.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from es_query_maker.exceptions import QueryBuildError

UInt = Annotated[int, Field(ge=0)]
UInt8 = Annotated[int, Field(ge=0, le=255)]
UInt16 = Annotated[int, Field(ge=0, le=65535)]


class Params(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        populate_by_name=True,
    )

    def render(self) -> Dict[str, Any]:
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise QueryBuildError(
                f"Cannot render {type(self).__name__} as JSON: {e}"
            ) from e


class Parametrized:
    """
    Mixin for fluent builders backed by a :class:`Params` model.

    Subclasses set ``self._params`` in ``__init__`` and call ``_set`` from
    their chainable setters.
    """

    _params: Params

    def _set(self, **values: Any):
        for key, value in values.items():
            try:
                setattr(self._params, key, value)
            except ValidationError as e:
                raise QueryBuildError(
                    f"Invalid value for {type(self).__name__}.{key}: {e}"
                ) from e
        return self
