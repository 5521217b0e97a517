from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from es_query_maker.models.enums import Order
from es_query_maker.utils import validate_field_name


class SortItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    field: str
    order: Order = Order.ASC

    @field_validator("field")
    @classmethod
    def _validate_field(cls, v: str) -> str:
        return validate_field_name(v)

    def map(self) -> Dict[str, Any]:
        return {self.field: {"order": self.order.value}}


class Sort(RootModel[List[SortItem]]):
    root: List[SortItem] = Field(default_factory=list)

    def add(self, field: str, order: Order = Order.ASC) -> "Sort":
        self.root.append(SortItem(field=field, order=order))
        return self

    def __len__(self) -> int:
        return len(self.root)

    def map(self) -> List[Dict[str, Any]]:
        return [item.map() for item in self.root]


class SourceFilter(BaseModel):
    """Source filtering for "_source": empty lists are left out."""

    model_config = ConfigDict(extra="forbid")

    includes: List[str] = Field(default_factory=list)
    excludes: List[str] = Field(default_factory=list)

    def map(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.includes:
            out["includes"] = list(self.includes)
        if self.excludes:
            out["excludes"] = list(self.excludes)
        return out
