"""Pydantic schemas for the search API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, SerializationInfo, SerializerFunctionWrapHandler, model_serializer

from .common import CamelModel
from .items import NormalizedItem, TopResult


class SearchResponse(CamelModel):
    success: bool = True
    query: str = Field(..., description="Search query as received")
    type: str = Field(..., description="Requested search type")
    top_result: Optional[TopResult] = Field(None, description="Best-match card, when present upstream")
    results: List[NormalizedItem] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_missing_top_result(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        data = handler(self)
        if self.top_result is None:
            data.pop("topResult" if info.by_alias else "top_result", None)
        return data
