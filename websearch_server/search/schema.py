"""
Purpose:
- Pydantic models for search in/out so the tool schemas are self-documenting and stable.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator
from typing import List, Optional, Union

class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    query: str = Field(..., min_length=1, description="Search query")
    # Strict types keep booleans and numeric strings out; range is clamped by the service.
    limit: Optional[Union[StrictInt, StrictFloat]] = Field(
        None, description="Maximum number of results to return (default: 5)"
    )

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("query must not be blank")
        return v

    @field_validator("limit")
    @classmethod
    def limit_finite(cls, v):
        if v is not None and not math.isfinite(v):
            raise ValueError("limit must be a finite number")
        return v

class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    description: str = ""

class SearchResponse(BaseModel):
    results: List[SearchResult] = []
