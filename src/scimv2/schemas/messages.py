from typing import Dict, List, Optional, Type
from pydantic import Field, StrictInt, field_validator
from .base import Resource, SCIMModel, SCIMSchemaUri
from .user import User
from .group import Group
from .meta import ResourceType, Schema, ServiceProviderConfig


# Resource classes a ListResponse can carry, keyed by base schema URN
RESOURCE_MODELS: Dict[str, Type[Resource]] = {
    model.base_schema: model
    for model in (User, Group, ResourceType, ServiceProviderConfig, Schema)
}


class ListResponse(SCIMModel):
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.LIST_RESPONSE.value])
    total_results: StrictInt = Field(..., alias="totalResults")
    items_per_page: Optional[StrictInt] = Field(None, alias="itemsPerPage")
    start_index: Optional[StrictInt] = Field(None, alias="startIndex")
    resources: List[Resource] = Field(default_factory=list, alias="Resources")


class SearchRequest(SCIMModel):
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.SEARCH_REQUEST.value])
    attributes: Optional[List[str]] = None
    excluded_attributes: Optional[List[str]] = Field(None, alias="excludedAttributes")
    filter: Optional[str] = None
    sort_by: Optional[str] = Field(None, alias="sortBy")
    sort_order: Optional[str] = Field(None, alias="sortOrder")
    start_index: Optional[StrictInt] = Field(None, alias="startIndex", ge=1)
    count: Optional[StrictInt] = Field(None, ge=0)

    @field_validator("sort_order")
    def validate_sort_order(cls, v: Optional[str]) -> Optional[str]:
        allowed = ["ascending", "descending"]
        if v is not None and v not in allowed:
            raise ValueError(f"sortOrder must be one of {allowed}")
        return v
