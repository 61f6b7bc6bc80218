from typing import List, Optional
from pydantic import Field, StrictInt
from .base import SCIMModel, SCIMSchemaUri


class ErrorResponse(SCIMModel):
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.ERROR.value])
    status: StrictInt
    scim_type: Optional[str] = Field(None, alias="scimType")
    detail: Optional[str] = None
