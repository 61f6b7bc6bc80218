from typing import ClassVar, List, Optional
from pydantic import Field
from .base import Resource, SCIMModel, SCIMSchemaUri


class GroupMember(SCIMModel):
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class Group(Resource):
    base_schema: ClassVar[str] = SCIMSchemaUri.GROUP.value

    display_name: Optional[str] = Field(None, alias="displayName")
    members: Optional[List[GroupMember]] = None
