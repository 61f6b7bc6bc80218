from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Type
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError
from enum import Enum


class SCIMSchemaUri(str, Enum):
    USER = "urn:ietf:params:scim:schemas:core:2.0:User"
    GROUP = "urn:ietf:params:scim:schemas:core:2.0:Group"
    ENTERPRISE_USER = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
    RESOURCE_TYPE = "urn:ietf:params:scim:schemas:core:2.0:ResourceType"
    SERVICE_PROVIDER_CONFIG = "urn:ietf:params:scim:schemas:core:2.0:ServiceProviderConfig"
    SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Schema"
    LIST_RESPONSE = "urn:ietf:params:scim:api:messages:2.0:ListResponse"
    SEARCH_REQUEST = "urn:ietf:params:scim:api:messages:2.0:SearchRequest"
    ERROR = "urn:ietf:params:scim:api:messages:2.0:Error"


# Key sent by some identity providers (OneLogin) in place of the RFC enterprise URN
LEGACY_ENTERPRISE_USER_URN = "urn:scim:schemas:extension:enterprise:2.0"


class Strictness(str, Enum):
    """How unknown JSON keys are treated while decoding."""

    STRICT = "strict"
    IGNORE = "ignore"
    PRESERVE = "preserve"


class FieldState(str, Enum):
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


class SCIMModel(BaseModel):
    """Base for every SCIM structure.

    An attribute is ABSENT until it is passed to the constructor, decoded from
    the wire or assigned. Absent attributes are left out of the encoded JSON,
    attributes explicitly set to ``None`` are encoded as ``null``.

    Unknown keys are screened before validation. Decoding passes a
    ``strictness`` in the validation context and only wire names are known;
    direct construction accepts wire names and Python names and rejects
    anything else. Keys preserved while decoding, Python field names such as
    ``extensions`` included, are kept as extras and never fill a field.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @classmethod
    def wire_names(cls) -> FrozenSet[str]:
        return frozenset(
            field.alias or name
            for name, field in cls.model_fields.items()
            if not field.exclude
        )

    @classmethod
    def attribute_name(cls, wire_name: str) -> Optional[str]:
        for name, field in cls.model_fields.items():
            if (field.alias or name) == wire_name:
                return name
        return None

    @model_validator(mode="wrap")
    @classmethod
    def screen_unknown_attributes(
        cls,
        data: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        if not isinstance(data, dict):
            return handler(data)

        context = info.context or {}
        strictness = context.get("strictness")
        known = cls.wire_names()
        if strictness is None:
            known = known | set(cls.model_fields)
            strictness = Strictness.STRICT

        unknown = [key for key in data if key not in known]
        if not unknown:
            return handler(data)

        if strictness == Strictness.STRICT:
            raise PydanticCustomError(
                "unknown_attribute",
                "Unknown attribute '{attribute}'",
                {"attribute": unknown[0]},
            )
        if strictness == Strictness.IGNORE:
            return handler({key: value for key, value in data.items() if key in known})

        # Python field names would otherwise populate the field they name
        shadowed = {key: data[key] for key in unknown if key in cls.model_fields}
        model = handler({key: value for key, value in data.items() if key not in shadowed})
        if shadowed:
            model.__pydantic_extra__.update(shadowed)
        return model

    def _resolve(self, name: str) -> str:
        if name in type(self).model_fields:
            return name
        resolved = type(self).attribute_name(name)
        if resolved is None:
            raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")
        return resolved

    def field_state(self, name: str) -> FieldState:
        """Return whether ``name`` (Python or wire name) is absent, null or set."""
        name = self._resolve(name)
        if name not in self.model_fields_set:
            return FieldState.ABSENT
        if getattr(self, name) is None:
            return FieldState.NULL
        return FieldState.VALUE

    def unset(self, name: str) -> None:
        """Make an attribute absent again."""
        name = self._resolve(name)
        field = type(self).model_fields[name]
        object.__setattr__(self, name, field.get_default(call_default_factory=True))
        self.__pydantic_fields_set__.discard(name)


class Meta(SCIMModel):
    resource_type: Optional[str] = Field(None, alias="resourceType")
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = Field(None, alias="lastModified")
    location: Optional[str] = None
    version: Optional[str] = None

    @field_validator("created", "last_modified", mode="before")
    def require_timestamp_string(cls, v: Any) -> Any:
        # Numbers would otherwise be read as unix timestamps
        if isinstance(v, (bool, int, float)):
            raise PydanticCustomError("datetime_type", "Timestamps must be ISO-8601 strings")
        return v


class MultiValuedAttribute(SCIMModel):
    value: Optional[str] = None
    display: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[StrictBool] = None


class Name(SCIMModel):
    formatted: Optional[str] = None
    family_name: Optional[str] = Field(None, alias="familyName")
    given_name: Optional[str] = Field(None, alias="givenName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    honorific_prefix: Optional[str] = Field(None, alias="honorificPrefix")
    honorific_suffix: Optional[str] = Field(None, alias="honorificSuffix")


class Address(SCIMModel):
    formatted: Optional[str] = None
    street_address: Optional[str] = Field(None, alias="streetAddress")
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    country: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[StrictBool] = None


class Resource(SCIMModel):
    """A SCIM resource: common attributes plus attached schema extensions.

    ``extensions`` maps an extension URN to its payload. It never appears on
    the wire under its own name; the codec flattens each payload into a
    top-level key named by its URN.
    """

    base_schema: ClassVar[str] = ""
    extension_models: ClassVar[Dict[str, Type[SCIMModel]]] = {}

    schemas: List[str] = Field(default_factory=list)
    id: Optional[str] = None
    external_id: Optional[str] = Field(None, alias="externalId")
    meta: Optional[Meta] = None

    extensions: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def get_extension(self, urn: str) -> Optional[SCIMModel]:
        return self.extensions.get(urn)

    def attach_extension(self, urn: str, payload: SCIMModel) -> None:
        # Assignment keeps the attribute in model_fields_set
        self.extensions = {**self.extensions, urn: payload}

    def detach_extension(self, urn: str) -> Optional[SCIMModel]:
        remaining = dict(self.extensions)
        payload = remaining.pop(urn, None)
        if remaining:
            self.extensions = remaining
        else:
            self.unset("extensions")
        return payload

    def with_declared_schemas(self) -> "Resource":
        """Return a copy whose ``schemas`` lists the base URN and every attached extension."""
        schemas = [self.base_schema]
        schemas.extend(urn for urn in self.extensions if urn not in schemas)
        resource = self.model_copy(deep=True)
        resource.schemas = schemas
        return resource
