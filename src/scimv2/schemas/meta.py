from typing import ClassVar, List, Optional
from pydantic import Field, StrictBool, StrictInt
from enum import Enum
from .base import Resource, SCIMModel, SCIMSchemaUri


class AttributeType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    BINARY = "binary"
    INTEGER = "integer"
    DATETIME = "dateTime"
    REFERENCE = "reference"
    COMPLEX = "complex"


class Mutability(str, Enum):
    READ_ONLY = "readOnly"
    READ_WRITE = "readWrite"
    IMMUTABLE = "immutable"
    WRITE_ONLY = "writeOnly"


class Returned(str, Enum):
    ALWAYS = "always"
    NEVER = "never"
    DEFAULT = "default"
    REQUEST = "request"


class Uniqueness(str, Enum):
    NONE = "none"
    SERVER = "server"
    GLOBAL = "global"


class SchemaAttribute(SCIMModel):
    name: str
    type: AttributeType
    multi_valued: bool = Field(False, alias="multiValued")
    description: Optional[str] = None
    required: bool = False
    canonical_values: Optional[List[str]] = Field(None, alias="canonicalValues")
    case_exact: bool = Field(False, alias="caseExact")
    mutability: Mutability = Mutability.READ_WRITE
    returned: Returned = Returned.DEFAULT
    uniqueness: Optional[Uniqueness] = Uniqueness.NONE
    sub_attributes: Optional[List["SchemaAttribute"]] = Field(None, alias="subAttributes")
    reference_types: Optional[List[str]] = Field(None, alias="referenceTypes")

    def accepts(self, value: str) -> bool:
        """Check a value against ``canonicalValues``; any value passes when none are declared."""
        if not self.canonical_values:
            return True
        if self.case_exact:
            return value in self.canonical_values
        folded = value.casefold()
        return any(folded == canonical.casefold() for canonical in self.canonical_values)


class Schema(Resource):
    base_schema: ClassVar[str] = SCIMSchemaUri.SCHEMA.value

    name: Optional[str] = None
    description: Optional[str] = None
    attributes: List[SchemaAttribute] = Field(default_factory=list)


class SchemaExtension(SCIMModel):
    schema_uri: str = Field(..., alias="schema")
    required: StrictBool


class ResourceType(Resource):
    base_schema: ClassVar[str] = SCIMSchemaUri.RESOURCE_TYPE.value

    name: Optional[str] = None
    description: Optional[str] = None
    endpoint: Optional[str] = None
    schema_uri: Optional[str] = Field(None, alias="schema")
    schema_extensions: Optional[List[SchemaExtension]] = Field(None, alias="schemaExtensions")


class Supported(SCIMModel):
    supported: StrictBool


class BulkSupport(SCIMModel):
    supported: StrictBool
    max_operations: Optional[StrictInt] = Field(None, alias="maxOperations")
    max_payload_size: Optional[StrictInt] = Field(None, alias="maxPayloadSize")


class FilterSupport(SCIMModel):
    supported: StrictBool
    max_results: Optional[StrictInt] = Field(None, alias="maxResults")


class AuthenticationScheme(SCIMModel):
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    spec_uri: Optional[str] = Field(None, alias="specUri")
    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    primary: Optional[StrictBool] = None


class ServiceProviderConfig(Resource):
    base_schema: ClassVar[str] = SCIMSchemaUri.SERVICE_PROVIDER_CONFIG.value

    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    patch: Optional[Supported] = None
    bulk: Optional[BulkSupport] = None
    filter: Optional[FilterSupport] = None
    change_password: Optional[Supported] = Field(None, alias="changePassword")
    sort: Optional[Supported] = None
    etag: Optional[Supported] = None
    authentication_schemes: Optional[List[AuthenticationScheme]] = Field(None, alias="authenticationSchemes")
