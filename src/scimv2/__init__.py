"""SCIM 2.0 resource models, schema validation and JSON wire codec (RFC 7643/7644)."""
from scimv2.schemas import (
    Resource,
    User,
    Group,
    EnterpriseUser,
    ResourceType,
    ServiceProviderConfig,
    ListResponse,
    SearchRequest,
    ErrorResponse,
    SCIMSchemaUri,
    Strictness,
    FieldState,
)
from scimv2.exceptions import (
    SCIMError,
    SCIMSyntaxError,
    SchemaError,
    FieldError,
    TypeMismatchError,
)
from scimv2.validator import (
    validate,
    validate_user,
    validate_group,
    validate_resource_type,
    validate_service_provider_config,
    validate_enterprise_user,
)
from scimv2.codec import (
    encode,
    decode,
    resource_to_dict,
    resource_from_dict,
    user_to_json,
    json_to_user,
    group_to_json,
    json_to_group,
    resource_type_to_json,
    json_to_resource_type,
    service_provider_config_to_json,
    json_to_service_provider_config,
    enterprise_user_to_json,
    json_to_enterprise_user,
    list_response_to_json,
    json_to_list_response,
    search_request_to_json,
    json_to_search_request,
    error_response_to_json,
    schema_to_json,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Resource",
    "User",
    "Group",
    "EnterpriseUser",
    "ResourceType",
    "ServiceProviderConfig",
    "ListResponse",
    "SearchRequest",
    "ErrorResponse",
    "SCIMSchemaUri",
    "Strictness",
    "FieldState",
    # Errors
    "SCIMError",
    "SCIMSyntaxError",
    "SchemaError",
    "FieldError",
    "TypeMismatchError",
    # Validation
    "validate",
    "validate_user",
    "validate_group",
    "validate_resource_type",
    "validate_service_provider_config",
    "validate_enterprise_user",
    # Codec
    "encode",
    "decode",
    "resource_to_dict",
    "resource_from_dict",
    "user_to_json",
    "json_to_user",
    "group_to_json",
    "json_to_group",
    "resource_type_to_json",
    "json_to_resource_type",
    "service_provider_config_to_json",
    "json_to_service_provider_config",
    "enterprise_user_to_json",
    "json_to_enterprise_user",
    "list_response_to_json",
    "json_to_list_response",
    "search_request_to_json",
    "json_to_search_request",
    "error_response_to_json",
    "schema_to_json",
]
