from .base import (
    SCIMModel,
    Resource,
    Meta,
    MultiValuedAttribute,
    Name,
    Address,
    SCIMSchemaUri,
    LEGACY_ENTERPRISE_USER_URN,
    Strictness,
    FieldState,
)
from .user import (
    User,
    Email,
    PhoneNumber,
    InstantMessaging,
    Photo,
    Entitlement,
    Role,
    X509Certificate,
    EnterpriseUser,
    Manager,
    UserGroup,
)
from .group import (
    Group,
    GroupMember,
)
from .error import (
    ErrorResponse,
)
from .meta import (
    Schema,
    SchemaAttribute,
    SchemaExtension,
    ResourceType,
    ServiceProviderConfig,
    Supported,
    BulkSupport,
    FilterSupport,
    AuthenticationScheme,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
)
from .messages import (
    ListResponse,
    SearchRequest,
    RESOURCE_MODELS,
)

__all__ = [
    # Base
    "SCIMModel",
    "Resource",
    "Meta",
    "MultiValuedAttribute",
    "Name",
    "Address",
    "SCIMSchemaUri",
    "LEGACY_ENTERPRISE_USER_URN",
    "Strictness",
    "FieldState",
    # User
    "User",
    "Email",
    "PhoneNumber",
    "InstantMessaging",
    "Photo",
    "Entitlement",
    "Role",
    "X509Certificate",
    "EnterpriseUser",
    "Manager",
    "UserGroup",
    # Group
    "Group",
    "GroupMember",
    # Error
    "ErrorResponse",
    # Meta
    "Schema",
    "SchemaAttribute",
    "SchemaExtension",
    "ResourceType",
    "ServiceProviderConfig",
    "Supported",
    "BulkSupport",
    "FilterSupport",
    "AuthenticationScheme",
    "AttributeType",
    "Mutability",
    "Returned",
    "Uniqueness",
    # Messages
    "ListResponse",
    "SearchRequest",
    "RESOURCE_MODELS",
]
