"""
SCIM schema definitions (RFC 7643 sections 3, 4, 5, 6 and 7).

These are the attribute tables the validator walks: required flags,
multi-valued cardinality, canonical values and mutability all come from
here. They are also the documents a service provider publishes on its
``/Schemas`` endpoint.
"""
from typing import Dict, List, Optional
from .base import SCIMSchemaUri
from .meta import (
    Schema,
    SchemaAttribute,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
)


EMAIL_TYPES = ["work", "home", "other"]
PHONE_NUMBER_TYPES = ["work", "home", "mobile", "fax", "pager", "other"]
IM_TYPES = ["aim", "gtalk", "icq", "xmpp", "msn", "skype", "qq", "yahoo"]
PHOTO_TYPES = ["photo", "thumbnail"]
ADDRESS_TYPES = ["work", "home", "other"]
USER_GROUP_TYPES = ["direct", "indirect"]
MEMBER_TYPES = ["User", "Group"]
AUTHENTICATION_SCHEME_TYPES = ["oauth", "oauth2", "oauthbearertoken", "httpbasic", "httpdigest"]


def _string(name: str, description: str, **kwargs) -> SchemaAttribute:
    return SchemaAttribute(name=name, type=AttributeType.STRING, description=description, **kwargs)


def _boolean(name: str, description: str, **kwargs) -> SchemaAttribute:
    return SchemaAttribute(name=name, type=AttributeType.BOOLEAN, description=description, **kwargs)


def _integer(name: str, description: str, **kwargs) -> SchemaAttribute:
    return SchemaAttribute(name=name, type=AttributeType.INTEGER, description=description, **kwargs)


def _reference(name: str, description: str, reference_types: List[str], **kwargs) -> SchemaAttribute:
    return SchemaAttribute(
        name=name,
        type=AttributeType.REFERENCE,
        description=description,
        reference_types=reference_types,
        case_exact=True,
        **kwargs,
    )


def _complex(name: str, description: str, sub_attributes: List[SchemaAttribute], **kwargs) -> SchemaAttribute:
    return SchemaAttribute(
        name=name,
        type=AttributeType.COMPLEX,
        description=description,
        sub_attributes=sub_attributes,
        **kwargs,
    )


def _multi_valued(
    name: str,
    description: str,
    canonical_types: Optional[List[str]] = None,
    value_type: AttributeType = AttributeType.STRING,
    **kwargs,
) -> SchemaAttribute:
    """Build the usual value/display/type/primary multi-valued attribute."""
    return _complex(
        name,
        description,
        [
            SchemaAttribute(name="value", type=value_type, description=f"Value of the {name} entry"),
            _string("display", "A human-readable name, primarily used for display purposes"),
            _string("type", f"A label indicating the {name} entry's function", canonical_values=canonical_types),
            _boolean("primary", f"Indicates the primary {name} entry; at most one entry may be primary"),
        ],
        multi_valued=True,
        **kwargs,
    )


# Attributes every resource carries (RFC 7643 section 3.1)
COMMON_ATTRIBUTES: List[SchemaAttribute] = [
    _string(
        "id",
        "Unique identifier for the resource as defined by the service provider",
        case_exact=True,
        mutability=Mutability.READ_ONLY,
        returned=Returned.ALWAYS,
        uniqueness=Uniqueness.SERVER,
    ),
    _string(
        "externalId",
        "An identifier for the resource as defined by the provisioning client",
        case_exact=True,
    ),
    _complex(
        "meta",
        "Resource metadata",
        [
            _string("resourceType", "The name of the resource type of the resource", case_exact=True,
                    mutability=Mutability.READ_ONLY),
            SchemaAttribute(name="created", type=AttributeType.DATETIME, mutability=Mutability.READ_ONLY,
                            description="The date and time the resource was added"),
            SchemaAttribute(name="lastModified", type=AttributeType.DATETIME, mutability=Mutability.READ_ONLY,
                            description="The most recent date and time the resource was modified"),
            _reference("location", "The URI of the resource being returned", ["uri"],
                       mutability=Mutability.READ_ONLY),
            _string("version", "The version (ETag) of the resource", case_exact=True,
                    mutability=Mutability.READ_ONLY),
        ],
        mutability=Mutability.READ_ONLY,
    ),
]


USER_SCHEMA = Schema(
    id=SCIMSchemaUri.USER.value,
    name="User",
    description="User Account",
    attributes=[
        _string("userName", "Unique identifier for the User", required=True, uniqueness=Uniqueness.SERVER),
        _complex(
            "name",
            "The components of the user's real name",
            [
                _string("formatted", "The full name"),
                _string("familyName", "The family name"),
                _string("givenName", "The given name"),
                _string("middleName", "The middle name(s)"),
                _string("honorificPrefix", "The honorific prefix(es), or title"),
                _string("honorificSuffix", "The honorific suffix(es)"),
            ],
        ),
        _string("displayName", "The name of the user, suitable for display to end-users"),
        _string("nickName", "The casual way to address the user in real life"),
        _reference("profileUrl", "A fully qualified URL pointing to the user's online profile", ["external"]),
        _string("title", "The user's title, such as Vice President"),
        _string("userType", "Used to identify the relationship between the organization and the user"),
        _string("preferredLanguage", "Indicates the user's preferred written or spoken language"),
        _string("locale", "Used to indicate the user's default location"),
        _string("timezone", "The user's time zone in the Olson time zone database format"),
        _boolean("active", "A Boolean value indicating the user's administrative status"),
        _string(
            "password",
            "The user's cleartext password",
            mutability=Mutability.WRITE_ONLY,
            returned=Returned.NEVER,
        ),
        _multi_valued("emails", "Email addresses for the user", EMAIL_TYPES),
        _multi_valued("phoneNumbers", "Phone numbers for the user", PHONE_NUMBER_TYPES),
        _multi_valued("ims", "Instant messaging addresses for the user", IM_TYPES),
        _multi_valued("photos", "URLs of photos of the user", PHOTO_TYPES, value_type=AttributeType.REFERENCE),
        _complex(
            "addresses",
            "A physical mailing address for this user",
            [
                _string("formatted", "The full mailing address, formatted for display"),
                _string("streetAddress", "The full street address component"),
                _string("locality", "The city or locality component"),
                _string("region", "The state or region component"),
                _string("postalCode", "The zip code or postal code component"),
                _string("country", "The country name component"),
                _string("type", "A label indicating the address' function", canonical_values=ADDRESS_TYPES),
                _boolean("primary", "Indicates the primary mailing address"),
            ],
            multi_valued=True,
        ),
        _complex(
            "groups",
            "A list of groups to which the user belongs",
            [
                _string("value", "The identifier of the user's group", mutability=Mutability.READ_ONLY),
                _reference("$ref", "The URI of the corresponding 'Group' resource", ["User", "Group"],
                           mutability=Mutability.READ_ONLY),
                _string("display", "A human-readable name for the group", mutability=Mutability.READ_ONLY),
                _string("type", "A label indicating the membership's function", canonical_values=USER_GROUP_TYPES,
                        mutability=Mutability.READ_ONLY),
            ],
            multi_valued=True,
            mutability=Mutability.READ_ONLY,
        ),
        _multi_valued("entitlements", "A list of entitlements for the user"),
        _multi_valued("roles", "A list of roles for the user"),
        _multi_valued("x509Certificates", "A list of certificates issued to the user",
                      value_type=AttributeType.BINARY),
    ],
)


GROUP_SCHEMA = Schema(
    id=SCIMSchemaUri.GROUP.value,
    name="Group",
    description="Group",
    attributes=[
        _string("displayName", "A human-readable name for the Group", required=True),
        _complex(
            "members",
            "A list of members of the Group",
            [
                _string("value", "Identifier of the member of this Group", mutability=Mutability.IMMUTABLE),
                _reference("$ref", "The URI corresponding to a SCIM resource that is a member of this Group",
                           ["User", "Group"], mutability=Mutability.IMMUTABLE),
                _string("display", "A human-readable name for the member"),
                _string("type", "A label indicating the type of resource", mutability=Mutability.IMMUTABLE),
            ],
            multi_valued=True,
        ),
    ],
)


ENTERPRISE_USER_SCHEMA = Schema(
    id=SCIMSchemaUri.ENTERPRISE_USER.value,
    name="EnterpriseUser",
    description="Enterprise User",
    attributes=[
        _string("employeeNumber", "Numeric or alphanumeric identifier assigned to a person"),
        _string("costCenter", "Identifies the name of a cost center"),
        _string("organization", "Identifies the name of an organization"),
        _string("division", "Identifies the name of a division"),
        _string("department", "Identifies the name of a department"),
        _complex(
            "manager",
            "The User's manager",
            [
                _string("value", "The id of the SCIM resource representing the User's manager"),
                _reference("$ref", "The URI of the SCIM resource representing the User's manager", ["User"]),
                _string("displayName", "The displayName of the User's manager", mutability=Mutability.READ_ONLY),
            ],
        ),
    ],
)


RESOURCE_TYPE_SCHEMA = Schema(
    id=SCIMSchemaUri.RESOURCE_TYPE.value,
    name="ResourceType",
    description="Specifies the schema that describes a SCIM resource type",
    attributes=[
        _string("name", "The resource type name", required=True, mutability=Mutability.READ_ONLY),
        _string("description", "The resource type's human-readable description", mutability=Mutability.READ_ONLY),
        _reference("endpoint", "The resource type's HTTP-addressable endpoint relative to the Base URL", ["uri"],
                   required=True, mutability=Mutability.READ_ONLY),
        _reference("schema", "The resource type's primary/base schema URI", ["uri"],
                   required=True, mutability=Mutability.READ_ONLY),
        _complex(
            "schemaExtensions",
            "A list of URIs of the resource type's schema extensions",
            [
                _reference("schema", "The URI of a schema extension", ["uri"], required=True,
                           mutability=Mutability.READ_ONLY),
                _boolean("required", "Whether resources must include this schema extension", required=True,
                         mutability=Mutability.READ_ONLY),
            ],
            multi_valued=True,
            mutability=Mutability.READ_ONLY,
        ),
    ],
)


def _supported(name: str, description: str) -> SchemaAttribute:
    return _complex(
        name,
        description,
        [_boolean("supported", "A Boolean value specifying whether or not the operation is supported",
                  required=True, mutability=Mutability.READ_ONLY)],
        required=True,
        mutability=Mutability.READ_ONLY,
    )


SERVICE_PROVIDER_CONFIG_SCHEMA = Schema(
    id=SCIMSchemaUri.SERVICE_PROVIDER_CONFIG.value,
    name="Service Provider Configuration",
    description="Schema for representing the service provider's configuration",
    attributes=[
        _reference("documentationUri", "An HTTP-addressable URL pointing to the service provider's help documentation",
                   ["external"], mutability=Mutability.READ_ONLY),
        _supported("patch", "A complex type that specifies PATCH configuration options"),
        _complex(
            "bulk",
            "A complex type that specifies bulk configuration options",
            [
                _boolean("supported", "A Boolean value specifying whether or not the operation is supported",
                         required=True, mutability=Mutability.READ_ONLY),
                _integer("maxOperations", "An integer value specifying the maximum number of operations",
                         required=True, mutability=Mutability.READ_ONLY),
                _integer("maxPayloadSize", "An integer value specifying the maximum payload size in bytes",
                         required=True, mutability=Mutability.READ_ONLY),
            ],
            required=True,
            mutability=Mutability.READ_ONLY,
        ),
        _complex(
            "filter",
            "A complex type that specifies FILTER options",
            [
                _boolean("supported", "A Boolean value specifying whether or not the operation is supported",
                         required=True, mutability=Mutability.READ_ONLY),
                _integer("maxResults", "The maximum number of resources returned in a response",
                         required=True, mutability=Mutability.READ_ONLY),
            ],
            required=True,
            mutability=Mutability.READ_ONLY,
        ),
        _supported("changePassword", "A complex type that specifies configuration options related to changing a password"),
        _supported("sort", "A complex type that specifies sort result options"),
        _supported("etag", "A complex type that specifies ETag configuration options"),
        _complex(
            "authenticationSchemes",
            "A complex type that specifies supported authentication scheme properties",
            [
                _string("type", "The authentication scheme", canonical_values=AUTHENTICATION_SCHEME_TYPES,
                        mutability=Mutability.READ_ONLY),
                _string("name", "The common authentication scheme name", required=True,
                        mutability=Mutability.READ_ONLY),
                _string("description", "A description of the authentication scheme", required=True,
                        mutability=Mutability.READ_ONLY),
                _reference("specUri", "An HTTP-addressable URL pointing to the authentication scheme's specification",
                           ["external"], mutability=Mutability.READ_ONLY),
                _reference("documentationUri", "An HTTP-addressable URL pointing to the authentication scheme's usage documentation",
                           ["external"], mutability=Mutability.READ_ONLY),
                _boolean("primary", "Indicates the primary authentication scheme", mutability=Mutability.READ_ONLY),
            ],
            multi_valued=True,
            required=True,
            mutability=Mutability.READ_ONLY,
        ),
    ],
)


# Base schema for each resource type
RESOURCE_SCHEMAS: Dict[str, Schema] = {
    schema.id: schema
    for schema in (USER_SCHEMA, GROUP_SCHEMA, RESOURCE_TYPE_SCHEMA, SERVICE_PROVIDER_CONFIG_SCHEMA)
}

# Schema extensions, keyed by extension URN
EXTENSION_SCHEMAS: Dict[str, Schema] = {
    ENTERPRISE_USER_SCHEMA.id: ENTERPRISE_USER_SCHEMA,
}
