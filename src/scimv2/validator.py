"""
SCIM resource validation.

Every resource type is checked by the same routine, driven by the attribute
tables in :mod:`scimv2.schemas.definitions`. Checks run in a fixed order and
stop at the first violation:

1. ``schemas`` is non-empty and lists the base schema URN
2. declared extension URNs and attached extension data match
3. required attributes are present and non-empty
4. at most one ``primary`` entry per multi-valued attribute
5. canonical values (and email syntax when enabled)
6. cross-field rules specific to a resource type
7. read-only attributes are not supplied (``for_creation=True`` only)

Validation never mutates the resource and never corrects it.
"""
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple, Type
from email_validator import validate_email, EmailNotValidError
from scimv2.config import settings
from scimv2.exceptions import SCIMError, FieldError, SchemaError, TypeMismatchError
from scimv2.schemas import (
    SCIMModel,
    Resource,
    User,
    Group,
    EnterpriseUser,
    ResourceType,
    ServiceProviderConfig,
    SchemaAttribute,
    Mutability,
)
from scimv2.schemas.definitions import (
    COMMON_ATTRIBUTES,
    RESOURCE_SCHEMAS,
    EXTENSION_SCHEMAS,
    ENTERPRISE_USER_SCHEMA,
    MEMBER_TYPES,
)
from scimv2.utils import get_logger

logger = get_logger(__name__)

# (attribute path, attribute definition, value)
Visit = Tuple[str, SchemaAttribute, Any]

ENTERPRISE_USER_PROFILE = ["employeeNumber", "costCenter", "organization", "division", "department", "manager"]


def _read(model: SCIMModel, wire_name: str) -> Any:
    name = type(model).attribute_name(wire_name)
    if name is None:
        return None
    return getattr(model, name)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return not value
    return False


def _walk(model: SCIMModel, attributes: Iterable[SchemaAttribute], prefix: str = "") -> Iterator[Visit]:
    """Yield every defined attribute of ``model``, descending into present complex values."""
    for attribute in attributes:
        value = _read(model, attribute.name)
        path = f"{prefix}{attribute.name}"
        yield path, attribute, value

        if value is None or not attribute.sub_attributes:
            continue
        if attribute.multi_valued and isinstance(value, list):
            for index, element in enumerate(value):
                if isinstance(element, SCIMModel):
                    yield from _walk(element, attribute.sub_attributes, f"{path}[{index}].")
        elif isinstance(value, SCIMModel):
            yield from _walk(value, attribute.sub_attributes, f"{path}.")


def _visit_resource(resource: Resource) -> List[Visit]:
    schema = RESOURCE_SCHEMAS[resource.base_schema]
    visits = list(_walk(resource, [*COMMON_ATTRIBUTES, *schema.attributes]))

    # Extensions in the order their URNs are declared
    for urn in resource.schemas:
        if urn == resource.base_schema or urn not in resource.extensions:
            continue
        extension_schema = EXTENSION_SCHEMAS.get(urn)
        if extension_schema is not None:
            visits.extend(_walk(resource.extensions[urn], extension_schema.attributes, f"{urn}:"))
    return visits


def _check_schemas(resource: Resource) -> None:
    if not resource.schemas:
        raise SchemaError("schemas must not be empty", rule="schemas", attribute="schemas")
    if resource.base_schema not in resource.schemas:
        raise SchemaError(
            f"schemas must include '{resource.base_schema}'",
            rule="schemas",
            attribute="schemas",
        )


def _check_extensions(resource: Resource) -> None:
    for urn in resource.schemas:
        if urn != resource.base_schema and urn not in resource.extensions:
            raise SchemaError(
                f"Schema '{urn}' is declared but no extension data is attached",
                rule="extensions",
                attribute=urn,
            )

    for urn, payload in resource.extensions.items():
        if urn not in resource.schemas:
            raise SchemaError(
                f"Extension data is attached but '{urn}' is not listed in schemas",
                rule="extensions",
                attribute=urn,
            )
        model = type(resource).extension_models.get(urn)
        if model is None:
            raise SchemaError(
                f"'{urn}' is not a supported extension of {type(resource).__name__}",
                rule="extensions",
                attribute=urn,
            )
        if not isinstance(payload, model):
            raise SchemaError(
                f"Extension data must be a {model.__name__}, got {type(payload).__name__}",
                rule="extensions",
                attribute=urn,
            )


def _check_required(visits: List[Visit]) -> None:
    for path, attribute, value in visits:
        if attribute.required and _is_empty(value):
            raise FieldError("Required attribute is missing or empty", rule="required", attribute=path)


def _check_primary(visits: List[Visit]) -> None:
    for path, attribute, value in visits:
        if not (attribute.multi_valued and isinstance(value, list)):
            continue
        primaries = sum(1 for element in value if getattr(element, "primary", None) is True)
        if primaries > 1:
            raise FieldError(
                f"Only one entry can be marked as primary, found {primaries}",
                rule="primary",
                attribute=path,
            )


def _check_canonical_values(visits: List[Visit]) -> None:
    for path, attribute, value in visits:
        if isinstance(value, str) and not attribute.accepts(value):
            raise FieldError(
                f"'{value}' is not one of {attribute.canonical_values}",
                rule="canonicalValues",
                attribute=path,
            )


def _check_email_syntax(resource: Resource) -> None:
    if not settings.verify_email_syntax or not isinstance(resource, User):
        return
    for index, email in enumerate(resource.emails or []):
        if email.value is None:
            continue
        try:
            validate_email(email.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise FieldError(str(e), rule="format", attribute=f"emails[{index}].value") from e


def _check_member_types(group: Group) -> None:
    for index, member in enumerate(group.members or []):
        if member.type is not None and member.type not in MEMBER_TYPES:
            raise FieldError(
                f"Member type must be one of {MEMBER_TYPES}, got '{member.type}'",
                rule="memberType",
                attribute=f"members[{index}].type",
            )


def _check_schema_extensions(resource_type: ResourceType) -> None:
    seen = set()
    for index, extension in enumerate(resource_type.schema_extensions or []):
        path = f"schemaExtensions[{index}].schema"
        if extension.schema_uri == resource_type.schema_uri:
            raise FieldError("An extension cannot repeat the base schema", rule="schemaExtensions", attribute=path)
        if extension.schema_uri in seen:
            raise FieldError(
                f"Extension '{extension.schema_uri}' is listed more than once",
                rule="schemaExtensions",
                attribute=path,
            )
        seen.add(extension.schema_uri)


def _check_limits(config: ServiceProviderConfig) -> None:
    limits = [
        ("bulk.maxOperations", config.bulk.max_operations if config.bulk else None),
        ("bulk.maxPayloadSize", config.bulk.max_payload_size if config.bulk else None),
        ("filter.maxResults", config.filter.max_results if config.filter else None),
    ]
    for path, limit in limits:
        if limit is not None and limit < 0:
            raise FieldError(f"Limit cannot be negative, got {limit}", rule="limits", attribute=path)


CROSS_FIELD_CHECKS: Dict[Type[Resource], List[Callable[[Any], None]]] = {
    Group: [_check_member_types],
    ResourceType: [_check_schema_extensions],
    ServiceProviderConfig: [_check_limits],
}


def _check_mutability(visits: List[Visit]) -> None:
    for path, attribute, value in visits:
        if attribute.mutability == Mutability.READ_ONLY and value is not None:
            raise FieldError(
                "Read-only attribute cannot be supplied when creating a resource",
                rule="mutability",
                attribute=path,
                scim_type="mutability",
            )


def _expect(value: Any, model: Type[SCIMModel]) -> None:
    if not isinstance(value, model):
        raise TypeMismatchError(
            f"Expected a {model.__name__}, got {type(value).__name__}",
            rule="type",
        )


def validate(resource: Resource, *, for_creation: bool = False) -> None:
    """Validate any supported resource; raises the first :class:`SCIMError` found."""
    if not isinstance(resource, Resource) or resource.base_schema not in RESOURCE_SCHEMAS:
        raise TypeMismatchError(f"{type(resource).__name__} is not a validatable resource", rule="type")

    try:
        _check_schemas(resource)
        _check_extensions(resource)

        visits = _visit_resource(resource)
        _check_required(visits)
        _check_primary(visits)
        _check_canonical_values(visits)
        _check_email_syntax(resource)

        for check in CROSS_FIELD_CHECKS.get(type(resource), []):
            check(resource)

        if for_creation:
            _check_mutability(visits)
    except SCIMError as e:
        logger.debug(f"{type(resource).__name__} failed validation ({e.rule}): {e}")
        raise

    logger.debug(f"{type(resource).__name__} '{resource.id or resource.external_id}' is valid")


def validate_user(user: User, *, for_creation: bool = False) -> None:
    _expect(user, User)
    validate(user, for_creation=for_creation)


def validate_group(group: Group, *, for_creation: bool = False) -> None:
    _expect(group, Group)
    validate(group, for_creation=for_creation)


def validate_resource_type(resource_type: ResourceType, *, for_creation: bool = False) -> None:
    _expect(resource_type, ResourceType)
    validate(resource_type, for_creation=for_creation)


def validate_service_provider_config(config: ServiceProviderConfig, *, for_creation: bool = False) -> None:
    _expect(config, ServiceProviderConfig)
    validate(config, for_creation=for_creation)


def validate_enterprise_user(enterprise_user: EnterpriseUser) -> None:
    """Validate a standalone Enterprise User payload.

    Besides the extension's own attribute rules, the full organizational
    profile (employee number, cost center, organization, division,
    department and manager) must be filled in.
    """
    _expect(enterprise_user, EnterpriseUser)

    visits = list(_walk(enterprise_user, ENTERPRISE_USER_SCHEMA.attributes))
    _check_required(visits)
    _check_canonical_values(visits)

    for attribute in ENTERPRISE_USER_PROFILE:
        if _is_empty(_read(enterprise_user, attribute)):
            raise FieldError("Required attribute is missing or empty", rule="required", attribute=attribute)
