"""
SCIM JSON wire codec.

Encoding leaves out every attribute that was never provided, keeps explicit
nulls and empty values, and flattens schema extensions into top-level keys
named by their URN. Decoding is the inverse: known keys map onto model
fields, registered extension URNs become ``Resource.extensions`` entries and
unknown keys are handled according to the caller's :class:`Strictness`.

Pydantic validation errors never leave this module; the first error is
translated into one of the :mod:`scimv2.exceptions` kinds.
"""
import json
from typing import Any, Dict, List, Optional, Set, Tuple, Type, TypeVar, Union
from pydantic import ValidationError
from scimv2.config import settings
from scimv2.exceptions import (
    SCIMError,
    SCIMSyntaxError,
    SchemaError,
    FieldError,
    TypeMismatchError,
)
from scimv2.schemas import (
    SCIMModel,
    Resource,
    User,
    Group,
    EnterpriseUser,
    ResourceType,
    ServiceProviderConfig,
    Schema,
    ListResponse,
    SearchRequest,
    ErrorResponse,
    SCIMSchemaUri,
    LEGACY_ENTERPRISE_USER_URN,
    Strictness,
    RESOURCE_MODELS,
)
from scimv2.utils import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=SCIMModel)
R = TypeVar("R", bound=Resource)

JSONText = Union[str, bytes, bytearray]


def _attribute_path(loc: Tuple[Any, ...], prefix: str = "") -> Optional[str]:
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif not path or path.endswith((":", ".")):
            path += str(part)
        else:
            path += f".{part}"
    return path.rstrip(":.") or None


def _translate(error: ValidationError, prefix: str = "") -> SCIMError:
    """Turn the first pydantic error into a SCIM error kind."""
    first = error.errors()[0]
    kind = first["type"]
    loc = tuple(first["loc"])

    if kind == "unknown_attribute":
        attribute = _attribute_path(loc + (first["ctx"]["attribute"],), prefix)
        return SchemaError("Attribute is not defined by any declared schema", rule="unknownAttribute", attribute=attribute)

    attribute = _attribute_path(loc, prefix)
    if kind == "missing":
        return FieldError("Required attribute is missing", rule="required", attribute=attribute)
    if kind.endswith(("_type", "_parsing")):
        return TypeMismatchError(first["msg"], rule="type", attribute=attribute)
    return FieldError(first["msg"], rule="value", attribute=attribute)


def _validate(model: Type[M], payload: Any, strictness: Strictness, prefix: str = "") -> M:
    try:
        return model.model_validate(payload, context={"strictness": strictness})
    except ValidationError as e:
        error = _translate(e, prefix)
        logger.debug(f"Could not decode {model.__name__}: {error}")
        raise error from e


def _loads(text: JSONText) -> Any:
    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        return json.loads(text)
    except UnicodeDecodeError as e:
        raise SCIMSyntaxError(f"JSON text must be UTF-8: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise SCIMSyntaxError(f"Malformed JSON: {e.msg}", line=e.lineno, column=e.colno) from e


def _dumps(document: Any) -> str:
    return json.dumps(document, indent=settings.json_indent, ensure_ascii=False)


def _dump(model: SCIMModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _dump_message(message: SCIMModel, exclude: Optional[Set[str]] = None) -> Dict[str, Any]:
    # Message schemas come from a default and are always written
    document = message.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude=exclude)
    return {"schemas": message.schemas, **document}


def _require(value: Any, model: Type[SCIMModel]) -> None:
    if not isinstance(value, model):
        raise TypeMismatchError(f"Expected a {model.__name__}, got {type(value).__name__}", rule="type")


def _upgrade_legacy_enterprise_urn(document: Dict[str, Any]) -> None:
    standard = SCIMSchemaUri.ENTERPRISE_USER.value
    if LEGACY_ENTERPRISE_USER_URN not in document or standard in document:
        return

    logger.debug("Detected non-standard enterprise extension key, converting to RFC-compliant format")
    document[standard] = document.pop(LEGACY_ENTERPRISE_USER_URN)
    schemas = document.get("schemas")
    if isinstance(schemas, list):
        document["schemas"] = [standard if urn == LEGACY_ENTERPRISE_USER_URN else urn for urn in schemas]


def _decode_resource(data: Any, model: Type[R], strictness: Strictness, prefix: str = "") -> R:
    if not isinstance(data, dict):
        raise TypeMismatchError(
            f"A {model.__name__} must be a JSON object",
            rule="type",
            attribute=prefix.rstrip(".") or None,
        )

    document = dict(data)
    if settings.accept_legacy_enterprise_urn and SCIMSchemaUri.ENTERPRISE_USER.value in model.extension_models:
        _upgrade_legacy_enterprise_urn(document)

    extension_documents = {
        urn: document.pop(urn)
        for urn in list(document)
        if urn in model.extension_models
    }

    resource = _validate(model, document, strictness, prefix)
    if extension_documents:
        resource.extensions = {
            urn: _validate(model.extension_models[urn], payload, strictness, f"{prefix}{urn}:")
            for urn, payload in extension_documents.items()
        }
    return resource


# Resources

def resource_to_dict(resource: Resource) -> Dict[str, Any]:
    """Encode a resource to a JSON-ready dict, extensions flattened under their URN."""
    _require(resource, Resource)

    document = _dump(resource)
    for urn, payload in resource.extensions.items():
        if not isinstance(payload, SCIMModel):
            raise TypeMismatchError(
                f"Extension data must be a SCIM model, got {type(payload).__name__}",
                rule="type",
                attribute=urn,
            )
        document[urn] = _dump(payload)
    return document


def resource_from_dict(data: Any, model: Type[R], *, strictness: Strictness) -> R:
    """Decode an already-parsed JSON object into ``model``."""
    return _decode_resource(data, model, Strictness(strictness))


def encode(resource: Resource) -> str:
    document = resource_to_dict(resource)
    logger.debug(f"Encoded {type(resource).__name__} with {len(document)} top-level attributes")
    return _dumps(document)


def decode(text: JSONText, model: Type[R], *, strictness: Strictness) -> R:
    """Decode JSON text into ``model``.

    ``strictness`` is required: STRICT rejects unknown keys, IGNORE drops them
    and PRESERVE keeps them so they are written back out by :func:`encode`.
    """
    resource = _decode_resource(_loads(text), model, Strictness(strictness))
    logger.debug(f"Decoded {model.__name__} (strictness={Strictness(strictness).value})")
    return resource


def user_to_json(user: User) -> str:
    _require(user, User)
    return encode(user)


def json_to_user(text: JSONText, *, strictness: Strictness) -> User:
    return decode(text, User, strictness=strictness)


def group_to_json(group: Group) -> str:
    _require(group, Group)
    return encode(group)


def json_to_group(text: JSONText, *, strictness: Strictness) -> Group:
    return decode(text, Group, strictness=strictness)


def resource_type_to_json(resource_type: ResourceType) -> str:
    _require(resource_type, ResourceType)
    return encode(resource_type)


def json_to_resource_type(text: JSONText, *, strictness: Strictness) -> ResourceType:
    return decode(text, ResourceType, strictness=strictness)


def service_provider_config_to_json(config: ServiceProviderConfig) -> str:
    _require(config, ServiceProviderConfig)
    return encode(config)


def json_to_service_provider_config(text: JSONText, *, strictness: Strictness) -> ServiceProviderConfig:
    return decode(text, ServiceProviderConfig, strictness=strictness)


def enterprise_user_to_json(enterprise_user: EnterpriseUser) -> str:
    """Encode a standalone Enterprise User payload (the value stored under its URN)."""
    _require(enterprise_user, EnterpriseUser)
    return _dumps(_dump(enterprise_user))


def json_to_enterprise_user(text: JSONText, *, strictness: Strictness) -> EnterpriseUser:
    return _validate(EnterpriseUser, _loads(text), Strictness(strictness))


# Protocol messages

def _resource_model(item: Any, prefix: str) -> Type[Resource]:
    schemas = item.get("schemas") if isinstance(item, dict) else None
    if isinstance(schemas, list):
        for urn in schemas:
            if isinstance(urn, str) and urn in RESOURCE_MODELS:
                return RESOURCE_MODELS[urn]
    raise SchemaError(
        "Cannot determine the resource type from schemas",
        rule="schemas",
        attribute=f"{prefix}schemas",
    )


def list_response_to_json(response: ListResponse) -> str:
    _require(response, ListResponse)
    document = _dump_message(response, exclude={"resources"})
    if "resources" in response.model_fields_set:
        document["Resources"] = [resource_to_dict(resource) for resource in response.resources]
    return _dumps(document)


def json_to_list_response(text: JSONText, *, strictness: Strictness) -> ListResponse:
    """Decode a ListResponse, dispatching each resource on its base schema URN."""
    strictness = Strictness(strictness)
    document = _loads(text)
    if not isinstance(document, dict):
        raise TypeMismatchError("A ListResponse must be a JSON object", rule="type")

    document = dict(document)
    if "Resources" in document:
        items = document["Resources"]
        if not isinstance(items, list):
            raise TypeMismatchError("Resources must be an array", rule="type", attribute="Resources")
        resources: List[Resource] = []
        for index, item in enumerate(items):
            prefix = f"Resources[{index}]."
            resources.append(_decode_resource(item, _resource_model(item, prefix), strictness, prefix))
        document["Resources"] = resources

    return _validate(ListResponse, document, strictness)


def search_request_to_json(request: SearchRequest) -> str:
    _require(request, SearchRequest)
    return _dumps(_dump_message(request))


def json_to_search_request(text: JSONText, *, strictness: Strictness) -> SearchRequest:
    return _validate(SearchRequest, _loads(text), Strictness(strictness))


def error_response_to_json(error: Union[SCIMError, ErrorResponse]) -> str:
    if isinstance(error, SCIMError):
        error = error.to_error_response()
    _require(error, ErrorResponse)
    return _dumps(_dump_message(error))


def schema_to_json(schema: Schema) -> str:
    """Encode a schema definition as served from the ``/Schemas`` endpoint."""
    _require(schema, Schema)
    if not schema.schemas:
        schema = schema.with_declared_schemas()
    # Attribute characteristics are written even when left at their defaults
    return _dumps(schema.model_dump(mode="json", by_alias=True, exclude_none=True))
