from typing import ClassVar, Dict, List, Optional, Type
from pydantic import Field, StrictBool
from .base import (
    Resource,
    SCIMModel,
    MultiValuedAttribute,
    Name,
    Address,
    SCIMSchemaUri,
)


class Email(MultiValuedAttribute):
    pass


class PhoneNumber(MultiValuedAttribute):
    pass


class InstantMessaging(MultiValuedAttribute):
    pass


class Photo(MultiValuedAttribute):
    pass


class Entitlement(MultiValuedAttribute):
    pass


class Role(MultiValuedAttribute):
    pass


class X509Certificate(MultiValuedAttribute):
    pass


class UserGroup(SCIMModel):
    """Represents a group membership for a user (read-only)"""

    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class Manager(SCIMModel):
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display_name: Optional[str] = Field(None, alias="displayName")


class EnterpriseUser(SCIMModel):
    """Enterprise User schema extension (RFC 7643 section 4.3).

    Attached to a :class:`User` through ``User.extensions`` under
    :attr:`SCIMSchemaUri.ENTERPRISE_USER`, never subclassed.
    """

    urn: ClassVar[str] = SCIMSchemaUri.ENTERPRISE_USER.value

    employee_number: Optional[str] = Field(None, alias="employeeNumber")
    cost_center: Optional[str] = Field(None, alias="costCenter")
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[Manager] = None


class User(Resource):
    base_schema: ClassVar[str] = SCIMSchemaUri.USER.value
    extension_models: ClassVar[Dict[str, Type[SCIMModel]]] = {
        SCIMSchemaUri.ENTERPRISE_USER.value: EnterpriseUser,
    }

    user_name: Optional[str] = Field(None, alias="userName")
    name: Optional[Name] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    nick_name: Optional[str] = Field(None, alias="nickName")
    profile_url: Optional[str] = Field(None, alias="profileUrl")
    title: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    locale: Optional[str] = None
    timezone: Optional[str] = None
    active: Optional[StrictBool] = None
    password: Optional[str] = None

    emails: Optional[List[Email]] = None
    phone_numbers: Optional[List[PhoneNumber]] = Field(None, alias="phoneNumbers")
    ims: Optional[List[InstantMessaging]] = None
    photos: Optional[List[Photo]] = None
    addresses: Optional[List[Address]] = None
    groups: Optional[List[UserGroup]] = None
    entitlements: Optional[List[Entitlement]] = None
    roles: Optional[List[Role]] = None
    x509_certificates: Optional[List[X509Certificate]] = Field(None, alias="x509Certificates")

    @property
    def enterprise_user(self) -> Optional[EnterpriseUser]:
        return self.extensions.get(SCIMSchemaUri.ENTERPRISE_USER.value)
