from typing import Optional
from scimv2.schemas.error import ErrorResponse


class SCIMError(Exception):
    """Base class for every error raised by the codec and the validator.

    ``rule`` names the check that failed and ``attribute`` is the SCIM
    attribute path of the offending value (``emails[1].type``). Each error maps
    onto a SCIM error response through :meth:`to_error_response`.
    """

    scim_type: Optional[str] = "invalidValue"
    status_code: int = 400

    def __init__(
        self,
        detail: str,
        rule: Optional[str] = None,
        attribute: Optional[str] = None,
        scim_type: Optional[str] = None,
    ):
        self.detail = detail
        self.rule = rule
        self.attribute = attribute
        if scim_type is not None:
            self.scim_type = scim_type
        super().__init__(self._format())

    def _format(self) -> str:
        if self.attribute:
            return f"{self.attribute}: {self.detail}"
        return self.detail

    def to_error_response(self) -> ErrorResponse:
        return ErrorResponse(
            status=self.status_code,
            detail=str(self),
            scim_type=self.scim_type,
        )


class SCIMSyntaxError(SCIMError):
    scim_type = "invalidSyntax"

    def __init__(self, detail: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(detail, rule="syntax")


class SchemaError(SCIMError):
    scim_type = "invalidSyntax"


class FieldError(SCIMError):
    pass


class TypeMismatchError(SCIMError):
    pass
