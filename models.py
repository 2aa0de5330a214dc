import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class UserValidationError(ValueError):
    """Raised when a create request fails field validation"""

    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class UserNotFoundError(LookupError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


def _new_id():
    return str(uuid.uuid4())


class User(BaseModel):
    """A user record as stored in the Users container.

    Only the id is required on read; the other fields are validated when a
    user is created, and older records may carry a userPrincipal instead of
    an authorizationKey.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    name: Optional[str] = None
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    # Issued on creation; nothing checks it yet
    authorization_key: Optional[str] = Field(default=None, alias="authorizationKey")
    user_principal: Optional[str] = Field(default=None, alias="userPrincipal")

    @classmethod
    def from_document(cls, document):
        return cls.model_validate(document)

    def to_document(self):
        return self.model_dump(by_alias=True, exclude_none=True)


class UserInput(BaseModel):
    """Body of a create request"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, validate_default=True)
    email_address: Optional[str] = Field(
        default=None, alias="emailAddress", validate_default=True
    )
    user_principal: Optional[str] = Field(default=None, alias="userPrincipal")

    @field_validator("name", "email_address")
    @classmethod
    def not_null_or_empty(cls, value, info):
        if value is None or not value.strip():
            alias = cls.model_fields[info.field_name].alias or info.field_name
            raise ValueError(f"{alias} is null or empty")
        return value

    @field_validator("user_principal")
    @classmethod
    def blank_principal_is_none(cls, value):
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def parse(cls, data):
        """Validate a decoded JSON body, raising UserValidationError on failure"""
        if not isinstance(data, dict):
            raise UserValidationError(["request body must be a JSON object"])

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise UserValidationError(
                _error_message(error) for error in e.errors()
            ) from e

    def to_user(self):
        return User(
            id=_new_id(),
            authorization_key=_new_id(),
            name=self.name,
            email_address=self.email_address,
            user_principal=self.user_principal,
        )


def _error_message(error):
    # Our own validators raise ValueError; pydantic prefixes those with "Value error, "
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}"
