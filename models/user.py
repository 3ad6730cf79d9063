import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


class RegisterRequest(BaseModel):
    """Body of POST /api/users/register. Accepts camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str
    password: str
    first_name: str
    last_name: str

    @field_validator("email", "password", "first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        if EMAIL_PATTERN.match(value) is None:
            raise ValueError("must be a well-formed email address")
        return value


class UserResponse(BaseModel):
    """Public view of a user. The password is never part of it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime
