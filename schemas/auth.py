from pydantic import BaseModel, ConfigDict, Field, SecretStr, AfterValidator
from pydantic.alias_generators import to_camel
import re
from typing import Annotated

PASSWORD_COMPLEXITY_REGEX = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[!@#$%^&])\S+")


def validate_password(v: SecretStr) -> SecretStr:
    password = v.get_secret_value()

    if len(password) < 8:
        raise ValueError("Password must be longer than 8 characters")

    if len(password) > 72:
        raise ValueError("Password must be less than 72 characters")

    if password.startswith(" ") or password.endswith(" "):
        raise ValueError("Password must not start or end with empty spaces")

    if not PASSWORD_COMPLEXITY_REGEX.search(password):
        raise ValueError(
            "Password must contain one upper case, lower case, number and special character"
        )

    return v


ValidatePassword = Annotated[SecretStr, AfterValidator(validate_password)]


class RegisterIn(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    password: ValidatePassword


class LoginIn(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: SecretStr


class TokenOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    auth_token: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
