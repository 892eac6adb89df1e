from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, validate_email
from pydantic.alias_generators import to_camel


def _check_email_format(value: str) -> str:
    # Emails are lookup keys and are stored exactly as sent; validate_email only checks the shape
    _, normalized = validate_email(value)
    if normalized.casefold() != value.casefold():
        raise ValueError("value is not a plain email address")
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_format)]


class ApiModel(BaseModel):
    """Response base: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiInput(BaseModel):
    """Request base: same aliasing, unknown fields rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class ResponseMessage(ApiModel):
    success: bool
    message: str
