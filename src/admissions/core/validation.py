"""
Request Validation

Turns raw JSON bodies into typed request schemas and pydantic errors into an
ordered list of field-specific messages.

Every request schema subclasses RequestSchema and declares `error_messages`:
a mapping of field name to {error kind: message}. Kinds are the short names
in ERROR_KINDS ("required", "min", "max", "only", "pattern", "invalid",
"type"). Validation always runs over the whole object so the caller gets
every problem at once.
"""

from collections.abc import Callable, Coroutine
from datetime import date
from typing import Any, ClassVar, TypeVar

from fastapi import Request
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from admissions.core.exceptions import ValidationFailedError

MINIMUM_AGE = 16

BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"

# pydantic error type -> message kind
ERROR_KINDS: dict[str, str] = {
    "missing": "required",
    "string_too_short": "min",
    "string_too_long": "max",
    "greater_than_equal": "min",
    "less_than_equal": "max",
    "enum": "only",
    "literal_error": "only",
    "string_pattern_mismatch": "pattern",
    "value_error": "invalid",
    "extra_forbidden": "unknown",
    "string_type": "type",
    "int_type": "type",
    "int_parsing": "type",
    "int_from_float": "type",
    "date_type": "type",
    "date_parsing": "type",
    "date_from_datetime_parsing": "type",
    "date_from_datetime_inexact": "type",
}

SchemaT = TypeVar("SchemaT", bound="RequestSchema")


class RequestSchema(BaseModel):
    """Base class for request bodies: trimmed strings, camelCase keys, no unknown keys."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    error_messages: ClassVar[dict[str, dict[str, str]]] = {}


def _field_lookup(schema: type[BaseModel]) -> dict[str, str]:
    """Map both the field name and its alias to the field name."""
    lookup: dict[str, str] = {}
    for name, field in schema.model_fields.items():
        lookup[name] = name
        if field.alias:
            lookup[field.alias] = name
    return lookup


def collect_errors(schema: type[RequestSchema], exc: ValidationError) -> list[str]:
    """
    Translate a pydantic ValidationError into ordered field messages.

    Args:
        schema: The schema that raised the error
        exc: The validation error

    Returns:
        One message per error, in the order pydantic reported them
    """
    lookup = _field_lookup(schema)
    messages: list[str] = []

    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else ""
        error_type = error["type"]
        kind = ERROR_KINDS.get(error_type)

        if kind == "unknown":
            messages.append(f'"{key}" is not allowed')
            continue

        field_name = lookup.get(key, key)
        field_messages = schema.error_messages.get(field_name, {})

        if kind and kind in field_messages:
            messages.append(field_messages[kind])
        elif kind is None:
            # PydanticCustomError raised by a field validator carries its own message
            messages.append(error["msg"])
        elif key:
            messages.append(f'"{key}": {error["msg"]}')
        else:
            messages.append(error["msg"])

    return messages


def validate_payload(schema: type[SchemaT], raw: Any) -> SchemaT:
    """
    Validate a raw decoded JSON body against a request schema.

    Raises:
        ValidationFailedError: With every field message, if validation fails
    """
    if not isinstance(raw, dict):
        raise ValidationFailedError([BODY_NOT_OBJECT_MESSAGE])
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        raise ValidationFailedError(collect_errors(schema, e)) from e


def validated_body(
    schema: type[SchemaT],
) -> Callable[[Request], Coroutine[Any, Any, SchemaT]]:
    """
    Build a FastAPI dependency that reads the JSON body and validates it.

    Usage:
        @router.post("/items")
        async def create_item(data: ItemIn = Depends(validated_body(ItemIn))):
            ...
    """

    async def dependency(request: Request) -> SchemaT:
        try:
            raw = await request.json()
        except ValueError as e:
            raise ValidationFailedError([BODY_NOT_OBJECT_MESSAGE]) from e
        return validate_payload(schema, raw)

    return dependency


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Age in whole years, counting a birthday only once its month and day are reached."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def check_date_of_birth(value: date) -> date:
    """
    Reject future dates and applicants younger than MINIMUM_AGE.

    Meant to be called from a pydantic field validator.
    """
    today = date.today()
    if value > today:
        raise PydanticCustomError("date_future", "Date of birth cannot be in the future")
    if calculate_age(value, today) < MINIMUM_AGE:
        raise PydanticCustomError(
            "age_minimum", "User must be at least {minimum} years old", {"minimum": MINIMUM_AGE}
        )
    return value
