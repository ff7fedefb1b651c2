"""Request payload validation producing field-level errors"""
from typing import Any, Iterable, List, Optional, Tuple
from pydantic import ValidationError
from app.models.schemas import FieldError, UserPayload

_REQUEST_SOURCES = {"body", "query", "path", "header", "cookie"}


def to_field_errors(errors: Iterable[dict]) -> List[FieldError]:
    """Convert pydantic/FastAPI error dicts into FieldError entries"""
    field_errors = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if len(loc) > 1 and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        field_errors.append(FieldError(field=field, message=error.get("msg", "Invalid value")))
    return field_errors


def validate_user_payload(data: Any) -> Tuple[Optional[UserPayload], List[FieldError]]:
    """
    Validate a raw request body as a user payload.

    Args:
        data: Decoded JSON body

    Returns:
        (payload, []) when valid, (None, errors) otherwise
    """
    if not isinstance(data, dict):
        return None, [FieldError(field="body", message="Request body must be a JSON object")]

    try:
        return UserPayload.model_validate(data), []
    except ValidationError as e:
        return None, to_field_errors(e.errors())
