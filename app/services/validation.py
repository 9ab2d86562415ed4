from typing import Any, Iterable, Mapping

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.schemas.student_schemas import StudentBaseSchema

FIELD_LABELS = {
    "name": "Name",
    "rollNumber": "Roll number",
    "email": "Email",
    "mobile": "Mobile number",
}

FIELD_MESSAGES = {
    "name": "Name must be at least 2 characters",
    "rollNumber": "Roll number must be at least 2 characters",
    "email": "Please enter a valid email address",
    "mobile": "Mobile number must be at least 10 characters",
}


def _describe_error(error: Mapping[str, Any]) -> str:
    # FastAPI prefixes body errors with "body"
    loc = [part for part in error.get("loc", ()) if part != "body"]
    error_type = error.get("type")

    if error_type == "json_invalid":
        return "Request body is not valid JSON"
    if not loc or error_type == "model_type":
        return "Request body must be a JSON object"

    field = str(loc[0])
    label = FIELD_LABELS.get(field, field)

    if error_type == "missing":
        message = f"{label} is required"
    elif error_type == "string_type":
        message = f"{label} must be a string"
    else:
        message = FIELD_MESSAGES.get(field, error.get("msg", "Invalid value"))
    return f'{message} at "{field}"'


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Join every field violation into one human readable message."""
    details = []
    for error in errors:
        detail = _describe_error(error)
        if detail not in details:
            details.append(detail)
    return "Validation error: " + "; ".join(details)


def validate_student_payload(
    payload: Any, schema: type[StudentBaseSchema] = StudentBaseSchema
) -> StudentBaseSchema:
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc
