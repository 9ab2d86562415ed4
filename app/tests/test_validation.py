import pytest

from app.core.errors import ValidationError
from app.services.validation import validate_student_payload


def test_valid_payload_is_normalized(john):
    john["name"] = "  John Doe  "

    fields = validate_student_payload(john)

    assert fields.name == "John Doe"
    assert fields.roll_number == "R1001"
    assert fields.email == "john.doe@example.com"
    assert fields.mobile == "1234567890"


def test_unknown_fields_are_ignored(john):
    john["id"] = 99

    fields = validate_student_payload(john)

    assert "id" not in fields.model_dump()


def test_every_violation_is_reported():
    payload = {"name": "J", "rollNumber": "R", "email": "not-an-email", "mobile": "123"}

    with pytest.raises(ValidationError) as exc_info:
        validate_student_payload(payload)

    message = exc_info.value.message
    assert message.startswith("Validation error: ")
    assert 'Name must be at least 2 characters at "name"' in message
    assert 'Roll number must be at least 2 characters at "rollNumber"' in message
    assert 'Please enter a valid email address at "email"' in message
    assert 'Mobile number must be at least 10 characters at "mobile"' in message
    assert exc_info.value.status_code == 400


def test_missing_fields_are_required(john):
    del john["mobile"]
    del john["email"]

    with pytest.raises(ValidationError) as exc_info:
        validate_student_payload(john)

    assert 'Email is required at "email"' in exc_info.value.message
    assert 'Mobile number is required at "mobile"' in exc_info.value.message


def test_whitespace_only_name_is_rejected(john):
    john["name"] = "   "

    with pytest.raises(ValidationError) as exc_info:
        validate_student_payload(john)

    assert '"name"' in exc_info.value.message


def test_non_string_values_are_rejected(john):
    john["mobile"] = 1234567890

    with pytest.raises(ValidationError) as exc_info:
        validate_student_payload(john)

    assert 'Mobile number must be a string at "mobile"' in exc_info.value.message


@pytest.mark.parametrize("payload", [None, [], "student"])
def test_body_must_be_an_object(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_student_payload(payload)

    assert exc_info.value.message == "Validation error: Request body must be a JSON object"
