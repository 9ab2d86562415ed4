import logging
import re
from functools import wraps
from typing import Any

from app.core.errors import (
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
    StudentRecordsError,
)
from app.db.memory_store import StudentStore
from app.schemas.student_schemas import (
    MessageResponse,
    StudentCreateSchema,
    StudentListResponse,
    StudentResponse,
    StudentUpdateSchema,
)
from app.services.validation import validate_student_payload

logger = logging.getLogger(__name__)

# ASCII digits only; 18 digits keeps int() well inside its conversion limit
_ID_PATTERN = re.compile(r"-?[0-9]{1,18}")


def _operation(action: str):
    """Turn any unexpected fault inside a handler into an InternalError."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except StudentRecordsError:
                raise
            except Exception as exc:
                logger.exception("Unexpected error while trying to %s", action)
                raise InternalError(f"Failed to {action}") from exc

        return wrapper

    return decorator


def parse_student_id(raw_id: Any) -> int:
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if not isinstance(raw_id, str) or not _ID_PATTERN.fullmatch(raw_id):
        raise BadRequestError("Invalid student ID format")
    return int(raw_id)


def _get_existing(store: StudentStore, student_id: int):
    student = store.get(student_id)
    if not student:
        raise NotFoundError("Student not found")
    return student


# -------------------------
# LIST + GET
# -------------------------
@_operation("retrieve students")
def list_students(store: StudentStore) -> StudentListResponse:
    return StudentListResponse(
        success=True,
        message="Students retrieved successfully",
        data=store.list_all(),
    )


@_operation("retrieve student")
def get_student(store: StudentStore, raw_id: Any) -> StudentResponse:
    student_id = parse_student_id(raw_id)
    student = _get_existing(store, student_id)
    return StudentResponse(
        success=True, message="Student retrieved successfully", data=student
    )


# -------------------------
# CREATE
# -------------------------
@_operation("create student")
def create_student(store: StudentStore, payload: Any) -> StudentResponse:
    fields = validate_student_payload(payload, StudentCreateSchema)

    # uniqueness check and insert must not interleave with another writer
    with store.transaction():
        if store.get_by_roll_number(fields.roll_number):
            raise ConflictError(
                f"Student with roll number {fields.roll_number} already exists"
            )
        if store.get_by_email(fields.email):
            raise ConflictError(f"Student with email {fields.email} already exists")

        student = store.create(fields)

    logger.info("Created student id=%s roll_number=%s", student.id, student.roll_number)
    return StudentResponse(
        success=True, message="Student added successfully", data=student
    )


# -------------------------
# UPDATE
# -------------------------
@_operation("update student")
def update_student(store: StudentStore, raw_id: Any, payload: Any) -> StudentResponse:
    student_id = parse_student_id(raw_id)
    fields = validate_student_payload(payload, StudentUpdateSchema)

    with store.transaction():
        _get_existing(store, student_id)

        with_roll_number = store.get_by_roll_number(fields.roll_number)
        if with_roll_number and with_roll_number.id != student_id:
            raise ConflictError(
                f"Roll number {fields.roll_number} is already assigned to another student"
            )

        with_email = store.get_by_email(fields.email)
        if with_email and with_email.id != student_id:
            raise ConflictError(
                f"Email {fields.email} is already assigned to another student"
            )

        student = store.replace(student_id, fields)

    logger.info("Updated student id=%s", student.id)
    return StudentResponse(
        success=True, message="Student updated successfully", data=student
    )


# -------------------------
# DELETE
# -------------------------
@_operation("delete student")
def delete_student(store: StudentStore, raw_id: Any) -> MessageResponse:
    student_id = parse_student_id(raw_id)

    with store.transaction():
        _get_existing(store, student_id)
        store.delete(student_id)

    logger.info("Deleted student id=%s", student_id)
    return MessageResponse(success=True, message="Student deleted successfully")
