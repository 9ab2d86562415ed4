from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.db.database import get_store
from app.db.memory_store import StudentStore
from app.schemas.student_schemas import (
    MessageResponse,
    StudentListResponse,
    StudentResponse,
)
from app.services import student_service

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=StudentListResponse)
def list_students(store: StudentStore = Depends(get_store)):
    return student_service.list_students(store)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, store: StudentStore = Depends(get_store)):
    return student_service.get_student(store, student_id)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: Any = Body(None),
    store: StudentStore = Depends(get_store),
):
    """
    Creates a student.

    Handled inside service:
    - body validated (every violated field reported)
    - roll number checked before email for conflicts
    """
    return student_service.create_student(store, payload)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str,
    payload: Any = Body(None),
    store: StudentStore = Depends(get_store),
):
    """Full replace; all four fields are required."""
    return student_service.update_student(store, student_id, payload)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(student_id: str, store: StudentStore = Depends(get_store)):
    return student_service.delete_student(store, student_id)
