import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from app.core.errors import NotFoundError
from app.models.student_models import Student
from app.schemas.student_schemas import StudentBaseSchema

logger = logging.getLogger(__name__)


class StudentStore:
    """In-memory table of student records keyed by an assigned integer id.

    The store does not enforce uniqueness of roll number or email; callers
    check with the lookup methods while holding ``transaction()`` and only
    then mutate. Ids start at 1, only ever increase and are never reused.
    """

    def __init__(self) -> None:
        self._students: Dict[int, Student] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["StudentStore"]:
        with self._lock:
            yield self

    # -------------------------
    # READ
    # -------------------------
    def get(self, student_id: int) -> Optional[Student]:
        with self._lock:
            return self._students.get(student_id)

    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        with self._lock:
            return next(
                (s for s in self._students.values() if s.roll_number == roll_number),
                None,
            )

    def get_by_email(self, email: str) -> Optional[Student]:
        with self._lock:
            return next(
                (s for s in self._students.values() if s.email == email),
                None,
            )

    def list_all(self) -> List[Student]:
        with self._lock:
            return list(self._students.values())

    def count(self) -> int:
        with self._lock:
            return len(self._students)

    # -------------------------
    # WRITE
    # -------------------------
    def create(self, fields: StudentBaseSchema) -> Student:
        with self._lock:
            student = Student(id=self._next_id, **fields.model_dump())
            self._students[student.id] = student
            self._next_id += 1
        logger.debug("Stored student id=%s", student.id)
        return student

    def replace(self, student_id: int, fields: StudentBaseSchema) -> Student:
        with self._lock:
            if student_id not in self._students:
                raise NotFoundError(f"Student with id {student_id} not found")
            student = Student(id=student_id, **fields.model_dump())
            self._students[student_id] = student
        return student

    def delete(self, student_id: int) -> None:
        with self._lock:
            if student_id not in self._students:
                raise NotFoundError(f"Student with id {student_id} not found")
            del self._students[student_id]
