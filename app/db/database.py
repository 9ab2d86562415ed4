import logging

from fastapi import Request

from app.db.memory_store import StudentStore
from app.schemas.student_schemas import StudentCreateSchema

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {
        "name": "John Doe",
        "rollNumber": "R1001",
        "email": "john.doe@example.com",
        "mobile": "1234567890",
    },
    {
        "name": "Jane Smith",
        "rollNumber": "R1002",
        "email": "jane.smith@example.com",
        "mobile": "9876543210",
    },
    {
        "name": "Alex Johnson",
        "rollNumber": "R1003",
        "email": "alex.johnson@example.com",
        "mobile": "5554443333",
    },
]


def seed_sample_data(store: StudentStore) -> int:
    """Insert the sample students if the store is empty. Returns how many were added."""
    with store.transaction():
        if store.count():
            return 0
        for sample in SAMPLE_STUDENTS:
            store.create(StudentCreateSchema.model_validate(sample))
    logger.info("Seeded %d sample students", len(SAMPLE_STUDENTS))
    return len(SAMPLE_STUDENTS)


# Dependency for FastAPI
def get_store(request: Request) -> StudentStore:
    return request.app.state.store
