from pydantic import BaseModel, EmailStr, Field
from typing import List

from app.models.student_models import Student


class StudentBaseSchema(BaseModel):
    name: str = Field(..., min_length=2)
    roll_number: str = Field(..., alias="rollNumber", min_length=2)
    email: EmailStr
    mobile: str = Field(..., min_length=10)

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


# create and update share one schema: update is a full replace
class StudentCreateSchema(StudentBaseSchema):
    pass


class StudentUpdateSchema(StudentBaseSchema):
    pass


class MessageResponse(BaseModel):
    success: bool
    message: str


class StudentResponse(MessageResponse):
    data: Student


class StudentListResponse(MessageResponse):
    data: List[Student]
