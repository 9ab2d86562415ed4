from pydantic import BaseModel, Field


class Student(BaseModel):
    """A stored student record.

    Records are frozen: the store swaps in a new instance on update, so a
    record handed to a caller never changes underneath it.
    """

    id: int
    name: str
    roll_number: str = Field(..., alias="rollNumber")
    email: str
    mobile: str

    class Config:
        frozen = True
        populate_by_name = True
