from fastapi import status


class StudentRecordsError(Exception):
    """Base error for every failure the API reports to its caller.

    Each subclass fixes the HTTP status it is rendered with; the message is
    sent back verbatim in the response envelope.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(StudentRecordsError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(StudentRecordsError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StudentRecordsError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StudentRecordsError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(StudentRecordsError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
