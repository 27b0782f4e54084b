from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR


class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class InternalServerError(HTTPException):
    """500 whose `error` field carries the underlying cause in development."""
    def __init__(self, detail: str = "Internal server error", error: str = None):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
        self.error = error

class ValidationError(BadRequest):
    def __init__(self, detail: str = "Validation error"):
        super().__init__(detail=detail)

class MissingRoleError(ValidationError):
    def __init__(self):
        super().__init__(detail="Role is required")

class MissingTranscriptError(ValidationError):
    def __init__(self):
        super().__init__(detail="Interview transcript is required")

class MissingResumeFileError(ValidationError):
    def __init__(self):
        super().__init__(detail="No PDF file uploaded")

class UnsupportedFileType(ValidationError):
    def __init__(self, content_type: str = None):
        super().__init__(detail="Only PDF files are allowed")
        self.content_type = content_type

class FileTooLarge(ValidationError):
    def __init__(self, max_bytes: int):
        super().__init__(detail=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.")

class InsufficientResumeText(ValidationError):
    def __init__(self):
        super().__init__(
            detail="Could not extract sufficient text from PDF. Please ensure the PDF contains readable text."
        )
