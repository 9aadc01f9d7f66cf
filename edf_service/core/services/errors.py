"""Service error taxonomy mapped onto HTTP status codes."""


class ServiceError(Exception):
    """Base class for service errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InvalidFileURLError(ValidationError):
    """Raised when a file URL is blank, malformed or uses a rejected scheme."""


class FileProcessingError(ServiceError):
    """Raised when an EDF file cannot be retrieved or decoded."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class RetrievalError(FileProcessingError):
    """Raised when a remote EDF file cannot be fetched."""


class StorageError(ServiceError):
    """Raised when metadata cannot be persisted."""

    def __init__(self, message: str = "Database error"):
        super().__init__(message, status_code=500)
