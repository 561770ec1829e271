"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""

    def __init__(self, message: str = "Unauthorized"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class ForbiddenException(AppException):
    """Forbidden access exception."""

    def __init__(self, message: str = "Forbidden"):
        """Initialize with 403 status code."""
        super().__init__(message, status_code=403)


class ConflictException(AppException):
    """Conflict exception."""

    def __init__(self, message: str = "Conflict"):
        """Initialize with 409 status code."""
        super().__init__(message, status_code=409)


class ValidationException(AppException):
    """Validation error exception."""

    def __init__(self, message: str = "Validation error"):
        """Initialize with 422 status code."""
        super().__init__(message, status_code=422)


class StorageException(AppException):
    """The storage backend failed (network, permission, constraint)."""

    def __init__(self, message: str = "Storage is unavailable, try again later"):
        """Initialize with 503 status code."""
        super().__init__(message, status_code=503)


# Scheduling


class SlotConflictException(ConflictException):
    """Requested time range intersects another appointment or a blocked period."""

    def __init__(self, message: str = "Time slot is not available"):
        super().__init__(message)


class ImmutableRecordException(ConflictException):
    """Completed appointments can only be deleted."""

    def __init__(self, message: str = "Completed appointments cannot be edited"):
        super().__init__(message)


class AlreadyCompletedException(ConflictException):
    """Appointment was already completed."""

    def __init__(self, message: str = "Appointment is already completed"):
        super().__init__(message)


class ServiceNotFoundException(NotFoundException):
    """Referenced catalog service does not exist."""

    def __init__(self, message: str = "Service not found"):
        super().__init__(message)


class InvalidPriceException(ValidationException):
    """Service has no positive price to charge."""

    def __init__(self, message: str = "Service price is invalid"):
        super().__init__(message)
