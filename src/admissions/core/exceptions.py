"""
Service Errors

Domain errors raised by services and translated to the response envelope
by the routers. Each carries a human-readable message, a stable error code
and the HTTP status it maps to.
"""


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 400,
        errors: list[str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.errors = errors
        super().__init__(message)


class ValidationFailedError(ServiceError):
    """Raised when a request body fails validation. Carries every field message."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message="Validation error",
            error_code="VALIDATION_ERROR",
            status_code=400,
            errors=errors,
        )


class UnauthenticatedError(ServiceError):
    """Raised when no valid access token accompanies a protected request."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            error_code="UNAUTHENTICATED",
            status_code=401,
        )


class InvalidCredentialsError(ServiceError):
    """Raised on failed login. Does not say which part was wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            error_code="INVALID_CREDENTIALS",
            status_code=401,
        )


class DuplicateIdentityError(ServiceError):
    """Raised when registering an email that already has an account."""

    def __init__(self):
        super().__init__(
            message="User with this email already exists",
            error_code="DUPLICATE_IDENTITY",
            status_code=409,
        )


class DuplicateNationalIdError(ServiceError):
    """Raised when a CNIC is already used by another applicant's profile."""

    def __init__(self):
        super().__init__(
            message="A profile with this CNIC already exists",
            error_code="DUPLICATE_CNIC",
            status_code=409,
        )


class NotFoundError(ServiceError):
    """Raised when the requested record does not exist for this caller."""

    def __init__(self, message: str = "Not found"):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
        )


class InvalidRoleError(ServiceError):
    """Raised when a role path parameter is not a known role."""

    def __init__(self):
        super().__init__(
            message="Invalid role specified",
            error_code="INVALID_ROLE",
            status_code=400,
        )
