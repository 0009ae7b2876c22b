"""Application error hierarchy.

Every error carries the HTTP status it maps to and a machine-readable code;
the handlers in ``screenlist.main`` render them as ``{"error", "code"}``.
"""


class AppError(Exception):
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed required field."""
    status_code = 400
    code = "validation_error"


class AuthError(AppError):
    """Missing, malformed or expired credential. The caller is never told which."""
    status_code = 401
    code = "unauthorized"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class NotFoundError(AppError):
    """Target row absent, or owned by someone other than the caller."""
    status_code = 404
    code = "not_found"


class ConflictError(AppError):
    status_code = 409
    code = "conflict"


class StoreUnavailable(AppError):
    status_code = 500
    code = "store_unavailable"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
