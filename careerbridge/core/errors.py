"""Error kinds surfaced by the data service.

Every failure raised by a repo or the blob store is exactly one of these, so the
API layer can branch on the cause instead of parsing messages.
"""


class CareerBridgeError(Exception):
    status_code = 500
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CareerBridgeError):
    """Missing or malformed required input."""

    status_code = 400
    kind = "validation_error"


class ConflictError(CareerBridgeError):
    """Uniqueness violation."""

    status_code = 409
    kind = "conflict"


class NotFoundError(CareerBridgeError):
    """Referenced entity is absent."""

    status_code = 404
    kind = "not_found"


class AuthError(CareerBridgeError):
    """Credential mismatch."""

    status_code = 401
    kind = "auth_error"


class PermissionDeniedError(AuthError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 403


class UploadError(CareerBridgeError):
    """I/O failure while ingesting or reading a blob."""

    status_code = 500
    kind = "upload_error"


class UploadTooLargeError(UploadError):
    status_code = 413
