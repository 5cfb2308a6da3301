"""Error taxonomy shared by services and routes.

Each error carries the HTTP status it maps to. Services raise these; routes
never recover from them locally.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.message = message


class InputValidationError(ServiceError):
    """Missing or empty required field, oversized text or upload."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Missing, malformed, expired or revoked identity token."""

    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class UpstreamError(ServiceError):
    """External backend unreachable, over quota, or returned a malformed response."""


# Name used by the text analysis contract
UpstreamUnavailable = UpstreamError


class PersistenceError(ServiceError):
    """Document store read or write failed."""
