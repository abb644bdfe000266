"""Exception types shared across the gateway."""


class GatewayError(Exception):
    """Base class for errors raised by the gateway itself."""


class BadRequest(GatewayError):
    """A required body or query field is missing or malformed.

    Rendered as a 400 envelope. Never logged as a server fault.
    """

    status = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ServiceInitError(GatewayError):
    """A collaborator client could not be constructed at startup."""

    def __init__(self, service: str, cause: Exception) -> None:
        super().__init__(f"{service} initialization failed: {cause}")
        self.service = service
        self.cause = cause
