"""Custom exception classes for the webhook gateway.

The ``message`` of each error is the exact string returned to the caller in the
``error`` field, so messages must never carry secrets or payload content.
"""


class HookgateError(Exception):
    """Base exception for hookgate."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MalformedBody(HookgateError):
    """Request body is not a JSON object."""

    def __init__(self, message: str = "Invalid JSON"):
        super().__init__("MALFORMED_BODY", message, status_code=400)


class MissingChallengeMaterial(HookgateError):
    """URL validation event without a plainToken, or no secret to answer it."""

    def __init__(self, message: str = "Missing plainToken/secret"):
        super().__init__("MISSING_CHALLENGE_MATERIAL", message, status_code=400)


class AuthenticationError(HookgateError):
    """Delivery could not be authenticated."""

    def __init__(self, code: str, message: str):
        super().__init__(code, message, status_code=401)


class StaleTimestamp(AuthenticationError):
    def __init__(self, message: str = "Stale timestamp"):
        super().__init__("STALE_TIMESTAMP", message)


class InvalidSignature(AuthenticationError):
    def __init__(self, message: str = "Bad signature"):
        super().__init__("INVALID_SIGNATURE", message)


class MissingSignature(AuthenticationError):
    """Unsigned delivery while signatures are required."""

    def __init__(self, message: str = "Missing signature"):
        super().__init__("MISSING_SIGNATURE", message)


class MissingDestination(HookgateError):
    """No downstream URL configured."""

    def __init__(self, message: str = "Missing GAS_URL"):
        super().__init__("MISSING_DESTINATION", message, status_code=500)


class DownstreamUnavailable(HookgateError):
    """The forwarding request itself failed (connection, protocol)."""

    def __init__(self, message: str = "Downstream unavailable", status_code: int = 502):
        super().__init__("DOWNSTREAM_UNAVAILABLE", message, status_code=status_code)


class DownstreamTimeout(DownstreamUnavailable):
    def __init__(self, message: str = "Downstream timeout"):
        super().__init__(message, status_code=504)
        self.code = "DOWNSTREAM_TIMEOUT"
