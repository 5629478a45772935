"""Exceptions raised at the service boundary.

Domain rules keep raising Protean's own exceptions (``ValidationError``,
``ObjectNotFoundError``, ``InvalidOperationError``). The classes here cover
the caller's identity and permissions, and failures of other services.
"""


class AuthenticationError(Exception):
    """The caller could not be identified: bad credentials or an unusable token."""

    def __init__(self, message: str = "Unauthorized", reason: str | None = None):
        super().__init__(message)
        self.message = message
        self.reason = reason or message


class PermissionDenied(Exception):
    """The caller is authenticated but not allowed to perform the action."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)
        self.message = message


class UpstreamError(Exception):
    """A service this one depends on failed or answered unexpectedly."""

    def __init__(self, message: str, service: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.service = service
        self.status_code = status_code
