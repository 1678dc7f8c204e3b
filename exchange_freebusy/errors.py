"""Typed failures raised by the free/busy request/response translator.

Every error carries a ``status_code`` (HTTP-style class of the failure) and
a ``retryable`` flag so callers can tell transient transport trouble from
deterministic decoding or configuration problems.
"""


class FreeBusyError(Exception):
    """Base class for all errors raised by exchange_freebusy."""

    status_code: int = 500
    retryable: bool = False


class TimezoneResolutionError(FreeBusyError):
    """Raised when a timezone name cannot be resolved to rule data."""

    def __init__(self, time_zone: str, cause: BaseException | None = None):
        self.time_zone = time_zone
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not resolve timezone {time_zone!r}{detail}")


class UnknownItemTypeError(FreeBusyError):
    """Raised when a calendar item tag has no registered constructor."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No decoder registered for calendar item <{tag}>")


class MalformedResponseError(FreeBusyError):
    """Raised when the response document lacks an expected node or is not XML."""

    status_code = 502


class InvalidStatusCodeError(MalformedResponseError):
    """Raised when MergedFreeBusy contains a character outside 0-4."""

    def __init__(self, code: str, position: int):
        self.code = code
        self.position = position
        super().__init__(
            f"Unrecognized free/busy status {code!r} at position {position}"
        )


class ServiceError(FreeBusyError):
    """Raised when Exchange answers with a SOAP fault or an error ResponseMessage."""

    def __init__(self, response_code: str, message: str = ""):
        self.response_code = response_code
        self.message = message
        super().__init__(f"{response_code}: {message}" if message else response_code)


class TransportError(FreeBusyError):
    """Raised when the request could not be delivered or answered."""

    status_code = 503
    retryable = True


class SessionExpiredError(TransportError):
    """Raised when the EWS session has expired (HTTP 401/440)."""

    status_code = 401


class RegistryFrozenError(FreeBusyError):
    """Raised when registering into an item registry that has been frozen."""
