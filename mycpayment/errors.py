"""Error types raised by the payment module."""

from __future__ import annotations

import enum


class PaymentError(Exception):
    """Base class for registered module errors.

    A registered error carries a codespace, a numeric code and a fixed
    description. An optional detail is prefixed to the description, the
    same way a wrapped error reads.
    """

    codespace = "sdk"
    code = 1
    description = "internal"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = f"{detail}: {self.description}" if detail else self.description
        super().__init__(message)


class InvalidAddressError(PaymentError):
    """An address could not be parsed."""

    code = 7
    description = "invalid address"


class UnauthorizedError(PaymentError):
    """The signer does not own the object it tries to change."""

    code = 4
    description = "unauthorized"


class KeyNotFoundError(PaymentError):
    """The requested key does not exist."""

    code = 38
    description = "key not found"


class LogicError(PaymentError):
    """An unexpected failure inside the module."""

    code = 35
    description = "internal logic error"


class InvalidRequestError(PaymentError):
    """The request itself cannot be carried out."""

    code = 18
    description = "invalid request"


class InvalidSignerError(PaymentError):
    """A parameter update was not signed by the module authority."""

    codespace = "payment"
    code = 1100
    description = "expected gov account as only signer for proposal message"


class StatusCode(enum.IntEnum):
    """Status codes reported by the query service."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16

    @property
    def label(self) -> str:
        """Camel-case name of the code, as shown in error messages."""
        if self is StatusCode.OK:
            return "OK"
        return "".join(part.capitalize() for part in self.name.split("_"))


class StatusError(Exception):
    """A query failure carrying a status code and a message.

    Two status errors are equal when their code and message are equal.
    """

    def __init__(self, code: StatusCode, message: str) -> None:
        self.code = StatusCode(code)
        self.message = message
        super().__init__(f"rpc error: code = {self.code.label} desc = {message}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))


class NotFoundError(LookupError):
    """A stored collection holds no value under the requested key."""

    def __init__(self, key: object = None) -> None:
        self.key = key
        message = "collections: not found"
        if key is not None:
            message = f"{message}: key {key!r}"
        super().__init__(message)