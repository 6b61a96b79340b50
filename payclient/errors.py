"""Exceptions raised by the payment client."""


class PaymentClientError(Exception):
    """Base class for all errors raised locally by the client."""


class InvalidCredentials(PaymentClientError, TypeError):
    """An API key argument was explicitly None or not a string."""


class AuthenticationError(PaymentClientError):
    """No API key was passed and none is configured."""


class ImmutableAssignment(PaymentClientError, AttributeError):
    """A protected composite field was assigned wholesale."""


class AttributeNotFound(PaymentClientError, AttributeError):
    """A field was neither loaded from the API nor assigned locally."""

    def __init__(self, name: str, type_name: str, available=None):
        self.name = name
        self.type_name = type_name
        self.available = sorted(available or [])
        message = f"'{type_name}' object has no attribute '{name}'"
        if self.available:
            message += f" (available fields: {', '.join(self.available)})"
        super().__init__(message)


class InvalidRequestError(PaymentClientError, ValueError):
    """A request could not be built, e.g. a resource URL without an id."""
