"""
payclient - Client for the payment API's account resources

Supports:
- Account retrieval, update, rejection and deauthorization
- Nested external (bank) account collections
- Change tracking: only fields assigned since the last load are sent
- Bracket-notation form encoding for nested and array parameters
"""

from .errors import (
    AttributeNotFound,
    AuthenticationError,
    ImmutableAssignment,
    InvalidCredentials,
    InvalidRequestError,
    PaymentClientError,
)
from .model import PaymentObject, convert_to_object, serialize_params
from .resources import Account, APIResource, BankAccount, ListObject

__version__ = "0.1.0"

__all__ = [
    "Account",
    "APIResource",
    "BankAccount",
    "ListObject",
    "PaymentObject",
    "convert_to_object",
    "serialize_params",
    "PaymentClientError",
    "InvalidCredentials",
    "AuthenticationError",
    "ImmutableAssignment",
    "AttributeNotFound",
    "InvalidRequestError",
]
