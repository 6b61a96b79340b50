"""
Resources - Payment API endpoints as records

Importing this package registers every resource class with the object
registry, so responses materialize into typed records.
"""

from .account import Account
from .bank_account import BankAccount
from .base import NOT_PROVIDED, APIResource, resolve_api_key
from .list_object import ListObject

__all__ = [
    "APIResource",
    "Account",
    "BankAccount",
    "ListObject",
    "NOT_PROVIDED",
    "resolve_api_key",
]
