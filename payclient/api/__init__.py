"""
API Module - HTTP transport for the payment API

Provides:
- APIRequestor: authenticated requests, each over a short-lived requests.Session
- Bracket-notation form encoding for nested parameters
"""

from .encoding import encode_params, flatten_params
from .requestor import APIRequestor

__all__ = [
    "APIRequestor",
    "encode_params",
    "flatten_params",
]
