"""
Object Model - Change-tracking records for API responses

Provides:
- PaymentObject: attribute-style access with per-field change tracking
- Nested materialization keyed by the API's ``object`` discriminator
- serialize_params: minimal update parameters from tracked changes
"""

from .record import PaymentObject, convert_to_object
from .registry import ObjectRegistry, object_registry
from .serializer import UNSET, serialize_params

__all__ = [
    "PaymentObject",
    "convert_to_object",
    "ObjectRegistry",
    "object_registry",
    "serialize_params",
    "UNSET",
]
