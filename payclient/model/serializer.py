"""
Change Serializer - Builds update parameters from a record's changes

Only fields assigned since the last load are sent:
- Assigned records are sent as full snapshots
- Records changed in place are sent as their own diff, recursively
- Arrays of records are sent as index-keyed mappings ("0", "1", ...)
- None and empty arrays are sent as "" so the server unsets the field
"""

import logging
from typing import Any, Dict, List, Optional

from payclient.model.record import PaymentObject

logger = logging.getLogger(__name__)

# Sent for a field whose value was cleared; the server unsets it
UNSET = ""


def serialize_params(record: PaymentObject) -> Dict[str, Any]:
    """
    Serialize the changes of a record into update parameters

    Args:
        record: Record, possibly holding nested records and arrays

    Returns:
        Mapping containing only changed fields, plus any fields the record
        always sends (see ``_extend_params``)

    Raises:
        ValueError: If an array was shortened in place
    """
    update = record._extend_params(_serialize_changes(record))
    logger.debug(f"Serialized {len(update)} changed fields for {type(record).__name__}")
    return update


def _serialize_changes(record: PaymentObject) -> Dict[str, Any]:
    update = {}

    for name, value in record._values.items():
        if name in record._unsaved:
            update[name] = _serialize_assigned(value)

        elif isinstance(value, PaymentObject):
            if value._saved_separately:
                continue
            nested = _serialize_changes(value)
            if nested:
                update[name] = nested

        elif isinstance(value, list):
            original = record._original_values.get(name)
            items = _serialize_array_changes(name, value, original)
            if items:
                update[name] = items

    return update


def _serialize_assigned(value: Any) -> Any:
    """Serialize a value the caller assigned directly."""
    if value is None:
        return UNSET

    if isinstance(value, PaymentObject):
        return _snapshot(value)

    if isinstance(value, list):
        if not value:
            return UNSET
        if not _holds_objects(value):
            return list(value)

        update = {}
        for index, item in enumerate(value):
            if isinstance(item, PaymentObject) and not item._fresh:
                # Loaded earlier and only edited: send just its own changes
                params = _serialize_changes(item)
                if params:
                    update[str(index)] = params
            else:
                update[str(index)] = _snapshot_value(item)
        return update

    return value


def _serialize_array_changes(name: str, items: List[Any], original: Optional[List[Any]]) -> Any:
    """Serialize an array that was not reassigned but may have been edited."""
    if original is not None and len(original) > len(items):
        raise ValueError(
            f"You cannot delete an item from '{name}' in place; "
            f"set a new array instead"
        )

    if not _holds_objects(items):
        if original is not None and items != original:
            return list(items)
        return None

    update = {}
    for index, item in enumerate(items):
        if isinstance(item, PaymentObject):
            if item._fresh:
                update[str(index)] = _snapshot(item)
            elif not item._saved_separately:
                params = _serialize_changes(item)
                if params:
                    update[str(index)] = params
        elif isinstance(item, dict):
            update[str(index)] = _snapshot_value(item)
    return update


def _snapshot(record: PaymentObject) -> Dict[str, Any]:
    """Full current field values of a record, ignoring change tracking."""
    return {name: _snapshot_value(value) for name, value in record._values.items()}


def _snapshot_value(value: Any) -> Any:
    if value is None:
        return UNSET

    if isinstance(value, PaymentObject):
        return _snapshot(value)

    if isinstance(value, dict):
        return {name: _snapshot_value(item) for name, item in value.items()}

    if isinstance(value, list):
        if not _holds_objects(value):
            return list(value)
        return {str(index): _snapshot_value(item) for index, item in enumerate(value)}

    return value


def _holds_objects(items: List[Any]) -> bool:
    return any(isinstance(item, (PaymentObject, dict)) for item in items)
