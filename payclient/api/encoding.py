"""Form encoding of nested request parameters using bracket notation."""
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote_plus


def flatten_params(params: Dict[str, Any], parent_key: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Flatten nested parameters into (key, value) pairs.

    Transforms:
        {"legal_entity": {"address": {"line1": "2 Three Four"}},
         "additional_owners": {"0": {"first_name": "Joe"}},
         "tags": ["a", "b"],
         "metadata": ""}
    Into:
        [("legal_entity[address][line1]", "2 Three Four"),
         ("additional_owners[0][first_name]", "Joe"),
         ("tags[]", "a"), ("tags[]", "b"),
         ("metadata", "")]
    """
    pairs = []

    for key, value in params.items():
        full_key = f"{parent_key}[{key}]" if parent_key else str(key)
        pairs.extend(_flatten_value(full_key, value))

    return pairs


def _flatten_value(key: str, value: Any) -> List[Tuple[str, str]]:
    if isinstance(value, dict):
        return flatten_params(value, key)

    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            if isinstance(item, (dict, list, tuple)):
                pairs.extend(_flatten_value(f"{key}[{index}]", item))
            else:
                pairs.append((f"{key}[]", _encode_scalar(item)))
        return pairs

    return [(key, _encode_scalar(value))]


def _encode_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: Optional[Dict[str, Any]]) -> str:
    """Encode parameters as an ``application/x-www-form-urlencoded`` string."""
    if not params:
        return ""

    return "&".join(
        f"{quote_plus(key, safe='[]')}={quote_plus(value)}"
        for key, value in flatten_params(params)
    )
