"""
Dynamic record model for API resources.

A ``PaymentObject`` wraps the field mapping of one API object and exposes it
through attribute and item access. It remembers:
- which fields were assigned since the last load (the unsaved set)
- the raw values of the last load (to detect in-place array shrinking)
- whether the record was built locally or materialized from a response

Nested mappings in a response become nested records, selected by their
``object`` tag through the object registry.
"""

import json
import logging
from typing import Any, Dict, FrozenSet, Optional

from payclient.errors import AttributeNotFound, ImmutableAssignment
from payclient.model.registry import object_registry

logger = logging.getLogger(__name__)


class PaymentObject:
    """
    Mutable, change-tracking view over one API object.

    Usage:
    ```python
    obj = PaymentObject.construct_from({"id": "acct_1", "email": "a@b.c"})
    obj.email = "new@b.c"
    serialize_params(obj)
    # Returns: {"email": "new@b.c"}
    ```
    """

    OBJECT_NAME: Optional[str] = None

    # Fields that may only be changed leaf by leaf
    _protected_fields: FrozenSet[str] = frozenset()

    # Resources saved through their own endpoint never ride along with a parent
    _saved_separately = False

    def __init__(self, id: Optional[str] = None, api_key: Optional[str] = None, **params):
        """
        Initialize a locally built record.

        Args:
            id: Object ID, stored without marking it as changed
            api_key: API key used by this record and its nested records
            **params: Initial fields, marked as changed
        """
        object.__setattr__(self, "_api_key", api_key)
        object.__setattr__(self, "_values", {})
        object.__setattr__(self, "_unsaved", set())
        object.__setattr__(self, "_original_values", {})
        object.__setattr__(self, "_fresh", True)

        if id is not None:
            self._values["id"] = id

        for name, value in params.items():
            self[name] = value

    @classmethod
    def construct_from(
        cls,
        values: Dict[str, Any],
        api_key: Optional[str] = None,
        fresh: bool = False,
    ) -> "PaymentObject":
        """
        Build a record from raw API data.

        Args:
            values: Decoded response mapping
            api_key: API key to carry along
            fresh: Treat the data as caller-provided (all fields changed)
                rather than loaded from the API (no fields changed)
        """
        instance = cls(values.get("id"), api_key=api_key)
        instance.refresh_from(values, api_key=api_key, fresh=fresh)
        return instance

    def refresh_from(
        self,
        values: Dict[str, Any],
        api_key: Optional[str] = None,
        fresh: bool = False,
    ) -> None:
        """Replace all fields with ``values`` and reset change tracking."""
        if api_key is not None:
            self._api_key = api_key

        self._values = {
            name: convert_to_object(value, api_key=self._api_key, fresh=fresh)
            for name, value in values.items()
        }
        self._unsaved = set(self._values) if fresh else set()
        self._original_values = {
            name: list(value) if isinstance(value, list) else value
            for name, value in values.items()
        }
        self._fresh = fresh

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeNotFound(name, type(self).__name__, self._values.keys()) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self[name] = value

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if name in self._protected_fields:
            raise ImmutableAssignment(
                f"Cannot replace '{name}' on {type(self).__name__} wholesale; "
                f"assign its fields individually instead (obj.{name}.<field> = value)"
            )

        if isinstance(value, str) and value == "":
            raise ValueError(
                f"You cannot set {name} to an empty string. Empty strings unset "
                f"fields on the server; set {name} to None to delete it instead."
            )

        self._values[name] = convert_to_object(value, api_key=self._api_key, fresh=True)
        self._unsaved.add(name)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        """Return field value, or ``default`` when the field is absent."""
        return self._values.get(name, default)

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._values))

    def _extend_params(self, update: Dict[str, Any]) -> Dict[str, Any]:
        """Adjust the serialized changes of this record; subclasses may add fields."""
        return update

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dictionaries and lists, recursively."""
        return {name: _to_plain(value) for name, value in self._values.items()}

    def __repr__(self) -> str:
        parts = [type(self).__name__]
        if self.OBJECT_NAME is None and isinstance(self._values.get("object"), str):
            parts.append(self._values["object"])
        if isinstance(self._values.get("id"), str):
            parts.append(f"id={self._values['id']}")
        return f"<{' '.join(parts)} at {hex(id(self))}> JSON: {self}"

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, indent=2, default=str)


def _to_plain(value: Any) -> Any:
    if isinstance(value, PaymentObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def convert_to_object(data: Any, api_key: Optional[str] = None, fresh: bool = False) -> Any:
    """
    Materialize raw API data into records.

    Mappings become records of the class registered for their ``object`` tag
    (``PaymentObject`` when the tag is missing or unknown), lists are
    converted element by element, and everything else passes through.
    """
    if isinstance(data, PaymentObject):
        return data

    if isinstance(data, list):
        return [convert_to_object(item, api_key=api_key, fresh=fresh) for item in data]

    if isinstance(data, dict):
        object_name = data.get("object")
        if object_name is not None and object_name not in object_registry:
            logger.debug(f"No class registered for object '{object_name}', using PaymentObject")
        cls = object_registry.get(object_name, PaymentObject)
        return cls.construct_from(data, api_key=api_key, fresh=fresh)

    return data
