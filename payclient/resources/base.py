"""
Base class for resources with their own API endpoints.

Resources build their request paths from ``OBJECT_NAME``, send requests
through ``APIRequestor`` and materialize responses as records.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote_plus

from payclient.api.requestor import APIRequestor
from payclient.errors import InvalidCredentials, InvalidRequestError
from payclient.model.record import PaymentObject, convert_to_object
from payclient.model.serializer import serialize_params

logger = logging.getLogger(__name__)

# Distinguishes an omitted argument from an explicit None
NOT_PROVIDED = object()


def resolve_api_key(api_key: Any = NOT_PROVIDED) -> Optional[str]:
    """
    Validate an API key argument.

    Returns:
        The key, or None when omitted (the configured key applies)

    Raises:
        InvalidCredentials: If the key was passed but is not a string
    """
    if api_key is NOT_PROVIDED:
        return None
    if not isinstance(api_key, str):
        raise InvalidCredentials(
            f"api_key must be a string, got {api_key!r}; "
            f"omit it to use the configured API key"
        )
    return api_key


class APIResource(PaymentObject):
    """Record that can be retrieved, created, saved and deleted on its own."""

    _saved_separately = True

    @classmethod
    def class_url(cls) -> str:
        """Collection path, e.g. ``/v1/accounts``."""
        if cls.OBJECT_NAME is None:
            raise NotImplementedError(
                "APIResource is an abstract class. Perform actions on its "
                "subclasses (e.g. Account) instead."
            )
        return f"/v1/{cls.OBJECT_NAME}s"

    def instance_url(self) -> str:
        """Path of this object, e.g. ``/v1/accounts/acct_123``."""
        object_id = self.get("id")
        if not isinstance(object_id, str) or not object_id:
            raise InvalidRequestError(
                f"Could not determine which URL to request: {type(self).__name__} "
                f"instance has invalid ID: {object_id!r}"
            )
        return f"{self.class_url()}/{quote_plus(object_id)}"

    @classmethod
    def retrieve(cls, id: Optional[str], api_key: Any = NOT_PROVIDED) -> "APIResource":
        """Fetch an object by ID."""
        instance = cls(id, api_key=resolve_api_key(api_key))
        instance.refresh()
        return instance

    @classmethod
    def create(cls, api_key: Any = NOT_PROVIDED, **params) -> PaymentObject:
        """Create an object from ``params``."""
        key = resolve_api_key(api_key)
        response = APIRequestor(key).request("post", cls.class_url(), params)
        return convert_to_object(response, api_key=key)

    @classmethod
    def list(cls, api_key: Any = NOT_PROVIDED, **params) -> PaymentObject:
        """List objects; returns a ``ListObject``."""
        key = resolve_api_key(api_key)
        response = APIRequestor(key).request("get", cls.class_url(), params)
        page = convert_to_object(response, api_key=key)
        page._retrieve_params = params
        return page

    def refresh(self) -> "APIResource":
        """Reload all fields from the API, discarding unsaved changes."""
        self.refresh_from(self._request("get", self.instance_url()))
        return self

    def save(self) -> "APIResource":
        """
        Send changed fields to the API.

        Only fields assigned since the last load are sent; the response
        replaces the local state and clears change tracking.
        """
        params = serialize_params(self)
        if not params:
            logger.info(f"Saving {type(self).__name__} {self.get('id')} with no changes")
        self.refresh_from(self._request("post", self.instance_url(), params))
        return self

    def delete(self) -> "APIResource":
        """Delete this object."""
        self.refresh_from(self._request("delete", self.instance_url()))
        return self

    def _request(self, method: str, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return APIRequestor(self._api_key).request(method, url, params)
