"""Paginated collection, e.g. an account's ``external_accounts``."""
import logging
from typing import Any, Iterator
from urllib.parse import quote_plus

from payclient.api.requestor import APIRequestor
from payclient.model.record import PaymentObject, convert_to_object
from payclient.model.registry import object_registry
from payclient.resources.base import NOT_PROVIDED, resolve_api_key

logger = logging.getLogger(__name__)


@object_registry.register("list")
class ListObject(PaymentObject):
    """
    One page of a collection.

    Elements in ``data`` are typed by their ``object`` tag, so an account's
    external accounts are ``BankAccount`` records. ``url`` is the collection
    path used for create/retrieve/list.
    """

    OBJECT_NAME = "list"

    # Params of the request that produced this page (for pagination)
    _retrieve_params = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get("data") or [])

    def __len__(self) -> int:
        return len(self.get("data") or [])

    def create(self, api_key: Any = NOT_PROVIDED, **params) -> PaymentObject:
        """Create an object in this collection."""
        return self._request("post", self.url, api_key, params)

    def retrieve(self, id: str, api_key: Any = NOT_PROVIDED, **params) -> PaymentObject:
        """Fetch one object of this collection by ID."""
        return self._request("get", f"{self.url}/{quote_plus(id)}", api_key, params)

    def list(self, api_key: Any = NOT_PROVIDED, **params) -> "ListObject":
        """Fetch a page of this collection."""
        page = self._request("get", self.url, api_key, params)
        page._retrieve_params = params
        return page

    def auto_paging_iter(self) -> Iterator[Any]:
        """Iterate over all objects, fetching further pages as needed."""
        page = self
        while True:
            yield from page

            data = page.get("data") or []
            if not page.get("has_more") or not data:
                return

            params = dict(page._retrieve_params or {})
            params["starting_after"] = data[-1].id
            logger.debug(f"Fetching next page of {self.url} after {params['starting_after']}")
            page = page.list(**params)

    def _request(self, method: str, url: str, api_key: Any, params: dict) -> Any:
        key = resolve_api_key(api_key) or self._api_key
        response = APIRequestor(key).request(method, url, params)
        return convert_to_object(response, api_key=key)
