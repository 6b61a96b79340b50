"""Account resource."""
import logging
from typing import Any, Dict

from config import app_config
from payclient.api.requestor import APIRequestor
from payclient.errors import InvalidCredentials
from payclient.model.record import PaymentObject
from payclient.model.registry import object_registry
from payclient.resources.base import NOT_PROVIDED, APIResource, resolve_api_key

logger = logging.getLogger(__name__)


@object_registry.register("account")
class Account(APIResource):
    """
    A connected (or the current) account.

    ``legal_entity`` cannot be replaced wholesale; assign its fields:
    ```python
    account = Account.retrieve("acct_123")
    account.legal_entity.first_name = "Bob"
    account.legal_entity.address.line1 = "2 Three Four"
    account.save()
    # POST /v1/accounts/acct_123
    # legal_entity[first_name]=Bob&legal_entity[address][line1]=2+Three+Four
    ```
    """

    OBJECT_NAME = "account"

    _protected_fields = frozenset(["legal_entity"])

    @classmethod
    def retrieve(cls, id: Any = NOT_PROVIDED, api_key: Any = NOT_PROVIDED) -> "Account":
        """
        Fetch an account.

        Args:
            id: Account ID; omit for the account owning the API key. A
                secret key (``sk_...``) as the only argument is used as
                the API key for the current account.
            api_key: API key; omit to use the configured key

        Raises:
            InvalidCredentials: If ``id`` or ``api_key`` is explicitly None
        """
        if id is None:
            raise InvalidCredentials(
                "Account.retrieve() got None; pass an account ID or an API key, "
                "or no argument for the current account"
            )

        if id is NOT_PROVIDED:
            id = None
        elif isinstance(id, str) and id.startswith("sk_") and api_key is NOT_PROVIDED:
            id, api_key = None, id

        return super().retrieve(id, api_key=api_key)

    def instance_url(self) -> str:
        if self.get("id") is None:
            return "/v1/account"
        return super().instance_url()

    def _extend_params(self, update: Dict[str, Any]) -> Dict[str, Any]:
        # additional_owners is always sent, as an empty mapping when unchanged
        entity = self.get("legal_entity")
        if isinstance(entity, PaymentObject) and isinstance(entity.get("additional_owners"), list):
            entity_update = update.setdefault("legal_entity", {})
            if isinstance(entity_update, dict):
                entity_update.setdefault("additional_owners", {})
        return update

    def reject(self, reason: str) -> "Account":
        """Reject this account (e.g. ``reason="fraud"``)."""
        self.refresh_from(self._request("post", f"{self.instance_url()}/reject", {"reason": reason}))
        return self

    def deauthorize(self, client_id: str, api_key: Any = NOT_PROVIDED) -> PaymentObject:
        """
        Revoke the platform's access to this account.

        Args:
            client_id: Platform's OAuth client ID (``ca_...``)
            api_key: Platform's secret key; defaults to this account's key

        Returns:
            Record with the deauthorized ``stripe_user_id``
        """
        key = resolve_api_key(api_key) or self._api_key
        requestor = APIRequestor(key, api_base=app_config.payment_api.connect_base)
        response = requestor.request(
            "post",
            "/oauth/deauthorize",
            {"client_id": client_id, "stripe_user_id": self.id},
        )
        logger.info(f"Deauthorized account {self.id} from {client_id}")
        return PaymentObject.construct_from(response, api_key=key)
