"""Bank account resource, nested under an account or a customer."""
from typing import Any
from urllib.parse import quote_plus

from payclient.errors import InvalidRequestError
from payclient.model.record import PaymentObject
from payclient.model.registry import object_registry
from payclient.resources.base import NOT_PROVIDED, APIResource


@object_registry.register("bank_account")
class BankAccount(APIResource):
    """External bank account of an account (or source of a customer)."""

    OBJECT_NAME = "bank_account"

    def instance_url(self) -> str:
        object_id = self.get("id")
        if not isinstance(object_id, str) or not object_id:
            raise InvalidRequestError(
                f"Could not determine which URL to request: BankAccount "
                f"instance has invalid ID: {object_id!r}"
            )

        account = _owner_id(self.get("account"))
        customer = _owner_id(self.get("customer"))
        if account:
            base = f"/v1/accounts/{quote_plus(account)}/external_accounts"
        elif customer:
            base = f"/v1/customers/{quote_plus(customer)}/sources"
        else:
            raise InvalidRequestError(
                f"Could not determine which URL to request: BankAccount "
                f"{object_id} has neither an account nor a customer"
            )
        return f"{base}/{quote_plus(object_id)}"

    @classmethod
    def retrieve(cls, id: Any = None, api_key: Any = NOT_PROVIDED):
        raise InvalidRequestError(
            "Bank accounts cannot be retrieved without an account ID. Retrieve "
            "a bank account using account.external_accounts.retrieve('ba_...')"
        )


def _owner_id(owner: Any):
    # Owner may be expanded into a full object
    if isinstance(owner, PaymentObject):
        return owner.get("id")
    return owner
