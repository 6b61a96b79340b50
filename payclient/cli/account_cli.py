"""Account commands for the payclient CLI."""
from typing import Any, Dict, List, Optional, Tuple

import click
from colorama import Fore, Style

from payclient.api.encoding import flatten_params
from payclient.model.record import PaymentObject
from payclient.model.serializer import serialize_params
from payclient.resources.account import Account


class AccountCLI:
    """Command implementations behind ``main.py``."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize CLI."""
        self.api_key = api_key

    def print_header(self, title: str):
        """Print a section header."""
        click.echo(f"\n{Fore.CYAN}{'━' * 45}")
        click.echo(f"{Fore.CYAN}{title}")
        click.echo(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")

    def show(self, account_id: Optional[str] = None) -> Account:
        """Retrieve and print an account."""
        account = self._retrieve(account_id)
        self.print_header(f"Account {account.get('id')}")
        self.print_record(account)
        return account

    def update(self, account_id: str, assignments: List[str]) -> Dict[str, Any]:
        """
        Assign leaf fields by dotted path and save the account.

        Args:
            account_id: Account to update
            assignments: ``path.to.field=value`` strings; an empty value
                unsets the field

        Returns:
            Parameters sent to the API
        """
        parsed = [parse_assignment(item) for item in assignments]

        account = self._retrieve(account_id)
        for path, value in parsed:
            assign_path(account, path, value)

        params = serialize_params(account)

        self.print_header(f"Updating {account.get('id')}")
        pairs = flatten_params(params)
        for key, value in pairs:
            click.echo(f"{Fore.YELLOW}  {key}{Style.RESET_ALL} = {value}")

        account.save()
        click.echo(f"\n{Fore.GREEN}✅ Saved {len(pairs)} changed fields")
        return params

    def deauthorize(self, client_id: str) -> PaymentObject:
        """Deauthorize the current account from a platform."""
        account = self._retrieve(None)
        result = account.deauthorize(client_id)
        click.echo(f"{Fore.GREEN}✅ Deauthorized {result.get('stripe_user_id')} from {client_id}")
        return result

    def list_external_accounts(self, account_id: Optional[str] = None) -> List[PaymentObject]:
        """Print all external accounts of an account."""
        account = self._retrieve(account_id)
        self.print_header(f"External accounts of {account.get('id')}")

        items = list(account.external_accounts.auto_paging_iter())
        for item in items:
            last4 = item.get("last4", "????")
            click.echo(
                f"{Fore.GREEN}{item.get('id')}{Style.RESET_ALL} "
                f"{item.get('object')} {item.get('bank_name', '')} ****{last4}"
            )

        if not items:
            click.echo(f"{Fore.YELLOW}No external accounts")
        return items

    def print_record(self, record: PaymentObject, indent: int = 0):
        """Print a record as an indented tree."""
        prefix = "  " * indent
        for name, value in record.to_dict().items():
            self._print_value(prefix, name, value)

    def _print_value(self, prefix: str, name: str, value: Any):
        if isinstance(value, dict):
            click.echo(f"{prefix}{Fore.CYAN}{name}:")
            for key, item in value.items():
                self._print_value(prefix + "  ", key, item)
        elif isinstance(value, list) and any(isinstance(item, dict) for item in value):
            click.echo(f"{prefix}{Fore.CYAN}{name}: [{len(value)}]")
            for index, item in enumerate(value):
                self._print_value(prefix + "  ", f"[{index}]", item)
        else:
            click.echo(f"{prefix}{Fore.CYAN}{name}{Style.RESET_ALL}: {value}")

    def _retrieve(self, account_id: Optional[str]) -> Account:
        kwargs = {}
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if account_id:
            return Account.retrieve(account_id, **kwargs)
        return Account.retrieve(**kwargs)


def parse_assignment(text: str) -> Tuple[str, Optional[str]]:
    """Split ``path=value``; an empty value means None (unset)."""
    if "=" not in text:
        raise click.BadParameter(f"Expected path=value, got '{text}'")
    path, value = text.split("=", 1)
    path = path.strip()
    if not path:
        raise click.BadParameter(f"Missing field path in '{text}'")
    return path, value if value != "" else None


def assign_path(record: PaymentObject, path: str, value: Any) -> None:
    """Assign ``value`` to a dotted leaf path, e.g. ``legal_entity.address.line1``."""
    *parents, leaf = path.split(".")

    target = record
    for part in parents:
        target = getattr(target, part)

    setattr(target, leaf, value)
