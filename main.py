#!/usr/bin/env python3
"""payclient - Account CLI entry point."""
import logging

import click
import requests
from colorama import Fore, Style, init

from config import app_config
from payclient.cli.account_cli import AccountCLI
from payclient.errors import PaymentClientError

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}payclient{Fore.CYAN}                            ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Payment API Account Tool{Fore.CYAN}             ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


def run_command(func, *args):
    """Run a CLI action, turning client and HTTP errors into exit code 1."""
    try:
        return func(*args)
    except (PaymentClientError, requests.RequestException, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version="0.1.0")
@click.option("--api-key", default=None, help="API key (defaults to PAYMENT_API_KEY)")
@click.option("--verbose", is_flag=True, help="Log HTTP requests")
@click.pass_context
def cli(ctx, api_key, verbose):
    """payclient - Inspect and update payment API accounts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = AccountCLI(api_key=api_key)


@cli.command()
@click.argument("account_id", required=False)
@click.pass_obj
def show(cli_tool, account_id):
    """Show an account (the current one if no ID is given)."""
    print_banner()
    run_command(cli_tool.show, account_id)


@cli.command()
@click.argument("account_id")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    required=True,
    help="Field to change as path.to.field=value (repeatable)",
)
@click.pass_obj
def update(cli_tool, account_id, assignments):
    """Update leaf fields of an account."""
    print_banner()
    run_command(cli_tool.update, account_id, list(assignments))


@cli.command()
@click.option("--client-id", required=True, help="Platform client ID (ca_...)")
@click.pass_obj
def deauthorize(cli_tool, client_id):
    """Deauthorize the current account from a platform."""
    print_banner()
    run_command(cli_tool.deauthorize, client_id)


@cli.command()
@click.argument("account_id", required=False)
@click.pass_obj
def external_accounts(cli_tool, account_id):
    """List external bank accounts."""
    print_banner()
    run_command(cli_tool.list_external_accounts, account_id)


@cli.command()
def config_api():
    """Configure payment API credentials."""
    print_banner()

    click.echo(f"{Fore.YELLOW}Payment API Configuration")
    click.echo(f"{Fore.YELLOW}{'=' * 30}")

    api_base = click.prompt("API Base URL", default=app_config.payment_api.api_base)
    api_key = click.prompt("API Key (secret)", hide_input=True, default="")

    app_config.payment_api.api_base = api_base
    app_config.payment_api.api_key = api_key

    click.echo(f"{Fore.GREEN}✅ Configuration saved!")


if __name__ == "__main__":
    cli()
