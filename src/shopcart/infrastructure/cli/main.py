import click

from shopcart.infrastructure.cli.cart_commands import cart_checkout, cart_summary
from shopcart.infrastructure.logging import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.option("--log-json", is_flag=True, default=False, help="Log as JSON lines.")
def cli(verbose: bool, log_json: bool) -> None:
    """shopcart: shopping cart with simulated checkout"""
    configure_logging(verbose=verbose, log_json=log_json)


# Register subcommands
cli.add_command(cart_summary)
cli.add_command(cart_checkout)
