import logging
import sys

import click

from core.exceptions import DecodeError
from log import setup_logging_to_console
from models import ValidatorData

logger = logging.getLogger(__name__)


@click.command()
@click.option("--cons-address", required=True, help="bech32 consensus address")
@click.option("--operator-address", required=True, help="bech32 operator address")
@click.option("--cons-pubkey", required=True, help="bech32 consensus public key")
@click.option("--self-delegate-address", required=True, help="bech32 account address")
@click.option("--max-rate", required=True, help="raw scaled integer")
@click.option("--max-change-rate", required=True, help="raw scaled integer")
def main(
    cons_address: str,
    operator_address: str,
    cons_pubkey: str,
    self_delegate_address: str,
    max_rate: str,
    max_change_rate: str,
):
    """Decode the stored identity strings of a validator."""
    validator = ValidatorData.create(
        cons_address,
        operator_address,
        cons_pubkey,
        self_delegate_address,
        max_rate,
        max_change_rate,
    )
    try:
        pubkey = validator.get_cons_pub_key()
        click.echo(f"consensus address:  {validator.get_cons_addr().hex()}")
        click.echo(f"consensus pubkey:   {pubkey.key_type} {pubkey.key.hex()}")
        click.echo(f"pubkey address:     {pubkey.address().to_bech32()}")
        click.echo(f"operator:           {validator.get_operator().hex()}")
        click.echo(f"self delegate:      {validator.get_self_delegate_address().hex()}")
        click.echo(f"max rate:           {validator.get_max_rate()}")
        click.echo(f"max change rate:    {validator.get_max_change_rate()}")
    except DecodeError as e:
        logger.warning(f"Validator {operator_address} holds undecodable data")
        click.echo(f"DecodeError: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    setup_logging_to_console()
    main()
