import os
import time

import dotenv
from eth_abi import encode
from eth_account import Account

from config.BluePrint import RICH_WALLETS
from scripts.utils import log

dotenv.load_dotenv()


DEFAULT_MAX_ATTEMPTS = 20
RETRY_DELAY = 3


def get_account(account_name):
    log.h1(f'Connecting to deployer account {account_name}')

    account_key = os.environ.get(f'{account_name}_PRIVATE_KEY')
    account = Account.from_key(
        account_key if account_key else RICH_WALLETS[0]["privateKey"])
    log.h2(f'Deployer account {account_name} connected')

    return account


def execute_transaction(transaction, *args, **kwargs):
    """
    Runs `transaction(*args, **kwargs)`, retrying on failure. The last
    exception is re-raised once the attempts are exhausted.
    """
    max_attempts = kwargs.pop("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if kwargs.pop("no_retry", False):
        max_attempts = 1
    delay = kwargs.pop("retry_delay", RETRY_DELAY)

    attempts = 0
    while True:
        attempts += 1
        try:
            return transaction(*args, **kwargs)

        except Exception as exception:
            log.info(
                "\tTransaction Failed "
                + str(attempts)
                + " time"
                + ("s" if attempts > 1 else "")
                + ("" if attempts >= max_attempts else f" (Trying again in {delay} seconds)")
            )
            log.error(f"\tException: {str(exception)}\n")
            if attempts >= max_attempts:
                log.error("\tMax attempts reached.\n")
                raise

            time.sleep(delay)


def _unwrap(arg):
    # contracts are passed around as objects, the abi wants their address
    if hasattr(arg, 'address'):
        return arg.address
    if isinstance(arg, (list, tuple)):
        return type(arg)(_unwrap(a) for a in arg)
    return arg


def encode_constructor_args(artifact, args):
    """
    Encode constructor arguments based on the artifact's ABI
    """
    types = artifact.constructor_types()
    if not types:
        if args:
            raise ValueError(f"{artifact.name} has no constructor args, got {len(args)}")
        return b""
    if len(types) != len(args):
        raise ValueError(f"{artifact.name} expects {len(types)} constructor args, got {len(args)}")

    return encode(types, [_unwrap(arg) for arg in args])


def deployed_contracts_manifest(contracts, artifacts, args):
    """
    Generate manifest entries that map each deployed contract to its address.
    """
    manifest = {}

    for label, contract in contracts.items():
        artifact = artifacts[label]
        manifest[label] = {
            "address": str(contract.address),
            "artifact": artifact.path,
            "args": [str(_unwrap(arg)) if not isinstance(arg, (bytes, int)) else arg for arg in args[label]],
        }

    return {"contracts": manifest}
