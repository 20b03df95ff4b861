import click
from eth_utils import is_address, to_bytes

from config.BluePrint import CHAINS, ZKSYNC_ARTIFACTS_DIR
from scripts.utils import log
from scripts.utils.address import agent_code_hash, calc_agent_address
from scripts.utils.artifacts import ArtifactNotFound, load_artifact


def _validate_address(ctx, param, value):
    if not is_address(value):
        raise click.BadParameter(f"`{value}` is not an address")
    return value


@click.command()
@click.option("--router", "-r", required=True, callback=_validate_address, help="Router address.")
@click.option("--user", "-u", required=True, callback=_validate_address, help="User the agent belongs to.")
@click.option("--implementation", "-i", required=True, callback=_validate_address, help="Agent implementation address.")
@click.option(
    "--zksync/--evm",
    default=True,
    help="Use zkSync Era or plain EVM create2 derivation. Defaults to `--zksync`.",
)
@click.option("--agent", default="Agent", help="Agent artifact name. Defaults to `Agent`.")
@click.option("--agent-bytecode", default="", help="Agent creation bytecode (hex), instead of an artifact.")
@click.option("--artifacts-dir", multiple=True, help="Directory with compiled artifacts. Defaults to `artifacts-zk` or `artifacts`.")
def cli(router, user, implementation, zksync, agent, agent_bytecode, artifacts_dir):
    """
    Predicts the agent address the router creates for a user, without
    touching the chain.
    """
    if agent_bytecode:
        bytecode = to_bytes(hexstr=agent_bytecode)
    else:
        try:
            default_dir = ZKSYNC_ARTIFACTS_DIR if zksync else CHAINS["local"]["artifacts_dir"]
            artifact = load_artifact(agent, list(artifacts_dir) or [default_dir])
        except ArtifactNotFound as exception:
            log.error(str(exception))
            raise click.Abort() from exception
        bytecode = artifact.bytecode

    try:
        predicted = calc_agent_address(router, user, implementation, bytecode, zksync)
        code_hash = agent_code_hash(bytecode, zksync)
    except ValueError as exception:
        raise click.ClickException(str(exception)) from exception

    log.h2(f"Agent for {user}")
    log.info(f"\tcode hash: 0x{code_hash.hex()}")
    click.echo(predicted)


if __name__ == "__main__":
    cli()
