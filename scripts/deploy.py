import click
import boa
from boa.environment import Env

from config.BluePrint import CHAINS
from scripts.utils import log
from scripts.utils.deploy_args import DeployArgs
from scripts.utils.deploy_helpers import get_account
from scripts.utils.deployer import Deployer


DEPLOYMENT_HISTORY_DIR = "./deployment_history"
DEPLOYER_BALANCE = 10 * 10**18


CLICK_PROMPTS = {
    "rpc": {
        "prompt": "What is the desired rpc?",
        "default": "",
        "help": "RPC url for the chain to deploy to. Defaults to the chain's rpc.",
    },
    "chain": {
        "prompt": "Chain name",
        "default": "local",
        "help": "Chain name for custom configuration on the deployment. Defaults to `local`",
        "type": click.Choice(list(CHAINS.keys()), case_sensitive=False),
    },
    "blueprint": {
        "prompt": "Blueprint",
        "default": "",
        "help": "Blueprint to use for the deployment. Defaults to the chain name.",
    },
    "account": {
        "prompt": "Deployer account name",
        "default": "DEPLOYER",
        "help": "Account name for deployment, read from `<ACCOUNT>_PRIVATE_KEY`. Defaults to `DEPLOYER`",
    },
    "permit2": {
        "prompt": "Permit2 address (empty deploys a MockPermit2)",
        "default": "",
        "help": "Permit2 address the router uses. Defaults to the blueprint's, or a fresh MockPermit2.",
    },
    "pauser": {
        "prompt": "Pauser address (empty uses the deployer)",
        "default": "",
        "help": "Address allowed to pause the router. Defaults to the deployer.",
    },
}


def param_prompt(ctx, param, value):
    param_config = CLICK_PROMPTS.get(param.name)
    if param_config is None:
        return value

    default_val = param_config.get("default")
    prompt = param_config.get("prompt")

    if value != default_val:
        return value

    if prompt is None or ctx.params.get("silent"):
        return value

    return click.prompt(
        f"{prompt} --{param.name.replace('_', '-')}",
        default=default_val,
        type=param_config.get("type"),
        show_default=True,
    )


def run_deployment(deploy_args, permit2="", pauser="", agent="Agent", artifacts_dirs=None):
    """
    Deploys MockPermit2 (when no permit2 is known), the router, and sets its pauser.
    Returns the router client.
    """
    sender = deploy_args.sender.address
    deployer = Deployer(
        chain=deploy_args.chain,
        sender=sender,
        artifacts_dirs=artifacts_dirs,
        history_dir=deploy_args.history_dir,
        max_attempts=1 if deploy_args.chain == "local" else 20,
    )

    permit2 = permit2 or deploy_args.blueprint.INTEGRATION_ADDYS["PERMIT2"]
    if not permit2:
        permit2 = deployer.deploy("MockPermit2").address

    router = deployer.deploy_router(
        permit2,
        agent=agent,
        owner=sender,
        pauser=pauser or sender,
        wrapped_native=deploy_args.blueprint.TOKENS["WRAPPED_NATIVE"],
    )

    log.h2("Router deployed")
    log.address("Router", router.address)
    log.address("Permit2", permit2)
    log.address("Agent implementation", router.agent_implementation())
    log.address("Pauser", router.pauser())
    return router


@click.command()
@click.option("--silent", is_flag=True, default=False, is_eager=True, help="Run command without prompts.")
@click.option("--fork", is_flag=True, default=False, help="Declare that the deployment is running on a fork.")
@click.option("--rpc", default=CLICK_PROMPTS["rpc"]["default"], help=CLICK_PROMPTS["rpc"]["help"], callback=param_prompt)
@click.option(
    "--chain", "-f",
    default=CLICK_PROMPTS["chain"]["default"],
    help=CLICK_PROMPTS["chain"]["help"],
    type=CLICK_PROMPTS["chain"]["type"],
    callback=param_prompt,
)
@click.option(
    "--blueprint", "-b",
    default=CLICK_PROMPTS["blueprint"]["default"],
    help=CLICK_PROMPTS["blueprint"]["help"],
    callback=param_prompt,
)
@click.option(
    "--account", "-a",
    default=CLICK_PROMPTS["account"]["default"],
    help=CLICK_PROMPTS["account"]["help"],
    callback=param_prompt,
)
@click.option("--permit2", default=CLICK_PROMPTS["permit2"]["default"], help=CLICK_PROMPTS["permit2"]["help"], callback=param_prompt)
@click.option("--pauser", default=CLICK_PROMPTS["pauser"]["default"], help=CLICK_PROMPTS["pauser"]["help"], callback=param_prompt)
@click.option("--agent", default="Agent", help="Agent artifact name. Defaults to `Agent`.")
@click.option("--artifacts-dir", multiple=True, help="Directory with compiled artifacts. Defaults to the chain's.")
@click.option("--history-dir", default=DEPLOYMENT_HISTORY_DIR, help="Where manifests are written.")
def cli(silent, fork, rpc, chain, blueprint, account, permit2, pauser, agent, artifacts_dir, history_dir):
    """
    Deploys the router (and a MockPermit2 when needed) to the given chain.

    Contract addresses are merged into `<history-dir>/<chain>/current-manifest.json`.
    """
    final_rpc = rpc if rpc else CHAINS[chain]["rpc"]
    sender = get_account(account)
    deploy_args = DeployArgs(sender, chain, blueprint=blueprint, rpc=final_rpc, history_dir=history_dir)

    log.h1("Router Deployment")
    log.info(f"Connected to rpc `{final_rpc}`.")
    log.info(f"Deployer account `{sender.address}`.")
    log.info(f"Deployment arguments: {deploy_args}")
    log.info(f"Chain: {chain}.")
    log.info(f"Fork: {fork}.")
    log.info("")

    artifacts_dirs = list(artifacts_dir) or None

    if final_rpc == "boa":
        with boa.set_env(Env()) as env:
            env.eoa = sender.address
            env.set_balance(sender.address, DEPLOYER_BALANCE)
            run_deployment(deploy_args, permit2, pauser, agent, artifacts_dirs)

    elif fork:
        with boa.fork(final_rpc, allow_dirty=True) as env:
            env.eoa = sender.address
            env.set_balance(sender.address, DEPLOYER_BALANCE)
            log.h2("Deployer wallet funded with 10 ETH")
            run_deployment(deploy_args, permit2, pauser, agent, artifacts_dirs)

    else:
        with boa.set_network_env(final_rpc) as env:
            env.add_account(sender)
            run_deployment(deploy_args, permit2, pauser, agent, artifacts_dirs)

    log.info("Done.")


if __name__ == "__main__":
    cli()
