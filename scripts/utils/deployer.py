import os
from contextlib import nullcontext

import boa
from mergedeep import merge

from config.BluePrint import CHAINS, TOKENS
from scripts.utils import json_file, log
from scripts.utils.address import agent_code_hash
from scripts.utils.artifacts import CONTRACTS_DIR, Artifact, load_artifact
from scripts.utils.deploy_helpers import (deployed_contracts_manifest,
                                          encode_constructor_args,
                                          execute_transaction)
from scripts.utils.router import RouterClient


class DeploymentError(Exception):
    def __init__(self, name, message="Contract creation failed"):
        self.name = name
        self.message = message
        super().__init__(f"{message}: {name}")


def as_address(account):
    if account is None:
        return None
    return getattr(account, "address", account)


class Deployer:
    """
    Loads compiled artifacts and deploys them into the active boa env.

    Every deployment is logged and, when `history_dir` is set, merged into
    `<history_dir>/<chain>/current-manifest.json` so later runs can find
    the addresses again.
    """

    def __init__(
        self,
        chain="local",
        sender=None,
        artifacts_dirs=None,
        contracts_dir=CONTRACTS_DIR,
        history_dir=None,
        max_attempts=1,
    ):
        self.chain = chain
        self.config = CHAINS[chain]
        self.sender = sender
        self.artifacts_dirs = [self.config["artifacts_dir"]] if artifacts_dirs is None else list(artifacts_dirs)
        self.contracts_dir = contracts_dir
        self.history_dir = history_dir
        self.max_attempts = max_attempts
        self._contracts = {}
        self._artifacts = {}
        self._args = {}

    @property
    def contracts(self):
        return dict(self._contracts)

    def load_artifact(self, name):
        return load_artifact(name, self.artifacts_dirs, self.contracts_dir)

    def deploy(self, artifact, *args, label=None, sender=None):
        """
        Deploys `artifact` (an Artifact or a contract name) with constructor `args`.
        Returns the deployed contract.
        """
        if not isinstance(artifact, Artifact):
            artifact = self.load_artifact(artifact)
        label = label or artifact.name
        sender = as_address(sender or self.sender)

        log.h2(f"Deploying {label}")
        contract = execute_transaction(
            self._deploy, artifact, list(args), label, sender, max_attempts=self.max_attempts
        )
        log.h3(f"Contract {label} deployed at {contract.address}")

        self._register(label, artifact, contract, args)
        return contract

    def _deploy(self, artifact, args, label, sender):
        if artifact.is_vyper:
            with boa.env.prank(sender) if sender else nullcontext():
                return boa.load(artifact.path, *args, name=label)

        if not artifact.bytecode:
            raise DeploymentError(artifact.name, "Artifact has no bytecode")

        bytecode = artifact.bytecode + encode_constructor_args(artifact, args)
        address, computation = boa.env.deploy(sender=sender, bytecode=bytecode)
        if getattr(computation, "is_error", False):
            raise DeploymentError(artifact.name)

        return boa.loads_abi(artifact.abi_json, name=artifact.name).at(address)

    def deploy_router(self, permit2, agent="Agent", owner=None, pauser=None, wrapped_native=None):
        """
        Deploys the router with the agent code hash it creates agents from,
        then hands pausing over to `pauser`.
        """
        if not isinstance(agent, Artifact):
            agent = self.load_artifact(agent)
        owner = as_address(owner or self.sender or boa.env.eoa)
        wrapped_native = wrapped_native or TOKENS[self.chain]["WRAPPED_NATIVE"]

        router = self.deploy(
            "Router",
            wrapped_native,
            as_address(permit2),
            owner,
            agent_code_hash(agent.bytecode, zksync=False),
            sender=owner,
        )
        client = RouterClient(router, agent_bytecode=agent.bytecode)

        if pauser is not None:
            log.h3(f"Setting pauser to {as_address(pauser)}")
            client.set_pauser(as_address(pauser), sender=owner)

        return client

    def manifest_filename(self):
        return os.path.join(self.history_dir, self.chain, "current-manifest.json")

    def _register(self, label, artifact, contract, args):
        self._contracts[label] = contract
        self._artifacts[label] = artifact
        self._args[label] = list(args)

        if self.history_dir is None:
            return

        manifest = deployed_contracts_manifest(
            {label: contract}, self._artifacts, self._args)
        filename = self.manifest_filename()
        merged = merge({}, json_file.load_or_empty(filename), manifest)
        json_file.save(filename, merged)
        log.h3(f"{label} added to manifest")
