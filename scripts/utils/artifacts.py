import json
import os

from scripts.utils import json_file


CONTRACTS_DIR = "./contracts"


class ArtifactNotFound(FileNotFoundError):
    def __init__(self, name, searched):
        self.name = name
        self.searched = searched
        super().__init__(f"No artifact for `{name}` (searched: {', '.join(searched) or '-'})")


def _to_bytes(value):
    if value is None:
        return b""
    # foundry nests the hex under `object`
    if isinstance(value, dict):
        value = value.get("object", "")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if value.startswith("0x"):
        value = value[2:]
    return bytes.fromhex(value)


class Artifact:
    """
    A compiled contract the deployer knows how to deploy.

    JSON artifacts (hardhat, hardhat-zksync or foundry output) carry the abi
    and creation bytecode. Vyper artifacts only point at the source file and
    are compiled by boa at deploy time.
    """

    def __init__(self, name, path, abi=None, bytecode=b""):
        self.name = name
        self.path = path
        self.abi = abi or []
        self.bytecode = bytecode

    @property
    def is_vyper(self):
        return self.path.endswith(".vy")

    @property
    def abi_json(self):
        return json.dumps(self.abi)

    def constructor_types(self):
        constructor = next((item for item in self.abi if item.get("type") == "constructor"), None)
        if constructor is None:
            return []
        return [_abi_type(input_) for input_ in constructor["inputs"]]

    @classmethod
    def from_json(cls, path, name=None):
        content = json_file.load(path)
        name = name or content.get("contractName") or os.path.splitext(os.path.basename(path))[0]
        return cls(name, path, abi=content.get("abi", []), bytecode=_to_bytes(content.get("bytecode")))

    def __repr__(self):
        return f"<Artifact {self.name} ({self.path})>"


def _abi_type(param):
    # expand tuples so eth_abi can encode struct args
    type_ = param["type"]
    if type_.startswith("tuple"):
        inner = ",".join(_abi_type(component) for component in param["components"])
        return f"({inner}){type_[len('tuple'):]}"
    return type_


def _find_json(name, artifacts_dir):
    target = f"{name}.json"
    for root, _, files in os.walk(artifacts_dir):
        if target in files:
            return os.path.join(root, target)
    return None


def _find_vyper(name, contracts_dir):
    target = f"{name}.vy"
    for root, _, files in os.walk(contracts_dir):
        if target in files:
            return os.path.relpath(os.path.join(root, target))
    return None


def load_artifact(name, artifacts_dirs=(), contracts_dir=CONTRACTS_DIR):
    """
    Resolve `name` to an artifact. Compiled JSON artifacts win over
    Vyper sources so a build output can shadow a local mock.
    """
    searched = []
    for artifacts_dir in artifacts_dirs:
        if not artifacts_dir:
            continue
        searched.append(artifacts_dir)
        if not os.path.isdir(artifacts_dir):
            continue
        path = _find_json(name, artifacts_dir)
        if path:
            return Artifact.from_json(path, name)

    searched.append(contracts_dir)
    if os.path.isdir(contracts_dir):
        path = _find_vyper(name, contracts_dir)
        if path:
            return Artifact(name, path)

    raise ArtifactNotFound(name, searched)

