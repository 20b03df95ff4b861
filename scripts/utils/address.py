import hashlib

from eth_abi import encode
from eth_utils import keccak, to_bytes, to_canonical_address, to_checksum_address


MAX_BYTECODE_LEN_WORDS = 2**16 - 1
MAX_BYTECODE_LEN_BYTES = MAX_BYTECODE_LEN_WORDS * 32
ZKSYNC_CREATE2_PREFIX = keccak(text="zksyncCreate2")
ZKSYNC_BYTECODE_VERSION = b"\x01\x00"


def _as_bytes(value):
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_bytes(hexstr=value)


def address_to_salt(addr):
    # bytes32(bytes20(addr)): the address right-padded with zeros
    return to_canonical_address(addr).ljust(32, b"\x00")


def evm_create2_address(deployer, salt, init_code):
    salt = _as_bytes(salt)
    if len(salt) != 32:
        raise ValueError(f"salt must be 32 bytes, got {len(salt)}")

    digest = keccak(b"\xff" + to_canonical_address(deployer) + salt + keccak(_as_bytes(init_code)))
    return to_checksum_address(digest[12:])


def zksync_hash_bytecode(bytecode):
    """
    Versioned bytecode hash used by zkSync Era: sha256 of the bytecode with
    the first two bytes replaced by the hash version and the next two by the
    bytecode length in 32-byte words.
    """
    bytecode = _as_bytes(bytecode)
    if len(bytecode) % 32 != 0:
        raise ValueError("The bytecode length in bytes must be divisible by 32")
    if len(bytecode) > MAX_BYTECODE_LEN_BYTES:
        raise ValueError(f"Bytecode can not be longer than {MAX_BYTECODE_LEN_BYTES} bytes")

    words = len(bytecode) // 32
    if words % 2 == 0:
        raise ValueError("Bytecode length in 32-byte words must be odd")

    digest = hashlib.sha256(bytecode).digest()
    return ZKSYNC_BYTECODE_VERSION + words.to_bytes(2, "big") + digest[4:]


def zksync_create2_address(sender, bytecode_hash, salt, input_=b""):
    salt = _as_bytes(salt)
    bytecode_hash = _as_bytes(bytecode_hash)
    if len(salt) != 32 or len(bytecode_hash) != 32:
        raise ValueError("salt and bytecode hash must be 32 bytes")

    digest = keccak(
        ZKSYNC_CREATE2_PREFIX
        + to_canonical_address(sender).rjust(32, b"\x00")
        + salt
        + bytecode_hash
        + keccak(_as_bytes(input_))
    )
    return to_checksum_address(digest[12:])


def agent_code_hash(agent_bytecode, zksync):
    # constructor arg of the router, also what calcAgent hashes against
    if zksync:
        return zksync_hash_bytecode(agent_bytecode)
    return keccak(_as_bytes(agent_bytecode))


def calc_agent_address(router, user, implementation, agent_bytecode, zksync):
    """
    Predict the agent the router deploys for `user`.

    The agent is created with create2 from the router, salted with the user
    address and constructed with the agent implementation address.
    """
    salt = address_to_salt(user)
    input_ = encode(["address"], [implementation])

    if zksync:
        return zksync_create2_address(router, zksync_hash_bytecode(agent_bytecode), salt, input_)
    return evm_create2_address(router, salt, _as_bytes(agent_bytecode) + input_)
