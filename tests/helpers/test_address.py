import hashlib

import pytest
from eth_abi import encode
from eth_utils import keccak, is_checksum_address

from constants import RICH_WALLET_ADDR_0, RICH_WALLET_ADDR_1, ZERO_ADDRESS
from scripts.utils import address
from scripts.utils.address import (
    MAX_BYTECODE_LEN_BYTES,
    ZKSYNC_CREATE2_PREFIX,
    address_to_salt,
    agent_code_hash,
    calc_agent_address,
    evm_create2_address,
    zksync_create2_address,
    zksync_hash_bytecode,
)


ROUTER = "0x111111125421ca6dc452d289314280a0f8842a65"
IMPLEMENTATION = "0x00000000000000000000000000000000deadbeef"

# 3 words: odd, so valid for zkSync
AGENT_BYTECODE = bytes(range(96))


# salt


def test_address_to_salt_right_pads():
    salt = address_to_salt(RICH_WALLET_ADDR_0)

    assert len(salt) == 32
    assert salt.hex() == RICH_WALLET_ADDR_0[2:].lower() + "0" * 24


def test_address_to_salt_ignores_checksum_case():
    assert address_to_salt(RICH_WALLET_ADDR_1) == address_to_salt(RICH_WALLET_ADDR_1.lower())


# evm create2 (EIP-1014 examples)


@pytest.mark.parametrize(
    "deployer, salt, init_code, expected",
    [
        (ZERO_ADDRESS, "0x" + "00" * 32, "0x00", "0x4D1A2e2bB4F88F0250f26Ffff098B0b30B26BF38"),
        ("0xdeadbeef00000000000000000000000000000000", "0x" + "00" * 32, "0x00", "0xB928f69Bb1D91Cd65274e3c79d8986362984fDA3"),
        (
            "0x00000000000000000000000000000000deadbeef",
            "0x00000000000000000000000000000000000000000000000000000000cafebabe",
            "0xdeadbeef",
            "0x60f3f640a8508fC6a86d45DF051962668E1e8AC7",
        ),
        (ZERO_ADDRESS, "0x" + "00" * 32, "0x", "0xE33C0C7F7df4809055C3ebA6c09CFe4BaF1BD9e0"),
    ],
)
def test_evm_create2_address(deployer, salt, init_code, expected):
    assert evm_create2_address(deployer, salt, init_code) == expected


def test_evm_create2_rejects_short_salt():
    with pytest.raises(ValueError):
        evm_create2_address(ZERO_ADDRESS, b"\x00" * 31, b"")


# zksync bytecode hash

# sha256(bytes(32)) is 66687aadf862bd77...; the first four bytes become version and word count
ZERO_WORD_HASH = "01000001f862bd776c8fc18b8e9f8e20089714856ee233b3902a591d0d5f2925"

# CREATE2_PREFIX in zksync-era's system contracts (Constants.sol)
CREATE2_PREFIX = "2020dba91b30cc0006188af794c2fb30dd8520db7e2c088b7fc7c103c00ca494"

# keccak256 of empty input
EMPTY_KECCAK = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_zksync_hash_bytecode_zero_word():
    assert zksync_hash_bytecode(b"\x00" * 32).hex() == ZERO_WORD_HASH


def test_zksync_hash_bytecode_layout():
    code_hash = zksync_hash_bytecode(AGENT_BYTECODE)

    assert len(code_hash) == 32
    assert code_hash[:2] == b"\x01\x00"
    assert code_hash[4:] == hashlib.sha256(AGENT_BYTECODE).digest()[4:]


def test_zksync_hash_bytecode_word_count():
    code_hash = zksync_hash_bytecode(AGENT_BYTECODE)
    assert int.from_bytes(code_hash[2:4], "big") == 3


def test_zksync_hash_bytecode_accepts_hex():
    assert zksync_hash_bytecode("0x" + AGENT_BYTECODE.hex()) == zksync_hash_bytecode(AGENT_BYTECODE)


@pytest.mark.parametrize(
    "bytecode, message",
    [
        (b"\x00" * 31, "divisible by 32"),
        (b"\x00" * 64, "must be odd"),
        (b"\x00" * (MAX_BYTECODE_LEN_BYTES + 64), "longer than"),
    ],
)
def test_zksync_hash_bytecode_invalid(bytecode, message):
    with pytest.raises(ValueError, match=message):
        zksync_hash_bytecode(bytecode)


# zksync create2


@pytest.fixture
def keccak_inputs(monkeypatch):
    inputs = []

    def recording_keccak(primitive=None, hexstr=None, text=None):
        inputs.append(primitive)
        return keccak(primitive, hexstr=hexstr, text=text)

    monkeypatch.setattr(address, "keccak", recording_keccak)
    return inputs


def test_zksync_create2_prefix():
    assert ZKSYNC_CREATE2_PREFIX.hex() == CREATE2_PREFIX


def test_zksync_create2_preimage(keccak_inputs):
    preimage = bytes.fromhex(
        CREATE2_PREFIX
        + "000000000000000000000000111111125421ca6dc452d289314280a0f8842a65"
        + "36615cf349d7f6344891b1e7ca7c72883f5dc049000000000000000000000000"
        + ZERO_WORD_HASH
        + EMPTY_KECCAK
    )

    predicted = zksync_create2_address(
        ROUTER,
        bytes.fromhex(ZERO_WORD_HASH),
        address_to_salt(RICH_WALLET_ADDR_0),
    )

    assert keccak_inputs[-1] == preimage
    assert is_checksum_address(predicted)
    assert predicted.lower() == "0x" + keccak(preimage)[12:].hex()


def test_zksync_create2_address_depends_on_salt_and_input():
    code_hash = zksync_hash_bytecode(AGENT_BYTECODE)
    salt_0 = address_to_salt(RICH_WALLET_ADDR_0)
    salt_1 = address_to_salt(RICH_WALLET_ADDR_1)

    base = zksync_create2_address(ROUTER, code_hash, salt_0, b"")
    assert base == zksync_create2_address(ROUTER, code_hash, salt_0, b"")
    assert base != zksync_create2_address(ROUTER, code_hash, salt_1, b"")
    assert base != zksync_create2_address(ROUTER, code_hash, salt_0, b"\x01")


def test_zksync_create2_differs_from_evm_create2():
    salt = address_to_salt(RICH_WALLET_ADDR_0)
    assert zksync_create2_address(ROUTER, zksync_hash_bytecode(AGENT_BYTECODE), salt) != evm_create2_address(
        ROUTER, salt, AGENT_BYTECODE
    )


def test_zksync_create2_rejects_bad_hash():
    with pytest.raises(ValueError):
        zksync_create2_address(ROUTER, b"\x01" * 31, address_to_salt(RICH_WALLET_ADDR_0))


# agent prediction


def test_calc_agent_address_zksync(keccak_inputs):
    constructor_input = bytes.fromhex("00000000000000000000000000000000000000000000000000000000deadbeef")
    preimage = bytes.fromhex(
        CREATE2_PREFIX
        + "000000000000000000000000111111125421ca6dc452d289314280a0f8842a65"
        + "36615cf349d7f6344891b1e7ca7c72883f5dc049000000000000000000000000"
        + ZERO_WORD_HASH
    ) + keccak(constructor_input)

    predicted = calc_agent_address(ROUTER, RICH_WALLET_ADDR_0, IMPLEMENTATION, b"\x00" * 32, zksync=True)

    assert keccak_inputs == [constructor_input, preimage]
    assert predicted.lower() == "0x" + keccak(preimage)[12:].hex()


def test_calc_agent_address_evm():
    expected = evm_create2_address(
        ROUTER,
        address_to_salt(RICH_WALLET_ADDR_0),
        AGENT_BYTECODE + encode(["address"], [IMPLEMENTATION]),
    )
    assert calc_agent_address(ROUTER, RICH_WALLET_ADDR_0, IMPLEMENTATION, AGENT_BYTECODE, zksync=False) == expected


def test_calc_agent_address_per_user():
    user_0 = calc_agent_address(ROUTER, RICH_WALLET_ADDR_0, IMPLEMENTATION, AGENT_BYTECODE, zksync=True)
    user_1 = calc_agent_address(ROUTER, RICH_WALLET_ADDR_1, IMPLEMENTATION, AGENT_BYTECODE, zksync=True)
    assert user_0 != user_1


def test_agent_code_hash():
    assert agent_code_hash(AGENT_BYTECODE, zksync=True) == zksync_hash_bytecode(AGENT_BYTECODE)
    assert agent_code_hash(AGENT_BYTECODE, zksync=False) == keccak(AGENT_BYTECODE)
