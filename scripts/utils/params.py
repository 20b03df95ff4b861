from enum import IntEnum


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_BYTES32 = b"\x00" * 32

BPS_BASE = 10_000
BPS_NOT_USED = 0
OFFSET_NOT_USED = 2**256 - 1


# matches IParam.WrapMode
class WrapMode(IntEnum):
    NONE = 0
    WRAP_BEFORE = 1
    UNWRAP_AFTER = 2


def create_input(token, balance_bps=BPS_NOT_USED, amount_or_offset=OFFSET_NOT_USED):
    if balance_bps > BPS_BASE:
        raise ValueError(f"balance bps {balance_bps} exceeds {BPS_BASE}")
    return (token, balance_bps, amount_or_offset)


def create_logic(
    to,
    data=b"",
    inputs=None,
    wrap_mode=WrapMode.NONE,
    approve_to=ZERO_ADDRESS,
    callback=ZERO_ADDRESS,
):
    return (
        to,
        data,
        inputs or [],
        int(wrap_mode),
        approve_to,
        callback,
    )


def create_fee(token, amount, metadata=ZERO_BYTES32):
    return (token, amount, metadata)


def create_logic_batch(logics=None, fees=None, referrals=None, deadline=0):
    return (
        logics or [],
        fees or [],
        referrals or [],
        deadline,
    )
