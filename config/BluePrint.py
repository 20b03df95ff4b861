# https://github.com/matter-labs/local-setup/blob/main/rich-wallets.json
RICH_WALLETS = [
    {
        "address": "0x36615Cf349d7F6344891B1e7CA7C72883F5dc049",
        "privateKey": "0x7726827caac94a7f9e1b160f7ea819f172f7b6f9d2a97f992c38edeab82d4110",
    },
    {
        "address": "0xa61464658AfeAf65CccaaFD3a512b69A83B77618",
        "privateKey": "0xac1e735be8536c6534bb4f17f06f6afc73b2b5ba84ac2cfb12f7461b20c0bbe3",
    },
]


# router state markers
INIT_CURRENT_USER = "0x0000000000000000000000000000000000000001"


# hardhat-zksync output, only read for offline agent address prediction
ZKSYNC_ARTIFACTS_DIR = "artifacts-zk"


CHAINS = {
    # in-process boa evm
    "local": {
        "rpc": "boa",
        "artifacts_dir": "artifacts",
    },
    "anvil": {
        "rpc": "http://localhost:8545",
        "artifacts_dir": "artifacts",
    },
}


TOKENS = {
    "local": {
        "WRAPPED_NATIVE": "0x5AEa5775959fBC2557Cc8789bC1bf90A239D9a91",
    },
    "anvil": {
        "WRAPPED_NATIVE": "0x5AEa5775959fBC2557Cc8789bC1bf90A239D9a91",
    },
}


# empty permit2 means a MockPermit2 gets deployed alongside the router
INTEGRATION_ADDYS = {
    "local": {
        "PERMIT2": "",
    },
    "anvil": {
        "PERMIT2": "",
    },
}
