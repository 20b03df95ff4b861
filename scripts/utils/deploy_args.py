from config.BluePrint import INTEGRATION_ADDYS, TOKENS


class BluePrint:
    def __init__(self, blueprint):
        self.blueprint = blueprint
        self.INTEGRATION_ADDYS = INTEGRATION_ADDYS[blueprint]
        self.TOKENS = TOKENS[blueprint]

    def __repr__(self):
        return f"BluePrint({self.blueprint})"


class DeployArgs:
    def __init__(self, sender, chain, blueprint, rpc, history_dir=None):
        self.sender = sender
        self.chain = chain
        self.blueprint = BluePrint(blueprint or chain)
        self.rpc = rpc
        self.history_dir = history_dir

    def __repr__(self):
        return f"DeployArgs(chain={self.chain}, blueprint={self.blueprint}, rpc={self.rpc})"
