import boa

from scripts.utils.address import calc_agent_address
from scripts.utils.calldata import simple_encode


class TransactionFailed(Exception):
    """
    Raised when a raw transaction to the router does not go through.
    Carries the revert data returned by the chain, if any.
    """

    def __init__(self, to, data=b"", revert_data=b""):
        self.to = to
        self.data = data
        self.revert_data = revert_data
        super().__init__(f"Transaction to {to} reverted ({'0x' + bytes(revert_data).hex()})")


def _sender_kwargs(sender):
    return {} if sender is None else {"sender": sender}


class RouterClient:
    """
    Thin wrapper over a deployed Router.

    Mutating calls return once the transaction is included. `newAgent` is
    overloaded on the router, so both variants are sent as raw calldata.
    """

    def __init__(self, contract, agent_bytecode=b"", zksync=False):
        self.contract = contract
        self.agent_bytecode = agent_bytecode
        self.zksync = zksync

    @property
    def address(self):
        return self.contract.address

    # raw sends

    def send_raw(self, data=b"", sender=None, value=0):
        computation = boa.env.execute_code(
            to_address=self.address,
            sender=sender,
            value=value,
            data=data,
            is_modifying=True,
        )
        if getattr(computation, "is_error", False):
            raise TransactionFailed(self.address, data, getattr(computation, "output", b"") or b"")
        return computation

    # agents

    def new_agent(self, sender=None):
        return self.send_raw(simple_encode("newAgent()"), sender=sender)

    def new_agent_for(self, user, sender=None):
        return self.send_raw(simple_encode("newAgent(address)", user), sender=sender)

    def calc_agent(self, user):
        return self.contract.calcAgent(user)

    def get_agent(self, user):
        return self.contract.getAgent(user)

    def get_current_user_agent(self):
        return self.contract.getCurrentUserAgent()

    def predict_agent(self, user):
        # client-side twin of calcAgent
        return calc_agent_address(
            self.address,
            user,
            self.agent_implementation(),
            self.agent_bytecode,
            self.zksync,
        )

    # execution

    def execute(self, permit2_datas, logics, tokens_return, sender=None, value=0):
        return self.contract.execute(
            permit2_datas, logics, tokens_return, value=value, **_sender_kwargs(sender)
        )

    def execute_with_signer_fee(
        self, permit2_datas, logic_batch, signer, signature, tokens_return, sender=None, value=0
    ):
        return self.contract.executeWithSignerFee(
            permit2_datas,
            logic_batch,
            signer,
            signature,
            tokens_return,
            value=value,
            **_sender_kwargs(sender),
        )

    # signers

    def add_signer(self, signer, sender=None):
        return self.contract.addSigner(signer, **_sender_kwargs(sender))

    def remove_signer(self, signer, sender=None):
        return self.contract.removeSigner(signer, **_sender_kwargs(sender))

    def is_signer(self, signer):
        return self.contract.signers(signer)

    # pausing

    def set_pauser(self, pauser, sender=None):
        return self.contract.setPauser(pauser, **_sender_kwargs(sender))

    def pause(self, sender=None):
        return self.contract.pause(**_sender_kwargs(sender))

    def unpause(self, sender=None):
        return self.contract.unpause(**_sender_kwargs(sender))

    # owner ops

    def rescue(self, token, receiver, amount, sender=None):
        return self.contract.rescue(token, receiver, amount, **_sender_kwargs(sender))

    def set_fee_collector(self, fee_collector, sender=None):
        return self.contract.setFeeCollector(fee_collector, **_sender_kwargs(sender))

    # views

    def owner(self):
        return self.contract.owner()

    def pauser(self):
        return self.contract.pauser()

    def current_user(self):
        return self.contract.currentUser()

    def agent_implementation(self):
        return self.contract.agentImplementation()

    def default_collector(self):
        return self.contract.defaultCollector()
