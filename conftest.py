import pytest
import boa
from boa.network import NetworkEnv

pytest_plugins = [
    "conf_env",
    "conf_mock",
    "conf_core",
    "conf_utils",
]


# every test starts from the state the session fixtures left behind
@pytest.fixture(autouse=True)
def isolation(env):
    if isinstance(boa.env, NetworkEnv):
        yield
        return
    with boa.env.anchor():
        yield
