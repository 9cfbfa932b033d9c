"""Test configuration and fixtures.

Loads the optional project-root .env without overriding the environment,
points the log sinks at a throwaway directory and provides the fake chain
client / contract doubles shared by the router tests.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest


ROOT = Path(__file__).resolve().parents[1]

WALLET = "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1"
ROUTER = "0xeE567Fe1712Faf6149d80dA1E6934E354124CfE3"


def _load_dotenv(dotenv_path: Path) -> None:
    if not dotenv_path.exists():
        return
    for line in dotenv_path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        # don't override existing env vars
        if k not in os.environ:
            os.environ[k] = v


_load_dotenv(ROOT / '.env')

# Keep test runs out of the repository's logs/ directory
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "swapbot_tests" / "swapbot.log"))


class _FakeFunctions:
    def __init__(self, contract: "_FakeContract"):
        self._contract = contract

    def __getattr__(self, name):
        def _bind(*args):
            bound = SimpleNamespace(fn_name=name, args=args, call=lambda: self._contract.results[name])
            self._contract.bound.append(bound)
            return bound

        return _bind


class _FakeContract:
    """``contract.functions.<name>(*args)`` returns a bound call whose ``call()`` reads ``results``."""

    def __init__(self, address: str, results: dict | None = None):
        self.address = address
        self.results = dict(results or {})
        self.bound: list[SimpleNamespace] = []
        self.functions = _FakeFunctions(self)


class _FakeChainClient:
    """Async chain client double recording every interaction in order."""

    def __init__(self, gas_price: int = 50, nonce: int = 7, tx_id: str = "0xabc"):
        self.address = WALLET
        self.gas_price = gas_price
        self.nonce = nonce
        self.tx_id = tx_id
        self.submit_error: Exception | None = None
        self.read_error: Exception | None = None
        self.events: list[str] = []
        self.submitted: list = []
        self.contracts: dict[str, _FakeContract] = {}

    async def get_address(self) -> str:
        self.events.append("get_address")
        return self.address

    async def get_balance(self, address: str) -> int:
        self.events.append("get_balance")
        return 10**18

    async def get_gas_price(self) -> int:
        self.events.append("get_gas_price")
        if self.read_error is not None:
            raise self.read_error
        return self.gas_price

    async def get_nonce(self, address: str) -> int:
        self.events.append("get_nonce")
        return self.nonce

    async def call(self, label: str, fn):
        self.events.append(f"call:{fn.fn_name}")
        if self.read_error is not None:
            raise self.read_error
        return fn.call()

    def contract(self, address: str, abi):
        return self.contracts.setdefault(address, _FakeContract(address))

    async def submit(self, call):
        self.events.append("submit")
        if self.submit_error is not None:
            raise self.submit_error
        self.submitted.append(call)
        return self.tx_id


@pytest.fixture
def make_contract():
    return _FakeContract


@pytest.fixture
def fake_chain():
    return _FakeChainClient()


@pytest.fixture
def router_contract():
    return _FakeContract(ROUTER)
