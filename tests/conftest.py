from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import pytest

from naming.adapters.base_contract_config import CallResult, CallStatus
from naming.config import ResolverConfig
from naming.naming_types import RegistryDescriptor

REGISTRY_ADDRESS = "0xAbC0000000000000000000000000000000000001"
RESOLVED_ADDRESS = "0x1234567890123456789012345678901234567890"


class FakeResponse:
    def __init__(self, status: int = 200, payload: Any = None, error: Exception = None):
        self.status = status
        self.reason = "Not Found" if status == 404 else "OK"
        self._payload = payload
        self._error = error

    async def json(self, content_type=None):
        if self._error:
            raise self._error
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession in directory tests"""

    def __init__(self, response: FakeResponse = None, error: Exception = None):
        self._response = response
        self._error = error
        self.requested: List[str] = []
        self.timeout = None

    def __call__(self, timeout=None):
        self.timeout = timeout
        return self

    def get(self, url, headers=None):
        self.requested.append(url)
        if self._error:
            raise self._error
        return self._response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeContractCall:
    def __init__(self, outcome: Any):
        self._outcome = outcome

    async def call(self):
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


class FakeFunctions:
    def __init__(self, outcomes: Dict[str, Any], calls: List[tuple]):
        self._outcomes = outcomes
        self._calls = calls

    def __getattr__(self, name):
        outcome = self._outcomes[name]

        def build(*args):
            self._calls.append((name, args))
            return FakeContractCall(outcome)

        return build


class FakeContract:
    def __init__(self, functions: FakeFunctions):
        self.functions = functions


class FakeEth:
    def __init__(self, web3: "FakeWeb3"):
        self._web3 = web3

    def contract(self, address, abi):
        self._web3.contracts.append({"address": address, "abi": abi})
        return FakeContract(FakeFunctions(self._web3.outcomes, self._web3.calls))


class FakeWeb3:
    """Stands in for AsyncWeb3; every contract shares the configured outcomes"""

    def __init__(self, outcomes: Dict[str, Any]):
        self.outcomes = outcomes
        self.calls: List[tuple] = []
        self.contracts: List[Dict[str, Any]] = []
        self.eth = FakeEth(self)


class FakeRegistry:
    """Registry whose deployed methods are given by name"""

    def __init__(self, tld: CallResult, methods: Dict[str, CallResult]):
        self._tld = tld
        self._methods = methods
        self.calls: List[tuple] = []

    async def get_top_level_domain(self) -> CallResult:
        return self._tld

    async def lookup_address(self, variant, domain_name) -> CallResult:
        self.calls.append((variant.method_name, domain_name))
        return self._methods.get(
            variant.method_name,
            CallResult(CallStatus.NOT_SUPPORTED, error="function not in ABI"),
        )


class FakeGateway:
    def __init__(self, registry: Optional[FakeRegistry] = None, error: Exception = None):
        self._registry = registry
        self._error = error
        self.connected: List[RegistryDescriptor] = []

    @asynccontextmanager
    async def connect(self, descriptor):
        self.connected.append(descriptor)
        if self._error:
            raise self._error
        yield self._registry


class FakeDirectory:
    def __init__(self, descriptor: Optional[RegistryDescriptor] = None):
        self._descriptor = descriptor
        self.requested: List[str] = []

    async def fetch_descriptor(self, network_id):
        self.requested.append(network_id)
        return self._descriptor


@pytest.fixture
def config() -> ResolverConfig:
    return ResolverConfig(autocontracts_api_host="https://directory.test")


@pytest.fixture
def descriptor() -> RegistryDescriptor:
    return RegistryDescriptor(
        contract_address=REGISTRY_ADDRESS,
        rpc_endpoints=["https://rpc.example"],
    )


def ok(value: Any) -> CallResult:
    return CallResult(CallStatus.OK, value=value)


def reverted() -> CallResult:
    return CallResult(CallStatus.REVERTED, error="execution reverted")
