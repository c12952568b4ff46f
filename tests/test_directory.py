import asyncio
import json

import aiohttp

from conftest import REGISTRY_ADDRESS, FakeResponse, FakeSession
from naming.directory import RegistryDirectoryClient

INLINE_ABI = [
    {
        "name": "TOP_LEVEL_DOMAIN",
        "type": "function",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    }
]


def make_client(config, **session_kwargs):
    session = FakeSession(**session_kwargs)
    return RegistryDirectoryClient(config, session_factory=session), session


async def test_requests_domains_contract_for_network(config):
    payload = {"address": REGISTRY_ADDRESS, "blockchain": {"rpcs": ["https://rpc.example"]}}
    client, session = make_client(config, response=FakeResponse(payload=payload))

    descriptor = await client.fetch_descriptor("137")

    assert session.requested == ["https://directory.test/chains/137/contracts/domains"]
    assert session.timeout.total == config.directory_timeout
    assert descriptor.contract_address == REGISTRY_ADDRESS
    assert descriptor.rpc_endpoints == ["https://rpc.example"]
    assert descriptor.preferred_rpc is None
    assert descriptor.abi is None


async def test_custom_rpc_and_inline_abi(config):
    payload = {
        "address": REGISTRY_ADDRESS,
        "abi": INLINE_ABI,
        "blockchain": {"rpcs": [], "custom_rpc": "https://custom.example"},
    }
    client, _ = make_client(config, response=FakeResponse(payload=payload))

    descriptor = await client.fetch_descriptor("1")

    assert descriptor.preferred_rpc == "https://custom.example"
    assert descriptor.rpc_endpoints == []
    assert descriptor.abi == INLINE_ABI


async def test_not_found_status(config):
    client, _ = make_client(config, response=FakeResponse(status=404))
    assert await client.fetch_descriptor("1") is None


async def test_server_error_status(config):
    client, _ = make_client(config, response=FakeResponse(status=503))
    assert await client.fetch_descriptor("1") is None


async def test_malformed_json(config):
    error = json.JSONDecodeError("Expecting value", "<html>", 0)
    client, _ = make_client(config, response=FakeResponse(error=error))
    assert await client.fetch_descriptor("1") is None


async def test_missing_address(config):
    payload = {"blockchain": {"rpcs": ["https://rpc.example"]}}
    client, _ = make_client(config, response=FakeResponse(payload=payload))
    assert await client.fetch_descriptor("1") is None


async def test_missing_rpcs(config):
    payload = {"address": REGISTRY_ADDRESS, "blockchain": {"rpcs": [""], "custom_rpc": ""}}
    client, _ = make_client(config, response=FakeResponse(payload=payload))
    assert await client.fetch_descriptor("1") is None


async def test_non_object_payload(config):
    client, _ = make_client(config, response=FakeResponse(payload=["nope"]))
    assert await client.fetch_descriptor("1") is None


async def test_transport_error(config):
    client, _ = make_client(config, error=aiohttp.ClientConnectionError("refused"))
    assert await client.fetch_descriptor("1") is None


async def test_timeout(config):
    client, _ = make_client(config, error=asyncio.TimeoutError())
    assert await client.fetch_descriptor("1") is None
