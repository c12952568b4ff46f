import logging
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import AsyncIterator

import aiohttp
from web3 import AsyncWeb3

from naming.adapters.conft.contract_registry import ConftContractRegistry
from naming.config import ResolverConfig
from naming.exceptions import InvalidAddressError, NoUsableEndpointError
from naming.naming_types import RegistryDescriptor

logger = logging.getLogger(__name__)


class ContractGateway:
    """Opens read-only connections to registry contracts"""

    def __init__(self, config: ResolverConfig):
        self._config = config

    @staticmethod
    def select_endpoint(descriptor: RegistryDescriptor) -> str:
        """
        Pick the RPC endpoint for a descriptor.

        The directory's custom RPC wins over the first listed RPC.

        Raises:
            NoUsableEndpointError: If the descriptor has neither
        """
        if descriptor.preferred_rpc:
            return descriptor.preferred_rpc
        for rpc in descriptor.rpc_endpoints:
            if rpc:
                return rpc
        raise NoUsableEndpointError(
            f"No RPC URL provided for contract {descriptor.contract_address}"
        )

    @asynccontextmanager
    async def connect(
        self, descriptor: RegistryDescriptor
    ) -> AsyncIterator[ConftContractRegistry]:
        """
        Connect to the registry contract described by the directory.

        The HTTP session backing the provider is closed when the context exits.

        Raises:
            NoUsableEndpointError: If no RPC endpoint is available
            InvalidAddressError: If the contract address is not a valid address
        """
        rpc_url = self.select_endpoint(descriptor)
        if not AsyncWeb3.is_address(descriptor.contract_address):
            raise InvalidAddressError(
                f"Invalid contract address: {descriptor.contract_address}"
            )
        checksum_address = AsyncWeb3.to_checksum_address(descriptor.contract_address)

        timeout = aiohttp.ClientTimeout(total=self._config.rpc_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            provider = AsyncWeb3.AsyncHTTPProvider(
                rpc_url, request_kwargs={"timeout": timeout}
            )
            await provider.cache_async_session(session)
            logger.debug("Connecting to %s at %s", checksum_address, rpc_url)

            registry = ConftContractRegistry(
                replace(descriptor, contract_address=checksum_address)
            )
            registry.initialize(AsyncWeb3(provider))
            yield registry
