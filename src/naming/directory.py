import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import aiohttp
from pydantic import BaseModel, Field, ValidationError

from naming.config import ResolverConfig
from naming.naming_types import RegistryDescriptor

logger = logging.getLogger(__name__)


class BlockchainInfo(BaseModel):
    rpcs: List[str] = Field(default_factory=list)
    custom_rpc: Optional[str] = None


class DirectoryEntry(BaseModel):
    """Directory response for a network's domains contract"""

    address: str = Field(min_length=1)
    abi: Optional[List[Dict[str, Any]]] = None
    blockchain: BlockchainInfo


class RegistryDirectoryClient:
    """Fetches registry contract descriptors from the autocontracts directory"""

    def __init__(
        self,
        config: ResolverConfig,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession,
    ):
        self._config = config
        self._session_factory = session_factory

    def descriptor_url(self, network_id: str) -> str:
        host = self._config.autocontracts_api_host
        return f"{host}/chains/{network_id}/contracts/domains"

    async def fetch_descriptor(self, network_id: str) -> Optional[RegistryDescriptor]:
        """
        Fetch the registry descriptor for a network.

        Args:
            network_id: Numeric chain id as text (e.g. "137")

        Returns:
            Optional[RegistryDescriptor]: The descriptor, or None if the directory
            has no usable entry or cannot be reached
        """
        url = self.descriptor_url(network_id)
        timeout = aiohttp.ClientTimeout(total=self._config.directory_timeout)

        try:
            async with self._session_factory(timeout=timeout) as session:
                async with session.get(
                    url, headers={"accept": "application/json"}
                ) as response:
                    if not 200 <= response.status < 300:
                        logger.warning(
                            "Failed to fetch domain contract for chain %s: %s %s",
                            network_id,
                            response.status,
                            response.reason,
                        )
                        return None
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "Error fetching domain contract for chain %s: %s", network_id, str(e)
            )
            return None
        except ValueError as e:
            logger.warning(
                "Malformed directory response for chain %s: %s", network_id, str(e)
            )
            return None

        logger.debug("Directory entry for chain %s: %s", network_id, payload)
        return self._to_descriptor(network_id, payload)

    def _to_descriptor(
        self, network_id: str, payload: Any
    ) -> Optional[RegistryDescriptor]:
        try:
            entry = DirectoryEntry.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "Invalid directory entry for chain %s: %s", network_id, str(e)
            )
            return None

        rpcs = [rpc for rpc in entry.blockchain.rpcs if rpc]
        custom_rpc = entry.blockchain.custom_rpc or None
        if not rpcs and not custom_rpc:
            logger.warning("Directory entry for chain %s lists no RPC URL", network_id)
            return None

        return RegistryDescriptor(
            contract_address=entry.address,
            rpc_endpoints=rpcs,
            preferred_rpc=custom_rpc,
            abi=entry.abi,
        )
