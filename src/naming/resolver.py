import asyncio
import logging
from typing import Optional

from naming.adapters.conft.contract_registry import ConftContractRegistry
from naming.adapters.conft.variants import RegistryMethodVariant
from naming.chain_id import parse_chain_id
from naming.config import ResolverConfig
from naming.directory import RegistryDirectoryClient
from naming.domain import compose_full_name, extract_base_domain
from naming.exceptions import (
    ContractCallFailedError,
    DirectoryNotFoundError,
    InvalidDomainError,
    InvalidNetworkIdError,
    NamingError,
    NoAddressResolvedError,
)
from naming.gateway import ContractGateway
from naming.naming_types import ResolutionResult, is_empty_address

logger = logging.getLogger(__name__)


class DomainResolver:
    """
    Resolves Conft domain names to wallet addresses.

    Each call to resolve() fetches the network's registry descriptor, reads the
    registry's top-level domain and probes the registry's name-to-address
    variants in order. Nothing is shared between calls, so resolutions may run
    concurrently.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        directory: Optional[RegistryDirectoryClient] = None,
        gateway: Optional[ContractGateway] = None,
    ):
        self._config = config or ResolverConfig.from_env()
        self._directory = directory or RegistryDirectoryClient(self._config)
        self._gateway = gateway or ContractGateway(self._config)

    async def resolve(
        self, chain_id: Optional[str], domain: str
    ) -> Optional[ResolutionResult]:
        """
        Resolve a domain on the network named by a composite chain id.

        Args:
            chain_id: Composite chain id, e.g. "eip155:1"
            domain: Domain as typed by the user, e.g. "alice" or "alice.conft"

        Returns:
            Optional[ResolutionResult]: The resolved address and full domain name,
            or None if the domain could not be resolved for any reason
        """
        try:
            return await asyncio.wait_for(
                self._resolve(chain_id, domain),
                timeout=self._config.resolution_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Resolving %r on %r timed out after %ss",
                domain,
                chain_id,
                self._config.resolution_timeout,
            )
        except NamingError as e:
            logger.info("Could not resolve %r on %r: %s", domain, chain_id, str(e))
        except Exception:
            logger.exception("Error resolving domain %r on %r", domain, chain_id)
        return None

    async def _resolve(self, chain_id: Optional[str], domain: str) -> ResolutionResult:
        if not domain:
            raise InvalidDomainError("Domain is empty")

        network_id = parse_chain_id(chain_id)
        if not network_id:
            raise InvalidNetworkIdError(f"Invalid chain id: {chain_id!r}")

        base_domain = extract_base_domain(domain)
        if not base_domain:
            raise InvalidDomainError(f"No base label in domain {domain!r}")

        descriptor = await self._directory.fetch_descriptor(network_id)
        if descriptor is None:
            raise DirectoryNotFoundError(f"Domain contract not found for chain {network_id}")

        async with self._gateway.connect(descriptor) as registry:
            tld_result = await registry.get_top_level_domain()
            if not tld_result.ok or not isinstance(tld_result.value, str):
                raise ContractCallFailedError(
                    f"TOP_LEVEL_DOMAIN failed ({tld_result.status.value}): {tld_result.error}"
                )

            full_name = compose_full_name(base_domain, tld_result.value)
            resolved_address = await self._lookup_address(
                registry, base_domain, full_name
            )

        if resolved_address is None:
            raise NoAddressResolvedError(f"No address registered for {full_name}")

        logger.info("Resolved %s to %s", full_name, resolved_address)
        return ResolutionResult(resolved_address=resolved_address, domain_name=full_name)

    async def _lookup_address(
        self, registry: ConftContractRegistry, base_domain: str, full_name: str
    ) -> Optional[str]:
        for variant in RegistryMethodVariant:
            argument = variant.select_argument(base_domain, full_name)
            result = await registry.lookup_address(variant, argument)

            if result.ok and not is_empty_address(result.value):
                return result.value

            logger.debug(
                "%s(%r) gave no address: %s %s",
                variant.method_name,
                argument,
                result.status.value,
                result.error or result.value,
            )
        return None
