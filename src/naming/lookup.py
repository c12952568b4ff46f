"""Name-lookup envelope for wallet hosts."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from naming.resolver import DomainResolver

PROTOCOL = "Conft Domains"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NameLookupRequest(_CamelModel):
    chain_id: Optional[str] = None
    domain: Optional[str] = None


class ResolvedAddress(_CamelModel):
    resolved_address: str
    protocol: str = PROTOCOL
    domain_name: str


class NameLookupResponse(_CamelModel):
    resolved_addresses: List[ResolvedAddress]


class NameLookupHandler:
    """Maps host lookup requests onto the domain resolver"""

    def __init__(self, resolver: DomainResolver):
        self._resolver = resolver

    async def on_name_lookup(
        self, request: NameLookupRequest
    ) -> Optional[NameLookupResponse]:
        """
        Handle a domain lookup from the host.

        Args:
            request: Host request carrying the CAIP-2 chain id and the domain

        Returns:
            Optional[NameLookupResponse]: One resolved address, or None if the
            domain does not resolve
        """
        if not request.domain:
            return None

        result = await self._resolver.resolve(request.chain_id, request.domain)
        if result is None:
            return None

        return NameLookupResponse(
            resolved_addresses=[
                ResolvedAddress(
                    resolved_address=result.resolved_address,
                    domain_name=result.domain_name,
                )
            ]
        )
