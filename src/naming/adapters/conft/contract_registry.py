import json
from pathlib import Path
from naming.adapters.base_contract_config import ContractRegistry, ContractConfig, CallResult
from naming.adapters.conft.variants import RegistryMethodVariant
from naming.naming_types import RegistryDescriptor

current_dir = Path(__file__).parent
with open(current_dir / "contract_abis" / "DomainRegistry.json") as f:
    DomainRegistry = json.load(f)


class ConftContractRegistry(ContractRegistry):
    """Registry contract for one network, built from its directory descriptor"""

    def __init__(self, descriptor: RegistryDescriptor):
        super().__init__()
        self._configs = {
            "domains": ContractConfig(
                address=descriptor.contract_address,
                abi=descriptor.abi or DomainRegistry,
            ),
        }

    async def get_top_level_domain(self) -> CallResult:
        return await self.call("domains", "TOP_LEVEL_DOMAIN")

    async def lookup_address(
        self, variant: RegistryMethodVariant, domain_name: str
    ) -> CallResult:
        """Call one name-to-address variant with an already selected argument"""
        return await self.call("domains", variant.method_name, domain_name)
