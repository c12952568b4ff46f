from naming.adapters.conft.contract_registry import ConftContractRegistry
from naming.adapters.conft.variants import RegistryMethodVariant

__all__ = ["ConftContractRegistry", "RegistryMethodVariant"]
