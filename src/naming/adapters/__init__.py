from naming.adapters.base_contract_config import (
    CallResult,
    CallStatus,
    ContractConfig,
    ContractRegistry,
)
from naming.adapters.conft import ConftContractRegistry, RegistryMethodVariant

__all__ = [
    "CallResult",
    "CallStatus",
    "ContractConfig",
    "ContractRegistry",
    "ConftContractRegistry",
    "RegistryMethodVariant",
]
