from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class RegistryDescriptor:
    """Registry contract location for one network, as served by the directory"""

    contract_address: str
    rpc_endpoints: List[str] = field(default_factory=list)
    preferred_rpc: Optional[str] = None
    abi: Optional[List[Dict[str, Any]]] = None


@dataclass(frozen=True)
class ResolutionResult:
    """A resolved address and the canonical domain name it was resolved for"""

    resolved_address: str
    domain_name: str


def is_empty_address(address: Any) -> bool:
    """True for missing, non-string, or zero-valued addresses"""
    if not address or not isinstance(address, str):
        return True
    digits = address[2:] if address.lower().startswith("0x") else address
    return digits.strip("0") == ""
