import asyncio
import logging
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Set

import aiohttp
from web3 import AsyncWeb3
from web3.exceptions import (
    ABIFunctionNotFound,
    BadFunctionCallOutput,
    ContractLogicError,
    MismatchedABI,
    Web3Exception,
)

logger = logging.getLogger(__name__)


class CallStatus(Enum):
    OK = "ok"
    NOT_SUPPORTED = "not_supported"
    REVERTED = "reverted"
    FAILED = "failed"


@dataclass(frozen=True)
class CallResult:
    """Outcome of a read-only contract call"""

    status: CallStatus
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is CallStatus.OK


@dataclass
class ContractConfig:
    """Configuration for a smart contract"""

    address: str
    abi: List[Dict[str, Any]]

    def function_names(self) -> Set[str]:
        return {
            entry.get("name")
            for entry in self.abi
            if isinstance(entry, dict) and entry.get("type", "function") == "function"
        }


class ContractRegistry(ABC):
    """Base registry for managing smart contract configurations and instances"""

    def __init__(self):
        self._configs: Dict[str, ContractConfig] = {}
        self._instances: Dict[str, Any] = {}
        self._web3: Optional[AsyncWeb3] = None

    def initialize(self, web3: AsyncWeb3) -> None:
        """Initialize the registry with Web3 instance"""
        self._web3 = web3

    @property
    def web3(self) -> Optional[AsyncWeb3]:
        return self._web3

    def get_contract(self, name: str) -> Any:
        """Get or create a contract instance"""
        if name not in self._instances:
            if name not in self._configs:
                raise KeyError(f"Contract configuration not found: {name}")
            if not self._web3:
                raise RuntimeError("Registry not initialized with Web3 instance")

            config = self._configs[name]
            self._instances[name] = self._web3.eth.contract(
                address=config.address, abi=config.abi
            )
        return self._instances[name]

    async def call(self, name: str, function_name: str, *args: Any) -> CallResult:
        """
        Run a view call against a registered contract.

        Args:
            name: Registered contract name
            function_name: ABI function to call
            *args: Function arguments

        Returns:
            CallResult: OK with the decoded value, NOT_SUPPORTED when the ABI or the
            deployed code lacks the function, REVERTED on a contract revert, FAILED
            on any transport or decoding error
        """
        if function_name not in self._configs[name].function_names():
            return CallResult(CallStatus.NOT_SUPPORTED, error="function not in ABI")

        contract = self.get_contract(name)
        try:
            function = getattr(contract.functions, function_name)
            value = await function(*args).call()
        except ContractLogicError as e:
            return CallResult(CallStatus.REVERTED, error=str(e))
        except (ABIFunctionNotFound, MismatchedABI, BadFunctionCallOutput) as e:
            return CallResult(CallStatus.NOT_SUPPORTED, error=str(e))
        except (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.debug("Call %s.%s failed: %s", name, function_name, str(e))
            return CallResult(CallStatus.FAILED, error=str(e) or type(e).__name__)

        return CallResult(CallStatus.OK, value=value)
