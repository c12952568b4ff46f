"""Resolver configuration read from the environment."""

import os
from dataclasses import dataclass

from naming.exceptions import NamingConfigError

DEFAULT_AUTOCONTRACTS_API_HOST = "https://autocontracts.conft.app"


def _get_timeout(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise NamingConfigError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise NamingConfigError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class ResolverConfig:
    """Settings shared by the directory client, the contract gateway and the resolver"""

    autocontracts_api_host: str = DEFAULT_AUTOCONTRACTS_API_HOST
    directory_timeout: float = 10.0
    rpc_timeout: float = 10.0
    resolution_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """
        Build a config from environment variables.

        Reads AUTOCONTRACTS_API_HOST, DIRECTORY_TIMEOUT_SECONDS,
        RPC_TIMEOUT_SECONDS and RESOLUTION_TIMEOUT_SECONDS. Unset variables
        fall back to the defaults above.

        Raises:
            NamingConfigError: If a timeout is not a positive number
        """
        host = os.getenv("AUTOCONTRACTS_API_HOST") or DEFAULT_AUTOCONTRACTS_API_HOST
        return cls(
            autocontracts_api_host=host.rstrip("/"),
            directory_timeout=_get_timeout("DIRECTORY_TIMEOUT_SECONDS", 10.0),
            rpc_timeout=_get_timeout("RPC_TIMEOUT_SECONDS", 10.0),
            resolution_timeout=_get_timeout("RESOLUTION_TIMEOUT_SECONDS", 30.0),
        )
