from naming.resolver import DomainResolver
from naming.config import ResolverConfig
from naming.lookup import NameLookupHandler, NameLookupRequest, NameLookupResponse
from naming.naming_types import RegistryDescriptor, ResolutionResult
from naming.exceptions import (
    NamingError,
    InvalidNetworkIdError,
    InvalidDomainError,
    InvalidAddressError,
    DirectoryNotFoundError,
    NoUsableEndpointError,
    ContractCallFailedError,
    NoAddressResolvedError,
)

__all__ = [
    'DomainResolver',
    'ResolverConfig',
    'NameLookupHandler',
    'NameLookupRequest',
    'NameLookupResponse',
    'RegistryDescriptor',
    'ResolutionResult',
    'NamingError',
    'InvalidNetworkIdError',
    'InvalidDomainError',
    'InvalidAddressError',
    'DirectoryNotFoundError',
    'NoUsableEndpointError',
    'ContractCallFailedError',
    'NoAddressResolvedError',
]
