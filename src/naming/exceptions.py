class NamingError(Exception):
    """Base exception for domain resolution errors."""
    pass

class NamingConfigError(NamingError):
    """Raised when resolver configuration is invalid."""
    pass

class InvalidNetworkIdError(NamingError):
    """Raised when a network id cannot be parsed from a composite chain id."""
    pass

class InvalidDomainError(NamingError):
    """Raised when the input domain has no usable base label."""
    pass

class DirectoryNotFoundError(NamingError):
    """Raised when the directory has no usable registry for a network."""
    pass

class NoUsableEndpointError(NamingError):
    """Raised when a registry descriptor carries no RPC endpoint."""
    pass

class InvalidAddressError(NamingError):
    """Raised when an invalid contract address is provided."""
    pass

class ContractCallFailedError(NamingError):
    """Raised when a registry contract call does not return a value."""
    pass

class NoAddressResolvedError(NamingError):
    """Raised when no registry method variant resolves the domain."""
    pass
