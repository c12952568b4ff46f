from enum import Enum


class DomainArgument(Enum):
    BASE_DOMAIN = "base_domain"
    FULL_NAME = "full_name"


class RegistryMethodVariant(Enum):
    """
    Name-to-address entry points exposed by deployed registries.

    Registries deployed at different times expose this lookup under different
    names, one of them misspelled. Members are declared in the order they are
    probed.
    """

    NAME_TO_ADDRESS = ("nameToAddress", DomainArgument.BASE_DOMAIN)
    NAME_TO_ADRESS = ("nameToAdress", DomainArgument.BASE_DOMAIN)
    FULL_NAME_TO_ADDRESS = ("fullNameToAddress", DomainArgument.FULL_NAME)

    def __init__(self, method_name: str, argument: DomainArgument):
        self.method_name = method_name
        self.argument = argument

    def select_argument(self, base_domain: str, full_name: str) -> str:
        if self.argument is DomainArgument.FULL_NAME:
            return full_name
        return base_domain
