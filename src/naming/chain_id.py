from typing import Optional


def parse_chain_id(composite_id: Optional[str]) -> Optional[str]:
    """
    Extract the network id from a composite chain identifier.

    Args:
        composite_id: Identifier of the form "<namespace>:<id>", e.g. "eip155:137"

    Returns:
        Optional[str]: The network id ("137"), or None when it is missing
    """
    if not composite_id:
        return None

    parts = composite_id.split(":")
    if len(parts) < 2:
        return None

    network_id = parts[1].strip()
    return network_id or None
