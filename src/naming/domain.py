def extract_base_domain(domain: str) -> str:
    """Return the label before the first dot, or the whole input if it has none"""
    if "." not in domain:
        return domain
    return domain.split(".", 1)[0]


def compose_full_name(base_domain: str, top_level_domain: str) -> str:
    # The registry's suffix carries its own leading dot
    return f"{base_domain}{top_level_domain}"
