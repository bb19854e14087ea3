"""Ownership policy for catalog resources."""


def authorize(resource_owner_id: int, caller_id: int) -> bool:
    """Only the owner may see or change a movie. There are no roles."""
    return resource_owner_id == caller_id
