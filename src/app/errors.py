class AuditConfigurationError(ValueError):
    """A required collaborator was missing when a use case was constructed"""


def require(collaborator, name: str):
    """Return collaborator, or raise AuditConfigurationError if it is None"""
    if collaborator is None:
        raise AuditConfigurationError(f"{name} is required")
    return collaborator
