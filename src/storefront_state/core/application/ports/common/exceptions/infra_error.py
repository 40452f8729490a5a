from storefront_state.core.domain.shared.domain_error import DomainError


class InfraError(DomainError):
    """A collaborator outside the core (storage, catalog backend) failed.

    Stores and alert engines catch this family and degrade instead of raising.
    """
