"""Domain exceptions for charity app."""


class CharityServiceError(Exception):
    """Base exception for all charity service errors."""
    pass


class OrganizationNotFoundError(CharityServiceError):
    """Organization does not exist or is inactive."""
    pass


class NoActiveOrganizationsError(CharityServiceError):
    """There is no active organization to distribute to."""
    pass


class NothingToDistributeError(CharityServiceError):
    """Charity purse is empty."""
    pass


class InvalidSelectionError(CharityServiceError):
    """Selection payload is empty or malformed."""
    pass


class InvalidAmountError(CharityServiceError):
    """Donation amount is negative, zero or not a number."""
    pass


class AllocationConfigError(CharityServiceError):
    """Active organizations' percentages add up to more than 100%."""
    pass
