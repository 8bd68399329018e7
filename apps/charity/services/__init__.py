"""
Charity services - Business logic layer.

- Allocation arithmetic (integer floor splits)
- Distribution engine (proportional, selected, direct donation, history)
"""

from .allocation import (
    Allocation,
    AllocationPlan,
    allocate,
    plan_allocations,
    floor_amount,
)

from .distribution import (
    get_active_organizations,
    preview_distribution,
    distribute_all,
    distribute_selected,
    donate,
    get_distribution_history,
)

from .exceptions import (
    CharityServiceError,
    OrganizationNotFoundError,
    NoActiveOrganizationsError,
    NothingToDistributeError,
    InvalidSelectionError,
    InvalidAmountError,
    AllocationConfigError,
)

__all__ = [
    # Allocation
    'Allocation',
    'AllocationPlan',
    'allocate',
    'plan_allocations',
    'floor_amount',
    # Distribution Services
    'get_active_organizations',
    'preview_distribution',
    'distribute_all',
    'distribute_selected',
    'donate',
    'get_distribution_history',
    # Exceptions
    'CharityServiceError',
    'OrganizationNotFoundError',
    'NoActiveOrganizationsError',
    'NothingToDistributeError',
    'InvalidSelectionError',
    'InvalidAmountError',
    'AllocationConfigError',
]
