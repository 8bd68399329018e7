"""
Charity distribution service.

Three ways of giving, each committed in one transaction together with the
wallet debit:
- proportional: the whole charity purse split by allocation_percentage
- selected: caller-chosen amounts per organization from the charity purse
- direct: a single donation from any purse
"""

import logging
from typing import Mapping
from uuid import UUID

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.charity.models import (
    CharityDistribution,
    CharityDistributionDetail,
    CharityOrganization,
    DistributionMode,
)
from apps.wallets.models import Purse
from apps.wallets.services import apply_wallet_delta, get_wallet, lock_wallet
from .allocation import AllocationPlan, floor_amount, plan_allocations
from .exceptions import (
    AllocationConfigError,
    InvalidAmountError,
    InvalidSelectionError,
    NoActiveOrganizationsError,
    NothingToDistributeError,
    OrganizationNotFoundError,
)

logger = logging.getLogger(__name__)

REMAINDER_CONSUME = 'consume'
REMAINDER_RETAIN = 'retain'


def _remainder_policy() -> str:
    policy = getattr(settings, 'CHARITY_REMAINDER_POLICY', REMAINDER_CONSUME)
    if policy not in (REMAINDER_CONSUME, REMAINDER_RETAIN):
        raise ImproperlyConfigured(
            f"CHARITY_REMAINDER_POLICY must be '{REMAINDER_CONSUME}' or "
            f"'{REMAINDER_RETAIN}', got '{policy}'"
        )
    return policy


def get_active_organizations() -> QuerySet[CharityOrganization]:
    return CharityOrganization.objects.filter(is_active=True)


def _plan_for(balance: int) -> AllocationPlan:
    organizations = list(get_active_organizations())
    plan = plan_allocations(balance, organizations)
    if plan.total_allocated > balance:
        raise AllocationConfigError(
            "Active charity allocations exceed 100% of the charity purse"
        )
    return plan


def _record_distribution(*, user, mode, source_purse, total_amount, amounts) -> CharityDistribution:
    """Create the distribution row and one detail per non-zero allocation."""
    distribution = CharityDistribution.objects.create(
        user=user,
        total_amount=total_amount,
        mode=mode,
        source_purse=source_purse,
        status='completed',
    )
    CharityDistributionDetail.objects.bulk_create([
        CharityDistributionDetail(
            distribution=distribution,
            organization=organization,
            allocated_amount=amount,
        )
        for organization, amount in amounts
        if amount > 0
    ])
    return distribution


def preview_distribution(*, user: User) -> AllocationPlan:
    """
    Show how the charity purse would be split right now. Nothing is written.

    Raises:
        WalletNotFoundError: If the user has no wallet
    """
    wallet = get_wallet(user_id=user.pk)
    return plan_allocations(wallet.balance(Purse.CHARITY), get_active_organizations())


@transaction.atomic
def distribute_all(*, user: User) -> CharityDistribution:
    """
    Distribute the whole charity purse across active organizations.

    Each organization gets floor(C * pct / 100). With the 'consume'
    remainder policy the purse ends at 0; with 'retain' only the allocated
    total is debited and the rounding remainder stays in the purse.

    Raises:
        WalletNotFoundError: If the user has no wallet
        NothingToDistributeError: If the charity purse is empty
        NoActiveOrganizationsError: If no organization is active
        AllocationConfigError: If active percentages add up to over 100%
    """
    wallet = lock_wallet(user_id=user.pk)
    balance = wallet.balance(Purse.CHARITY)
    if balance <= 0:
        raise NothingToDistributeError("No tokens available in charity purse")

    plan = _plan_for(balance)
    if not plan.allocations:
        raise NoActiveOrganizationsError("No active charity organizations found")

    if _remainder_policy() == REMAINDER_CONSUME:
        debit = balance
    else:
        debit = plan.total_allocated
        if debit <= 0:
            raise NothingToDistributeError(
                "Charity purse balance is too small to allocate"
            )

    wallet.apply_delta({Purse.CHARITY: -debit})
    distribution = _record_distribution(
        user=user,
        mode=DistributionMode.PROPORTIONAL,
        source_purse=Purse.CHARITY,
        total_amount=debit,
        amounts=[(a.organization, a.allocated_amount) for a in plan.allocations],
    )

    logger.info(
        "User %s distributed %s charity tokens (%s allocated, remainder %s)",
        user.pk, debit, plan.total_allocated, plan.remainder,
    )
    return distribution


def _resolve_selected_organizations(org_ids) -> dict:
    try:
        ids = [UUID(str(org_id)) for org_id in org_ids]
    except ValueError:
        raise OrganizationNotFoundError("Some selected organizations are invalid")

    organizations = {
        org.pk: org
        for org in get_active_organizations().filter(pk__in=ids)
    }
    if len(organizations) != len(set(ids)):
        raise OrganizationNotFoundError("Some selected organizations are invalid")
    return {org_id: organizations[UUID(str(org_id))] for org_id in org_ids}


@transaction.atomic
def distribute_selected(*, user: User, selections: Mapping) -> CharityDistribution:
    """
    Give caller-chosen amounts from the charity purse.

    ``selections`` maps organization ids to amounts. Each amount is floored
    to whole tokens before summing, so the debited total always equals the
    sum of the recorded details. Whatever is not selected stays in the purse.

    Raises:
        InvalidSelectionError: If nothing is selected
        InvalidAmountError: If an amount is negative or not a number, or the total is 0
        OrganizationNotFoundError: If any organization is unknown or inactive
        WalletNotFoundError: If the user has no wallet
        InsufficientFundsError: If the total exceeds the charity purse
    """
    if not selections or not isinstance(selections, Mapping):
        raise InvalidSelectionError("No organizations selected")

    amounts = {org_id: floor_amount(value) for org_id, value in selections.items()}
    organizations = _resolve_selected_organizations(amounts.keys())

    total = sum(amounts.values())
    if total <= 0:
        raise InvalidAmountError("Invalid donation amounts")

    apply_wallet_delta(user_id=user.pk, delta={Purse.CHARITY: -total})

    distribution = _record_distribution(
        user=user,
        mode=DistributionMode.SELECTED,
        source_purse=Purse.CHARITY,
        total_amount=total,
        amounts=[(organizations[org_id], amount) for org_id, amount in amounts.items()],
    )

    logger.info(
        "User %s distributed %s charity tokens to %s selected organizations",
        user.pk, total, len(organizations),
    )
    return distribution


@transaction.atomic
def donate(*, user: User, organization_id, amount, from_purse) -> CharityDistribution:
    """
    Donate directly to one organization from any purse.

    Raises:
        InvalidAmountError: If the floored amount is not positive
        InvalidPurseError: If from_purse is unknown
        OrganizationNotFoundError: If the organization is unknown or inactive
        WalletNotFoundError: If the user has no wallet
        InsufficientFundsError: If the purse balance is too low
    """
    tokens = floor_amount(amount)
    if tokens <= 0:
        raise InvalidAmountError("Invalid donation amount")
    purse = Purse.resolve(from_purse)

    try:
        organization = get_active_organizations().get(pk=organization_id)
    except (CharityOrganization.DoesNotExist, ValidationError, ValueError):
        raise OrganizationNotFoundError("Organization not found or inactive")

    apply_wallet_delta(user_id=user.pk, delta={purse: -tokens})

    distribution = _record_distribution(
        user=user,
        mode=DistributionMode.DIRECT,
        source_purse=purse,
        total_amount=tokens,
        amounts=[(organization, tokens)],
    )

    logger.info(
        "User %s donated %s tokens from %s purse to %s",
        user.pk, tokens, purse.value, organization.name,
    )
    return distribution


def get_distribution_history(*, user: User) -> QuerySet[CharityDistribution]:
    """User's distributions, newest first, with details and organizations."""
    return (
        CharityDistribution.objects
        .filter(user=user)
        .prefetch_related('details__organization')
        .order_by('-distribution_date')
    )
