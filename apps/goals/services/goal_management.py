"""Goal management service - default and pledged custom goals."""

import logging
from datetime import datetime
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Exists, OuterRef, Q, QuerySet

from apps.accounts.models import User
from apps.goals.models import Goal, UserGoal
from apps.wallets.models import Purse
from apps.wallets.services import apply_wallet_delta
from .exceptions import InvalidPledgeError

logger = logging.getLogger(__name__)


@transaction.atomic
def create_custom_goal(
    *,
    user: User,
    name: str,
    pledge_amount: int,
    description: str = '',
    associated_tokens: int = 0,
    target_time: Optional[datetime] = None
) -> Goal:
    """
    Create a user goal and lock its pledge out of the base purse.

    Args:
        user: Goal owner
        name: Goal name
        pledge_amount: Tokens staked on the goal (>= GOAL_MIN_PLEDGE)
        description: Optional description
        associated_tokens: Bonus paid on done / partly done
        target_time: Optional deadline

    Returns:
        Created Goal instance

    Raises:
        InvalidPledgeError: If pledge is below the minimum
        WalletNotFoundError: If the user has no wallet
        InsufficientFundsError: If the base purse can't cover the pledge
    """
    minimum = settings.GOAL_MIN_PLEDGE
    if pledge_amount is None or pledge_amount < minimum:
        raise InvalidPledgeError(f"Pledge amount must be at least {minimum} RDM")

    apply_wallet_delta(user_id=user.pk, delta={Purse.BASE: -pledge_amount})

    goal = Goal.objects.create(
        name=name,
        description=description,
        associated_tokens=associated_tokens,
        pledge_amount=pledge_amount,
        target_time=target_time,
        is_default=False,
        user=user,
    )

    logger.info("User %s pledged %s tokens on goal %s", user.pk, pledge_amount, goal.id)
    return goal


def create_default_goal(
    *,
    name: str,
    description: str = '',
    associated_tokens: int = 0,
    target_time: Optional[datetime] = None
) -> Goal:
    """Create a platform-wide default goal (no pledge, no owner)."""
    return Goal.objects.create(
        name=name,
        description=description,
        associated_tokens=associated_tokens,
        target_time=target_time,
        is_default=True,
    )


def get_default_goals() -> QuerySet[Goal]:
    return Goal.objects.filter(is_default=True)


def get_visible_goals(*, user: User) -> QuerySet[Goal]:
    """
    Default goals plus the user's own goals.

    Each goal is annotated with ``is_claimed`` - True when the user has
    already reflected on it.
    """
    reflected = UserGoal.objects.filter(user=user, goal=OuterRef('pk'))
    return (
        Goal.objects
        .filter(Q(is_default=True) | Q(user=user))
        .annotate(is_claimed=Exists(reflected))
    )
