"""Goal reflection service - records outcomes and settles pledges."""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from apps.goals.models import Goal, UserGoal, ReflectionStatus
from apps.wallets.services import lock_wallet
from .exceptions import GoalNotFoundError, AlreadyReflectedError
from .settlement import Settlement, compute_settlement, resolve_status

logger = logging.getLogger(__name__)


def _get_visible_goal(*, goal_id: UUID, user: User) -> Goal:
    try:
        goal = Goal.objects.get(id=goal_id)
    except (Goal.DoesNotExist, ValidationError, ValueError):
        raise GoalNotFoundError("Goal not found")

    if not goal.is_visible_to(user):
        raise GoalNotFoundError("Goal not found")
    return goal


@transaction.atomic
def reflect_on_goal(*, user: User, goal_id: UUID, status: str) -> Settlement:
    """
    Record the user's one-time reflection on a goal and settle its pledge.

    This operation:
    1. Validates the reflection status
    2. Loads the goal (default goals or the user's own)
    3. Locks the user's wallet, serializing concurrent reflections
    4. Inserts the reflection row (unique per user and goal)
    5. Credits the reward / remorse purses

    The reflection row and the wallet credit commit together; a duplicate
    request either sees the existing row or hits the unique constraint, so
    the credit can never be applied twice.

    Args:
        user: Reflecting user
        goal_id: UUID of the goal
        status: 'done', 'partly done' or 'not done'

    Returns:
        Settlement describing the amounts moved

    Raises:
        InvalidStatusError: If status is not recognized
        GoalNotFoundError: If goal doesn't exist or isn't visible
        AlreadyReflectedError: If the user already reflected on this goal
        WalletNotFoundError: If the user has no wallet
    """
    status = resolve_status(status)
    goal = _get_visible_goal(goal_id=goal_id, user=user)
    wallet = lock_wallet(user_id=user.pk)

    if UserGoal.objects.filter(user=user, goal=goal).exists():
        raise AlreadyReflectedError("Goal reflection already completed")

    try:
        with transaction.atomic():
            UserGoal.objects.create(
                user=user,
                goal=goal,
                completed=(status == ReflectionStatus.DONE),
                reflection_status=status,
                completed_at=timezone.now(),
            )
    except IntegrityError:
        # Unique constraint caught a concurrent duplicate
        raise AlreadyReflectedError("Goal reflection already completed")

    settlement = compute_settlement(
        status=status,
        pledge_amount=goal.pledge_amount,
        associated_tokens=goal.associated_tokens,
    )
    wallet.apply_delta(settlement.wallet_delta)

    logger.info(
        "User %s reflected '%s' on goal %s: reward +%s, remorse +%s",
        user.pk, status.value, goal.id, settlement.reward_delta, settlement.remorse_delta,
    )
    return settlement


def complete_goal(*, user: User, goal_id: UUID, completed: bool) -> Settlement:
    """
    Legacy two-outcome completion.

    Superseded by reflect_on_goal; kept for older clients. A completed goal
    settles as 'done', an uncompleted one as 'not done'.
    """
    status = ReflectionStatus.DONE if completed else ReflectionStatus.NOT_DONE
    return reflect_on_goal(user=user, goal_id=goal_id, status=status)
