import uuid
from unittest.mock import patch

import pytest
from django.db import IntegrityError
from django.db.models.query import QuerySet
from django.test import override_settings
from apps.goals.models import Goal, UserGoal
from apps.goals.services import (
    create_custom_goal,
    get_visible_goals,
    reflect_on_goal,
    complete_goal,
    AlreadyReflectedError,
    GoalNotFoundError,
    InvalidPledgeError,
    InvalidStatusError,
)
from apps.wallets.models import Wallet
from apps.wallets.services import InsufficientFundsError, WalletNotFoundError


@pytest.mark.django_db
class TestCreateCustomGoal:

    def test_pledge_is_taken_from_base_purse(self, user):
        goal = create_custom_goal(user=user, name='Run', pledge_amount=30, associated_tokens=5)

        assert goal.user == user
        assert goal.is_default is False
        assert goal.pledge_amount == 30
        assert Wallet.objects.get(user=user).base_purse == 70

    @pytest.mark.parametrize('pledge', [0, -3, None])
    def test_pledge_below_minimum(self, user, pledge):
        with pytest.raises(InvalidPledgeError):
            create_custom_goal(user=user, name='Run', pledge_amount=pledge)

        assert not Goal.objects.exists()

    @override_settings(GOAL_MIN_PLEDGE=5)
    def test_configurable_minimum(self, user):
        with pytest.raises(InvalidPledgeError) as exc_info:
            create_custom_goal(user=user, name='Run', pledge_amount=4)
        assert 'at least 5 RDM' in str(exc_info.value)

    def test_insufficient_base_purse_creates_nothing(self, user):
        with pytest.raises(InsufficientFundsError):
            create_custom_goal(user=user, name='Run', pledge_amount=101)

        assert not Goal.objects.exists()
        assert Wallet.objects.get(user=user).base_purse == 100


@pytest.mark.django_db
class TestReflectOnGoal:

    def test_done_credits_reward(self, user, custom_goal):
        settlement = reflect_on_goal(user=user, goal_id=custom_goal.id, status='done')

        wallet = Wallet.objects.get(user=user)
        assert settlement.reward_delta == 14
        assert wallet.reward_purse == 14
        assert wallet.remorse_purse == 0
        reflection = UserGoal.objects.get(user=user, goal=custom_goal)
        assert reflection.completed is True
        assert reflection.reflection_status == 'done'

    def test_partly_done_splits_pledge(self, user, custom_goal):
        reflect_on_goal(user=user, goal_id=custom_goal.id, status='partly done')

        wallet = Wallet.objects.get(user=user)
        assert wallet.reward_purse == 9
        assert wallet.remorse_purse == 5
        assert UserGoal.objects.get(user=user).completed is False

    def test_not_done_credits_remorse(self, user, custom_goal):
        reflect_on_goal(user=user, goal_id=custom_goal.id, status='not done')

        wallet = Wallet.objects.get(user=user)
        assert wallet.reward_purse == 0
        assert wallet.remorse_purse == 10

    def test_second_reflection_is_rejected_without_credit(self, user, custom_goal):
        reflect_on_goal(user=user, goal_id=custom_goal.id, status='done')

        with pytest.raises(AlreadyReflectedError):
            reflect_on_goal(user=user, goal_id=custom_goal.id, status='not done')

        wallet = Wallet.objects.get(user=user)
        assert wallet.reward_purse == 14
        assert wallet.remorse_purse == 0
        assert UserGoal.objects.filter(user=user, goal=custom_goal).count() == 1

    def test_default_goal_can_be_reflected_by_each_user(self, user, other_user, default_goal):
        reflect_on_goal(user=user, goal_id=default_goal.id, status='done')
        reflect_on_goal(user=other_user, goal_id=default_goal.id, status='done')

        assert Wallet.objects.get(user=user).reward_purse == 4
        assert Wallet.objects.get(user=other_user).reward_purse == 4

    def test_other_users_goal_is_not_found(self, other_user, custom_goal):
        with pytest.raises(GoalNotFoundError):
            reflect_on_goal(user=other_user, goal_id=custom_goal.id, status='done')

        assert not UserGoal.objects.exists()

    @pytest.mark.parametrize('goal_id', [uuid.uuid4(), 'not-a-uuid'])
    def test_unknown_goal(self, user, goal_id):
        with pytest.raises(GoalNotFoundError):
            reflect_on_goal(user=user, goal_id=goal_id, status='done')

    def test_invalid_status_records_nothing(self, user, custom_goal):
        with pytest.raises(InvalidStatusError):
            reflect_on_goal(user=user, goal_id=custom_goal.id, status='finished')

        assert not UserGoal.objects.exists()

    def test_user_without_wallet(self, staff_user, default_goal):
        with pytest.raises(WalletNotFoundError):
            reflect_on_goal(user=staff_user, goal_id=default_goal.id, status='done')

        assert not UserGoal.objects.exists()

    def test_pledge_round_trip_conserves_tokens(self, user):
        goal = create_custom_goal(user=user, name='Read', pledge_amount=10)
        reflect_on_goal(user=user, goal_id=goal.id, status='partly done')

        assert Wallet.objects.get(user=user).total_tokens == 100


@pytest.mark.django_db
class TestCompleteGoal:

    def test_completed_settles_as_done(self, user, custom_goal):
        settlement = complete_goal(user=user, goal_id=custom_goal.id, completed=True)
        assert settlement.status == 'done'
        assert Wallet.objects.get(user=user).reward_purse == 14

    def test_not_completed_settles_as_not_done(self, user, custom_goal):
        settlement = complete_goal(user=user, goal_id=custom_goal.id, completed=False)
        assert settlement.status == 'not done'
        assert Wallet.objects.get(user=user).remorse_purse == 10


@pytest.mark.django_db
class TestVisibleGoals:

    def test_lists_default_and_own_goals_with_claim_flag(self, user, other_user, default_goal, custom_goal):
        Goal.objects.create(name='Someone else', pledge_amount=1, user=other_user)
        reflect_on_goal(user=user, goal_id=default_goal.id, status='done')

        goals = {g.name: g for g in get_visible_goals(user=user)}

        assert set(goals) == {'Drink 2L Water', 'Morning run'}
        assert goals['Drink 2L Water'].is_claimed is True
        assert goals['Morning run'].is_claimed is False


@pytest.mark.django_db
class TestSettlementAtomicity:

    def test_concurrent_duplicate_hits_unique_constraint(self, user, custom_goal):
        """A duplicate that slips past the existence check is stopped by the constraint."""
        reflect_on_goal(user=user, goal_id=custom_goal.id, status='done')

        with patch.object(QuerySet, 'exists', return_value=False):
            with pytest.raises(AlreadyReflectedError):
                reflect_on_goal(user=user, goal_id=custom_goal.id, status='done')

        wallet = Wallet.objects.get(user=user)
        assert wallet.reward_purse == 14
        assert UserGoal.objects.filter(user=user, goal=custom_goal).count() == 1

    def test_failed_credit_removes_reflection(self, user, custom_goal):
        with patch.object(Wallet, 'apply_delta', side_effect=IntegrityError('write failed')):
            with pytest.raises(IntegrityError):
                reflect_on_goal(user=user, goal_id=custom_goal.id, status='done')

        assert not UserGoal.objects.exists()
        assert Wallet.objects.get(user=user).reward_purse == 0

    def test_failed_goal_insert_returns_pledge(self, user):
        with patch.object(Goal.objects, 'create', side_effect=IntegrityError('insert failed')):
            with pytest.raises(IntegrityError):
                create_custom_goal(user=user, name='Run', pledge_amount=30)

        assert Wallet.objects.get(user=user).base_purse == 100
        assert not Goal.objects.exists()
