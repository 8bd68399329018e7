import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.goals.models import Goal, UserGoal
from apps.wallets.models import Wallet


@pytest.mark.django_db
class TestGoalList:
    """Tests for GET /api/goals"""

    def test_list_goals(self, authenticated_client, default_goal, custom_goal):
        response = authenticated_client.get(reverse('goals:goal-list'))

        assert response.status_code == status.HTTP_200_OK
        names = [g['name'] for g in response.data]
        assert names == ['Drink 2L Water', 'Morning run']
        assert all(g['is_claimed'] is False for g in response.data)

    def test_list_requires_auth(self, api_client):
        response = api_client.get(reverse('goals:goal-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCustomGoalCreate:
    """Tests for POST /api/goals/custom"""

    def test_create_custom_goal(self, authenticated_client, user):
        data = {
            'name': 'Meditate',
            'description': 'Ten minutes',
            'associated_tokens': 3,
            'pledge_amount': 25,
        }
        response = authenticated_client.post(reverse('goals:goal-custom'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Goal created successfully! 25 RDM pledged and locked.'
        assert response.data['user_id'] == str(user.pk)
        assert Wallet.objects.get(user=user).base_purse == 75

    def test_pledge_too_small(self, authenticated_client):
        data = {'name': 'Meditate', 'pledge_amount': 0}
        response = authenticated_client.post(reverse('goals:goal-custom'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Pledge amount must be at least 1 RDM'

    def test_pledge_exceeds_base_purse(self, authenticated_client, user):
        data = {'name': 'Meditate', 'pledge_amount': 500}
        response = authenticated_client.post(reverse('goals:goal-custom'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Insufficient tokens in base purse' in response.data['error']
        assert not Goal.objects.exists()


@pytest.mark.django_db
class TestDefaultGoals:
    """Tests for /api/goals/default"""

    def test_list_is_public(self, api_client, default_goal, custom_goal):
        response = api_client.get(reverse('goals:goal-default'))

        assert response.status_code == status.HTTP_200_OK
        assert [g['name'] for g in response.data] == ['Drink 2L Water']

    def test_staff_can_create(self, staff_client):
        data = {'name': 'Stretch', 'associated_tokens': 10}
        response = staff_client.post(reverse('goals:goal-default'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_default'] is True
        assert response.data['pledge_amount'] == 0

    def test_regular_user_cannot_create(self, authenticated_client):
        data = {'name': 'Stretch'}
        response = authenticated_client.post(reverse('goals:goal-default'), data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Goal.objects.exists()


@pytest.mark.django_db
class TestReflect:
    """Tests for POST /api/goals/reflect"""

    def test_reflect_partly_done(self, authenticated_client, custom_goal):
        data = {'goal_id': str(custom_goal.id), 'reflection_status': 'partly done'}
        response = authenticated_client.post(reverse('goals:goal-reflect'), data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['reward_delta'] == 9
        assert response.data['remorse_delta'] == 5
        assert response.data['pledge_amount'] == 10
        assert response.data['associated_tokens'] == 4

    def test_reflect_twice(self, authenticated_client, user, custom_goal):
        url = reverse('goals:goal-reflect')
        data = {'goal_id': str(custom_goal.id), 'reflection_status': 'done'}
        authenticated_client.post(url, data, format='json')
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Goal reflection already completed'
        assert Wallet.objects.get(user=user).reward_purse == 14

    def test_invalid_status(self, authenticated_client, custom_goal):
        data = {'goal_id': str(custom_goal.id), 'reflection_status': 'mostly'}
        response = authenticated_client.post(reverse('goals:goal-reflect'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == (
            'Invalid reflection status. Must be: done, partly done, or not done'
        )

    def test_unknown_goal(self, authenticated_client):
        data = {'goal_id': str(uuid.uuid4()), 'reflection_status': 'done'}
        response = authenticated_client.post(reverse('goals:goal-reflect'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Goal not found'

    def test_claimed_flag_after_reflection(self, authenticated_client, default_goal):
        data = {'goal_id': str(default_goal.id), 'reflection_status': 'done'}
        authenticated_client.post(reverse('goals:goal-reflect'), data, format='json')

        response = authenticated_client.get(reverse('goals:goal-list'))
        assert response.data[0]['is_claimed'] is True


@pytest.mark.django_db
class TestLegacyComplete:
    """Tests for POST /api/goals/complete"""

    def test_complete_true(self, authenticated_client, user, custom_goal):
        data = {'goal_id': str(custom_goal.id), 'completed': True}
        response = authenticated_client.post(reverse('goals:goal-complete'), data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reflection_status'] == 'done'
        assert UserGoal.objects.get(user=user).completed is True


@pytest.mark.django_db
class TestGoalInputBounds:

    def test_bonus_above_column_limit(self, authenticated_client, user):
        data = {'name': 'Huge', 'pledge_amount': 1, 'associated_tokens': 2147483648}
        response = authenticated_client.post(reverse('goals:goal-custom'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('associated_tokens:')
        assert Wallet.objects.get(user=user).base_purse == 100

    def test_pledge_above_column_limit(self, authenticated_client):
        data = {'name': 'Huge', 'pledge_amount': 2147483648}
        response = authenticated_client.post(reverse('goals:goal-custom'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('pledge_amount:')
