import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.goals.models import Goal
from apps.wallets.services import create_wallet


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """User with 100 tokens in the base purse."""
    user = User.objects.create_user(email='goaluser@example.com', password='TestPass123!')
    create_wallet(user=user, base_purse=100)
    return user


@pytest.fixture
def other_user(db):
    user = User.objects.create_user(email='othergoals@example.com', password='TestPass123!')
    create_wallet(user=user, base_purse=100)
    return user


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        is_staff=True,
    )


@pytest.fixture
def default_goal(db):
    """Default goal with a 4 token bonus and no pledge."""
    return Goal.objects.create(
        name='Drink 2L Water',
        description='Stay hydrated',
        associated_tokens=4,
        is_default=True,
    )


@pytest.fixture
def custom_goal(user):
    """User-owned goal with pledge 10 and bonus 4 (pledge already taken)."""
    return Goal.objects.create(
        name='Morning run',
        associated_tokens=4,
        pledge_amount=10,
        is_default=False,
        user=user,
    )


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def authenticated_client(user):
    """Return an authenticated API client using JWT."""
    return _client_for(user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)
