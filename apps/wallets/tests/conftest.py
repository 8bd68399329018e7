import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.wallets.services import create_wallet


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_user(db):
    """Factory creating a user with a wallet holding the given balances."""
    def _make_user(email, base=100, reward=0, remorse=0, charity=0):
        user = User.objects.create_user(email=email, password='TestPass123!')
        wallet = create_wallet(user=user, base_purse=base)
        wallet.reward_purse = reward
        wallet.remorse_purse = remorse
        wallet.charity_purse = charity
        wallet.save()
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    """Sender with 100 base, 20 reward, 10 remorse and 5 charity tokens."""
    return make_user('sender@example.com', base=100, reward=20, remorse=10, charity=5)


@pytest.fixture
def other_user(make_user):
    """Receiver with an empty wallet."""
    return make_user('receiver@example.com', base=0)


@pytest.fixture
def user_without_wallet(db):
    return User.objects.create_user(email='nowallet@example.com', password='TestPass123!')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
