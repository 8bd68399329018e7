from decimal import Decimal

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.charity.models import CharityOrganization
from apps.wallets.services import create_wallet


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_donor(db):
    """Factory creating a user whose wallet holds ``charity`` charity tokens."""
    def _make_donor(email='donor@example.com', charity=100, base=50):
        user = User.objects.create_user(email=email, password='TestPass123!')
        wallet = create_wallet(user=user, base_purse=base)
        wallet.charity_purse = charity
        wallet.save()
        return user
    return _make_donor


@pytest.fixture
def donor(make_donor):
    return make_donor()


@pytest.fixture
def org_60(db):
    return CharityOrganization.objects.create(
        name='Food Bank',
        category='hunger',
        wallet_address='0xFOOD',
        allocation_percentage=Decimal('60.00'),
    )


@pytest.fixture
def org_40(db):
    return CharityOrganization.objects.create(
        name='Library Fund',
        category='education',
        wallet_address='0xBOOK',
        allocation_percentage=Decimal('40.00'),
    )


@pytest.fixture
def inactive_org(db):
    return CharityOrganization.objects.create(
        name='Closed Shelter',
        category='housing',
        allocation_percentage=Decimal('0.00'),
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, donor):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(donor)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
