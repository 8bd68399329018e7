import pytest
from django.urls import reverse
from rest_framework import status
from apps.charity.models import CharityDistribution
from apps.charity.services import donate
from apps.wallets.models import Wallet


@pytest.mark.django_db
class TestOrganizations:
    """Tests for GET /api/charity/organizations"""

    def test_lists_active_organizations_publicly(self, api_client, org_60, org_40, inactive_org):
        response = api_client.get(reverse('charity:organizations'))

        assert response.status_code == status.HTTP_200_OK
        assert [o['name'] for o in response.data] == ['Food Bank', 'Library Fund']
        assert response.data[0]['allocation_percentage'] == '60.00'


@pytest.mark.django_db
class TestPreviewEndpoint:
    """Tests for GET /api/charity/preview"""

    def test_preview(self, authenticated_client, org_60, org_40):
        response = authenticated_client.get(reverse('charity:preview'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['charity_purse_balance'] == 100
        assert response.data['total_to_distribute'] == 100
        assert response.data['remainder'] == 0
        allocations = {a['name']: a['allocated_amount'] for a in response.data['allocations']}
        assert allocations == {'Food Bank': 60, 'Library Fund': 40}

    def test_preview_requires_auth(self, api_client):
        response = api_client.get(reverse('charity:preview'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestDistributeEndpoint:
    """Tests for POST /api/charity/distribute"""

    def test_distribute(self, authenticated_client, donor, org_60, org_40):
        response = authenticated_client.post(reverse('charity:distribute'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Charity distribution completed successfully!'
        assert response.data['total_distributed'] == 100
        amounts = sorted(d['allocated_amount'] for d in response.data['details'])
        assert amounts == [40, 60]
        assert Wallet.objects.get(user=donor).charity_purse == 0

    def test_no_active_organizations(self, authenticated_client, inactive_org):
        response = authenticated_client.post(reverse('charity:distribute'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'No active charity organizations found'

    def test_empty_purse(self, api_client, make_donor, org_60):
        donor = make_donor(email='empty@example.com', charity=0)
        api_client.force_authenticate(user=donor)

        response = api_client.post(reverse('charity:distribute'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'No tokens available in charity purse'


@pytest.mark.django_db
class TestDistributeSelectedEndpoint:
    """Tests for POST /api/charity/distribute-selected"""

    def test_distribute_selected(self, authenticated_client, donor, org_60):
        data = {'selections': {str(org_60.id): 30}}
        response = authenticated_client.post(
            reverse('charity:distribute-selected'), data, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_distributed'] == 30
        assert response.data['details'][0]['organization']['name'] == 'Food Bank'
        assert Wallet.objects.get(user=donor).charity_purse == 70

    def test_over_balance(self, authenticated_client, donor, org_60):
        data = {'selections': {str(org_60.id): 101}}
        response = authenticated_client.post(
            reverse('charity:distribute-selected'), data, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Insufficient tokens in charity purse' in response.data['error']
        assert Wallet.objects.get(user=donor).charity_purse == 100

    def test_missing_selections(self, authenticated_client):
        response = authenticated_client.post(
            reverse('charity:distribute-selected'), {}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'No organizations selected'


@pytest.mark.django_db
class TestDonateEndpoint:
    """Tests for POST /api/charity/donate"""

    def test_donate(self, authenticated_client, donor, org_40):
        data = {'organization_id': str(org_40.id), 'amount': 12, 'from_purse': 'base'}
        response = authenticated_client.post(reverse('charity:donate'), data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Donation successful!'
        assert response.data['organization'] == 'Library Fund'
        assert response.data['amount'] == 12
        assert response.data['from_purse'] == 'base'
        assert Wallet.objects.get(user=donor).base_purse == 38

    def test_inactive_organization(self, authenticated_client, inactive_org):
        data = {'organization_id': str(inactive_org.id), 'amount': 1, 'from_purse': 'charity'}
        response = authenticated_client.post(reverse('charity:donate'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Organization not found or inactive'

    def test_missing_fields(self, authenticated_client):
        response = authenticated_client.post(reverse('charity:donate'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not CharityDistribution.objects.exists()


@pytest.mark.django_db
class TestHistoryEndpoint:
    """Tests for GET /api/charity/history"""

    def test_history(self, authenticated_client, donor, org_60):
        donate(user=donor, organization_id=org_60.id, amount=5, from_purse='charity')

        response = authenticated_client.get(reverse('charity:history'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        entry = response.data[0]
        assert entry['mode'] == 'direct'
        assert entry['total_amount'] == 5
        assert entry['details'][0]['organization']['wallet_address'] == '0xFOOD'
