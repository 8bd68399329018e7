from rest_framework import serializers
from apps.wallets.models import Purse
from .models import CharityOrganization, CharityDistribution, CharityDistributionDetail


# =============================================================================
# Input Serializers
# =============================================================================

class SelectedDistributionInputSerializer(serializers.Serializer):
    """
    Validate input for POST /charity/distribute-selected.

    Amounts are parsed and floored by the service.
    """

    selections = serializers.DictField(
        child=serializers.JSONField(), required=False, default=dict
    )


class DonateInputSerializer(serializers.Serializer):
    """Validate input for POST /charity/donate."""

    organization_id = serializers.UUIDField()
    amount = serializers.JSONField()
    from_purse = serializers.ChoiceField(choices=Purse.choices)


# =============================================================================
# Output Serializers
# =============================================================================

class CharityOrganizationSerializer(serializers.ModelSerializer):

    class Meta:
        model = CharityOrganization
        fields = [
            'id',
            'name',
            'category',
            'description',
            'wallet_address',
            'allocation_percentage',
            'is_active',
        ]
        read_only_fields = fields


class AllocationSerializer(serializers.Serializer):
    """Organization fields plus the preview's allocated amount."""

    organization = CharityOrganizationSerializer(read_only=True)
    allocated_amount = serializers.IntegerField(read_only=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        flat = data.pop('organization')
        flat['allocated_amount'] = data['allocated_amount']
        return flat


class DistributionPreviewSerializer(serializers.Serializer):
    charity_purse_balance = serializers.IntegerField(source='balance')
    total_to_distribute = serializers.IntegerField(source='balance')
    total_allocated = serializers.IntegerField()
    remainder = serializers.IntegerField()
    allocations = AllocationSerializer(many=True)


class DistributionDetailSerializer(serializers.ModelSerializer):
    organization = serializers.SerializerMethodField()

    class Meta:
        model = CharityDistributionDetail
        fields = ['allocated_amount', 'organization']

    def get_organization(self, obj):
        org = obj.organization
        return {
            'id': str(org.id),
            'name': org.name,
            'category': org.category,
            'wallet_address': org.wallet_address,
            'allocation_percentage': str(org.allocation_percentage),
        }


class CharityDistributionSerializer(serializers.ModelSerializer):
    details = DistributionDetailSerializer(many=True, read_only=True)

    class Meta:
        model = CharityDistribution
        fields = [
            'id',
            'total_amount',
            'mode',
            'source_purse',
            'status',
            'distribution_date',
            'details',
        ]
        read_only_fields = fields
