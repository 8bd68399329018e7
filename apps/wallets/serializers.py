from rest_framework import serializers
from .models import MAX_TOKEN_AMOUNT, Wallet, Transaction, Purse, TransferType


# =============================================================================
# Input Serializers
# =============================================================================

class TransferInputSerializer(serializers.Serializer):
    """
    Validate input for POST /wallet/transfer.

    Fields:
        to_user_id (UUID): Receiving user, required for peer transfers
        from_purse (str): Source purse
        to_purse (str): Destination purse
        amount (int): Whole number of tokens, at least 1
        type (str): 'peer' or 'self-transfer'
        charity_info (dict): Optional metadata stored with the transaction
    """

    to_user_id = serializers.UUIDField(required=False, allow_null=True)
    from_purse = serializers.ChoiceField(choices=Purse.choices)
    to_purse = serializers.ChoiceField(choices=Purse.choices)
    amount = serializers.IntegerField(min_value=1, max_value=MAX_TOKEN_AMOUNT)
    type = serializers.ChoiceField(choices=TransferType.choices)
    charity_info = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs['type'] == TransferType.SELF_TRANSFER:
            if attrs['from_purse'] == attrs['to_purse']:
                raise serializers.ValidationError(
                    'Source and destination purses cannot be the same'
                )
        elif not attrs.get('to_user_id'):
            raise serializers.ValidationError({
                'to_user_id': 'Receiver is required for peer transfers'
            })
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class WalletSerializer(serializers.ModelSerializer):
    """Full wallet row."""

    user_id = serializers.UUIDField(read_only=True)
    total_tokens = serializers.IntegerField(read_only=True)

    class Meta:
        model = Wallet
        fields = [
            'id',
            'user_id',
            'base_purse',
            'reward_purse',
            'remorse_purse',
            'charity_purse',
            'total_tokens',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BalanceSerializer(serializers.ModelSerializer):
    """Purse balances only."""

    class Meta:
        model = Wallet
        fields = [
            'base_purse',
            'reward_purse',
            'remorse_purse',
            'charity_purse',
        ]
        read_only_fields = fields


class TransactionHistorySerializer(serializers.ModelSerializer):
    """
    Transaction as seen by one user.

    Requires ``user`` in the serializer context to compute direction flags.
    """

    is_sent = serializers.SerializerMethodField()
    is_received = serializers.SerializerMethodField()
    is_self_transfer = serializers.BooleanField(read_only=True)
    other_party_email = serializers.SerializerMethodField()

    class Meta:
        model = Transaction
        fields = [
            'id',
            'amount',
            'from_purse',
            'to_purse',
            'type',
            'created_at',
            'is_sent',
            'is_received',
            'is_self_transfer',
            'other_party_email',
            'charity_info',
        ]
        read_only_fields = fields

    def get_is_sent(self, obj):
        return obj.sender_id == self.context['user'].pk

    def get_is_received(self, obj):
        return obj.receiver_id == self.context['user'].pk

    def get_other_party_email(self, obj):
        if obj.is_self_transfer:
            return None
        other = obj.receiver if obj.sender_id == self.context['user'].pk else obj.sender
        return other.email if other else None


class TransferResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    transaction = TransactionHistorySerializer()
    wallet = BalanceSerializer()
