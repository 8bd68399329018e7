from rest_framework import serializers
from apps.wallets.models import MAX_TOKEN_AMOUNT
from .models import Goal


# =============================================================================
# Input Serializers
# =============================================================================

class CustomGoalInputSerializer(serializers.Serializer):
    """Validate input for POST /goals/custom."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    associated_tokens = serializers.IntegerField(
        min_value=0, max_value=MAX_TOKEN_AMOUNT, required=False, default=0
    )
    target_time = serializers.DateTimeField(required=False, allow_null=True)
    pledge_amount = serializers.IntegerField(max_value=MAX_TOKEN_AMOUNT)


class DefaultGoalInputSerializer(serializers.Serializer):
    """Validate input for POST /goals/default."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    associated_tokens = serializers.IntegerField(
        min_value=0, max_value=MAX_TOKEN_AMOUNT, required=False, default=0
    )
    target_time = serializers.DateTimeField(required=False, allow_null=True)


class ReflectInputSerializer(serializers.Serializer):
    """
    Validate input for POST /goals/reflect.

    ``reflection_status`` is checked by the service so the error message
    lists the accepted outcomes.
    """

    goal_id = serializers.UUIDField()
    reflection_status = serializers.CharField()


class CompleteGoalInputSerializer(serializers.Serializer):
    """Validate input for the legacy POST /goals/complete."""

    goal_id = serializers.UUIDField()
    completed = serializers.BooleanField()


# =============================================================================
# Output Serializers
# =============================================================================

class GoalSerializer(serializers.ModelSerializer):
    """Goal with the requesting user's claim status."""

    user_id = serializers.UUIDField(read_only=True, allow_null=True)
    is_claimed = serializers.BooleanField(read_only=True, default=False)

    class Meta:
        model = Goal
        fields = [
            'id',
            'name',
            'description',
            'associated_tokens',
            'pledge_amount',
            'target_time',
            'is_default',
            'user_id',
            'is_claimed',
            'created_at',
        ]
        read_only_fields = fields


class ReflectionResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    goal_id = serializers.UUIDField()
    reflection_status = serializers.CharField()
    pledge_amount = serializers.IntegerField()
    associated_tokens = serializers.IntegerField()
    reward_delta = serializers.IntegerField()
    remorse_delta = serializers.IntegerField()
    message = serializers.CharField()
