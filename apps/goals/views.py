import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.accounts.serializers import ErrorResponseSerializer
from apps.wallets.services import WalletsServiceError
from .serializers import (
    CustomGoalInputSerializer,
    DefaultGoalInputSerializer,
    ReflectInputSerializer,
    CompleteGoalInputSerializer,
    GoalSerializer,
    ReflectionResponseSerializer,
)
from .services import (
    create_custom_goal,
    create_default_goal,
    get_default_goals,
    get_visible_goals,
    reflect_on_goal,
    complete_goal,
    GoalsServiceError,
)

logger = logging.getLogger(__name__)


def _settlement_response(goal_id, settlement):
    return {
        'success': True,
        'goal_id': goal_id,
        'reflection_status': settlement.status,
        'pledge_amount': settlement.pledge_amount,
        'associated_tokens': settlement.associated_tokens,
        'reward_delta': settlement.reward_delta,
        'remorse_delta': settlement.remorse_delta,
        'message': settlement.message,
    }


@extend_schema(
    responses={200: GoalSerializer(many=True)},
    description="List default goals and the user's own goals with claim status.",
    tags=['goals'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def goal_list(request):
    """Get visible goals with is_claimed flag."""
    goals = get_visible_goals(user=request.user)
    return Response(GoalSerializer(goals, many=True).data)


@extend_schema(
    request=CustomGoalInputSerializer,
    responses={201: GoalSerializer, 400: ErrorResponseSerializer},
    description="Create a custom goal, locking the pledge from the base purse.",
    tags=['goals'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def custom_goal_create(request):
    """Create a pledged custom goal."""
    serializer = CustomGoalInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        goal = create_custom_goal(user=request.user, **serializer.validated_data)
    except (GoalsServiceError, WalletsServiceError) as e:
        logger.warning("Custom goal rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    data = GoalSerializer(goal).data
    data['message'] = (
        f"Goal created successfully! {goal.pledge_amount} RDM pledged and locked."
    )
    return Response(data, status=status.HTTP_201_CREATED)


class DefaultGoalView(APIView):
    """
    GET  /api/goals/default - List default goals (public)
    POST /api/goals/default - Create a default goal (staff only)
    """

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAdminUser()]
        return [AllowAny()]

    @extend_schema(
        responses={200: GoalSerializer(many=True)},
        tags=['goals'],
    )
    def get(self, request):
        return Response(GoalSerializer(get_default_goals(), many=True).data)

    @extend_schema(
        request=DefaultGoalInputSerializer,
        responses={201: GoalSerializer},
        tags=['goals'],
    )
    def post(self, request):
        serializer = DefaultGoalInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        goal = create_default_goal(**serializer.validated_data)
        return Response(GoalSerializer(goal).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=ReflectInputSerializer,
    responses={200: ReflectionResponseSerializer, 400: ErrorResponseSerializer},
    description="Reflect on a goal (done / partly done / not done) and settle its pledge.",
    tags=['goals'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reflect(request):
    """
    Settle a goal outcome.

    POST /api/goals/reflect
    Body: {"goal_id": "<uuid>", "reflection_status": "partly done"}
    """
    serializer = ReflectInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    goal_id = serializer.validated_data['goal_id']

    try:
        settlement = reflect_on_goal(
            user=request.user,
            goal_id=goal_id,
            status=serializer.validated_data['reflection_status'],
        )
    except (GoalsServiceError, WalletsServiceError) as e:
        logger.warning("Reflection rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_settlement_response(goal_id, settlement))


@extend_schema(
    request=CompleteGoalInputSerializer,
    responses={200: ReflectionResponseSerializer, 400: ErrorResponseSerializer},
    description="Legacy completion endpoint. Prefer /goals/reflect.",
    tags=['goals'],
    deprecated=True,
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def complete(request):
    """Legacy claim: completed=true settles as done, false as not done."""
    serializer = CompleteGoalInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    goal_id = serializer.validated_data['goal_id']

    try:
        settlement = complete_goal(
            user=request.user,
            goal_id=goal_id,
            completed=serializer.validated_data['completed'],
        )
    except (GoalsServiceError, WalletsServiceError) as e:
        logger.warning("Goal completion rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_settlement_response(goal_id, settlement))
