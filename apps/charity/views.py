import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.serializers import ErrorResponseSerializer
from apps.wallets.services import WalletsServiceError
from .serializers import (
    SelectedDistributionInputSerializer,
    DonateInputSerializer,
    CharityOrganizationSerializer,
    DistributionPreviewSerializer,
    DistributionDetailSerializer,
    CharityDistributionSerializer,
)
from .services import (
    get_active_organizations,
    preview_distribution,
    distribute_all,
    distribute_selected,
    donate,
    get_distribution_history,
    CharityServiceError,
)

logger = logging.getLogger(__name__)

CHARITY_ERRORS = (CharityServiceError, WalletsServiceError)


def _distribution_response(message, distribution):
    return {
        'message': message,
        'distribution_id': distribution.id,
        'total_distributed': distribution.total_amount,
        'details': DistributionDetailSerializer(
            distribution.details.select_related('organization'), many=True
        ).data,
    }


@extend_schema(
    responses={200: CharityOrganizationSerializer(many=True)},
    description="List active charity organizations.",
    tags=['charity'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def organization_list(request):
    organizations = get_active_organizations()
    return Response(CharityOrganizationSerializer(organizations, many=True).data)


@extend_schema(
    responses={200: DistributionPreviewSerializer, 400: ErrorResponseSerializer},
    description="Preview how the charity purse would be split. Nothing is changed.",
    tags=['charity'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def preview(request):
    try:
        plan = preview_distribution(user=request.user)
    except CHARITY_ERRORS as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(DistributionPreviewSerializer(plan).data)


@extend_schema(
    request=None,
    responses={200: CharityDistributionSerializer, 400: ErrorResponseSerializer},
    description="Distribute the whole charity purse proportionally to active organizations.",
    tags=['charity'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def distribute(request):
    try:
        distribution = distribute_all(user=request.user)
    except CHARITY_ERRORS as e:
        logger.warning("Charity distribution rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_distribution_response(
        'Charity distribution completed successfully!', distribution
    ))


@extend_schema(
    request=SelectedDistributionInputSerializer,
    responses={200: CharityDistributionSerializer, 400: ErrorResponseSerializer},
    description="Distribute chosen amounts from the charity purse. Body: {\"selections\": {orgId: amount}}",
    tags=['charity'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def distribute_selected_view(request):
    serializer = SelectedDistributionInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        distribution = distribute_selected(
            user=request.user,
            selections=serializer.validated_data['selections'],
        )
    except CHARITY_ERRORS as e:
        logger.warning("Selected distribution rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_distribution_response(
        'Selected charity distribution completed successfully!', distribution
    ))


@extend_schema(
    request=DonateInputSerializer,
    responses={400: ErrorResponseSerializer},
    description="Donate directly to one organization from any purse.",
    tags=['charity'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def donate_view(request):
    serializer = DonateInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        distribution = donate(
            user=request.user,
            organization_id=data['organization_id'],
            amount=data['amount'],
            from_purse=data['from_purse'],
        )
    except CHARITY_ERRORS as e:
        logger.warning("Donation rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    detail = distribution.details.select_related('organization').get()
    return Response({
        'message': 'Donation successful!',
        'donation_id': distribution.id,
        'organization': detail.organization.name,
        'amount': distribution.total_amount,
        'from_purse': distribution.source_purse,
        'transaction_date': distribution.distribution_date,
    })


@extend_schema(
    responses={200: CharityDistributionSerializer(many=True)},
    description="Get the user's charity distributions, newest first.",
    tags=['charity'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def history(request):
    distributions = get_distribution_history(user=request.user)
    return Response(CharityDistributionSerializer(distributions, many=True).data)
