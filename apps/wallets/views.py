import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.serializers import ErrorResponseSerializer
from .models import TransferType
from .serializers import (
    TransferInputSerializer,
    WalletSerializer,
    BalanceSerializer,
    TransactionHistorySerializer,
    TransferResponseSerializer,
)
from .services import (
    get_wallet,
    transfer_tokens,
    get_transaction_history,
    WalletsServiceError,
)

logger = logging.getLogger(__name__)


@extend_schema(
    responses={200: WalletSerializer, 400: ErrorResponseSerializer},
    description="Get the current user's wallet.",
    tags=['wallet'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def wallet_detail(request):
    """Get the authenticated user's wallet."""
    try:
        wallet = get_wallet(user_id=request.user.pk)
    except WalletsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(WalletSerializer(wallet).data)


@extend_schema(
    responses={200: BalanceSerializer, 400: ErrorResponseSerializer},
    description="Get all purse balances of the current user.",
    tags=['wallet'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def wallet_balance(request):
    """Get purse balances."""
    try:
        wallet = get_wallet(user_id=request.user.pk)
    except WalletsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(BalanceSerializer(wallet).data)


@extend_schema(
    request=TransferInputSerializer,
    responses={200: TransferResponseSerializer, 400: ErrorResponseSerializer},
    description="Move tokens between own purses or send them to another user.",
    tags=['wallet'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def transfer(request):
    """
    Transfer tokens.

    POST /api/wallet/transfer
    Body: {"from_purse": "base", "to_purse": "charity", "amount": 10,
           "type": "self-transfer"}
    """
    serializer = TransferInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        entry = transfer_tokens(
            sender=request.user,
            from_purse=data['from_purse'],
            to_purse=data['to_purse'],
            amount=data['amount'],
            kind=data['type'],
            to_user_id=data.get('to_user_id'),
            charity_info=data.get('charity_info'),
        )
    except WalletsServiceError as e:
        logger.warning("Transfer rejected for user %s: %s", request.user.pk, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    if entry.type == TransferType.SELF_TRANSFER:
        message = (
            f"Successfully transferred {entry.amount} tokens from "
            f"{entry.from_purse} purse to {entry.to_purse} purse"
        )
    else:
        message = f"Successfully sent {entry.amount} tokens"

    wallet = get_wallet(user_id=request.user.pk)
    return Response({
        'message': message,
        'transaction': TransactionHistorySerializer(entry, context={'user': request.user}).data,
        'wallet': BalanceSerializer(wallet).data,
    })


@extend_schema(
    responses={200: TransactionHistorySerializer(many=True)},
    description="Get the current user's sent and received transactions.",
    tags=['wallet'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def transaction_history(request):
    """Get transaction history, newest first."""
    transactions = get_transaction_history(user=request.user)
    serializer = TransactionHistorySerializer(
        transactions,
        many=True,
        context={'user': request.user}
    )
    return Response(serializer.data)
