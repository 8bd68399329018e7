"""
Wallet management service.

Creates wallets and provides the locked read-modify-write primitive that
every ledger mutation goes through.
"""

import logging
from typing import Iterable, Mapping, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction

from apps.accounts.models import User
from ..models import Wallet
from ..exceptions import WalletNotFoundError

logger = logging.getLogger(__name__)


def create_wallet(*, user: User, base_purse: Optional[int] = None) -> Wallet:
    """
    Create the wallet for a newly registered user.

    Args:
        user: Owner of the wallet
        base_purse: Opening base balance, defaults to WALLET_SIGNUP_BONUS

    Returns:
        Created Wallet instance
    """
    if base_purse is None:
        base_purse = settings.WALLET_SIGNUP_BONUS

    return Wallet.objects.create(
        user=user,
        base_purse=base_purse,
        reward_purse=0,
        remorse_purse=0,
        charity_purse=0,
    )


def get_wallet(*, user_id: UUID) -> Wallet:
    """
    Read a wallet snapshot without locking.

    Raises:
        WalletNotFoundError: If the user has no wallet
    """
    try:
        return Wallet.objects.select_related('user').get(user_id=user_id)
    except Wallet.DoesNotExist:
        raise WalletNotFoundError("Wallet not found")


def lock_wallet(*, user_id: UUID) -> Wallet:
    """
    Fetch a wallet with a row lock held until the surrounding transaction ends.

    Must be called inside transaction.atomic().

    Raises:
        WalletNotFoundError: If the user has no wallet
    """
    try:
        return (
            Wallet.objects
            .select_for_update()
            .get(user_id=user_id)
        )
    except Wallet.DoesNotExist:
        raise WalletNotFoundError("Wallet not found")


def lock_wallets(*, user_ids: Iterable[UUID]) -> dict:
    """
    Lock several wallets in a stable (user id) order.

    Locking in a fixed order keeps two opposite peer transfers from
    deadlocking on each other. Missing wallets are simply absent from the
    returned mapping.

    Returns:
        dict of user_id -> Wallet
    """
    wallets = (
        Wallet.objects
        .select_for_update()
        .filter(user_id__in=list(user_ids))
        .order_by('user_id')
    )
    return {wallet.user_id: wallet for wallet in wallets}


@transaction.atomic
def apply_wallet_delta(*, user_id: UUID, delta: Mapping) -> Wallet:
    """
    Lock a wallet and apply a signed per-purse delta to it.

    Args:
        user_id: Wallet owner
        delta: Mapping of purse name -> signed token amount

    Returns:
        Updated Wallet instance

    Raises:
        WalletNotFoundError: If the user has no wallet
        InsufficientFundsError: If any purse would go negative
    """
    wallet = lock_wallet(user_id=user_id)
    wallet.apply_delta(delta)
    return wallet
