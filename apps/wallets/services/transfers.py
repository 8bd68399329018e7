"""
Purse transfer service.

Moves tokens between purses of one wallet (self-transfer) or from one
user's purse to another user's purse (peer transfer). Debit, credit and the
ledger entry are committed in one transaction.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from ..models import Purse, Transaction, TransferType
from ..exceptions import (
    InvalidAmountError,
    InvalidTransferError,
    InvalidTransferTypeError,
    ReceiverNotFoundError,
    SamePurseError,
    WalletNotFoundError,
)
from .transaction_log import record_transaction
from .wallet_management import lock_wallet, lock_wallets

logger = logging.getLogger(__name__)


def _validate_amount(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError("Amount must be a whole number of tokens")
    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than zero")
    return amount


def _resolve_kind(kind) -> TransferType:
    try:
        return TransferType(kind)
    except ValueError:
        raise InvalidTransferTypeError("Invalid transfer type")


def _resolve_receiver_id(to_user_id) -> UUID:
    if not to_user_id:
        raise ReceiverNotFoundError("Receiver is required for peer transfers")
    try:
        return UUID(str(to_user_id))
    except ValueError:
        raise ReceiverNotFoundError("Receiver not found")


@transaction.atomic
def transfer_tokens(
    *,
    sender: User,
    from_purse,
    to_purse,
    amount: int,
    kind,
    to_user_id: Optional[UUID] = None,
    charity_info: Optional[dict] = None
) -> Transaction:
    """
    Move ``amount`` tokens out of ``from_purse`` into ``to_purse``.

    This operation:
    1. Validates amount, purse names and transfer type (no reads yet)
    2. Locks the wallet(s) involved
    3. For peer transfers, confirms the receiver wallet exists
    4. Debits the source purse (fails if balance is too low)
    5. Credits the destination purse
    6. Appends a Transaction entry

    Any failure rolls the whole operation back, so the sender is never
    left debited without a matching credit.

    Args:
        sender: User sending the tokens
        from_purse: Source purse name
        to_purse: Destination purse name (in the receiver's wallet for peer)
        amount: Positive whole number of tokens
        kind: 'peer' or 'self-transfer'
        to_user_id: Receiving user, required for peer transfers
        charity_info: Optional metadata stored on the ledger entry

    Returns:
        The recorded Transaction

    Raises:
        InvalidAmountError: If amount is not a positive integer
        InvalidPurseError: If a purse name is unknown
        InvalidTransferTypeError: If kind is not peer/self-transfer
        SamePurseError: If a self-transfer uses the same purse twice
        InvalidTransferError: If a peer transfer targets the sender
        ReceiverNotFoundError: If the peer receiver has no wallet
        WalletNotFoundError: If the sender has no wallet
        InsufficientFundsError: If the source purse balance is too low
    """
    amount = _validate_amount(amount)
    source = Purse.resolve(from_purse)
    destination = Purse.resolve(to_purse)
    kind = _resolve_kind(kind)

    if kind == TransferType.SELF_TRANSFER:
        if source == destination:
            raise SamePurseError("Source and destination purses cannot be the same")

        wallet = lock_wallet(user_id=sender.pk)
        wallet.apply_delta({source: -amount, destination: amount})
        receiver = sender
    else:
        receiver_id = _resolve_receiver_id(to_user_id)
        if receiver_id == sender.pk:
            raise InvalidTransferError("Use a self-transfer to move tokens between your own purses")

        wallets = lock_wallets(user_ids=[sender.pk, receiver_id])
        sender_wallet = wallets.get(sender.pk)
        receiver_wallet = wallets.get(receiver_id)
        if sender_wallet is None:
            raise WalletNotFoundError("Wallet not found")
        if receiver_wallet is None:
            raise ReceiverNotFoundError("Receiver not found")

        sender_wallet.apply_delta({source: -amount})
        receiver_wallet.apply_delta({destination: amount})
        receiver = receiver_wallet.user

    entry = record_transaction(
        sender=sender,
        receiver=receiver,
        from_purse=source,
        to_purse=destination,
        amount=amount,
        kind=kind,
        charity_info=charity_info,
    )

    logger.info(
        "%s transfer of %s tokens by %s: %s -> %s (receiver %s)",
        kind.value, amount, sender.pk, source.value, destination.value, receiver.pk,
    )
    return entry
