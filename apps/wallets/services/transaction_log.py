"""Transaction log service - append-only record of token movements."""

from typing import Optional

from django.db.models import Q, QuerySet

from apps.accounts.models import User
from ..models import Transaction, Purse, TransferType
from ..exceptions import InvalidAmountError


def record_transaction(
    *,
    sender: User,
    receiver: Optional[User],
    from_purse,
    to_purse,
    amount: int,
    kind,
    charity_info: Optional[dict] = None
) -> Transaction:
    """
    Append a ledger entry.

    Callers run this inside the same atomic block as the balance change it
    describes, so an entry exists if and only if the movement happened.

    Raises:
        InvalidAmountError: If amount is not positive
    """
    if amount <= 0:
        raise InvalidAmountError("Transaction amount must be positive")

    return Transaction.objects.create(
        sender=sender,
        receiver=receiver,
        from_purse=Purse.resolve(from_purse),
        to_purse=Purse.resolve(to_purse),
        amount=amount,
        type=TransferType(kind),
        charity_info=charity_info,
    )


def get_transaction_history(*, user: User) -> QuerySet[Transaction]:
    """
    Get transactions the user sent or received, newest first.

    Args:
        user: User whose history to fetch

    Returns:
        QuerySet of Transaction objects
    """
    return (
        Transaction.objects
        .filter(Q(sender=user) | Q(receiver=user))
        .select_related('sender', 'receiver')
        .order_by('-created_at')
    )
