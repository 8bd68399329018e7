"""
Wallets services - Business logic layer.

This package contains all ledger operations for the wallets app:
- Wallet provisioning and locked balance updates
- Purse transfers (self and peer)
- Transaction log
"""

from .wallet_management import (
    create_wallet,
    get_wallet,
    lock_wallet,
    lock_wallets,
    apply_wallet_delta,
)

from .transfers import transfer_tokens

from .transaction_log import (
    record_transaction,
    get_transaction_history,
)

# Domain Exceptions
from ..exceptions import (
    WalletsServiceError,
    WalletNotFoundError,
    InvalidPurseError,
    InvalidAmountError,
    InsufficientFundsError,
    InvalidTransferTypeError,
    SamePurseError,
    ReceiverNotFoundError,
    InvalidTransferError,
)

__all__ = [
    # Wallet Management Services
    'create_wallet',
    'get_wallet',
    'lock_wallet',
    'lock_wallets',
    'apply_wallet_delta',
    # Transfer Services
    'transfer_tokens',
    # Transaction Log Services
    'record_transaction',
    'get_transaction_history',
    # Exceptions
    'WalletsServiceError',
    'WalletNotFoundError',
    'InvalidPurseError',
    'InvalidAmountError',
    'InsufficientFundsError',
    'InvalidTransferTypeError',
    'SamePurseError',
    'ReceiverNotFoundError',
    'InvalidTransferError',
]
