"""
Domain exceptions for the wallets app.

Raised by the wallet aggregate and the transfer services. Views translate
any ``WalletsServiceError`` into a 400 response with an ``error`` message.
"""


class WalletsServiceError(Exception):
    """Base exception for wallet and transfer errors."""
    pass


class WalletNotFoundError(WalletsServiceError):
    """User has no wallet."""
    pass


class InvalidPurseError(WalletsServiceError):
    """Purse name is not one of the known purses."""
    pass


class InvalidAmountError(WalletsServiceError):
    """Token amount must be a positive whole number."""
    pass


class InsufficientFundsError(WalletsServiceError):
    """Purse balance is lower than the amount being taken out of it."""

    def __init__(self, purse, available, requested):
        self.purse = purse
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient tokens in {purse} purse "
            f"({available} available, {requested} requested)"
        )


class InvalidTransferTypeError(WalletsServiceError):
    """Transfer type must be 'peer' or 'self-transfer'."""
    pass


class SamePurseError(WalletsServiceError):
    """Self-transfer source and destination purses are identical."""
    pass


class ReceiverNotFoundError(WalletsServiceError):
    """Peer transfer receiver is missing or has no wallet."""
    pass


class InvalidTransferError(WalletsServiceError):
    """Transfer is structurally invalid (e.g. peer transfer to yourself)."""
    pass
