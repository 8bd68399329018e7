from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import uuid

from .exceptions import InvalidPurseError, InsufficientFundsError


class Purse(models.TextChoices):
    BASE = 'base', 'Base'
    REWARD = 'reward', 'Reward'
    REMORSE = 'remorse', 'Remorse'
    CHARITY = 'charity', 'Charity'

    @classmethod
    def resolve(cls, name):
        """Return the Purse for ``name`` or raise InvalidPurseError."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidPurseError(
                f"Unknown purse '{name}'. Must be one of: {', '.join(cls.values)}"
            )


# Largest balance or amount a PositiveIntegerField holds on every backend
MAX_TOKEN_AMOUNT = 2147483647


# Purse -> wallet column. The only place column names are derived from purses.
PURSE_FIELDS = {
    Purse.BASE: 'base_purse',
    Purse.REWARD: 'reward_purse',
    Purse.REMORSE: 'remorse_purse',
    Purse.CHARITY: 'charity_purse',
}


class TransferType(models.TextChoices):
    PEER = 'peer', 'Peer'
    SELF_TRANSFER = 'self-transfer', 'Self transfer'


class Wallet(models.Model):
    """
    Per-user token balances, one column per purse.

    All balance changes go through ``apply_delta`` on a row locked with
    ``select_for_update()`` (see services.wallet_management.lock_wallet).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wallet'
    )

    base_purse = models.PositiveIntegerField(default=0)
    reward_purse = models.PositiveIntegerField(default=0)
    remorse_purse = models.PositiveIntegerField(default=0)
    charity_purse = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'wallets'

    def __str__(self):
        return f"Wallet of {self.user} ({self.total_tokens} tokens)"

    def balance(self, purse):
        """Return the balance of a single purse."""
        return getattr(self, PURSE_FIELDS[Purse.resolve(purse)])

    def snapshot(self):
        """Return all purse balances keyed by column name."""
        return {field: getattr(self, field) for field in PURSE_FIELDS.values()}

    @property
    def total_tokens(self):
        return sum(self.snapshot().values())

    def apply_delta(self, delta):
        """
        Apply signed per-purse changes and persist them.

        ``delta`` maps purse names (or Purse members) to signed integers.
        Either every change is applied or, if any purse would go negative,
        none is and InsufficientFundsError is raised.

        Returns:
            list of updated column names
        """
        new_values = {}
        for purse, amount in delta.items():
            purse = Purse.resolve(purse)
            amount = int(amount)
            if amount == 0:
                continue
            field = PURSE_FIELDS[purse]
            current = new_values.get(field, getattr(self, field))
            new_values[field] = current + amount

        for field, value in new_values.items():
            if value < 0:
                purse = next(p for p, f in PURSE_FIELDS.items() if f == field)
                available = getattr(self, field)
                raise InsufficientFundsError(
                    purse.value, available, available - value
                )

        if not new_values:
            return []

        for field, value in new_values.items():
            setattr(self, field, value)
        self.save(update_fields=[*new_values, 'updated_at'])
        return list(new_values)


class Transaction(models.Model):
    """Append-only ledger entry for a purse-to-purse or peer movement."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_transactions'
    )
    # Equal to sender for self-transfers
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='received_transactions'
    )

    from_purse = models.CharField(max_length=20, choices=Purse.choices)
    to_purse = models.CharField(max_length=20, choices=Purse.choices)
    amount = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    type = models.CharField(max_length=20, choices=TransferType.choices)

    # Free-form donation metadata passed through by the client
    charity_info = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'transactions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['sender', 'created_at'], name='transaction_sender__1f0a3c_idx'),
            models.Index(fields=['receiver', 'created_at'], name='transaction_receive_7d2b41_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name='transaction_amount_positive',
            ),
        ]

    def __str__(self):
        return f"{self.amount} tokens {self.from_purse} -> {self.to_purse} ({self.type})"

    @property
    def is_self_transfer(self):
        return self.sender_id == self.receiver_id
